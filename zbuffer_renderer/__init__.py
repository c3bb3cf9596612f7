#
# PROJECT: zbuffer-renderer
# MODULE: zbuffer_renderer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .geometry import Point3d, Polygon
from .zbuffer import Cell, ZBuffer, MAX_DEPTH, BACKGROUND_COLOR
from .rasterizer import fill_polygon, scanline_intersections
from .config import RenderConfig
from .color import parse_hex_color, unpack_rgb
from .export import format_state, dump_state, DumpTrigger
from .scene import Scene, default_scene
from .renderer import Renderer
