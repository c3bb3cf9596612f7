#
# PROJECT: zbuffer-renderer
# MODULE: zbuffer_renderer/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses

from .config import RenderConfig
from .zbuffer import ZBuffer
from .scene import Scene
from .rasterizer import fill_polygon
from .color import ColorPairs, unpack_rgb
from .export import DumpTrigger

SHADES = " .:-=+*#%@"


def shade_char(color: int) -> str:
    """ASCII stand-in for a packed color when the terminal has no colors: darker is denser."""
    r, g, b = unpack_rgb(color)
    lum = (r * 299 + g * 587 + b * 114) // 1000
    return SHADES[(255 - lum) * len(SHADES) // 256]


class Renderer:
    """
    Presentation adapter between a ZBuffer and a curses screen.

    render_frame() performs one pass: clear, then fill each revealed
    polygon in order. draw() samples the buffer colors onto the terminal
    grid (nearest pixel) below a one-line header.
    """

    def __init__(self, config: RenderConfig):
        self.config = config
        self.pairs = ColorPairs()
        self.accepted = 0

    def init_colors(self):
        """Initialize curses color pairs.  Call once after curses.wrapper init."""
        self.pairs.init(self.config.use_color)

    def render_frame(self, buffer: ZBuffer, scene: Scene, on_filled=None) -> int:
        """Clear and refill the buffer. Returns how many polygons were accepted."""
        cfg = self.config
        buffer.clear()
        if isinstance(on_filled, DumpTrigger):
            on_filled.start_pass()
        accepted = 0
        for poly in scene.visible():
            if fill_polygon(buffer, poly,
                            min_vertices=cfg.min_vertices,
                            max_vertices=cfg.max_vertices,
                            on_filled=on_filled):
                accepted += 1
        self.accepted = accepted
        return accepted

    def draw(self, stdscr, buffer: ZBuffer):
        """
        Output the buffer to the curses screen (rows 1..th-2).

        Does NOT call stdscr.refresh(); the caller does that after the HUD.
        """
        th, tw = stdscr.getmaxyx()
        rows, cols = th - 2, tw - 1
        if rows <= 0 or cols <= 0:
            return

        stdscr.erase()
        colors = buffer.colors()
        use_pairs = self.pairs.enabled
        for r in range(rows):
            src = colors[r * buffer.h // rows]
            for c in range(cols):
                color = src[c * buffer.w // cols]
                try:
                    if use_pairs:
                        stdscr.addstr(r + 1, c, ' ', self.pairs.attr(color))
                    else:
                        stdscr.addstr(r + 1, c, shade_char(color))
                except curses.error:
                    # Writing the bottom-right cell raises; nothing to recover
                    pass
