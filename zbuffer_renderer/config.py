#
# PROJECT: zbuffer-renderer
# MODULE: zbuffer_renderer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import os
from dataclasses import dataclass

from .zbuffer import MAX_DEPTH, BACKGROUND_COLOR
from .rasterizer import MIN_VERTICES, MAX_VERTICES


@dataclass
class RenderConfig:
    """Buffer geometry, fill acceptance range and diagnostic dump settings."""
    width: int = 800
    height: int = 600
    max_depth: float = MAX_DEPTH
    background: int = BACKGROUND_COLOR
    min_vertices: int = MIN_VERTICES
    max_vertices: int = MAX_VERTICES
    dump_file: str = "zbuffer_output.txt"
    # Ordinal (1-based) of the fill whose bounding box gets dumped; 0 disables
    dump_index: int = 1
    use_color: bool = True

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"resolution must be positive, got {self.width}x{self.height}")
        if self.min_vertices > self.max_vertices:
            raise ValueError(
                f"min_vertices ({self.min_vertices}) exceeds "
                f"max_vertices ({self.max_vertices})")

    @classmethod
    def detect_terminal(cls, **overrides) -> 'RenderConfig':
        """
        Default config with use_color guessed from TERM.
        Accurate color detection needs curses initialization, so this is
        a pre-init guess; the renderer re-checks has_colors() later.
        """
        term = os.environ.get('TERM', '').lower()
        overrides.setdefault('use_color', term not in ('dumb', 'unknown', ''))
        return cls(**overrides)
