#
# PROJECT: zbuffer-renderer
# MODULE: zbuffer_renderer/zbuffer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

MAX_DEPTH = 1000.0
BACKGROUND_COLOR = 0xFFFFFF


class Cell:
    __slots__ = ['depth', 'color']

    def __init__(self, depth=MAX_DEPTH, color=BACKGROUND_COLOR):
        self.depth = depth
        self.color = color

    def __repr__(self):
        return f"Cell({self.depth:g}, {self.color:06x})"


class ZBuffer:
    """
    Fixed-size grid of (depth, color) cells, row 0 at the top.

    The buffer does no geometry of its own. The only write path is
    test_and_set(), which applies the strict less-than depth test.
    Indices are not validated; callers clamp to [0, h) x [0, w).
    """
    __slots__ = ['w', 'h', 'max_depth', 'background', 'rows']

    def __init__(self, w, h, max_depth=MAX_DEPTH, background=BACKGROUND_COLOR):
        if w <= 0 or h <= 0:
            raise ValueError(f"buffer dimensions must be positive, got {w}x{h}")
        self.w, self.h = int(w), int(h)
        self.max_depth = float(max_depth)
        self.background = int(background)
        # One list of cells per row, owned exclusively by this buffer
        self.rows = [[Cell() for _ in range(self.w)] for _ in range(self.h)]
        self.clear()

    @classmethod
    def from_config(cls, config) -> 'ZBuffer':
        return cls(config.width, config.height,
                   max_depth=config.max_depth, background=config.background)

    @property
    def width(self):
        return self.w

    @property
    def height(self):
        return self.h

    def clear(self):
        """Reset every cell to (sentinel depth, background color)."""
        max_depth, background = self.max_depth, self.background
        for row in self.rows:
            for cell in row:
                cell.depth = max_depth
                cell.color = background

    def get(self, row, col):
        c = self.rows[row][col]
        return c.depth, c.color

    def test_and_set(self, row, col, depth, color) -> bool:
        c = self.rows[row][col]
        if depth < c.depth:
            c.depth = depth
            c.color = color
            return True
        return False

    def colors(self):
        """Read-only snapshot of packed colors, one tuple per row."""
        return tuple(tuple(c.color for c in row) for row in self.rows)

    def depths(self):
        return tuple(tuple(c.depth for c in row) for row in self.rows)
