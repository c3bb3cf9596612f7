#
# PROJECT: zbuffer-renderer
# MODULE: zbuffer_renderer/scene.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .geometry import Polygon


class Scene:
    """
    Ordered polygon list with a reveal cursor.

    Only the first `revealed` polygons are drawn; reveal_next() advances
    the cursor by one, which is how the demo shows polygons on key press.
    """

    def __init__(self, polygons=None):
        self.polygons = list(polygons) if polygons else []
        self.revealed = 0

    def add(self, poly: Polygon):
        self.polygons.append(poly)

    def reveal_next(self):
        """Advance the cursor. Returns the newly revealed polygon, or None when exhausted."""
        if self.revealed >= len(self.polygons):
            return None
        poly = self.polygons[self.revealed]
        self.revealed += 1
        return poly

    def reveal_all(self):
        self.revealed = len(self.polygons)

    def visible(self):
        return self.polygons[:self.revealed]

    def reset(self):
        """Hide every polygon again."""
        self.revealed = 0

    def __len__(self):
        return len(self.polygons)


def default_scene() -> Scene:
    """The five overlapping demonstration polygons for an 800x600 buffer."""
    return Scene([
        Polygon([(300, 260, 50), (560, 280, -50), (480, 340, 0)], 0xFF0000),
        Polygon([(380, 300, -50), (480, 381, -50), (500, 230, 100), (420, 220, 100)], 0x00FF00),
        Polygon([(200, 160, 100), (500, 400, 100), (600, 340, 100), (600, 250, 100)], 0xFF0FF0),
        Polygon([(400, 200, -300), (400, 300, 200), (700, 300, 200), (700, 200, -300)], 0xFFF51F),
        Polygon([(280, 200, 100), (290, 300, -80), (550, 300, 100), (530, 200, 200),
                 (520, 150, 150)], 0x55555F),
    ])
