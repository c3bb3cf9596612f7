#
# PROJECT: zbuffer-renderer
# MODULE: zbuffer_renderer/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses


def parse_hex_color(hex_str):
    """
    Parse a hex color string to a packed 0xRRGGBB int.
    Accepts: '#RRGGBB', 'RRGGBB' or '0xRRGGBB' (case-insensitive).
    Returns None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip()
    if val[:2].lower() == '0x':
        val = val[2:]
    val = val.lstrip('#')
    if len(val) != 6:
        return None
    try:
        return int(val, 16)
    except ValueError:
        return None


def unpack_rgb(color):
    """Split a packed 0xRRGGBB color into an (r, g, b) tuple."""
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


# The 6x6x6 xterm color cube occupies indices 16-231.
_CUBE_VALUES = [0, 95, 135, 175, 215, 255]

_ANSI8 = [
    (0, 0, 0),       # 0  black
    (128, 0, 0),     # 1  red
    (0, 128, 0),     # 2  green
    (128, 128, 0),   # 3  yellow
    (0, 0, 128),     # 4  blue
    (128, 0, 128),   # 5  magenta
    (0, 128, 128),   # 6  cyan
    (192, 192, 192), # 7  white
]


def _nearest_cube_val(v):
    return min(range(6), key=lambda i: abs(v - _CUBE_VALUES[i]))


def rgb_to_nearest_xterm(r, g, b):
    """Nearest xterm-256 index, searching the color cube and grayscale ramp."""
    ri, gi, bi = _nearest_cube_val(r), _nearest_cube_val(g), _nearest_cube_val(b)
    cube_idx = 16 + ri * 36 + gi * 6 + bi
    cr, cg, cb = _CUBE_VALUES[ri], _CUBE_VALUES[gi], _CUBE_VALUES[bi]
    cube_dist = (r - cr) ** 2 + (g - cg) ** 2 + (b - cb) ** 2

    gray_avg = (r + g + b) // 3
    gray_step = max(0, min(23, (gray_avg - 8 + 5) // 10))
    gv = 8 + gray_step * 10
    gray_dist = (r - gv) ** 2 + (g - gv) ** 2 + (b - gv) ** 2

    return 232 + gray_step if gray_dist < cube_dist else cube_idx


def rgb_to_nearest_ansi8(r, g, b):
    """Nearest basic ANSI index (0-7), for 8-color terminals."""
    return min(range(8), key=lambda i: (r - _ANSI8[i][0]) ** 2 +
                                       (g - _ANSI8[i][1]) ** 2 +
                                       (b - _ANSI8[i][2]) ** 2)


def device_color(color, num_colors):
    """Map a packed color to a terminal color index for a palette of num_colors."""
    r, g, b = unpack_rgb(color)
    if num_colors >= 256:
        return rgb_to_nearest_xterm(r, g, b)
    return rgb_to_nearest_ansi8(r, g, b)


class ColorPairs:
    """
    Lazily allocates one curses color pair per distinct packed color.

    Each pair paints the cell background, so a space character shows the
    pixel color. Pairs that cannot be allocated fall back to pair 0.
    """

    def __init__(self):
        self.pairs = {}
        self.next_id = 1
        self.enabled = False

    def init(self, use_color):
        self.pairs.clear()
        self.next_id = 1
        self.enabled = False
        if not use_color:
            return
        try:
            if not curses.has_colors():
                return
            curses.start_color()
            self.enabled = True
        except curses.error:
            self.enabled = False

    def attr(self, color):
        if not self.enabled:
            return curses.color_pair(0)
        pair_id = self.pairs.get(color)
        if pair_id is None:
            pair_id = 0
            if self.next_id < getattr(curses, 'COLOR_PAIRS', 64):
                idx = device_color(color, getattr(curses, 'COLORS', 8))
                try:
                    curses.init_pair(self.next_id, curses.COLOR_BLACK, idx)
                    pair_id = self.next_id
                    self.next_id += 1
                except curses.error:
                    pass
            self.pairs[color] = pair_id
        return curses.color_pair(pair_id)
