#
# PROJECT: zbuffer-renderer
# MODULE: zbuffer_renderer/export.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging

from .zbuffer import ZBuffer

logger = logging.getLogger(__name__)


def format_state(buffer: ZBuffer, ymin, ymax, xmin, xmax) -> str:
    """
    Text dump of the sub-rectangle [ymin, ymax) x [xmin, xmax).

    One line per row; each cell is written as "(depth, colorhex) " with
    depth in %g form and the color as bare lowercase hex.
    """
    lines = []
    for y in range(ymin, ymax):
        row = buffer.rows[y]
        lines.append("".join(f"({row[x].depth:g}, {row[x].color:x}) "
                             for x in range(xmin, xmax)))
    return "".join(line + "\n" for line in lines)


def dump_state(buffer: ZBuffer, path, ymin=0, ymax=None, xmin=0, xmax=None) -> bool:
    """Write format_state() to path. Returns False if the file cannot be written."""
    ymax = buffer.h if ymax is None else ymax
    xmax = buffer.w if xmax is None else xmax
    text = format_state(buffer, ymin, ymax, xmin, xmax)
    try:
        with open(path, 'w') as f:
            f.write(text)
    except OSError as e:
        logger.error(f"Could not write buffer dump to '{path}': {e}")
        return False
    logger.info(f"Dumped rows {ymin}-{ymax}, cols {xmin}-{xmax} to {path}")
    return True


class DumpTrigger:
    """
    Fill hook that dumps the bounding box of the N-th accepted polygon.

    Pass an instance as fill_polygon(..., on_filled=trigger). Fills are
    counted from 1 within a render pass; call start_pass() after each
    clear so a refill of the same polygons counts them again from the
    first. The dump happens once per reset().
    """

    def __init__(self, path, target_index=1):
        self.path = path
        self.target_index = target_index
        self.count = 0
        self.fired = False

    def reset(self):
        self.count = 0
        self.fired = False

    def start_pass(self):
        self.count = 0

    def __call__(self, buffer, poly, bbox):
        self.count += 1
        if self.fired or self.target_index <= 0 or self.count != self.target_index:
            return
        ymin, ymax, xmin, xmax = bbox
        self.fired = dump_state(buffer, self.path, ymin, ymax, xmin, xmax)
