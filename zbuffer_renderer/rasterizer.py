#
# PROJECT: zbuffer-renderer
# MODULE: zbuffer_renderer/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging

from .zbuffer import ZBuffer
from .geometry import Polygon

logger = logging.getLogger(__name__)

MIN_VERTICES = 3
MAX_VERTICES = 6


def scanline_intersections(xs, ys, zs, y):
    """
    Returns the (x, z) crossings of scanline y with the closed edge loop,
    sorted by x (ties broken by z).

    xs, ys are the truncated integer screen coordinates; zs are the
    unrounded vertex depths. An edge covers rows [min_y, max_y), so a
    vertex shared by two edges is counted once.
    """
    n = len(xs)
    hits = []
    for i in range(n):
        j = (i + 1) % n
        yi, yj = ys[i], ys[j]
        if yi == yj:
            continue
        if (yi < yj and yi <= y < yj) or (yi > yj and yj <= y < yi):
            t = (y - yi) / (yj - yi)
            x = int(xs[i] + t * (xs[j] - xs[i]))
            z = zs[i] + t * (zs[j] - zs[i])
            hits.append((x, z))
    hits.sort()
    return hits


def fill_span(buffer: ZBuffer, y, x1, z1, x2, z2, color):
    """Depth-tests columns [x1, x2) of row y, clamped to the buffer."""
    if x1 == x2:
        return
    span = x2 - x1
    dz = z2 - z1
    for x in range(max(0, x1), min(buffer.w, x2)):
        buffer.test_and_set(y, x, z1 + (x - x1) / span * dz, color)


def fill_polygon(buffer: ZBuffer, poly: Polygon, min_vertices=MIN_VERTICES,
                 max_vertices=MAX_VERTICES, on_filled=None) -> bool:
    """
    Scanline-fills a convex polygon into the buffer with linear depth
    interpolation and a strict less-than depth test.

    Returns False without touching the buffer when the vertex count lies
    outside [min_vertices, max_vertices], True otherwise.

    on_filled, if given, is called as on_filled(buffer, poly, bbox) after
    the fill, with bbox = (ymin, ymax, xmin, xmax) clamped to the buffer.
    """
    n = len(poly.points)
    if n < min_vertices or n > max_vertices:
        logger.debug(f"Ignoring polygon with {n} vertices "
                     f"(accepted range {min_vertices}-{max_vertices})")
        return False

    # Only x/y are discretised; depth keeps full precision
    xs = [int(p.x) for p in poly.points]
    ys = [int(p.y) for p in poly.points]
    zs = [float(p.z) for p in poly.points]

    w, h = buffer.w, buffer.h
    ymin = max(0, min(ys))
    ymax = min(h, max(ys))
    xmin = max(0, min(xs))
    xmax = min(w, max(xs))

    color = poly.color
    for y in range(ymin, ymax):
        hits = scanline_intersections(xs, ys, zs, y)
        if len(hits) % 2:
            logger.debug(f"Row {y}: odd intersection count {len(hits)}, "
                         f"dropping trailing crossing")
        for k in range(0, len(hits) - 1, 2):
            x1, z1 = hits[k]
            x2, z2 = hits[k + 1]
            fill_span(buffer, y, x1, z1, x2, z2, color)

    logger.debug(f"Filled {n}-gon color={color:06x} rows {ymin}-{ymax}")

    if on_filled is not None:
        on_filled(buffer, poly, (ymin, ymax, xmin, xmax))
    return True
