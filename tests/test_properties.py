"""
Property-based tests for the rasterizer.

Uses Hypothesis to generate convex polygons (vertices on a circle at
sorted angles) and arbitrary vertex loops.
"""

import math

from hypothesis import given, settings
from hypothesis import strategies as st

from zbuffer_renderer.geometry import Polygon
from zbuffer_renderer.zbuffer import ZBuffer
from zbuffer_renderer.rasterizer import fill_polygon, scanline_intersections

SIZE = 24

depths = st.floats(min_value=-500.0, max_value=500.0, allow_nan=False, allow_infinity=False)
colors = st.integers(min_value=0, max_value=0xFFFFFF)


@st.composite
def convex_polygon_strategy(draw, min_n=3, max_n=6):
    """Convex polygon with n vertices placed on a circle, possibly hanging off the buffer."""
    n = draw(st.integers(min_value=min_n, max_value=max_n))
    cx = draw(st.floats(min_value=-5.0, max_value=SIZE + 5.0))
    cy = draw(st.floats(min_value=-5.0, max_value=SIZE + 5.0))
    r = draw(st.floats(min_value=1.0, max_value=SIZE))
    angles = sorted(draw(st.lists(st.floats(min_value=0.0, max_value=2 * math.pi,
                                            exclude_max=True),
                                  min_size=n, max_size=n, unique=True)))
    zs = draw(st.lists(depths, min_size=n, max_size=n))
    pts = [(cx + r * math.cos(a), cy + r * math.sin(a), z) for a, z in zip(angles, zs)]
    return Polygon(pts, draw(colors))


@st.composite
def vertex_loop_strategy(draw, min_n=0, max_n=10):
    n = draw(st.integers(min_value=min_n, max_value=max_n))
    coord = st.floats(min_value=-10.0, max_value=SIZE + 10.0)
    pts = draw(st.lists(st.tuples(coord, coord, depths), min_size=n, max_size=n))
    return Polygon(pts, draw(colors))


@given(polys=st.lists(convex_polygon_strategy(), min_size=1, max_size=6))
@settings(max_examples=60, deadline=None)
def test_depth_never_increases(polys):
    """Without a clear, each cell's depth is non-increasing across fills."""
    buf = ZBuffer(SIZE, SIZE)
    prev = buf.depths()
    for poly in polys:
        fill_polygon(buf, poly)
        cur = buf.depths()
        for prow, crow in zip(prev, cur):
            for p, c in zip(prow, crow):
                assert c <= p
        prev = cur


@given(poly=convex_polygon_strategy())
@settings(max_examples=100, deadline=None)
def test_convex_rows_have_even_intersections(poly):
    """Every scanline crosses the edge loop an even number of times."""
    xs = [int(p.x) for p in poly.points]
    ys = [int(p.y) for p in poly.points]
    zs = [p.z for p in poly.points]
    for y in range(min(ys), max(ys)):
        assert len(scanline_intersections(xs, ys, zs, y)) % 2 == 0


@given(poly=vertex_loop_strategy())
@settings(max_examples=100, deadline=None)
def test_vertex_count_gate(poly):
    """Out-of-range vertex counts leave the buffer untouched; fill never raises."""
    buf = ZBuffer(SIZE, SIZE)
    before = (buf.depths(), buf.colors())
    accepted = fill_polygon(buf, poly)
    assert accepted == (3 <= len(poly) <= 6)
    if not accepted:
        assert (buf.depths(), buf.colors()) == before


@given(poly=convex_polygon_strategy())
@settings(max_examples=100, deadline=None)
def test_written_depths_stay_within_vertex_range(poly):
    """Linear interpolation never leaves the [min z, max z] range of the vertices."""
    buf = ZBuffer(SIZE, SIZE)
    fill_polygon(buf, poly)
    zmin = min(p.z for p in poly.points)
    zmax = max(p.z for p in poly.points)
    eps = 1e-6 * max(1.0, abs(zmin), abs(zmax))
    for y in range(SIZE):
        for x in range(SIZE):
            depth, color = buf.get(y, x)
            if depth != buf.max_depth:
                assert zmin - eps <= depth <= zmax + eps


@given(poly=convex_polygon_strategy())
@settings(max_examples=50, deadline=None)
def test_refill_with_same_polygon_is_noop(poly):
    """Filling the same polygon twice changes nothing the second time (strict test)."""
    buf = ZBuffer(SIZE, SIZE)
    fill_polygon(buf, poly)
    snapshot = (buf.depths(), buf.colors())
    fill_polygon(buf, Polygon(poly.points, poly.color ^ 0xFFFFFF))
    assert (buf.depths(), buf.colors()) == snapshot
