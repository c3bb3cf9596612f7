"""Diagnostic dump format and the fill-count dump trigger."""

from zbuffer_renderer.geometry import Polygon
from zbuffer_renderer.zbuffer import ZBuffer
from zbuffer_renderer.rasterizer import fill_polygon
from zbuffer_renderer.export import format_state, dump_state, DumpTrigger


def test_format_state_cleared_buffer():
    buf = ZBuffer(2, 2)
    assert format_state(buf, 0, 2, 0, 2) == (
        "(1000, ffffff) (1000, ffffff) \n"
        "(1000, ffffff) (1000, ffffff) \n"
    )


def test_format_state_sub_rectangle_and_values():
    buf = ZBuffer(4, 3)
    buf.test_and_set(1, 2, 0.5, 0x00FF00)
    buf.test_and_set(1, 3, -12.25, 0x0000AB)
    assert format_state(buf, 1, 2, 2, 4) == "(0.5, ff00) (-12.25, ab) \n"


def test_format_state_uses_six_significant_digits():
    buf = ZBuffer(1, 1)
    buf.test_and_set(0, 0, 1.0 / 3.0, 0xFF0000)
    assert format_state(buf, 0, 1, 0, 1) == "(0.333333, ff0000) \n"


def test_format_state_empty_range():
    assert format_state(ZBuffer(3, 3), 2, 2, 0, 3) == ""


def test_dump_state_writes_file(tmp_path):
    buf = ZBuffer(3, 2)
    path = tmp_path / "dump.txt"
    assert dump_state(buf, str(path))
    assert path.read_text() == format_state(buf, 0, 2, 0, 3)


def test_dump_state_reports_unwritable_path(tmp_path, caplog):
    path = tmp_path / "missing_dir" / "dump.txt"
    with caplog.at_level("ERROR"):
        assert dump_state(ZBuffer(2, 2), str(path)) is False
    assert "Could not write buffer dump" in caplog.text


def test_dump_trigger_fires_on_target_fill_only(tmp_path):
    path = tmp_path / "zb.txt"
    trigger = DumpTrigger(str(path), target_index=2)
    buf = ZBuffer(10, 10)
    first = Polygon([(0, 0, 5), (4, 0, 5), (0, 4, 5)], 0xFF0000)
    second = Polygon([(2, 2, 1), (6, 2, 1), (2, 5, 1)], 0x00FF00)

    fill_polygon(buf, first, on_filled=trigger)
    assert not path.exists()

    fill_polygon(buf, second, on_filled=trigger)
    assert trigger.fired
    assert path.read_text() == format_state(buf, 2, 5, 2, 6)

    path.unlink()
    fill_polygon(buf, first, on_filled=trigger)
    assert not path.exists()


def test_dump_trigger_ignores_rejected_fills(tmp_path):
    path = tmp_path / "zb.txt"
    trigger = DumpTrigger(str(path), target_index=1)
    buf = ZBuffer(5, 5)
    fill_polygon(buf, Polygon([(0, 0, 0), (3, 3, 0)], 0xFF0000), on_filled=trigger)
    assert trigger.count == 0
    fill_polygon(buf, Polygon([(0, 0, 0), (4, 0, 0), (0, 4, 0)], 0xFF0000), on_filled=trigger)
    assert path.exists()


def test_dump_trigger_reset_and_disable(tmp_path):
    path = tmp_path / "zb.txt"
    buf = ZBuffer(5, 5)
    tri = Polygon([(0, 0, 0), (4, 0, 0), (0, 4, 0)], 0xFF0000)

    disabled = DumpTrigger(str(path), target_index=0)
    fill_polygon(buf, tri, on_filled=disabled)
    assert not path.exists()

    trigger = DumpTrigger(str(path), target_index=1)
    fill_polygon(buf, tri, on_filled=trigger)
    path.unlink()
    trigger.reset()
    fill_polygon(buf, tri, on_filled=trigger)
    assert path.exists()
