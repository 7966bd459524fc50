import pytest

from nlregress.app import format_parameters, main, sample_curve, scale_points
from nlregress.config import EDGE, HEIGHT, WIDTH, initial_parameters
from nlregress.formulas import Pair


def test_scale_points_maps_bounds_to_corners():
    lo, hi = Pair(0.0, 0.0), Pair(10.0, 20.0)
    scaled = scale_points([lo, hi], lo, hi)
    assert scaled[0] == pytest.approx((0.0, HEIGHT - EDGE))
    assert scaled[1] == pytest.approx((WIDTH - EDGE, 0.0))


def test_scale_points_degenerate_range_raises():
    lo = hi = Pair(1.0, 1.0)
    with pytest.raises(ValueError):
        scale_points([lo], lo, hi)


def test_sample_curve_covers_every_column():
    lo, hi = Pair(-1.0, -5.0), Pair(1.0, 5.0)
    para = [0.0] * 9 + [-5.0]
    curve = sample_curve(para, lo, hi)
    assert len(curve) == WIDTH
    for column, (x, y) in enumerate(curve):
        assert x == pytest.approx(column)
        assert y == pytest.approx(HEIGHT - EDGE)


def test_format_parameters_initial():
    assert format_parameters(initial_parameters()) == "[0, 0, 0, 0, 1, 0, 0, 0, 0, 0]"


def test_format_parameters_fractional():
    assert format_parameters([0.5, -2.25]) == "[0.5, -2.25]"


def test_main_missing_file_returns_error(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "Could not open data file" in capsys.readouterr().err