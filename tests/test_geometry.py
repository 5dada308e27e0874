import pytest

from judgekit.geometry import (
    balloon_count,
    catch_time,
    survives,
    triangle_area_from_medians,
)


def test_survives_concentric_equal_circles():
    assert survives(5, 0, 0, 5, 0, 0) is True


def test_survives_small_circle_inside():
    assert survives(5, 0, 0, 3, 1, 1) is True


def test_survives_far_circle_dies():
    assert survives(5, 0, 0, 1, 100, 100) is False


def test_survives_larger_inner_radius_dies():
    assert survives(3, 0, 0, 4, 0, 0) is False


def test_triangle_area_equilateral_medians():
    assert triangle_area_from_medians(3, 3, 3) == pytest.approx(5.196, abs=1e-3)


@pytest.mark.parametrize("sides", [(3.0, 4.0, 5.0), (2.5, 1.7, 2.0), (9.8, 9.1, 9.9)])
def test_triangle_area_scales_quadratically(sides):
    a, b, c = sides
    base = triangle_area_from_medians(a, b, c)
    doubled = triangle_area_from_medians(2 * a, 2 * b, 2 * c)
    assert doubled == pytest.approx(4 * base)


def test_triangle_area_is_symmetric():
    assert triangle_area_from_medians(3, 4, 5) == pytest.approx(
        triangle_area_from_medians(5, 3, 4)
    )


@pytest.mark.parametrize("sides", [(1, 1, 2), (1, 2, 3), (10, 1, 1), (0, 0, 0)])
def test_triangle_area_invalid(sides):
    with pytest.raises(ValueError):
        triangle_area_from_medians(*sides)


def test_balloon_count_zero_volume():
    assert balloon_count(1, 0) == 0


def test_balloon_count_monotonic_in_volume():
    counts = [balloon_count(2, v) for v in range(0, 5000, 97)]
    assert counts == sorted(counts)
    assert counts[-1] > 0


def test_balloon_count_smaller_balloons_fit_more():
    assert balloon_count(1, 10000) >= balloon_count(2, 10000)


def test_catch_time_times_closing_speed_is_distance():
    assert catch_time(10, 3, 1) * (3 - 1) == pytest.approx(10)


def test_catch_time_faster_chaser_takes_less_time():
    assert catch_time(100, 20, 5) < catch_time(100, 10, 5)


@pytest.mark.parametrize("speeds", [(5, 5), (3, 7)])
def test_catch_time_impossible(speeds):
    with pytest.raises(ValueError, match="impossivel"):
        catch_time(10, *speeds)