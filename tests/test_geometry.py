import pytest

from radarscope.geometry import blip_point, in_band, label_anchor, point_at_angle

O = (120, 120)


def test_zero_degrees_points_right():
    assert point_at_angle(O, 0, 50) == (170, 120)


def test_ninety_degrees_points_up():
    assert point_at_angle(O, 90, 50) == (120, 70)


def test_one_eighty_degrees_points_left():
    assert point_at_angle(O, 180, 50) == (70, 120)


def test_forty_five_degrees():
    x, y = point_at_angle((0, 0), 45, 100)
    assert (x, y) == (71, -71)


def test_label_anchor_nudges_left_from_ninety():
    assert label_anchor(O, 30, 104) == point_at_angle(O, 30, 107)
    x, y = point_at_angle(O, 90, 107)
    assert label_anchor(O, 90, 104) == (x - 8, y)
    x, y = point_at_angle(O, 150, 107)
    assert label_anchor(O, 150, 104) == (x - 8, y)


@pytest.mark.parametrize("distance", [1, 2, 50, 51, 0])
def test_no_blip_outside_band(distance):
    assert blip_point(O, 60, distance) is None


def test_blip_is_scaled():
    assert blip_point(O, 90, 49) == (120, 120 - 98)
    assert blip_point(O, 0, 3) == (126, 120)


def test_custom_band_and_scale():
    assert in_band(10, (5, 20))
    assert not in_band(5, (5, 20))
    assert blip_point(O, 0, 10, band=(5, 20), scale=3) == (150, 120)
