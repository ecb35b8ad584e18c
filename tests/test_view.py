import pytest

from mifview.view import widget_to_image


def test_wide_widget_corners_map_to_corner_pixels():
    assert widget_to_image(50, 0, 200, 100, 10, 10) == (0, 0)
    assert widget_to_image(149, 99, 200, 100, 10, 10) == (10 - 1, 10 - 1)


def test_wide_widget_left_margin_is_outside():
    column, _ = widget_to_image(20, 50, 200, 100, 10, 10)
    assert column < 0


def test_tall_widget_corners_map_to_corner_pixels():
    assert widget_to_image(0, 50, 100, 200, 10, 10) == (0, 0)
    assert widget_to_image(99, 149, 100, 200, 10, 10) == (10 - 1, 10 - 1)


def test_tall_widget_top_margin_is_outside():
    _, row = widget_to_image(50, 20, 100, 200, 10, 10)
    assert row < 0


def test_widget_centre_maps_to_image_centre():
    assert widget_to_image(150, 150, 300, 300, 10, 10) == (10 // 2, 10 // 2)


def test_exact_fit_is_plain_scaling():
    for x in range(0, 40, 4):
        assert widget_to_image(x, 0, 40, 20, 10, 5) == (x // 4, 0)


def test_empty_image_raises():
    with pytest.raises(ValueError):
        widget_to_image(0, 0, 100, 100, 0, 10)


def test_empty_widget_raises():
    with pytest.raises(ValueError):
        widget_to_image(0, 0, 0, 100, 10, 10)