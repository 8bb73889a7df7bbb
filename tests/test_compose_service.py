from __future__ import annotations

import numpy as np
import pytest

from combiner.errors import EmptyDimensionError, UnsupportedModeError
from combiner.models.options_model import StackMode
from combiner.services.compose_service import ComposeService
from combiner.services.layout_service import LayoutService

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)


def _pixels(canvas):
    return np.asarray(canvas)


def test_bottom_two_equal_images(make_data):
    canvas = ComposeService().compose([make_data(100, 50, RED), make_data(100, 50, GREEN)], StackMode.BOTTOM)

    arr = _pixels(canvas)
    assert arr.shape == (200, 50, 4)
    assert (arr[0:100] == RED).all()
    assert (arr[100:200] == GREEN).all()


def test_right_two_equal_images(make_data):
    canvas = ComposeService().compose([make_data(100, 50, RED), make_data(100, 50, GREEN)], "right")

    arr = _pixels(canvas)
    assert arr.shape == (100, 100, 4)
    assert (arr[:, 0:50] == RED).all()
    assert (arr[:, 50:100] == GREEN).all()


def test_bottom_uneven_widths_leave_transparent_area(make_data):
    canvas = ComposeService().compose([make_data(10, 30, RED), make_data(20, 60, BLUE)], StackMode.BOTTOM)

    arr = _pixels(canvas)
    assert canvas.size == (60, 30)
    assert (arr[0:10, 0:30] == RED).all()
    assert (arr[0:10, 30:60] == 0).all()
    assert (arr[10:30, 0:60] == BLUE).all()


def test_right_uneven_heights_leave_transparent_area(make_data):
    canvas = ComposeService().compose([make_data(40, 5, RED), make_data(15, 7, GREEN)], StackMode.RIGHT)

    arr = _pixels(canvas)
    assert canvas.size == (12, 40)
    assert (arr[:, 0:5] == RED).all()
    assert (arr[0:15, 5:12] == GREEN).all()
    assert (arr[15:40, 5:12] == 0).all()


@pytest.mark.parametrize("mode", [StackMode.BOTTOM, StackMode.RIGHT])
def test_canvas_size_matches_aggregate_for_any_order(make_data, mode):
    images = [make_data(13, 40), make_data(70, 9), make_data(22, 22)]
    service = ComposeService()
    dims = LayoutService().aggregate(images)

    for ordered in (images, images[::-1]):
        assert service.compose(ordered, mode).size == dims.canvas_size(mode)


def test_order_is_placement_order(make_data):
    canvas = ComposeService().compose(
        [make_data(5, 5, BLUE), make_data(5, 5, RED), make_data(5, 5, GREEN)], StackMode.RIGHT
    )

    arr = _pixels(canvas)
    assert tuple(arr[2, 2]) == BLUE
    assert tuple(arr[2, 7]) == RED
    assert tuple(arr[2, 12]) == GREEN


def test_translucent_pixels_replace_instead_of_blend(make_data):
    half = (200, 100, 50, 128)

    canvas = ComposeService().compose([make_data(4, 4, half)], StackMode.BOTTOM)

    assert (_pixels(canvas) == half).all()


def test_result_is_rgba(make_data):
    assert ComposeService().compose([make_data(3, 3)], StackMode.BOTTOM).mode == "RGBA"


@pytest.mark.parametrize("mode", ["top", "left", "", "Bottom"])
def test_unknown_mode(make_data, mode):
    with pytest.raises(UnsupportedModeError, match="bottom или right"):
        ComposeService().compose([make_data(3, 3)], mode)


def test_unknown_mode_checked_before_layout():
    # an empty set would fail aggregation, the mode error must come first
    with pytest.raises(UnsupportedModeError):
        ComposeService().compose([], "top")


def test_empty_set():
    with pytest.raises(EmptyDimensionError):
        ComposeService().compose([], StackMode.BOTTOM)
