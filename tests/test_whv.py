import random

import pytest

from paretokit.whv import rect_weighted_hv2d


def _area(rect):
    lower0, lower1, upper0, upper1, color = rect
    return (upper0 - lower0) * (upper1 - lower1) * color


def test_empty_inputs_give_zero():
    assert rect_weighted_hv2d([], [(0, 0, 1, 1, 1)]) == 0.0
    assert rect_weighted_hv2d([(0, 0)], []) == 0.0


@pytest.mark.parametrize(
    "rect",
    [(0, 0, 1, 1, 1), (0, 0, 2, 3, 1.5), (-1, 2, 4, 5, 0.25)],
)
def test_point_dominating_rectangle_gives_weighted_area(rect):
    point = (rect[0] - 1, rect[1] - 1)
    assert rect_weighted_hv2d([point], [rect]) == pytest.approx(_area(rect))


def test_point_outside_rectangle_gives_zero():
    assert rect_weighted_hv2d([(2, 2)], [(0, 0, 1, 1, 1)]) == 0.0


def test_disjoint_rectangles_sum_up():
    rects = [(0, 0, 1, 1, 1), (1, 1, 2, 2, 2)]
    expected = sum(_area(rect) for rect in rects)
    assert rect_weighted_hv2d([(0, 0)], rects) == pytest.approx(expected)


def test_two_points_union_area():
    value = rect_weighted_hv2d([(0, 0.5), (0.5, 0)], [(0, 0, 1, 1, 1)])
    assert value == pytest.approx(0.75)


def test_zero_color_contributes_nothing():
    assert rect_weighted_hv2d([(0, 0)], [(0, 0, 1, 1, 0)]) == 0.0


def test_order_of_inputs_does_not_matter():
    rng = random.Random(3)
    points = [(rng.random(), rng.random()) for _ in range(8)]
    rects = [(0, 0, 0.5, 0.5, 1), (0.2, 0.3, 0.9, 1.0, 2), (0.5, 0.0, 1.0, 0.4, 0.5)]
    expected = rect_weighted_hv2d(points, rects)
    shuffled_points = points[::-1]
    shuffled_rects = rects[::-1]
    assert rect_weighted_hv2d(shuffled_points, shuffled_rects) == pytest.approx(expected)


def test_input_lists_are_not_modified():
    points = [(0.5, 0.0), (0.0, 0.5)]
    rects = [(0, 0, 1, 1, 1)]
    rect_weighted_hv2d(points, rects)
    assert points == [(0.5, 0.0), (0.0, 0.5)]


def test_scaling_colors_scales_result():
    points = [(0.1, 0.6), (0.4, 0.3), (0.7, 0.1)]
    rects = [(0, 0, 1, 1, 1), (0.5, 0.5, 2, 2, 3)]
    doubled = [rect[:4] + (rect[4] * 2,) for rect in rects]
    assert rect_weighted_hv2d(points, doubled) == pytest.approx(
        2 * rect_weighted_hv2d(points, rects)
    )


def test_result_bounded_by_total_weighted_area():
    rng = random.Random(11)
    points = [(rng.random(), rng.random()) for _ in range(10)]
    rects = [(0, 0, 1, 1, 1)]
    value = rect_weighted_hv2d(points, rects)
    assert 0.0 <= value <= _area(rects[0]) + 1e-12


def test_adding_a_point_never_decreases_value():
    points = [(0.3, 0.7), (0.6, 0.4)]
    rects = [(0, 0, 1, 1, 1)]
    before = rect_weighted_hv2d(points, rects)
    after = rect_weighted_hv2d(points + [(0.2, 0.2)], rects)
    assert after >= before


@pytest.mark.parametrize(
    "rect",
    [(1, 0, 1, 1, 1), (0, 2, 1, 1, 1), (0, 0, 1, 1, -1)],
)
def test_invalid_rectangle_rejected(rect):
    with pytest.raises(ValueError):
        rect_weighted_hv2d([(0, 0)], [rect])


def test_rectangle_with_wrong_length_rejected():
    with pytest.raises(ValueError):
        rect_weighted_hv2d([(0, 0)], [(0, 0, 1, 1)])


def test_point_with_wrong_length_rejected():
    with pytest.raises(ValueError):
        rect_weighted_hv2d([(0, 0, 0)], [(0, 0, 1, 1, 1)])