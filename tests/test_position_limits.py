import math

import pytest

from board_camera.camera.utils.position import (
    Boundaries,
    boundaries_fully_defined,
    clamp_point,
    clamp_point_entire_viewport,
    half_translation_height_of,
    half_translation_width_of,
    is_valid_boundaries,
    translation_height_of,
    translation_width_of,
    viewport_corner_offsets,
    within_boundaries,
    worst_corner_correction,
)
from board_camera.geometry import Point

BOX = Boundaries.from_extents(min_x=-100.0, min_y=-50.0, max_x=100.0, max_y=50.0)


def test_within_boundaries_is_inclusive():
    assert within_boundaries(Point(100.0, 50.0), BOX)
    assert within_boundaries(Point(-100.0, -50.0), BOX)
    assert not within_boundaries(Point(150.0, 0.0), BOX)
    assert not within_boundaries(Point(0.0, -50.5), BOX)
    assert within_boundaries(Point(1e12, 1e12), None)


def test_partially_defined_boundaries_leave_open_sides_free():
    right_wall = Boundaries.from_extents(max_x=10.0)

    assert within_boundaries(Point(-1e9, 1e9), right_wall)
    assert not within_boundaries(Point(11.0, 0.0), right_wall)
    assert clamp_point(Point(20.0, -5.0), right_wall) == Point(10.0, -5.0)
    assert not boundaries_fully_defined(right_wall)
    assert boundaries_fully_defined(BOX)


def test_clamp_point_snaps_each_axis():
    assert clamp_point(Point(150.0, 0.0), BOX) == Point(100.0, 0.0)
    assert clamp_point(Point(-300.0, 75.0), BOX) == Point(-100.0, 50.0)
    inside = Point(10.0, 10.0)
    assert clamp_point(inside, BOX) == inside
    assert clamp_point((5.0, 6.0), None) == Point(5.0, 6.0)


def test_boundaries_validity():
    assert is_valid_boundaries(BOX)
    assert is_valid_boundaries(None)
    assert is_valid_boundaries(Boundaries.from_extents(min_x=5.0))
    assert not is_valid_boundaries(Boundaries.from_extents(min_x=5.0, max_x=5.0))
    assert not is_valid_boundaries(Boundaries.from_extents(min_y=10.0, max_y=-10.0))


def test_translation_extents():
    assert translation_width_of(BOX) == 200.0
    assert translation_height_of(BOX) == 100.0
    assert half_translation_width_of(BOX) == 100.0
    assert half_translation_height_of(BOX) == 50.0
    assert translation_width_of(Boundaries.from_extents(min_x=0.0)) is None
    assert half_translation_height_of(None) is None


def test_with_horizontal_swaps_inverted_extent():
    updated = BOX.with_horizontal(300.0, -300.0)

    assert (updated.min_x, updated.max_x) == (-300.0, 300.0)
    assert (updated.min_y, updated.max_y) == (-50.0, 50.0)


def test_boundaries_mapping_round_trip():
    mapping = {"min": {"x": -1.0, "y": None}, "max": {"x": 1.0, "y": 2.0}}

    boundaries = Boundaries.from_mapping(mapping)

    assert boundaries.min_y is None
    assert boundaries.to_mapping() == mapping


def test_viewport_corner_offsets_scale_with_zoom():
    top_left, top_right, bottom_left, bottom_right = viewport_corner_offsets(400.0, 200.0, 2.0, 0.0)

    assert top_left == Point(-100.0, 50.0)
    assert top_right == Point(100.0, 50.0)
    assert bottom_left == Point(-100.0, -50.0)
    assert bottom_right == Point(100.0, -50.0)


def test_viewport_corner_offsets_follow_rotation():
    corners = viewport_corner_offsets(200.0, 200.0, 1.0, math.pi / 2)

    assert corners[1].is_close(Point(-100.0, 100.0))
    assert corners[2].is_close(Point(100.0, -100.0))


def test_worst_corner_correction_picks_largest_overshoot_per_axis():
    corners = [Point(120.0, 0.0), Point(105.0, 70.0), Point(0.0, -60.0)]

    assert worst_corner_correction(corners, BOX) == Point(-20.0, -20.0)
    assert worst_corner_correction(corners, None) == Point(0.0, 0.0)
    assert worst_corner_correction([Point(0.0, 0.0)], BOX) == Point(0.0, 0.0)


def test_clamp_point_entire_viewport_keeps_edges_inside():
    boundaries = Boundaries.from_extents(-10000.0, -10000.0, 10000.0, 10000.0)

    clamped = clamp_point_entire_viewport(Point(9800.0, 0.0), 1000.0, 1000.0, boundaries, 1.0, 0.0)

    assert clamped == Point(9500.0, 0.0)


def test_clamp_point_entire_viewport_accounts_for_rotation():
    boundaries = Boundaries.from_extents(-1000.0, -1000.0, 1000.0, 1000.0)

    clamped = clamp_point_entire_viewport(
        Point(800.0, 800.0), 400.0, 400.0, boundaries, 1.0, math.pi / 4
    )

    half_diagonal = 200.0 * math.sqrt(2.0)
    assert clamped.x == pytest.approx(1000.0 - half_diagonal)
    assert clamped.y == pytest.approx(1000.0 - half_diagonal)
    for offset in viewport_corner_offsets(400.0, 400.0, 1.0, math.pi / 4):
        corner = clamped + offset
        assert -1000.0 - 1e-9 <= corner.x <= 1000.0 + 1e-9
        assert -1000.0 - 1e-9 <= corner.y <= 1000.0 + 1e-9
