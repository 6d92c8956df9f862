import math

import pytest

from board_camera.camera.base import BaseCamera
from board_camera.camera.camera_rig import CameraRig, CameraRigConfig, create_default_camera_rig
from board_camera.camera.default_camera import DefaultBoardCamera
from board_camera.camera.utils.position import Boundaries
from board_camera.camera.utils.rotation import RotationLimits
from board_camera.errors import CameraConfigError
from board_camera.geometry import Point

SMALL_WORLD = Boundaries.from_extents(-1000.0, -1000.0, 1000.0, 1000.0)


@pytest.fixture
def camera() -> BaseCamera:
    return BaseCamera()


@pytest.fixture
def rig(camera) -> CameraRig:
    return CameraRig(camera)


def _corners(camera):
    return list(camera.viewport_in_world_space())


@pytest.mark.parametrize(
    "delta, anchor, rotation",
    [
        (1.0, Point(100.0, -50.0), 0.0),
        (0.5, Point(-200.0, 120.0), 0.7),
        (-0.5, Point(300.0, 300.0), 2.0),
        (3.0, Point(-450.0, -10.0), 5.5),
    ],
)
def test_zoom_by_at_keeps_world_point_under_anchor(delta, anchor, rotation):
    camera = BaseCamera(position=(50.0, 20.0), rotation=rotation, zoom_level=1.5)
    rig = CameraRig(camera)
    before = camera.convert_from_viewport_to_world(anchor)

    rig.zoom_by_at(delta, anchor)

    assert camera.zoom_level == pytest.approx(1.5 + delta)
    assert camera.convert_from_viewport_to_world(anchor).is_close(before)


@pytest.mark.parametrize("target", [0.25, 2.0, 7.5])
def test_zoom_to_at_world_keeps_anchor_on_screen(target):
    camera = BaseCamera(position=(-80.0, 40.0), rotation=1.2)
    rig = CameraRig(camera)
    anchor = Point(120.0, -60.0)
    before = camera.convert_from_world_to_viewport(anchor)

    rig.zoom_to_at_world(target, anchor)

    assert camera.zoom_level == target
    assert camera.convert_from_world_to_viewport(anchor).is_close(before)


def test_zoom_by_at_world_and_zoom_to_at_agree_on_anchor():
    camera = BaseCamera(rotation=0.3)
    rig = CameraRig(camera)
    anchor = Point(40.0, 90.0)
    before = camera.convert_from_world_to_viewport(anchor)

    rig.zoom_by_at_world(1.0, anchor)
    assert camera.convert_from_world_to_viewport(anchor).is_close(before)

    viewport_anchor = Point(-100.0, 25.0)
    world_before = camera.convert_from_viewport_to_world(viewport_anchor)
    rig.zoom_to_at(4.0, viewport_anchor)
    assert camera.zoom_level == 4.0
    assert camera.convert_from_viewport_to_world(viewport_anchor).is_close(world_before)


def test_zoom_is_clamped_to_limits(camera, rig):
    rig.zoom_to(50.0)
    assert camera.zoom_level == 10.0

    rig.zoom_by(-100.0)
    assert camera.zoom_level == pytest.approx(0.1)


def test_zoom_at_limit_leaves_position_alone(camera, rig):
    camera.set_zoom_level(10.0)
    camera.set_position(Point(5.0, 5.0))

    rig.zoom_by_at(2.0, Point(300.0, 300.0))

    assert camera.zoom_level == 10.0
    assert camera.position == Point(5.0, 5.0)


def test_clamped_zoom_still_keeps_anchor():
    camera = BaseCamera(zoom_level=8.0)
    rig = CameraRig(camera)
    anchor = Point(200.0, -100.0)
    before = camera.convert_from_viewport_to_world(anchor)

    rig.zoom_by_at(5.0, anchor)

    assert camera.zoom_level == 10.0
    assert camera.convert_from_viewport_to_world(anchor).is_close(before)


def test_restrict_zoom_freezes_zoom(camera, rig):
    rig.configure(restrict_zoom=True)

    rig.zoom_to(3.0)
    rig.zoom_by(2.0)
    rig.zoom_by_at(2.0, Point(100.0, 0.0))

    assert camera.zoom_level == 1.0
    assert camera.position == Point(0.0, 0.0)


@pytest.mark.parametrize(
    "flag, expected",
    [
        ("restrict_x_translation", Point(0.0, 20.0)),
        ("restrict_y_translation", Point(10.0, 0.0)),
    ],
)
def test_absolute_translation_restrictions(camera, rig, flag, expected):
    rig.configure({flag: True})

    rig.pan_by_world(Point(10.0, 20.0))

    assert camera.position == expected


def test_restricted_viewport_pan_keeps_y_exactly():
    camera = BaseCamera(position=(12.5, -7.25), zoom_level=3.0)
    rig = CameraRig(camera)
    rig.configure({"restrict_y_translation": True})

    rig.pan_by_viewport(Point(100.0, 100.0))

    assert camera.position.y == -7.25
    assert camera.position.x == pytest.approx(12.5 + 100.0 / 3.0)


def test_both_translation_restrictions_block_panning(camera, rig):
    rig.configure(restrict_x_translation=True, restrict_y_translation=True)

    rig.pan_by_world(Point(10.0, 20.0))
    rig.pan_to_world(Point(-40.0, 70.0))

    assert camera.position == Point(0.0, 0.0)


def test_relative_restriction_follows_camera_rotation():
    camera = BaseCamera(rotation=math.pi / 2)
    rig = CameraRig(camera)
    rig.configure(restrict_relative_x_translation=True)

    rig.pan_by_world(Point(10.0, 20.0))

    assert camera.position.x == pytest.approx(10.0)
    assert camera.position.y == pytest.approx(0.0, abs=1e-9)


@pytest.mark.parametrize(
    "flag, rotation, expected",
    [
        ("restrict_relative_x_translation", 0.0, Point(0.0, 20.0)),
        ("restrict_relative_y_translation", 0.0, Point(10.0, 0.0)),
        ("restrict_relative_y_translation", math.pi / 2, Point(0.0, 20.0)),
        ("restrict_relative_y_translation", math.pi, Point(10.0, 0.0)),
    ],
)
def test_relative_restrictions_project_onto_viewport_axes(flag, rotation, expected):
    camera = BaseCamera(rotation=rotation)
    rig = CameraRig(camera)
    rig.configure({flag: True})

    rig.pan_by_world(Point(10.0, 20.0))

    assert camera.position.x == pytest.approx(expected.x, abs=1e-9)
    assert camera.position.y == pytest.approx(expected.y, abs=1e-9)


@pytest.mark.parametrize(
    "flags, expected",
    [
        # Absolute axis is zeroed first, then the rest is projected.
        (("restrict_x_translation", "restrict_relative_x_translation"), Point(-10.0, 10.0)),
        (("restrict_y_translation", "restrict_relative_y_translation"), Point(5.0, 5.0)),
        (("restrict_relative_x_translation", "restrict_relative_y_translation"), Point(0.0, 0.0)),
    ],
)
def test_combined_restrictions_apply_in_sequence(flags, expected):
    camera = BaseCamera(rotation=math.pi / 4)
    rig = CameraRig(camera)
    rig.configure({flag: True for flag in flags})

    rig.pan_by_world(Point(10.0, 20.0))

    assert camera.position.x == pytest.approx(expected.x, abs=1e-9)
    assert camera.position.y == pytest.approx(expected.y, abs=1e-9)


def test_pan_to_world_respects_restriction(camera, rig):
    rig.configure(restrict_x_translation=True)

    rig.pan_to_world(Point(100.0, 200.0))

    assert camera.position == Point(0.0, 200.0)


def test_pan_by_viewport_converts_delta():
    camera = BaseCamera(zoom_level=2.0)
    rig = CameraRig(camera)

    rig.pan_by_viewport(Point(100.0, 0.0))

    assert camera.position == Point(50.0, 0.0)


def test_pan_to_viewport_moves_centre_to_point(camera, rig):
    rig.pan_to_viewport(Point(100.0, -30.0))

    assert camera.position == Point(100.0, -30.0)


def test_pan_is_clamped_to_boundaries(camera, rig):
    rig.pan_to_world(Point(20000.0, 0.0))
    assert camera.position == Point(10000.0, 0.0)

    rig.pan_by_world(Point(0.0, -50000.0))
    assert camera.position == Point(10000.0, -10000.0)


def test_unclamped_pan_outside_boundaries_is_rejected(camera, rig):
    rig.configure(clamp_translation=False)

    rig.pan_to_world(Point(20000.0, 0.0))

    assert camera.position == Point(0.0, 0.0)


def test_default_rig_keeps_entire_viewport_inside_on_pan(camera):
    rig = create_default_camera_rig(camera)

    rig.pan_to_world(Point(10000.0, 0.0))

    assert rig.limit_entire_viewport
    assert camera.position == Point(9500.0, 0.0)


def test_default_rig_shifts_camera_after_rotation():
    camera = BaseCamera(400.0, 400.0, position=(800.0, 800.0), boundaries=SMALL_WORLD)
    rig = create_default_camera_rig(camera)

    rig.rotate_by(math.pi / 4)

    assert camera.rotation == pytest.approx(math.pi / 4)
    expected = 1000.0 - 200.0 * math.sqrt(2.0)
    assert camera.position.x == pytest.approx(expected)
    assert camera.position.y == pytest.approx(expected)
    for corner in _corners(camera):
        assert -1000.0 - 1e-9 <= corner.x <= 1000.0 + 1e-9
        assert -1000.0 - 1e-9 <= corner.y <= 1000.0 + 1e-9


def test_rotation_without_viewport_limit_keeps_position():
    camera = BaseCamera(400.0, 400.0, position=(800.0, 800.0), boundaries=SMALL_WORLD)
    rig = CameraRig(camera)

    rig.rotate_by(math.pi / 4)

    assert camera.position == Point(800.0, 800.0)
    assert max(corner.x for corner in _corners(camera)) > 1000.0


def test_restrict_rotation_makes_rotation_a_no_op(camera, rig):
    rig.configure(restrict_rotation=True)

    rig.rotate_by(1.0)
    rig.rotate_to(2.0)

    assert camera.rotation == 0.0


def test_rotation_is_clamped_to_arc():
    camera = BaseCamera(rotation_boundaries=RotationLimits(0.0, math.pi / 2))
    rig = CameraRig(camera)

    rig.rotate_by(math.pi)
    assert camera.rotation == pytest.approx(math.pi / 2)

    rig.rotate_to(-0.3)
    assert camera.rotation == 0.0


def test_configure_merges_flags(rig):
    rig.configure({"restrict_zoom": True}, clamp_zoom=False)

    assert rig.config.restrict_zoom
    assert not rig.config.clamp_zoom
    assert rig.config.clamp_translation

    rig.limit_entire_viewport = True
    assert rig.config == CameraRigConfig(
        restrict_zoom=True, clamp_zoom=False, limit_entire_viewport=True
    )


def test_configure_rejects_unknown_flag(rig):
    with pytest.raises(CameraConfigError):
        rig.configure(restrict_everything=True)

    assert rig.config == CameraRigConfig()


def test_rig_drives_observable_camera(scheduler):
    camera = DefaultBoardCamera(scheduler=scheduler)
    rig = CameraRig(camera)
    received = []
    camera.on("all", lambda event, state: received.append(event.type))

    rig.zoom_by_at(1.0, Point(100.0, 0.0))
    rig.rotate_by(0.25)
    scheduler.run_all()

    assert received == ["zoom", "pan", "rotate"]
    assert camera.position.is_close(Point(50.0, 0.0))
