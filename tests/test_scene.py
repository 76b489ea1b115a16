import math

import pytest

from orrery.scene import ORBITAL_SPEED, BodyPlacement, Camera, Scene
from orrery.solar_system import get_solar_system


def _distance(a, b):
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(a, b)))


@pytest.fixture
def scene():
    return Scene(get_solar_system())


def test_orbit_keeps_distance_and_height():
    camera = Camera(position=(10.0, 5.0, 10.0))
    before = _distance(camera.position, camera.target)
    camera.orbit(0.7)
    assert _distance(camera.position, camera.target) == pytest.approx(before)
    assert camera.position[1] == pytest.approx(5.0)
    assert camera.position[0] != pytest.approx(10.0)


def test_orbit_with_zero_time_stays_put():
    camera = Camera(position=(3.0, 4.0, 5.0))
    camera.orbit(0.0)
    assert camera.position == pytest.approx((3.0, 4.0, 5.0))


def test_full_orbit_returns_to_start():
    camera = Camera(position=(3.0, 4.0, 5.0))
    camera.orbit(2 * math.pi / ORBITAL_SPEED)
    assert camera.position == pytest.approx((3.0, 4.0, 5.0))


def test_project_target_lands_in_screen_centre():
    camera = Camera(position=(10.0, 10.0, 10.0))
    x, y, depth = camera.project(camera.target, 800, 600)
    assert x == pytest.approx(400)
    assert y == pytest.approx(300)
    assert depth == pytest.approx(_distance(camera.position, camera.target))


def test_project_behind_camera_is_none():
    camera = Camera(position=(10.0, 10.0, 10.0))
    assert camera.project((20.0, 20.0, 20.0), 800, 600) is None


def test_project_beyond_far_plane_is_none():
    camera = Camera(position=(0.0, 0.0, 10.0), far=50.0)
    assert camera.project((0.0, 0.0, -100.0), 800, 600) is None


def test_project_up_is_above_centre():
    camera = Camera(position=(0.0, 0.0, 10.0))
    x, y, _ = camera.project((0.0, 1.0, 0.0), 800, 600)
    assert x == pytest.approx(400)
    assert y < 300


def test_project_with_camera_on_target_raises():
    camera = Camera(position=(0.0, 0.0, 0.0))
    with pytest.raises(ValueError):
        camera.project((1.0, 1.0, 1.0), 800, 600)


def test_focal_size_is_outermost_scaled_orbit(scene):
    expected = scene.bodies[-1].scaled_orbit_radius(scene.bounds)
    assert scene.focal_size == pytest.approx(expected)
    assert scene.camera.position == pytest.approx((expected, expected, expected))


def test_focal_scale_multiplies(scene):
    doubled = Scene(get_solar_system(), focal_scale=2.0)
    assert doubled.focal_size == pytest.approx(scene.focal_size * 2)


def test_empty_scene_raises():
    with pytest.raises(ValueError):
        Scene([])


def test_single_body_without_bounds_raises():
    with pytest.raises(ValueError):
        Scene(get_solar_system()[:1])


def test_angles_start_at_zero(scene):
    assert all(p.orbit_angle == 0.0 and p.axis_angle == 0.0 for p in scene.placements())


def test_update_sets_angles_from_periods(scene):
    scene.update(0.5)
    for placement in scene.placements():
        assert placement.orbit_angle == pytest.approx(placement.body.orbit / 360.0)
        assert placement.axis_angle == pytest.approx(placement.body.rotation / 360.0)


def test_time_scale_multiplies_angles():
    scene = Scene(get_solar_system(), time_scale=3.0)
    scene.update(0.1)
    earth = next(p for p in scene.placements() if p.body.name == "Earth")
    assert earth.orbit_angle == pytest.approx(3.0 * earth.body.orbit / 360.0)


def test_update_accumulates_elapsed_time(scene):
    scene.update(0.25)
    scene.update(0.5)
    assert scene.elapsed == pytest.approx(0.75)


def test_update_moves_camera(scene):
    before = scene.camera.position
    scene.update(1.0)
    assert _distance(scene.camera.position, (0.0, 0.0, 0.0)) == pytest.approx(
        _distance(before, (0.0, 0.0, 0.0))
    )
    assert scene.camera.position[1] == pytest.approx(before[1])


def test_placements_lie_on_scaled_orbits(scene):
    scene.update(1.0)
    placements = scene.placements()
    assert len(placements) == len(scene.bodies)
    for placement in placements:
        assert isinstance(placement, BodyPlacement)
        x, y, z = placement.position
        assert y == 0.0
        assert math.hypot(x, z) == pytest.approx(
            placement.body.scaled_orbit_radius(scene.bounds)
        )
        assert placement.radius == pytest.approx(
            placement.body.scaled_radius(scene.bounds)
        )


def test_sun_sits_at_origin(scene):
    sun = scene.placements()[0]
    assert sun.body.name == "Sun"
    assert sun.position == (0.0, 0.0, 0.0)