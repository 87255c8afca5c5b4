import pytest

from flappy_core.constants import GameConfig, MAX_FALL_SPEED, FLAP_IMPULSE
from flappy_core.data_models import Bird
from flappy_core.physics_core import PhysicsCore, step_factor


@pytest.fixture
def physics():
    return PhysicsCore()


def make_bird(y=100.0, vy=0.0, rotation=0.0):
    return Bird(x=112.0, y=y, radius=14, vy=vy, rotation=rotation)


def test_one_nominal_step_applies_gravity_then_moves(physics):
    bird = make_bird()
    physics.integrate(bird, 16)
    assert bird.vy == pytest.approx(0.45)
    assert bird.y == pytest.approx(100.45)
    assert bird.x == 112.0


def test_step_factor_is_capped():
    assert step_factor(16) == pytest.approx(1.0)
    assert step_factor(8) == pytest.approx(0.5)
    assert step_factor(5000) == pytest.approx(2.0)
    assert step_factor(10, GameConfig(nominal_step_ms=10.0, max_step_factor=3.0)) == pytest.approx(1.0)


def test_long_pause_is_clamped_to_two_steps(physics):
    bird = make_bird()
    physics.integrate(bird, 1000)
    assert bird.vy == pytest.approx(0.9)
    assert bird.y == pytest.approx(101.8)


@pytest.mark.parametrize("dt", [0, 1, 16, 33, 100, 10_000])
@pytest.mark.parametrize("vy", [-8.2, 0.0, 9.9, 10.0])
def test_fall_speed_never_exceeds_terminal(physics, dt, vy):
    bird = make_bird(vy=vy)
    physics.integrate(bird, dt)
    assert bird.vy <= MAX_FALL_SPEED


def test_zero_dt_leaves_motion_unchanged(physics):
    bird = make_bird(vy=2.0)
    physics.integrate(bird, 0)
    assert bird.vy == pytest.approx(2.0)
    assert bird.y == pytest.approx(100.0)


def test_rotation_eases_toward_tilt_up_when_rising(physics):
    bird = make_bird(vy=-5.0)
    physics.integrate(bird, 0)
    assert bird.rotation == pytest.approx(-0.4 * 0.15)


def test_rotation_eases_toward_capped_tilt_down_when_falling(physics):
    bird = make_bird(vy=10.0)
    physics.integrate(bird, 0)
    assert bird.rotation == pytest.approx(0.6 * 0.15)


def test_rotation_converges_on_target(physics):
    bird = make_bird(vy=2.0)
    for _ in range(200):
        physics.integrate(bird, 0)
    assert bird.rotation == pytest.approx(2.0 * 0.08)


def test_target_rotation_bounds(physics):
    assert physics.target_rotation(-0.1) == pytest.approx(-0.4)
    assert physics.target_rotation(0.0) == pytest.approx(0.0)
    assert physics.target_rotation(5.0) == pytest.approx(0.4)
    assert physics.target_rotation(50.0) == pytest.approx(0.6)


def test_flap_replaces_velocity(physics):
    bird = make_bird(vy=7.5)
    physics.flap(bird)
    assert bird.vy == FLAP_IMPULSE
