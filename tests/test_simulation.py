import itertools

import pytest

from threebody.collisions import bodies_overlap
from threebody.config import SimulationConfig
from threebody.constants import SPAWN_MARGIN
from threebody.physics import NBodyPhysics, total_momentum
from threebody.simulation import Simulation
from threebody.vector_utils import vec_add, vec_dist


def positions(sim):
    return [b.position for b in sim.bodies]


def test_starts_running_with_random_bodies(viewport):
    sim = Simulation(SimulationConfig(), viewport)
    assert sim.running
    assert [b.id for b in sim.bodies] == [0, 1, 2]
    for b in sim.bodies:
        assert SPAWN_MARGIN <= b.position[0] <= viewport[0] - SPAWN_MARGIN
        assert SPAWN_MARGIN <= b.position[1] <= viewport[1] - SPAWN_MARGIN
        assert -1.0 <= b.velocity[0] <= 1.0
        assert 5.0 <= b.mass <= 10.0
        assert b.radius == b.mass
        assert b.color[3] == 255


def test_fixed_radius_policy(viewport):
    sim = Simulation(SimulationConfig(radius_policy="fixed", fixed_radius=4.0), viewport)
    assert all(b.radius == 4.0 for b in sim.bodies)


def test_seed_is_used_once(viewport):
    config = SimulationConfig(seed=7)
    first = Simulation(config, viewport)
    initial = positions(first)
    first.reset(config, viewport)
    assert positions(first) != initial
    assert positions(Simulation(config, viewport)) == initial


def test_rejects_single_body(make_body, viewport):
    with pytest.raises(ValueError):
        Simulation(SimulationConfig(), viewport, bodies=[make_body(0, (1.0, 1.0))])


def test_velocities_come_from_one_snapshot(make_body, viewport):
    bodies = [
        make_body(0, (200.0, 300.0), velocity=(0.5, 0.0), mass=6.0),
        make_body(1, (400.0, 320.0), velocity=(0.0, -0.5), mass=9.0),
        make_body(2, (300.0, 150.0), velocity=(-0.2, 0.3), mass=7.0),
    ]
    physics = NBodyPhysics()
    expected = [vec_add(b.velocity, physics.velocity_increment(b, bodies)) for b in bodies]

    sim = Simulation(SimulationConfig(), viewport, bodies=bodies)
    sim.step(SimulationConfig(), viewport)

    for body, start, velocity in zip(sim.bodies, bodies, expected):
        assert body.velocity == pytest.approx(velocity)
        assert body.position == pytest.approx(vec_add(start.position, velocity))


def test_step_does_not_touch_caller_bodies(make_body, viewport):
    bodies = [make_body(0, (200.0, 300.0)), make_body(1, (400.0, 300.0))]
    sim = Simulation(SimulationConfig(), viewport, bodies=bodies)
    sim.step(SimulationConfig(), viewport)
    assert bodies[0].position == (200.0, 300.0)
    assert bodies[0].velocity == (0.0, 0.0)


def test_halting_collision_freezes_simulation(make_body, viewport):
    config = SimulationConfig(radius_policy="fixed")
    bodies = [
        make_body(0, (100.0, 300.0), velocity=(1.0, 0.0), radius=5.0),
        make_body(1, (140.0, 300.0), velocity=(-1.0, 0.0), radius=5.0),
        make_body(2, (600.0, 100.0), radius=5.0),
    ]
    sim = Simulation(config, viewport, bodies=bodies)

    collided_at = None
    for step in range(1, 101):
        sim.step(config, viewport)
        touching = any(vec_dist(a.position, b.position) <= a.radius + b.radius
                       for a, b in itertools.combinations(sim.bodies, 2))
        if touching:
            assert not sim.running
            collided_at = step
            break
        assert sim.running

    assert collided_at is not None
    assert sim.collided == (0, 1)

    frozen = positions(sim)
    trail_count = len(sim.trails)
    for _ in range(100 - collided_at):
        assert sim.step(config, viewport) is False
    assert positions(sim) == frozen
    assert sim.steps == collided_at
    assert len(sim.trails) == trail_count


def test_auto_restart_resets_on_next_step(make_body, viewport):
    config = SimulationConfig(auto_restart=True)
    bodies = [make_body(0, (100.0, 100.0), radius=5.0), make_body(1, (105.0, 100.0), radius=5.0)]
    sim = Simulation(config, viewport, bodies=bodies)

    assert sim.step(config, viewport) is False
    assert sim.step(config, viewport) is True
    assert sim.running
    assert sim.steps == 0
    assert sim.collided is None
    assert len(sim.trails) == 0
    assert [b.id for b in sim.bodies] == [0, 1, 2]


def test_elastic_head_on_collision_exchanges_velocities(make_body, viewport):
    config = SimulationConfig(elastic=True)
    bodies = [
        make_body(0, (100.0, 100.0), velocity=(1.0, 0.0), mass=5.0, radius=5.0),
        make_body(1, (112.0, 100.0), velocity=(-1.0, 0.0), mass=5.0, radius=5.0),
    ]
    sim = Simulation(config, viewport, bodies=bodies)

    sim.step(config, viewport)
    a, b = sim.bodies
    assert bodies_overlap(a, b)
    before = [a.velocity, b.velocity]
    momentum = total_momentum(sim.bodies)

    sim.step(config, viewport)
    a, b = sim.bodies
    assert a.velocity == pytest.approx(before[1], abs=1e-5)
    assert b.velocity == pytest.approx(before[0], abs=1e-5)
    assert total_momentum(sim.bodies) == pytest.approx(momentum, abs=1e-5)
    assert sim.running

    for _ in range(50):
        assert sim.step(config, viewport)
    assert sim.collided is None


def test_trails_follow_config(make_body, viewport):
    config = SimulationConfig()
    bodies = [make_body(0, (200.0, 300.0)), make_body(1, (400.0, 300.0)), make_body(2, (300.0, 100.0))]
    sim = Simulation(config, viewport, bodies=bodies)
    for _ in range(3):
        sim.step(config, viewport)
    assert len(sim.trails) == 9

    sim.step(config.toggled("trails"), viewport)
    assert len(sim.trails) == 0


def test_wrap_mode_keeps_bodies_on_screen(make_body, viewport):
    config = SimulationConfig(wrap=True)
    bodies = [
        make_body(0, (799.0, 300.0), velocity=(3.0, 0.0), mass=0.001),
        make_body(1, (400.0, 300.0), mass=0.001),
    ]
    sim = Simulation(config, viewport, bodies=bodies)
    sim.step(config, viewport)
    x, _ = sim.bodies[0].position
    assert 0.0 <= x < 10.0


def test_reset_restarts_stopped_simulation(make_body, viewport):
    config = SimulationConfig()
    bodies = [make_body(0, (100.0, 100.0), radius=5.0), make_body(1, (105.0, 100.0), radius=5.0)]
    sim = Simulation(config, viewport, bodies=bodies)
    sim.step(config, viewport)
    assert not sim.running
    assert not sim.step(config, viewport)

    sim.reset(config, viewport)
    assert sim.running
    assert len(sim.bodies) == 3
