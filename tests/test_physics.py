"""Tests for bodies, pairwise forces and the world."""

import numpy as np
import pytest
from nbody_sim.physics.body import Body
from nbody_sim.physics.force_calculator import (
    compute_accelerations,
    pairwise_acceleration,
    total_acceleration,
)
from nbody_sim.physics.vec3 import Point3, Vec3
from nbody_sim.physics.world import World


def make_bodies():
    return [
        Body(Point3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, 0.0), 1.0),
        Body(Point3(2.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0), 4.0),
        Body(Point3(0.0, 3.0, 0.0), Vec3(1.0, 0.0, 0.5), 9.0),
    ]


def test_body_from_row():
    """Test mapping an input row onto a body."""
    row = {"pos_x": 1.0, "pos_y": 2.0, "pos_z": 3.0,
           "vel_x": 4.0, "vel_y": 5.0, "vel_z": 6.0, "mass": 7.0}
    body = Body.from_row(row)
    
    assert body.position == Point3(1.0, 2.0, 3.0)
    assert body.velocity == Vec3(4.0, 5.0, 6.0)
    assert body.mass == 7.0
    assert body.next_velocity is None
    assert body.to_row() == row


def test_body_rendering():
    """Test the diagnostic text form of a body."""
    body = Body(Point3(1.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0), 2.0)
    
    assert str(body) == (
        "r = [1.000000e+00 0.000000e+00 0.000000e+00], "
        "v = [0.000000e+00 1.000000e+00 0.000000e+00], Gm = 2.000000e+00"
    )
    assert body.speed == 1.0


def test_pairwise_acceleration():
    """a = m_j / |r|^3 * r with r pointing from body i to body j."""
    a, b, _ = make_bodies()
    
    assert pairwise_acceleration(a, b) == Vec3(1.0, 0.0, 0.0)  # 4 / 8 * (2, 0, 0)
    assert pairwise_acceleration(b, a) == Vec3(-0.25, 0.0, 0.0)  # 1 / 8 * (-2, 0, 0)


def test_total_acceleration_sums_other_bodies():
    """Total acceleration is the sum over every other body."""
    bodies = make_bodies()
    expected = pairwise_acceleration(bodies[0], bodies[1]) + pairwise_acceleration(bodies[0], bodies[2])
    
    assert total_acceleration(bodies, 0) == expected
    assert np.allclose(total_acceleration(bodies, 0).to_array(), [1.0, 1.0, 0.0])
    assert len(compute_accelerations(bodies)) == 3


def test_no_self_force():
    """A lone body feels exactly zero acceleration; no bodies gives no results."""
    lone = [Body(Point3(1.0, 2.0, 3.0), Vec3(0.0, 0.0, 0.0), 5.0)]
    
    assert total_acceleration(lone, 0) == Vec3.ZERO
    assert compute_accelerations([]) == []


def test_newton_third_law():
    """Equal masses feel exactly opposite accelerations; forces balance in general."""
    equal = [
        Body(Point3(0.1, 0.2, 0.3), Vec3.ZERO, 2.0),
        Body(Point3(1.3, -0.4, 0.7), Vec3.ZERO, 2.0),
    ]
    a0, a1 = compute_accelerations(equal)
    assert a0 == -a1
    
    unequal = [
        Body(Point3(0.1, 0.2, 0.3), Vec3.ZERO, 2.0),
        Body(Point3(1.3, -0.4, 0.7), Vec3.ZERO, 5.0),
    ]
    a0, a1 = compute_accelerations(unequal)
    assert np.allclose((2.0 * a0).to_array(), (-5.0 * a1).to_array(), rtol=1e-14, atol=0)


def test_coincident_bodies_give_non_finite_acceleration():
    """Zero separation is not guarded: the result is NaN/Inf."""
    bodies = [
        Body(Point3(1.0, 1.0, 1.0), Vec3.ZERO, 1.0),
        Body(Point3(1.0, 1.0, 1.0), Vec3.ZERO, 1.0),
    ]
    acceleration = total_acceleration(bodies, 0)
    assert not np.all(np.isfinite(acceleration.to_array()))


def test_world_basics():
    """Test world construction and read-only view."""
    world = World(make_bodies())
    
    assert world.time == 0.0
    assert len(world) == 3
    assert isinstance(world.bodies, tuple)
    assert world.bodies[1].mass == 4.0
    
    world.advance_time(0.5)
    assert world.time == 0.5
    assert len(World()) == 0


def test_rest_frame_zeroes_reference_body():
    """After into_rest_frame(i) body i is exactly at rest at the origin."""
    bodies = make_bodies()
    bodies[1].position = Point3(0.3, -1.7, 2.9)
    bodies[1].velocity = Vec3(0.1, 0.7, -0.3)
    world = World(bodies)
    
    world.into_rest_frame(1)
    
    assert world.bodies[1].position == Vec3.ZERO
    assert world.bodies[1].velocity == Vec3.ZERO
    assert np.allclose(world.bodies[0].position.to_array(), [-0.3, 1.7, -2.9])
    assert np.allclose(world.bodies[2].velocity.to_array(), [0.9, -0.7, 0.8])


def test_rest_frame_shifts_staged_velocity():
    """Staged velocities move with the frame."""
    bodies = make_bodies()
    for body in bodies:
        body.next_velocity = body.velocity
    world = World(bodies)
    
    world.into_rest_frame(2)
    
    for body in world.bodies:
        assert body.next_velocity == body.velocity
    assert world.bodies[2].next_velocity == Vec3.ZERO


@pytest.mark.parametrize("index", [3, 100, -1])
def test_rest_frame_out_of_range_is_noop(index):
    """An invalid index leaves every body unchanged."""
    world = World(make_bodies())
    before = [(b.position, b.velocity) for b in world.bodies]
    
    world.into_rest_frame(index)
    
    assert [(b.position, b.velocity) for b in world.bodies] == before


def test_world_array_round_trip():
    """Test get_state and from_arrays."""
    world = World(make_bodies())
    positions, velocities, masses = world.get_state()
    
    assert positions.shape == (3, 3)
    assert np.allclose(masses, [1.0, 4.0, 9.0])
    
    rebuilt = World.from_arrays(positions, velocities, masses)
    assert [b.position for b in rebuilt.bodies] == [b.position for b in world.bodies]
    assert [b.velocity for b in rebuilt.bodies] == [b.velocity for b in world.bodies]
    
    with pytest.raises(ValueError):
        World.from_arrays(positions, velocities, masses[:2])
