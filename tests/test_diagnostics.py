"""Tests for conserved-quantity diagnostics."""

import warnings
import numpy as np
from nbody_sim.physics.body import Body
from nbody_sim.physics.diagnostics import (
    Diagnostics,
    angular_momentum,
    center_of_mass,
    kinetic_energy,
    linear_momentum,
    potential_energy,
    relative_energy_error,
)
from nbody_sim.physics.vec3 import Point3, Vec3
from nbody_sim.physics.world import World


def two_bodies():
    return World([
        Body(Point3(0.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0), 2.0),
        Body(Point3(2.0, 0.0, 0.0), Vec3(0.0, -1.0, 0.0), 3.0),
    ])


def test_energies():
    """K = 0.5 sum m v^2, U = -m1 m2 / r."""
    K, U, E = Diagnostics(two_bodies()).compute_energies()
    
    assert np.isclose(K, 2.5)
    assert np.isclose(U, -3.0)
    assert np.isclose(E, K + U)


def test_energy_functions_on_arrays():
    """Test the array-level helpers directly."""
    positions, velocities, masses = two_bodies().get_state()
    
    assert np.isclose(kinetic_energy(velocities, masses), 2.5)
    assert np.isclose(potential_energy(positions, masses), -3.0)
    assert potential_energy(np.zeros((1, 3)), np.ones(1)) == 0.0


def test_momenta_and_center_of_mass():
    """Test linear and angular momentum and centre of mass."""
    diagnostics = Diagnostics(two_bodies())
    
    assert np.allclose(diagnostics.linear_momentum(), [2.0, -3.0, 0.0])
    # Only the second body has r x v != 0: 3 * (2, 0, 0) x (0, -1, 0) = (0, 0, -6)
    assert np.allclose(diagnostics.angular_momentum(), [0.0, 0.0, -6.0])
    assert np.allclose(diagnostics.center_of_mass(), [1.2, 0.0, 0.0])


def test_empty_system():
    """An empty system has zero energy and momentum."""
    positions, velocities, masses = World().get_state()
    
    assert kinetic_energy(velocities, masses) == 0.0
    assert potential_energy(positions, masses) == 0.0
    assert np.allclose(linear_momentum(velocities, masses), np.zeros(3))
    assert np.allclose(angular_momentum(positions, velocities, masses), np.zeros(3))


def test_relative_energy_error():
    """Test relative error with and without a zero reference."""
    assert np.isclose(relative_energy_error(-2.0, -1.9), 0.05)
    assert relative_energy_error(0.0, 0.5) == 0.5


def test_center_of_mass_helper():
    """Test the weighted average directly."""
    positions = np.array([[0.0, 0.0, 0.0], [4.0, 0.0, 0.0]])
    masses = np.array([3.0, 1.0])
    assert np.allclose(center_of_mass(positions, masses), [1.0, 0.0, 0.0])


def test_center_of_mass_without_mass_is_nan():
    """Zero total mass gives NaN without numpy warnings."""
    positions = np.array([[1.0, 2.0, 3.0], [4.0, 0.0, 0.0]])
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        com = center_of_mass(positions, np.zeros(2))
    assert np.all(np.isnan(com))
