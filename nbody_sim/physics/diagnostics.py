"""Diagnostics for N-body simulations.

Masses carry G (``G * m``), so every quantity here is G-scaled: energies
are G times the physical energy, momenta G times the physical momentum.
That is fine for conservation checks, which only compare values over time.
"""

import numpy as np
from typing import Tuple
from nbody_sim.physics.world import World


def kinetic_energy(velocities, masses) -> float:
    """K = 0.5 * sum(m_i * v_i^2)."""
    velocities = np.asarray(velocities)
    masses = np.asarray(masses).flatten()
    v_sq = np.sum(velocities ** 2, axis=1)
    return float(0.5 * np.sum(masses * v_sq))


def potential_energy(positions, masses) -> float:
    """U = -sum_{i<j} m_i * m_j / r_ij (unsoftened, matches the force law)."""
    positions = np.asarray(positions)
    masses = np.asarray(masses).flatten()
    n = len(masses)
    U = 0.0
    for i in range(n):
        for j in range(i + 1, n):
            r = np.linalg.norm(positions[j] - positions[i])
            U -= masses[i] * masses[j] / r
    return float(U)


def linear_momentum(velocities, masses) -> np.ndarray:
    """P = sum(m_i * v_i) as a (3,) array."""
    masses = np.asarray(masses).flatten()
    return np.sum(masses[:, np.newaxis] * np.asarray(velocities), axis=0)


def angular_momentum(positions, velocities, masses) -> np.ndarray:
    """L = sum(m_i * r_i x v_i) about the origin, as a (3,) array."""
    masses = np.asarray(masses).flatten()
    if len(masses) == 0:
        return np.zeros(3)
    return np.sum(masses[:, np.newaxis] * np.cross(positions, velocities), axis=0)


def center_of_mass(positions, masses) -> np.ndarray:
    """Mass-weighted mean position. Zero total mass gives NaN components."""
    masses = np.asarray(masses).flatten()
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.sum(masses[:, np.newaxis] * np.asarray(positions), axis=0) / np.sum(masses)


def relative_energy_error(E0: float, E: float) -> float:
    """|E - E0| / |E0|, or the absolute error when E0 is zero."""
    if E0 == 0:
        return abs(E - E0)
    return abs(E - E0) / abs(E0)


class Diagnostics:
    """Conserved-quantity diagnostics for a World."""

    def __init__(self, world: World):
        self.world = world

    def compute_energies(self) -> Tuple[float, float, float]:
        """Compute kinetic, potential, and total energy.

        Returns:
            Tuple of (kinetic_energy, potential_energy, total_energy)
        """
        positions, velocities, masses = self.world.get_state()
        K = kinetic_energy(velocities, masses)
        U = potential_energy(positions, masses)
        return K, U, K + U

    def total_energy(self) -> float:
        return self.compute_energies()[2]

    def linear_momentum(self) -> np.ndarray:
        _, velocities, masses = self.world.get_state()
        return linear_momentum(velocities, masses)

    def angular_momentum(self) -> np.ndarray:
        positions, velocities, masses = self.world.get_state()
        return angular_momentum(positions, velocities, masses)

    def center_of_mass(self) -> np.ndarray:
        positions, _, masses = self.world.get_state()
        return center_of_mass(positions, masses)
