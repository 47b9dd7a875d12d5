"""Ordered collection of bodies plus elapsed simulated time."""

from typing import Iterable, Tuple
import numpy as np
from nbody_sim.physics.body import Body
from nbody_sim.physics.vec3 import Point3, Vec3


class World:
    """N-body state advanced by an integrator.

    The world owns its bodies. Their order is fixed at construction and is
    what rest-frame indices refer to. Only integrators (through
    ``advance_time``) and ``into_rest_frame`` mutate it.
    """

    def __init__(self, bodies: Iterable[Body] = ()):
        """Initialize world.

        Args:
            bodies: Bodies in the order used for index-based selection
        """
        self._bodies = list(bodies)
        self._time = 0.0

    @classmethod
    def from_arrays(cls, positions, velocities, masses) -> "World":
        """Build a world from (n, 3), (n, 3) and (n,) arrays."""
        positions = np.asarray(positions, dtype=np.float64).reshape(-1, 3)
        velocities = np.asarray(velocities, dtype=np.float64).reshape(-1, 3)
        masses = np.asarray(masses, dtype=np.float64).reshape(-1)
        if not (len(positions) == len(velocities) == len(masses)):
            raise ValueError(
                f"Mismatched state arrays: {len(positions)} positions, "
                f"{len(velocities)} velocities, {len(masses)} masses"
            )
        return cls(
            Body(Point3.from_array(p), Vec3.from_array(v), float(m))
            for p, v, m in zip(positions, velocities, masses)
        )

    @property
    def bodies(self) -> Tuple[Body, ...]:
        """Read-only ordered view of the bodies."""
        return tuple(self._bodies)

    @property
    def time(self) -> float:
        return self._time

    def advance_time(self, dt: float):
        self._time += dt

    def __len__(self) -> int:
        return len(self._bodies)

    def into_rest_frame(self, index: int):
        """Re-express all bodies relative to the body at ``index``.

        The reference body ends up exactly at rest at the origin. An index
        outside ``[0, len(self))`` leaves the frame unchanged.
        """
        if not 0 <= index < len(self._bodies):
            return
        reference = self._bodies[index]
        r_position = reference.position
        r_velocity = reference.velocity
        for body in self._bodies:
            body.position = body.position - r_position
            body.velocity = body.velocity - r_velocity
            if body.next_velocity is not None:
                body.next_velocity = body.next_velocity - r_velocity

    def get_state(self):
        """Get current state (positions, velocities, masses).

        Returns:
            Tuple of (positions, velocities, masses) as numpy arrays
        """
        n = len(self._bodies)
        positions = np.zeros((n, 3))
        velocities = np.zeros((n, 3))
        masses = np.zeros(n)
        for i, body in enumerate(self._bodies):
            positions[i] = body.position.to_array()
            velocities[i] = body.velocity.to_array()
            masses[i] = body.mass
        return positions, velocities, masses

    def __repr__(self) -> str:
        return f"World(n_bodies={len(self._bodies)}, time={self._time!r})"
