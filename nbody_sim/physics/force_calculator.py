"""Direct all-pairs gravitational acceleration.

Masses are stored as ``G * m``, so the acceleration on body i from body j is

    a_ij = m_j / |r_ij|^3 * r_ij,    r_ij = x_j - x_i

No softening is applied: coincident bodies produce inf/NaN, which then
propagates through the sum.
"""

from typing import List, Sequence
import numpy as np
from nbody_sim.physics.body import Body
from nbody_sim.physics.vec3 import Vec3


def pairwise_acceleration(body: Body, source: Body) -> Vec3:
    """Acceleration contribution on ``body`` from ``source``."""
    r = source.position - body.position
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        scale = np.float64(source.mass) / np.float64(r.length()) ** 3
        return scale * r


def total_acceleration(bodies: Sequence[Body], i: int) -> Vec3:
    """Sum of contributions on body ``i`` from every other body, in index order.

    A lone body gets exactly zero: there is no self-force term.
    """
    body = bodies[i]
    return Vec3.sum(
        pairwise_acceleration(body, other)
        for j, other in enumerate(bodies)
        if j != i
    )


def compute_accelerations(bodies: Sequence[Body]) -> List[Vec3]:
    """Accelerations of all bodies evaluated from one consistent snapshot.

    This is a read-only pass; callers apply the results afterwards.
    """
    return [total_acceleration(bodies, i) for i in range(len(bodies))]
