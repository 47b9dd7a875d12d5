"""
N-body Simulator - direct-summation gravitational N-body integration.

Features:
- Naive O(N^2) all-pairs Newtonian gravity on G-scaled masses
- Three integrators (forward Euler, symplectic Euler, leapfrog)
- Rest-frame transform for reporting
- CSV initial conditions, text report, state export, trajectory plots
- CLI interface
"""

__version__ = "0.1.0"

from nbody_sim.physics.simulator import Simulator
from nbody_sim.physics.world import World
from nbody_sim.physics.body import Body
from nbody_sim.physics.vec3 import Vec3, Point3
from nbody_sim.physics.integrators import get_integrator, list_integrators

__all__ = [
    "Simulator",
    "World",
    "Body",
    "Vec3",
    "Point3",
    "get_integrator",
    "list_integrators",
]
