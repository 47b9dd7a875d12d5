"""Physics engine for N-body simulations."""

from nbody_sim.physics.vec3 import Vec3, Point3
from nbody_sim.physics.body import Body
from nbody_sim.physics.world import World
from nbody_sim.physics.simulator import Simulator, TrajectoryRecorder

__all__ = ["Vec3", "Point3", "Body", "World", "Simulator", "TrajectoryRecorder"]
