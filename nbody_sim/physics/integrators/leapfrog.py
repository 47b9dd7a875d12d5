"""Leapfrog integrator (staggered kick-drift, O(h²) accuracy)."""

from nbody_sim.physics.force_calculator import compute_accelerations
from nbody_sim.physics.integrators.base import Integrator
from nbody_sim.physics.world import World


class LeapfrogIntegrator(Integrator):
    """Leapfrog / velocity Verlet in staggered form - second-order, symplectic.
    
    Velocities live half a step ahead of positions:
    
        x[n+1]     = x[n] + dt * v[n+1/2]
        v[n+3/2]   = v[n+1/2] + dt * a(x[n+1])
    
    The offset is created by ``half_tick_velocity``, which must run exactly
    once before the first ``tick``. ``prepare`` does this for the simulator.
    Skipping it leaves positions and velocities out of phase and quietly
    degrades accuracy.
    """
    
    @property
    def name(self) -> str:
        return "leapfrog"
    
    @property
    def order(self) -> int:
        return 2
    
    def half_tick_velocity(self, world: World, dt: float):
        """Half kick: v[1/2] = v[0] + dt/2 * a(x[0])."""
        bodies = world.bodies
        accelerations = compute_accelerations(bodies)
        for body, acceleration in zip(bodies, accelerations):
            body.velocity = body.velocity + acceleration * dt / 2.0
    
    def prepare(self, world: World, dt: float):
        self.half_tick_velocity(world, dt)
    
    def tick(self, world: World, dt: float):
        """Drift all positions, advance time, then kick with the new forces."""
        bodies = world.bodies
        
        # x[n+1] = x[n] + dt * v[n+1/2]
        for body in bodies:
            body.position = body.position + body.velocity * dt
        world.advance_time(dt)
        
        # v[n+3/2] = v[n+1/2] + dt * a(x[n+1])
        accelerations = compute_accelerations(bodies)
        for body, acceleration in zip(bodies, accelerations):
            body.velocity = body.velocity + dt * acceleration
