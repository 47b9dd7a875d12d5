"""Symplectic (semi-implicit) Euler integrator."""

from nbody_sim.physics.force_calculator import total_acceleration
from nbody_sim.physics.integrators.base import Integrator
from nbody_sim.physics.world import World


class SymplecticEulerIntegrator(Integrator):
    """Semi-implicit Euler - first-order, symplectic.
    
    Kick then drift:
    1. v_new = v + a(x)*dt, body by body
    2. x_new = x + v_new*dt
    
    Positions are untouched until every velocity is updated, so each
    body's acceleration still sees the pre-tick positions and no staging
    buffer is needed.
    """
    
    @property
    def name(self) -> str:
        return "symplectic-euler"
    
    @property
    def order(self) -> int:
        return 1
    
    def tick(self, world: World, dt: float):
        bodies = world.bodies
        for i, body in enumerate(bodies):
            body.velocity = body.velocity + dt * total_acceleration(bodies, i)
        for body in bodies:
            body.position = body.position + dt * body.velocity
        world.advance_time(dt)
