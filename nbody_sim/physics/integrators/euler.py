"""Forward (explicit) Euler integrator (baseline, O(h) accuracy)."""

from nbody_sim.physics.force_calculator import compute_accelerations
from nbody_sim.physics.integrators.base import Integrator
from nbody_sim.physics.world import World


class ForwardEulerIntegrator(Integrator):
    """Forward Euler method - plain explicit first-order integrator.
    
    Not symplectic: energy error grows without bound. Kept as a baseline to
    compare the other schemes against.
    
    Each tick is two-phase. All new velocities are staged into
    ``Body.next_velocity`` from one snapshot of positions, then positions
    are advanced with the old velocities and the staged velocities are
    committed.
    """
    
    @property
    def name(self) -> str:
        return "forward-euler"
    
    @property
    def order(self) -> int:
        return 1
    
    def attach(self, world: World):
        """Initialise every body's staging buffer to its current velocity."""
        for body in world.bodies:
            body.next_velocity = body.velocity
    
    def tick(self, world: World, dt: float):
        """Euler step: v_new = v + a*dt, r_new = r + v*dt."""
        bodies = world.bodies
        
        # Stage: read-only pass over the pre-tick snapshot
        accelerations = compute_accelerations(bodies)
        for body, acceleration in zip(bodies, accelerations):
            body.next_velocity = body.velocity + acceleration * dt
        
        # Commit: positions move with the pre-tick velocity
        for body in bodies:
            body.position = body.position + body.velocity * dt
            body.velocity = body.next_velocity
        
        world.advance_time(dt)
