"""Abstract base class for numerical integrators."""

from abc import ABC, abstractmethod
from nbody_sim.physics.world import World


class Integrator(ABC):
    """Abstract interface for fixed-step integration schemes.

    An integrator carries no per-run state; everything it advances lives in
    the World passed to it.
    """
    
    def attach(self, world: World):
        """Prepare per-body storage this scheme needs (called once per world)."""
        pass
    
    def prepare(self, world: World, dt: float):
        """One-time start-up step, run before the first tick."""
        pass
    
    @abstractmethod
    def tick(self, world: World, dt: float):
        """Advance the world by exactly one step of duration ``dt``.
        
        Args:
            world: World to advance in place
            dt: Time step (positive)
        """
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass
    
    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy (1 for the Euler schemes, 2 for leapfrog)."""
        pass
    
    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
