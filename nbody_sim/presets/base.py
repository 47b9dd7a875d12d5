"""Base class for preset scenarios."""

from abc import ABC, abstractmethod
from typing import List
from nbody_sim.physics.body import Body


class Preset(ABC):
    """Abstract base class for initial-condition presets."""
    
    @abstractmethod
    def generate(self) -> List[Body]:
        """Generate initial conditions.
        
        Returns:
            Bodies in a fixed order (new objects on every call)
        """
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass
