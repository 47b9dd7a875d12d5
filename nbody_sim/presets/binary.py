"""Two bodies on a circular mutual orbit."""

import numpy as np
from typing import List
from nbody_sim.physics.body import Body
from nbody_sim.physics.vec3 import Point3, Vec3
from nbody_sim.presets.base import Preset


class CircularBinary(Preset):
    """Circular two-body orbit about the barycentre, which sits at rest at the origin.
    
    The orbit lies in the xy-plane with the bodies starting on the x-axis.
    Masses are G-scaled, so the relative orbital speed is sqrt((m1 + m2) / d)
    and the period is 2*pi*sqrt(d^3 / (m1 + m2)).
    """
    
    def __init__(self, m1: float = 1.0, m2: float = 1.0, separation: float = 1.0):
        """Initialize circular binary preset.
        
        Args:
            m1: G-scaled mass of the first body
            m2: G-scaled mass of the second body
            separation: Distance between the bodies
        """
        if m1 + m2 <= 0:
            raise ValueError(f"Total mass must be positive, got {m1 + m2}")
        if separation <= 0:
            raise ValueError(f"Separation must be positive, got {separation}")
        self.m1 = float(m1)
        self.m2 = float(m2)
        self.separation = float(separation)
    
    @property
    def name(self) -> str:
        return "binary"
    
    @property
    def total_mass(self) -> float:
        return self.m1 + self.m2
    
    @property
    def relative_speed(self) -> float:
        return float(np.sqrt(self.total_mass / self.separation))
    
    @property
    def period(self) -> float:
        return float(2 * np.pi * np.sqrt(self.separation ** 3 / self.total_mass))
    
    def generate(self) -> List[Body]:
        """Generate the two bodies, m1 first."""
        f1 = self.m2 / self.total_mass
        f2 = self.m1 / self.total_mass
        d = self.separation
        v = self.relative_speed
        return [
            Body(Point3(-f1 * d, 0.0, 0.0), Vec3(0.0, -f1 * v, 0.0), self.m1),
            Body(Point3(f2 * d, 0.0, 0.0), Vec3(0.0, f2 * v, 0.0), self.m2),
        ]
