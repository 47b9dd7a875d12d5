"""Figure-eight three-body choreography."""

from typing import List
from nbody_sim.physics.body import Body
from nbody_sim.physics.vec3 import Point3, Vec3
from nbody_sim.presets.base import Preset

# Chenciner & Montgomery (2000), unit masses with G = 1
_X1 = Point3(0.97000436, -0.24308753, 0.0)
_V3 = Vec3(-0.93240737, -0.86473146, 0.0)
PERIOD = 6.32591398


class FigureEight(Preset):
    """Three equal masses chasing each other along a figure-eight curve.
    
    Total linear momentum is zero, so the centre of mass stays at the origin.
    """
    
    def __init__(self, scale: float = 1.0):
        """Initialize figure-eight preset.
        
        Args:
            scale: Length scale; velocities are rescaled so the orbit stays a
                solution (v ~ 1 / sqrt(scale) for unit masses)
        """
        if scale <= 0:
            raise ValueError(f"Scale must be positive, got {scale}")
        self.scale = float(scale)
    
    @property
    def name(self) -> str:
        return "figure-eight"
    
    @property
    def period(self) -> float:
        return PERIOD * self.scale ** 1.5
    
    def generate(self) -> List[Body]:
        s = self.scale
        k = s ** -0.5
        v12 = _V3 * (-0.5)
        return [
            Body(_X1 * s, v12 * k, 1.0),
            Body(-_X1 * s, v12 * k, 1.0),
            Body(Point3.ZERO, _V3 * k, 1.0),
        ]
