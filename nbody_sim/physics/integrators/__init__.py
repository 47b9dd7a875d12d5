"""Numerical integrators for N-body simulations."""

from typing import List
from nbody_sim.physics.integrators.base import Integrator
from nbody_sim.physics.integrators.euler import ForwardEulerIntegrator
from nbody_sim.physics.integrators.symplectic_euler import SymplecticEulerIntegrator
from nbody_sim.physics.integrators.leapfrog import LeapfrogIntegrator

_INTEGRATORS = {
    'forward-euler': ForwardEulerIntegrator,
    'symplectic-euler': SymplecticEulerIntegrator,
    'leapfrog': LeapfrogIntegrator,
}


def list_integrators() -> List[str]:
    """Names accepted by get_integrator."""
    return list(_INTEGRATORS)


def get_integrator(name: str) -> Integrator:
    """Get a new integrator instance by name.
    
    Args:
        name: 'forward-euler', 'symplectic-euler' or 'leapfrog'
            (case-insensitive, underscores accepted)
    
    Raises:
        ValueError: If the name is unknown
    """
    key = name.lower().replace('_', '-')
    integrator_class = _INTEGRATORS.get(key)
    if integrator_class is None:
        raise ValueError(f"Unknown integrator: {name}. Available: {list_integrators()}")
    return integrator_class()


__all__ = [
    "Integrator",
    "ForwardEulerIntegrator",
    "SymplecticEulerIntegrator",
    "LeapfrogIntegrator",
    "get_integrator",
    "list_integrators",
]
