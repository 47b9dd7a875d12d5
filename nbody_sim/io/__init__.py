"""I/O utilities for initial conditions, reports and state management."""

from nbody_sim.io.csv_reader import InitialConditionsError, read_bodies, write_bodies
from nbody_sim.io.state_io import save_state, load_state, save_world, load_world
from nbody_sim.io.report import format_report, print_report

__all__ = [
    "InitialConditionsError",
    "read_bodies",
    "write_bodies",
    "save_state",
    "load_state",
    "save_world",
    "load_world",
    "format_report",
    "print_report",
]
