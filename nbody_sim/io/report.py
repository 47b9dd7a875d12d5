"""Plain-text report of a world's state."""

from typing import List
from nbody_sim.physics.world import World


def format_report(world: World) -> List[str]:
    """Report lines: elapsed time, then one line per body."""
    lines = [f"Simulation time: {world.time}"]
    for body in world.bodies:
        lines.append(f"{body}, speed = {body.speed}")
    return lines


def print_report(world: World):
    for line in format_report(world):
        print(line)
