"""Rendering of simulation output."""

from nbody_sim.render.trajectory_plot import plot_trajectories

__all__ = ["plot_trajectories"]
