"""Static trajectory plots using matplotlib."""

import numpy as np
from matplotlib.figure import Figure
from typing import Optional, Sequence

_AXES = {'x': 0, 'y': 1, 'z': 2}


def plot_trajectories(
    times: np.ndarray,
    positions: np.ndarray,
    output_path: Optional[str] = None,
    projection: str = "xy",
    labels: Optional[Sequence[str]] = None,
    figsize=(8, 8),
    dpi: int = 100
) -> Figure:
    """Plot the path of every body projected onto two coordinate axes.
    
    Args:
        times: Snapshot times (k,)
        positions: Snapshot positions (k, n, 3)
        output_path: If given, the figure is saved there
        projection: Two of 'x', 'y', 'z', e.g. 'xy' or 'xz'
        labels: Optional legend label per body
        figsize: Figure size (width, height)
        dpi: Dots per inch
        
    Returns:
        The matplotlib Figure
    """
    if len(projection) != 2 or any(c not in _AXES for c in projection):
        raise ValueError(f"Invalid projection '{projection}'. Use two of x, y, z, e.g. 'xy'")
    positions = np.asarray(positions, dtype=np.float64)
    if positions.ndim != 3 or positions.shape[2] != 3:
        raise ValueError(f"Expected positions of shape (k, n, 3), got {positions.shape}")
    
    a, b = (_AXES[c] for c in projection)
    n_bodies = positions.shape[1]
    
    # Figure without pyplot: no GUI backend or global state involved
    fig = Figure(figsize=figsize, dpi=dpi)
    ax = fig.add_subplot(1, 1, 1)
    ax.set_aspect('equal')
    ax.set_xlabel(projection[0].upper())
    ax.set_ylabel(projection[1].upper())
    if len(times):
        ax.set_title(f'N-body trajectories (t = {times[0]:g} .. {times[-1]:g})')
    else:
        ax.set_title('N-body trajectories')
    ax.grid(True, alpha=0.3)
    
    for i in range(n_bodies):
        label = labels[i] if labels is not None else f'body {i}'
        line, = ax.plot(positions[:, i, a], positions[:, i, b], '-', linewidth=1.0, label=label)
        # Mark the final position
        ax.plot(positions[-1, i, a], positions[-1, i, b], 'o', color=line.get_color())
    
    if n_bodies:
        ax.legend(loc='best')
    
    if output_path is not None:
        fig.savefig(output_path)
    return fig
