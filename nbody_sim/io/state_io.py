"""State I/O for saving and loading simulation states."""

import numpy as np
import json
from typing import Tuple, Dict, Any, Optional
from pathlib import Path
from nbody_sim.physics.world import World


def save_state(
    positions: np.ndarray,
    velocities: np.ndarray,
    masses: np.ndarray,
    output_path: str,
    metadata: Optional[Dict[str, Any]] = None
):
    """Save body state to file.

    Args:
        positions: Body positions (n, 3)
        velocities: Body velocities (n, 3)
        masses: G-scaled masses (n,)
        output_path: Output file path (.npz or .json)
        metadata: Optional metadata dictionary (scalars only for .npz)
    """
    output_path = Path(output_path)

    if output_path.suffix == '.npz':
        save_dict = {
            'positions': np.asarray(positions, dtype=np.float64),
            'velocities': np.asarray(velocities, dtype=np.float64),
            'masses': np.asarray(masses, dtype=np.float64)
        }
        if metadata:
            for key, value in metadata.items():
                if isinstance(value, (int, float, str)):
                    save_dict[f'metadata_{key}'] = value
        np.savez_compressed(output_path, **save_dict)

    elif output_path.suffix == '.json':
        state_dict = {
            'positions': np.asarray(positions).tolist(),
            'velocities': np.asarray(velocities).tolist(),
            'masses': np.asarray(masses).tolist(),
            'metadata': metadata or {}
        }
        with open(output_path, 'w') as f:
            json.dump(state_dict, f, indent=2)

    else:
        raise ValueError(f"Unsupported file format: {output_path.suffix}. Use .npz or .json")


def load_state(input_path: str) -> Tuple[np.ndarray, np.ndarray, np.ndarray, Dict[str, Any]]:
    """Load body state from file.

    Args:
        input_path: Input file path (.npz or .json)

    Returns:
        Tuple of (positions, velocities, masses, metadata)
    """
    input_path = Path(input_path)

    if input_path.suffix == '.npz':
        with np.load(input_path) as data:
            positions = data['positions'].reshape(-1, 3)
            velocities = data['velocities'].reshape(-1, 3)
            masses = data['masses'].reshape(-1)
            metadata = {
                key[len('metadata_'):]: data[key].item()
                for key in data.files
                if key.startswith('metadata_')
            }
        return positions, velocities, masses, metadata

    elif input_path.suffix == '.json':
        with open(input_path, 'r') as f:
            state_dict = json.load(f)

        positions = np.array(state_dict['positions'], dtype=np.float64).reshape(-1, 3)
        velocities = np.array(state_dict['velocities'], dtype=np.float64).reshape(-1, 3)
        masses = np.array(state_dict['masses'], dtype=np.float64).reshape(-1)
        metadata = state_dict.get('metadata', {})

        return positions, velocities, masses, metadata

    else:
        raise ValueError(f"Unsupported file format: {input_path.suffix}. Use .npz or .json")


def save_world(world: World, output_path: str, metadata: Optional[Dict[str, Any]] = None):
    """Save a world's bodies; its elapsed time goes into metadata['time']."""
    positions, velocities, masses = world.get_state()
    metadata = dict(metadata or {})
    metadata['time'] = world.time
    save_state(positions, velocities, masses, output_path, metadata)


def load_world(input_path: str) -> Tuple[World, Dict[str, Any]]:
    """Load a world saved by save_world.

    The world's clock restarts at zero; the saved time is left in the
    returned metadata.
    """
    positions, velocities, masses, metadata = load_state(input_path)
    return World.from_arrays(positions, velocities, masses), metadata
