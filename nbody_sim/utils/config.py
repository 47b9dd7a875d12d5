"""Configuration management."""

import json
from typing import Dict, Any, Optional
from pathlib import Path
from dataclasses import dataclass, asdict, fields


@dataclass
class Config:
    """Simulation run configuration.
    
    Field names match the long CLI options, so a config file can hold any
    subset of the command line.
    """
    # Initial conditions: a CSV file or a preset name
    file: Optional[str] = None
    preset: Optional[str] = None
    preset_params: Dict[str, Any] = None
    
    # Simulation parameters
    tick: float = 1e-3
    sim: str = "forward-euler"
    dur: Optional[float] = None
    rest_frame: Optional[int] = None
    
    # Output
    save_state: Optional[str] = None
    plot: Optional[str] = None
    record_every: int = 1
    
    def __post_init__(self):
        if self.preset_params is None:
            self.preset_params = {}
        if not isinstance(self.preset_params, dict):
            raise ValueError(f"preset_params must be a mapping, got {self.preset_params!r}")
        for name in ('file', 'preset', 'sim', 'save_state', 'plot'):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"{name} must be a string, got {value!r}")
        for name in ('tick', 'dur'):
            value = getattr(self, name)
            if value is not None:
                setattr(self, name, _number(name, value))
        if self.rest_frame is not None:
            self.rest_frame = _integer('rest_frame', self.rest_frame)
        self.record_every = _integer('record_every', self.record_every)


def _number(name: str, value) -> float:
    # bool is an int subclass but never a valid number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number, got {value!r}")
    return float(value)


def _integer(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    return value


def _yaml():
    try:
        import yaml
    except ImportError:
        raise ImportError("YAML support requires PyYAML. Install with: pip install pyyaml")
    return yaml


def load_config(config_path: str) -> Config:
    """Load configuration from file.
    
    Args:
        config_path: Path to config file (.json or .yaml)
        
    Returns:
        Config object
        
    Raises:
        ValueError: On unknown keys, malformed content, values of the
            wrong type, or an unsupported suffix
    """
    config_path = Path(config_path)
    
    with open(config_path, 'r') as f:
        if config_path.suffix in ('.yaml', '.yml'):
            yaml = _yaml()
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {config_path}: {e}") from e
        elif config_path.suffix == '.json':
            # JSONDecodeError is a ValueError
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config format: {config_path.suffix}. Use .json or .yaml")

    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")

    # Accept the CLI spelling (rest-frame) as well as the field name
    data = {key.replace('-', '_'): value for key, value in data.items()}
    known = {f.name for f in fields(Config)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config key(s) in {config_path}: {', '.join(unknown)}")
    
    return Config(**data)


def save_config(config: Config, output_path: str):
    """Save configuration to file.
    
    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = asdict(config)
    
    with open(output_path, 'w') as f:
        if output_path.suffix in ('.yaml', '.yml'):
            _yaml().dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
