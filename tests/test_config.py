"""Tests for configuration files."""

import json
import pytest
from nbody_sim.utils.config import Config, load_config, save_config


def test_defaults():
    """Defaults match the command line defaults."""
    config = Config()
    assert config.tick == 1e-3
    assert config.sim == "forward-euler"
    assert config.dur is None
    assert config.preset_params == {}


def test_load_json(tmp_path):
    """Test loading JSON, including the CLI spelling of keys."""
    path = tmp_path / "run.json"
    path.write_text(json.dumps({"file": "bodies.csv", "sim": "leapfrog", "dur": 2.0, "rest-frame": 1}))
    
    config = load_config(str(path))
    
    assert config.file == "bodies.csv"
    assert config.sim == "leapfrog"
    assert config.dur == 2.0
    assert config.rest_frame == 1


def test_unknown_key_rejected(tmp_path):
    """Typos in config files are reported."""
    path = tmp_path / "run.json"
    path.write_text(json.dumps({"durr": 2.0}))
    with pytest.raises(ValueError, match="durr"):
        load_config(str(path))


def test_unsupported_suffix(tmp_path):
    """Test config format validation."""
    path = tmp_path / "run.toml"
    path.write_text("dur = 2.0\n")
    with pytest.raises(ValueError, match="Unsupported config format"):
        load_config(str(path))


def test_save_load_json_round_trip(tmp_path):
    """Test saving then loading JSON."""
    config = Config(preset="binary", preset_params={"m1": 2.0}, tick=0.01, dur=5.0)
    path = tmp_path / "run.json"
    
    save_config(config, str(path))
    
    assert load_config(str(path)) == config


def test_yaml_round_trip(tmp_path):
    """Test saving then loading YAML."""
    pytest.importorskip("yaml")
    config = Config(file="bodies.csv", sim="symplectic-euler", dur=1.5, rest_frame=0)
    path = tmp_path / "run.yaml"
    
    save_config(config, str(path))
    
    assert load_config(str(path)) == config


def test_malformed_yaml_rejected(tmp_path):
    """YAML syntax errors surface as ValueError."""
    pytest.importorskip("yaml")
    path = tmp_path / "run.yaml"
    path.write_text("dur: [1.0\ntick: 0.01\n")
    with pytest.raises(ValueError, match="Invalid YAML"):
        load_config(str(path))


@pytest.mark.parametrize("data, key", [
    ({"tick": "0.001"}, "tick"),
    ({"dur": True}, "dur"),
    ({"rest_frame": 1.5}, "rest_frame"),
    ({"record_every": "2"}, "record_every"),
    ({"sim": 3}, "sim"),
])
def test_wrong_value_type_rejected(tmp_path, data, key):
    """Values of the wrong type are reported by name."""
    path = tmp_path / "run.json"
    path.write_text(json.dumps(data))
    with pytest.raises(ValueError, match=key):
        load_config(str(path))


def test_integer_numbers_accepted(tmp_path):
    """Whole numbers are fine for float options."""
    path = tmp_path / "run.json"
    path.write_text(json.dumps({"tick": 1, "dur": 10}))
    
    config = load_config(str(path))
    
    assert config.tick == 1.0
    assert isinstance(config.dur, float)
