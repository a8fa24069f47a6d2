import json

import pytest

from radarscope import config
from radarscope.errors import ConfigError


def test_missing_file_is_created(tmp_path):
    path = tmp_path / "radar_config.json"
    cfg = config.load(path)
    assert cfg == config.defaults()
    assert json.loads(path.read_text())["trail_capacity"] == 40


def test_defaults_fill_missing_keys(tmp_path):
    path = tmp_path / "radar_config.json"
    path.write_text(json.dumps({"serial_port": "/dev/ttyACM1", "scale": 4}))
    cfg = config.load(path)
    assert cfg["serial_port"] == "/dev/ttyACM1"
    assert cfg["scale"] == 4
    assert cfg["blip_band"] == [2, 50]


def test_defaults_are_independent_copies():
    a = config.defaults()
    a["blip_band"].append(99)
    assert config.defaults()["blip_band"] == [2, 50]


def test_save_round_trip(tmp_path):
    path = tmp_path / "radar_config.json"
    cfg = config.defaults()
    cfg["input_mode"] = "replay"
    config.save(cfg, path)
    assert config.load(path)["input_mode"] == "replay"


def test_validate_accepts_defaults():
    cfg = config.defaults()
    assert config.validate(cfg) is cfg


@pytest.mark.parametrize("key,value", [
    ("canvas_width", 0),
    ("scale", -1),
    ("trail_capacity", 0),
    ("blip_band", [50, 2]),
    ("table_band", [5, 5]),
    ("input_mode", "bluetooth"),
    ("max_residue", 0),
    ("scale", "x"),
    ("canvas_width", None),
    ("blip_band", 50),
    ("blip_band", [1, 2, 3]),
    ("table_band", ["a", "b"]),
    ("max_residue", "lots"),
    ("log_level", "LOUD"),
])
def test_validate_rejects(key, value):
    cfg = config.defaults()
    cfg[key] = value
    with pytest.raises(ConfigError):
        config.validate(cfg)


def test_unbounded_residue_is_allowed():
    cfg = config.defaults()
    cfg["max_residue"] = None
    config.validate(cfg)


@pytest.mark.parametrize("level", ["DEBUG", "WARNING", 10])
def test_known_log_levels(level):
    cfg = config.defaults()
    cfg["log_level"] = level
    config.validate(cfg)
