"""
radarscope.config
=================

Tiny helper that loads / saves *radar_config.json* and injects sensible
defaults for any missing keys.
"""

from __future__ import annotations
import json
import logging
from pathlib import Path

from radarscope.constants import CFG_PATH
from radarscope.errors import ConfigError

_DEFAULT = {
    # input selection
    "input_mode": "serial",           # "serial", "mqtt" or "replay"
    "serial_port": "/dev/tty.usbmodem101",
    "serial_baud": 9600,

    # MQTT (only used when input_mode == "mqtt")
    "broker": "127.0.0.1",
    "port": 1883,
    "topic": "radar/raw",

    # replay (only used when input_mode == "replay")
    "replay_file": "capture.bin",
    "replay_chunk": 16,               # bytes per read
    "replay_delay": 0.01,             # seconds between reads

    # canvas
    "canvas_width": 240,
    "canvas_height": 140,
    "scale": 3,

    # trail / blips
    "trail_capacity": 40,
    "blip_band": [2, 50],             # cm, both bounds exclusive
    "blip_scale": 2,                  # px per cm
    "table_band": [1, 50],            # cm, both bounds exclusive

    # fade
    "trail_green": 195,
    "blip_red": 248,
    "fade_step": 5,
    "red_fade_ratio": 1.4,

    # framer
    "max_residue": 1024,              # bytes, null → unbounded

    "log_level": "INFO",
}

INPUT_MODES = ("serial", "mqtt", "replay")


def defaults() -> dict:
    return json.loads(json.dumps(_DEFAULT))


def load(path: Path = CFG_PATH) -> dict:
    try:
        with open(path) as fh:
            return {**defaults(), **json.load(fh)}
    except FileNotFoundError:
        cfg = defaults()
        save(cfg, path)
        return cfg


def save(cfg: dict, path: Path = CFG_PATH) -> None:
    Path(path).write_text(json.dumps(cfg, indent=2))


def _positive_int(cfg: dict, key: str) -> int:
    try:
        value = int(cfg[key])
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{key} must be an integer, got {cfg[key]!r}") from exc
    if value <= 0:
        raise ConfigError(f"{key} must be positive, got {cfg[key]!r}")
    return value


def _band(cfg: dict, key: str):
    try:
        lo, hi = (float(v) for v in cfg[key])
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{key} must be a [low, high] pair, got {cfg[key]!r}") from exc
    if lo >= hi:
        raise ConfigError(f"{key} lower bound {lo:g} is not below {hi:g}")
    return lo, hi


def validate(cfg: dict) -> dict:
    """Raise `ConfigError` for values the pipeline cannot work with."""
    for key in ("canvas_width", "canvas_height", "scale",
                "trail_capacity", "blip_scale"):
        _positive_int(cfg, key)

    for key in ("blip_band", "table_band"):
        _band(cfg, key)

    if cfg["input_mode"] not in INPUT_MODES:
        raise ConfigError(f"unknown input_mode {cfg['input_mode']!r}")

    if cfg["max_residue"] is not None:
        _positive_int(cfg, "max_residue")

    level = cfg["log_level"]
    if not isinstance(level, int) and not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"unknown log_level {level!r}")
    return cfg
