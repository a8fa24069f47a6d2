import logging

import pytest
import serial

import main
from radarscope import config, serial_reader


@pytest.fixture
def entry(cfg, monkeypatch):
    """Run `main.main()` against *cfg* without touching disk, signals or pygame teardown."""
    saved = []
    monkeypatch.setattr(config, "load", lambda *a, **kw: cfg)
    monkeypatch.setattr(config, "save", lambda c, *a, **kw: saved.append(c))
    monkeypatch.setattr(main.signal, "signal", lambda *a: None)
    monkeypatch.setattr(main.pygame, "quit", lambda: None)
    return saved


def test_serial_open_failure_exits_with_status_1(cfg, entry, monkeypatch, caplog):
    def boom(*_a, **_kw):
        raise serial.SerialException("no such device")

    monkeypatch.setattr(serial_reader.serial, "Serial", boom)
    with caplog.at_level(logging.ERROR), pytest.raises(SystemExit) as info:
        main.main()

    assert info.value.code == 1
    assert cfg["serial_port"] in caplog.text
    assert entry == []                          # config not saved on failure


@pytest.mark.parametrize("key,value", [
    ("scale", "x"),
    ("blip_band", 50),
    ("log_level", "LOUD"),
])
def test_bad_config_exits_with_status_1(cfg, entry, caplog, key, value):
    cfg[key] = value
    with caplog.at_level(logging.ERROR), pytest.raises(SystemExit) as info:
        main.main()

    assert info.value.code == 1
    assert key in caplog.text
