import csv

from radarscope import constants as C
from radarscope import gui
from radarscope.mqtt_client import MqttSource
from radarscope.playback import ReplaySource
from radarscope.serial_reader import SerialSource


def test_open_source_by_mode(cfg):
    assert isinstance(gui.open_source(cfg), SerialSource)
    cfg["input_mode"] = "mqtt"
    assert isinstance(gui.open_source(cfg), MqttSource)
    cfg["input_mode"] = "replay"
    assert isinstance(gui.open_source(cfg), ReplaySource)


def test_replay_run_exports_table(cfg, tmp_path, monkeypatch):
    cap = tmp_path / "capture.bin"
    cap.write_bytes(b"30:20|90:5|200:abc|45:80|")
    cfg.update(input_mode="replay", replay_file=str(cap),
               replay_chunk=7, replay_delay=0)
    monkeypatch.setattr(C, "LOG_DIR", tmp_path / "log")

    app = gui.RadarGUI(cfg)
    frames = []
    monkeypatch.setattr(app, "present", frames.append)

    def pump():
        # leave the idle loop once the capture has been played out
        if app.session.records == 3:
            app.stop.set()

    monkeypatch.setattr(app, "_pump", pump)
    app.run()

    assert app.session.trail.snapshot() == [(45, 80), (90, 5), (30, 20)]
    assert app.session.parse_errors == 1
    assert len(frames) == 1 + 3                 # template + one per record
    assert frames[-1].get_size() == (720, 420)

    (out,) = (tmp_path / "log").glob("*_measurements.csv")
    with out.open() as fh:
        assert list(csv.reader(fh))[1:] == [["30", "20"], ["90", "5"]]
