"""
radarscope.gui
==============

Window glue around the session: open the configured byte source, render
a frame for every accepted record, present it, and export the
measurement table on the way out.

Stop conditions: window close, ESC, or `stop.set()` from a signal handler.
A replay that runs out keeps the last frame on screen until the window is
closed.
"""
from __future__ import annotations

import datetime as dt
import logging
import threading
from pathlib import Path
from typing import Optional

import pygame

from radarscope import constants as C
from radarscope.compositor import Compositor
from radarscope.framer import Measurement
from radarscope.mqtt_client import MqttSource
from radarscope.playback import ReplaySource
from radarscope.serial_reader import SerialSource
from radarscope.session import RadarSession

log = logging.getLogger(__name__)


def open_source(cfg: dict):
    """Build (unopened) byte source for `cfg["input_mode"]`."""
    mode = cfg["input_mode"]
    if mode == "mqtt":
        return MqttSource(cfg["broker"], int(cfg["port"]), cfg["topic"])
    if mode == "replay":
        return ReplaySource(cfg["replay_file"], cfg["replay_chunk"], cfg["replay_delay"])
    return SerialSource(cfg["serial_port"], int(cfg["serial_baud"]))


class RadarGUI:
    FPS_IDLE = 30

    def __init__(self, cfg: dict) -> None:
        self.cfg = cfg
        self.compositor = Compositor(cfg)
        self.session = RadarSession(cfg)
        self.stop = threading.Event()

        self.screen = pygame.display.set_mode(self.compositor.scaled_size)
        pygame.display.set_caption("Radar")
        self.clock = pygame.time.Clock()

    # ───────────────────────────────────────── drawing
    def present(self, frame: pygame.Surface) -> None:
        self.screen.blit(frame, (0, 0))
        pygame.display.flip()

    def redraw(self, latest: Optional[Measurement] = None) -> None:
        self.present(self.compositor.render(self.session.trail.snapshot(), latest))

    def _on_record(self, _session: RadarSession, m: Measurement) -> None:
        self.redraw(m)

    # ───────────────────────────────────────── events
    def _pump(self) -> None:
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                self.stop.set()
            elif e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE:
                self.stop.set()

    # ───────────────────────────────────────── MAIN LOOP
    def run(self) -> None:
        self.redraw()
        try:
            with open_source(self.cfg) as src:
                self.session.run(src, self._on_record, self.stop, self._pump)
            while not self.stop.is_set():
                self._pump()
                self.clock.tick(self.FPS_IDLE)
        finally:
            s = self.session
            log.info("%d records, %d malformed, %d overflows",
                     s.records, s.parse_errors, s.overflows)
            if len(s.table):
                self.export_table()

    def export_table(self) -> Path:
        path = C.LOG_DIR / f"{dt.date.today().isoformat()}_measurements.csv"
        return self.session.table.export_csv(path)
