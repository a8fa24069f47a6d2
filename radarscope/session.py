"""
radarscope.session
==================

All mutable state of a radar run in one object, plus the control loop
that drives it from a byte source.

    session = RadarSession(cfg)
    session.ingest(b"30:20|90:5|")          # pure: no I/O, no drawing
    session.trail.snapshot()                # [(90, 5), (30, 20)]
    session.table.as_dict()                 # {30: 20, 90: 5}

`run()` reads until *stop* is set or the source runs dry.  Everything runs
on the caller's thread; hand out `trail.snapshot()` copies if rendering
ever moves elsewhere.
"""
from __future__ import annotations

import logging
import threading
from typing import Callable, List, Optional

from radarscope.errors import FrameOverflow, FramingError
from radarscope.framer import Framer, Measurement
from radarscope.tracking import MeasurementTable, TrailBuffer

log = logging.getLogger(__name__)

OnRecord = Callable[["RadarSession", Measurement], None]


class RadarSession:
    def __init__(self, cfg: dict) -> None:
        self.framer = Framer(cfg.get("max_residue"))
        self.trail  = TrailBuffer(int(cfg["trail_capacity"]))
        self.table  = MeasurementTable(cfg["table_band"])

        self.records      = 0
        self.parse_errors = 0
        self.overflows    = 0

    @property
    def latest(self) -> Optional[Measurement]:
        return self.trail.latest

    def accept(self, m: Measurement) -> None:
        self.trail.push(m)
        if self.table.offer(m):
            log.debug("table: %d° → %d cm", m.angle, m.distance)
        self.records += 1

    def ingest(self, chunk: bytes, on_record: Optional[OnRecord] = None) -> List[Measurement]:
        """
        Frame *chunk*, apply every valid record in arrival order and return
        them.  *on_record* fires right after each record is applied, so it
        sees the trail exactly as that record left it.
        """
        accepted: List[Measurement] = []
        for item in self.framer.records(chunk):
            if isinstance(item, FrameOverflow):
                self.overflows += 1
                log.error("framer overflow, skipping to next delimiter: %s", item)
            elif isinstance(item, FramingError):
                self.parse_errors += 1
                log.warning("dropped malformed message (%s)", item)
            else:
                self.accept(item)
                accepted.append(item)
                if on_record is not None:
                    on_record(self, item)
        return accepted

    def run(self, source, on_record: Optional[OnRecord] = None,
            stop: Optional[threading.Event] = None,
            on_tick: Optional[Callable[[], None]] = None) -> None:
        """
        Blocking read → ingest loop.  *on_tick* runs once per iteration
        before the read (GUI event pumping); it may set *stop*.
        """
        stop = stop or threading.Event()
        while not stop.is_set():
            if on_tick is not None:
                on_tick()
                if stop.is_set():
                    break
            chunk = source.read()
            if chunk:
                self.ingest(chunk, on_record)
            elif source.exhausted:
                log.info("source exhausted after %d records", self.records)
                break
