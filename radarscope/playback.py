"""
radarscope.playback
===================

Replays a captured wire stream (e.g. `cat /dev/ttyACM0 > capture.bin`)
through the normal pipeline, in fixed-size chunks with an optional delay
to mimic a live port.
"""
from __future__ import annotations

import logging
import time
from pathlib import Path

from radarscope.errors import SourceError

log = logging.getLogger(__name__)


class ReplaySource:
    def __init__(self, path, chunk: int = 16, delay: float = 0.0) -> None:
        self.path = Path(path)
        self.chunk = max(1, int(chunk))
        self.delay = delay
        self.exhausted = False
        self._fh = None

    def open(self) -> "ReplaySource":
        try:
            self._fh = self.path.open("rb")
        except OSError as exc:
            raise SourceError(f"cannot open capture {self.path}: {exc}") from exc
        log.info("replaying %s (%d-byte chunks)", self.path, self.chunk)
        return self

    def close(self) -> None:
        if self._fh is not None:
            self._fh.close()
            self._fh = None

    def __enter__(self) -> "ReplaySource":
        return self.open()

    def __exit__(self, *exc) -> None:
        self.close()

    def read(self) -> bytes:
        if self.exhausted:
            return b""
        if self._fh is None:
            raise SourceError(f"capture {self.path} is not open")
        if self.delay:
            time.sleep(self.delay)
        data = self._fh.read(self.chunk)
        if not data:
            self.exhausted = True
        return data
