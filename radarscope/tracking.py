"""
Book-keeping for the recent sweep (trail) and first-seen ranges per angle.

`TrailBuffer` feeds the compositor; `MeasurementTable` is the hand-off for
anything that wants a sparse angle → distance map of nearby obstacles.  It
can be dumped as CSV:

    angle,distance
    30,20
    90,5
"""
from __future__ import annotations

import collections
import csv
import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Sequence

from radarscope.framer import Measurement
from radarscope.geometry import in_band

log = logging.getLogger(__name__)


class TrailBuffer:
    """Newest-first history, oldest entry evicted once `capacity` is hit."""

    def __init__(self, capacity: int = 40) -> None:
        self.capacity = capacity
        self._items: collections.deque = collections.deque(maxlen=capacity)

    def push(self, m: Measurement) -> None:
        self._items.appendleft(m)          # maxlen drops from the right

    def snapshot(self) -> List[Measurement]:
        return list(self._items)

    @property
    def latest(self) -> Optional[Measurement]:
        return self._items[0] if self._items else None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Measurement]:
        return iter(self.snapshot())


class MeasurementTable:
    """Sparse angle → distance map.  First accepted value for an angle wins."""

    def __init__(self, band: Sequence[int] = (1, 50)) -> None:
        self.band = tuple(band)
        self._table: Dict[int, int] = {}

    def offer(self, m: Measurement) -> bool:
        """Store *m* if in band and its angle is new.  Returns True if stored."""
        if not in_band(m.distance, self.band) or m.angle in self._table:
            return False
        self._table[m.angle] = m.distance
        return True

    def get(self, angle: int) -> Optional[int]:
        return self._table.get(angle)

    def as_dict(self) -> Dict[int, int]:
        return dict(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, angle: int) -> bool:
        return angle in self._table

    def export_csv(self, path: Path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", newline="") as fh:
            wr = csv.writer(fh)
            wr.writerow(["angle", "distance"])
            for angle in sorted(self._table):
                wr.writerow([angle, self._table[angle]])
        log.info("wrote %d measurements to %s", len(self._table), path)
        return path
