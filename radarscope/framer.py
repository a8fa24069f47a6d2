"""
radarscope.framer
=================

Turns the raw sensor byte stream into `Measurement` records.

Wire format
-----------
    <angle>:<distance>|<angle>:<distance>|...

`|` ends a token, `:` splits angle from distance.  Bytes may arrive in any
chunking; whatever follows the last `|` is kept until the next `feed()`.

Usage
-----
    framer = Framer(max_residue=1024)
    for item in framer.records(chunk):
        if isinstance(item, FramingError):
            ...                        # logged & skipped by the session
        else:
            angle, distance = item
"""
from __future__ import annotations

import re
from typing import List, NamedTuple, Optional, Union

from radarscope.constants import FIELD_DELIM, FRAME_DELIM, MAX_ANGLE
from radarscope.errors import FrameOverflow, FramingError, ParseError

# integer with an optional fractional tail; the tail is truncated
_NUMBER = re.compile(rb"\s*([+-]?\d+)(?:\.\d*)?\s*")


class Measurement(NamedTuple):
    angle: int          # degrees, 0‥180
    distance: int       # centimetres


def _field(raw: bytes, text: bytes, name: str) -> int:
    m = _NUMBER.fullmatch(text)
    if m is None:
        raise ParseError(raw, f"non-numeric {name}")
    return int(m.group(1))


def parse_message(raw: bytes) -> Measurement:
    """Parse one delimiter-stripped token, raising `ParseError` if malformed."""
    head, sep, tail = raw.partition(FIELD_DELIM)
    if not sep:
        raise ParseError(raw, "missing field delimiter")

    angle = _field(raw, head, "angle")
    distance = _field(raw, tail, "distance")

    if not 0 <= angle <= MAX_ANGLE:
        raise ParseError(raw, f"angle {angle} outside 0-{MAX_ANGLE}")
    if distance < 0:
        raise ParseError(raw, f"negative distance {distance}")
    return Measurement(angle, distance)


class Framer:
    def __init__(self, max_residue: Optional[int] = None) -> None:
        self.max_residue = max_residue
        self._buf = bytearray()
        self._resync = False            # skip up to the next `|` after overflow

    @property
    def residue(self) -> bytes:
        return bytes(self._buf)

    def feed(self, chunk: bytes) -> List[bytes]:
        """
        Append *chunk* and return every complete token, delimiter removed.

        Raises `FrameOverflow` (carrying the tokens already extracted) when
        the trailing partial token grows beyond `max_residue`.
        """
        buf = self._buf
        buf += chunk

        if self._resync:
            idx = buf.find(FRAME_DELIM)
            if idx == -1:
                del buf[:]
                return []
            del buf[: idx + 1]
            self._resync = False

        out: List[bytes] = []
        start = 0
        idx = buf.find(FRAME_DELIM)
        while idx != -1:
            out.append(bytes(buf[start:idx]))
            start = idx + 1
            idx = buf.find(FRAME_DELIM, start)
        del buf[:start]

        if self.max_residue is not None and len(buf) > self.max_residue:
            size = len(buf)
            del buf[:]
            self._resync = True
            raise FrameOverflow(size, self.max_residue, out)
        return out

    def records(self, chunk: bytes) -> List[Union[Measurement, FramingError]]:
        """
        Feed *chunk* and parse what comes out.  Errors are returned in place
        of the token that caused them so ordering is preserved.
        """
        overflow = None
        try:
            messages = self.feed(chunk)
        except FrameOverflow as exc:
            messages, overflow = exc.messages, exc

        out: List[Union[Measurement, FramingError]] = []
        for raw in messages:
            try:
                out.append(parse_message(raw))
            except ParseError as exc:
                out.append(exc)
        if overflow is not None:
            out.append(overflow)
        return out
