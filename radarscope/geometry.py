"""
Polar → screen helpers.

0° points right, angles grow counter-clockwise, and the sine term is
subtracted because screen y grows downward.  Results are rounded to whole
pixels.
"""
from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

from radarscope.constants import LABEL_GAP, LABEL_NUDGE

Point = Tuple[int, int]


def point_at_angle(origin: Sequence[float], angle: float, length: float) -> Point:
    rad = math.radians(angle)
    return (int(round(origin[0] + math.cos(rad) * length)),
            int(round(origin[1] - math.sin(rad) * length)))


def label_anchor(origin: Sequence[float], angle: float, length: float) -> Point:
    """Where a guide's angle label goes: just past the end, nudged left ≥ 90°."""
    x, y = point_at_angle(origin, angle, length + LABEL_GAP)
    if angle >= 90:
        x -= LABEL_NUDGE
    return x, y


def in_band(distance: float, band: Sequence[float]) -> bool:
    """Exclusive on both ends."""
    lo, hi = band
    return lo < distance < hi


def blip_point(origin: Sequence[float], angle: float, distance: float,
               band: Sequence[float] = (2, 50), scale: float = 2) -> Optional[Point]:
    """Scaled blip centre, or None when *distance* is outside *band*."""
    if not in_band(distance, band):
        return None
    return point_at_angle(origin, angle, distance * scale)
