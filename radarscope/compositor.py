"""
radarscope.compositor
=====================

Builds one radar frame from scratch per update:

1. template: background, origin dot, range rings, angle guides, info bar
2. trail   : newest → oldest sweep lines fading out, red blips for hits
3. status  : current angle & distance (or "Nothing") in the info bar
4. upscale : `smoothscale` by the configured integer factor

Nothing is carried over between frames except what the trail snapshot
re-supplies.

Fade
----
Entry *i* of the trail (0 = newest) gets green `trail_green - fade_step*i`
and blip red `blip_red - fade_step*i*red_fade_ratio`.  Channels are clamped
to 0‥255, so with the defaults the green line bottoms out at index 39 and
the blip red at index 36; older entries stay drawn at that floor (pure
black line / near-black blip).
"""
from __future__ import annotations

from typing import Optional, Sequence, Tuple

import pygame

from radarscope import constants as C
from radarscope.framer import Measurement
from radarscope.geometry import blip_point, label_anchor, point_at_angle

Colour = Tuple[int, int, int]


def _channel(v: float) -> int:
    return max(0, min(255, int(round(v))))


class Compositor:
    def __init__(self, cfg: dict) -> None:
        self.width  = int(cfg["canvas_width"])
        self.height = int(cfg["canvas_height"])
        self.scale  = int(cfg["scale"])
        self.origin = (self.width // 2, self.height - C.INFO_BAR_H)

        self.blip_band  = tuple(cfg["blip_band"])
        self.blip_scale = cfg["blip_scale"]

        self.trail_green    = cfg["trail_green"]
        self.blip_red       = cfg["blip_red"]
        self.fade_step      = cfg["fade_step"]
        self.red_fade_ratio = cfg["red_fade_ratio"]

        pygame.font.init()
        self.small_font = pygame.font.SysFont("monospace", 9)
        self.info_font  = pygame.font.SysFont("monospace", 12)

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def scaled_size(self) -> Tuple[int, int]:
        return self.width * self.scale, self.height * self.scale

    # ───────────────────────────────────────── fade
    def trail_colour(self, i: int) -> Colour:
        return 0, _channel(self.trail_green - self.fade_step * i), 0

    def blip_colour(self, i: int) -> Colour:
        red = self.blip_red - self.fade_step * i * self.red_fade_ratio
        return _channel(red), C.BLIP_GREEN, 0

    # ───────────────────────────────────────── text helper
    def _text(self, surf, font, text, bottomleft) -> pygame.Rect:
        img = font.render(text, True, C.GREEN)
        rect = img.get_rect(bottomleft=bottomleft)
        surf.blit(img, rect)
        return rect

    # ───────────────────────────────────────── step 1
    def template(self) -> pygame.Surface:
        w, h, o = self.width, self.height, self.origin
        frame = pygame.Surface((w, h), 0, 32)
        frame.fill(C.BACKGROUND)

        pygame.draw.circle(frame, C.GREEN, o, C.ORIGIN_R)
        for ring in range(1, C.RING_COUNT + 1):
            pygame.draw.circle(frame, C.GREEN, o, ring * C.RING_STEP_PX, 1)

        for angle in C.GUIDE_ANGLES:
            pygame.draw.line(frame, C.GREEN, o, point_at_angle(o, angle, C.GUIDE_LEN))
            self._text(frame, self.small_font, str(angle),
                       label_anchor(o, angle, C.GUIDE_LEN))

        # info bar
        bar_top = h - C.INFO_BAR_H
        pygame.draw.line(frame, C.GREEN, (0, bar_top - 1), (w, bar_top - 1))
        pygame.draw.rect(frame, C.INFO_BG, pygame.Rect(0, bar_top, w, C.INFO_BAR_H))
        self._angle_lbl = self._text(frame, self.info_font, "Angle:", (5, h - 3))
        self._dist_lbl  = self._text(frame, self.info_font, "Distance:",
                                     (w // 2 - 20, h - 3))

        for ring in range(1, C.RING_COUNT + 1):
            self._text(frame, self.small_font, str(ring * C.RING_STEP_CM),
                       (o[0] + ring * C.RING_STEP_PX - 5, bar_top + 8))
        return frame

    # ───────────────────────────────────────── steps 2 + 3
    def compose(self, trail: Sequence[Measurement],
                latest: Optional[Measurement] = None) -> pygame.Surface:
        frame = self.template()
        o = self.origin

        for i, m in enumerate(trail):
            pygame.draw.line(frame, self.trail_colour(i), o,
                             point_at_angle(o, m.angle, C.SWEEP_LEN))
            pt = blip_point(o, m.angle, m.distance, self.blip_band, self.blip_scale)
            if pt is not None:
                pygame.draw.circle(frame, self.blip_colour(i), pt, C.BLIP_R)

        if latest is not None:
            y = self.height - 3
            self._text(frame, self.info_font, str(latest.angle),
                       (self._angle_lbl.right + 4, y))
            self._text(frame, self.info_font, self.distance_text(latest.distance),
                       (self._dist_lbl.right + 4, y))
        return frame

    def distance_text(self, distance: int) -> str:
        if distance >= self.blip_band[1]:
            return C.NOTHING_TEXT
        return f"{distance} cm"

    # ───────────────────────────────────────── step 4
    def render(self, trail: Sequence[Measurement],
               latest: Optional[Measurement] = None) -> pygame.Surface:
        return pygame.transform.smoothscale(self.compose(trail, latest),
                                            self.scaled_size)
