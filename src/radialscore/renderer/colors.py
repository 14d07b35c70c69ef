"""Pitch gradient palette."""

from __future__ import annotations

import pygame


def to_hex(color: pygame.Color) -> str:
    return f"#{color.r:02x}{color.g:02x}{color.b:02x}"


def pitch_palette(min_pitch: int, max_pitch: int, low: str, high: str) -> list[str]:
    """Return one hex color per pitch in [min_pitch, max_pitch].

    Colors are linearly interpolated from ``low`` (lowest pitch) to
    ``high`` (highest pitch). A single-pitch range gets ``low`` only.
    """
    start = pygame.Color(low)
    end = pygame.Color(high)
    steps = max_pitch - min_pitch + 1
    if steps <= 1:
        return [to_hex(start)]
    return [to_hex(start.lerp(end, i / (steps - 1))) for i in range(steps)]
