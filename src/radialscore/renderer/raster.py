"""PNG preview of the radial plot, drawn with pygame."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pygame

from radialscore.config import DEFAULT_CONFIG, PNG_BACKGROUND, PNG_SIZE, RenderConfig
from radialscore.models import Note
from radialscore.renderer.radial import Circle, layout_notes

_WHITE = (255, 255, 255)


def rasterize(
    circles: Sequence[Circle],
    config: RenderConfig = DEFAULT_CONFIG,
    size: int = PNG_SIZE,
) -> pygame.Surface:
    """Draw circles onto a square surface covering the SVG viewBox.

    Each circle is painted on a white scratch surface and blitted with
    BLEND_MULT, so overlaps darken like ``mix-blend-mode: multiply``.
    """
    surface = pygame.Surface((size, size))
    surface.fill(PNG_BACKGROUND)
    scale = size / (2 * config.view_half_extent)

    for circle in circles:
        r = circle.size * scale
        if r <= 0:
            continue
        extent = int(r) + 2
        stamp = pygame.Surface((extent * 2, extent * 2))
        stamp.fill(_WHITE)
        pygame.draw.circle(stamp, pygame.Color(circle.fill), (extent, extent), r)

        cx = (circle.x + config.view_half_extent) * scale
        cy = (circle.y + config.view_half_extent) * scale
        surface.blit(
            stamp,
            (round(cx) - extent, round(cy) - extent),
            special_flags=pygame.BLEND_MULT,
        )
    return surface


def write_png(
    notes: Sequence[Note],
    path: str | Path,
    config: RenderConfig = DEFAULT_CONFIG,
    size: int = PNG_SIZE,
) -> Path:
    out = Path(path)
    pygame.image.save(rasterize(layout_notes(notes, config), config, size), str(out))
    return out
