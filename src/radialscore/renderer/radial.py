"""Radial layout: map notes onto circles around a ring.

Time runs clockwise from 12 o'clock, pitch runs outward from the inner
radius, circle area grows with note length and color follows pitch.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from radialscore.config import DEFAULT_CONFIG, RenderConfig
from radialscore.models import Note
from radialscore.renderer.colors import pitch_palette


@dataclass(frozen=True)
class NoteStats:
    """Whole-set statistics every circle is normalized against."""

    min_pitch: int
    max_pitch: int
    max_length: int
    max_time: int  # latest end tick


@dataclass(frozen=True)
class Circle:
    x: float
    y: float
    size: float
    fill: str  # "#rrggbb"


def compute_stats(notes: Sequence[Note]) -> NoteStats | None:
    if not notes:
        return None
    return NoteStats(
        min_pitch=min(n.pitch for n in notes),
        max_pitch=max(n.pitch for n in notes),
        max_length=max(n.length for n in notes),
        max_time=max(n.end_tick for n in notes),
    )


def note_angle(start_tick: int, max_time: int) -> float:
    """Angle in radians; -pi/2 puts tick 0 at the top of the ring."""
    return -math.pi / 2 + 2 * math.pi * start_tick / (max_time + 1)


def note_radius(pitch: int, stats: NoteStats, config: RenderConfig) -> float:
    pitch_range = stats.max_pitch - stats.min_pitch
    if pitch_range == 0:
        return config.inner_radius + config.radius_span / 2
    return config.inner_radius + config.radius_span * (pitch - stats.min_pitch) / pitch_range


def note_size(length: int, stats: NoteStats, config: RenderConfig) -> float:
    if stats.max_length == 0:
        return 0.0
    return round(config.max_point_size * math.sqrt(length / stats.max_length), config.size_decimals)


def _round(value: float, decimals: int) -> float:
    # + 0.0 turns -0.0 into 0.0
    return round(value, decimals) + 0.0


def layout_notes(notes: Sequence[Note], config: RenderConfig = DEFAULT_CONFIG) -> list[Circle]:
    """Compute one circle per note, in input order."""
    stats = compute_stats(notes)
    if stats is None:
        return []

    palette = pitch_palette(stats.min_pitch, stats.max_pitch, config.low_color, config.high_color)
    circles: list[Circle] = []
    for note in notes:
        angle = note_angle(note.start_tick, stats.max_time)
        radius = note_radius(note.pitch, stats, config)
        circles.append(
            Circle(
                x=_round(radius * math.cos(angle), config.decimals),
                y=_round(radius * math.sin(angle), config.decimals),
                size=note_size(note.length, stats, config),
                fill=palette[note.pitch - stats.min_pitch],
            )
        )
    return circles
