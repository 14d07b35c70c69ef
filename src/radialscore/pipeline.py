"""End-to-end: MIDI file in, radial SVG (and optional PNG) out."""

from __future__ import annotations

import logging
from pathlib import Path

from radialscore.config import DEFAULT_CONFIG, PNG_SIZE, RenderConfig
from radialscore.extractor import NotePredicate, exclude_notes, extract_notes
from radialscore.midi_loader import TrackSplitStrategy, load_events
from radialscore.models import Note, ZeroLengthPolicy
from radialscore.renderer.raster import write_png
from radialscore.renderer.svg import write_svg

logger = logging.getLogger(__name__)


def render_midi_file(
    midi_path: str | Path,
    svg_path: str | Path,
    *,
    config: RenderConfig = DEFAULT_CONFIG,
    split: TrackSplitStrategy = TrackSplitStrategy.BY_TRACK,
    zero_length: ZeroLengthPolicy = ZeroLengthPolicy.KEEP,
    exclude: NotePredicate | None = None,
    png_path: str | Path | None = None,
    png_size: int = PNG_SIZE,
) -> list[Note]:
    """Render ``midi_path`` to ``svg_path`` and return the notes drawn.

    Raises:
        MidiLoadError: If the MIDI file cannot be parsed.
    """
    notes = extract_notes(load_events(midi_path, split), zero_length)
    if exclude is not None:
        before = len(notes)
        notes = exclude_notes(notes, exclude)
        logger.info("Excluded %d notes", before - len(notes))

    write_svg(notes, svg_path, config)
    logger.info("Wrote %d circles to %s", len(notes), svg_path)

    if png_path is not None:
        write_png(notes, png_path, config, png_size)
        logger.info("Wrote %dx%d preview to %s", png_size, png_size, png_path)

    return notes
