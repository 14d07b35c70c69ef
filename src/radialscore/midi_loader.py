"""Load MIDI files into a flat stream of RawEvents."""

from __future__ import annotations

import logging
from enum import Enum, auto
from pathlib import Path

import mido

from radialscore.models import RawEvent

logger = logging.getLogger(__name__)


class TrackSplitStrategy(Enum):
    """How MIDI messages are grouped into tracks.

    With BY_CHANNEL a channel takes the name of the first named track chunk,
    in file order, that plays on it.
    """
    BY_TRACK = auto()    # One track per MIDI track chunk (type 1 files)
    BY_CHANNEL = auto()  # One track per MIDI channel (for type 0 files)


class MidiLoadError(Exception):
    """Raised when a MIDI file cannot be parsed."""


def load_events(
    file_path: str | Path,
    split: TrackSplitStrategy = TrackSplitStrategy.BY_TRACK,
) -> list[RawEvent]:
    """Load a MIDI file and return its note and track-name events.

    Args:
        file_path: Path to a .mid or .midi file.
        split: Strategy for assigning events to tracks.

    Raises:
        MidiLoadError: If the file cannot be parsed.
    """
    path = Path(file_path)
    try:
        if path.suffix.lower() not in (".mid", ".midi"):
            raise MidiLoadError(f"Unsupported file format: {path.suffix}")
        mid = mido.MidiFile(str(path))
        events = events_from_midi(mid, split)
    except MidiLoadError:
        raise
    except Exception as exc:
        raise MidiLoadError(f"Failed to load {path.name}: {exc}") from exc

    logger.info(
        "Loaded %s: type %d, %d tracks, %d events",
        path.name, mid.type, len(mid.tracks), len(events),
    )
    return events


def events_from_midi(
    mid: mido.MidiFile,
    split: TrackSplitStrategy = TrackSplitStrategy.BY_TRACK,
) -> list[RawEvent]:
    """Flatten an in-memory MidiFile, converting delta times to absolute ticks.

    Only note_on, note_off and track_name messages are kept.
    """
    events: list[RawEvent] = []
    named_channels: set[int] = set()

    for track_idx, track in enumerate(mid.tracks):
        tick = 0
        track_name = ""

        for msg in track:
            tick += msg.time

            if msg.type == "track_name":
                if split == TrackSplitStrategy.BY_TRACK:
                    events.append(RawEvent.track_name(track_idx, msg.name, tick))
                elif not track_name:
                    track_name = msg.name

            elif msg.type in ("note_on", "note_off"):
                if split == TrackSplitStrategy.BY_CHANNEL:
                    track_id = msg.channel
                    if track_name and track_id not in named_channels:
                        named_channels.add(track_id)
                        events.append(RawEvent.track_name(track_id, track_name, tick))
                else:
                    track_id = track_idx

                if msg.type == "note_on":
                    events.append(RawEvent.note_on(track_id, tick, msg.note, msg.velocity))
                else:
                    events.append(RawEvent.note_off(track_id, tick, msg.note))

    if split == TrackSplitStrategy.BY_CHANNEL:
        # A channel may span several track chunks; restore tick order (stable)
        events.sort(key=lambda e: e.tick)
    return events
