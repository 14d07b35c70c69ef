"""Core data models shared by the loader, extractor and renderer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class EventKind(Enum):
    NOTE_ON = auto()
    NOTE_OFF = auto()
    TRACK_NAME = auto()


class ZeroLengthPolicy(Enum):
    """What to do with a note whose note-off lands on its own start tick."""
    KEEP = auto()     # Pass through with length 0 (renders as a point)
    DROP = auto()     # Discard the note
    MIN_ONE = auto()  # Stretch to a length of one tick


@dataclass(frozen=True)
class RawEvent:
    """A single MIDI event flattened to an absolute tick."""

    track: int
    tick: int  # absolute MIDI ticks
    kind: EventKind
    pitch: int = 0  # MIDI note number 0-127
    velocity: int = 0
    name: str = ""

    @classmethod
    def note_on(cls, track: int, tick: int, pitch: int, velocity: int = 80) -> RawEvent:
        return cls(track=track, tick=tick, kind=EventKind.NOTE_ON, pitch=pitch, velocity=velocity)

    @classmethod
    def note_off(cls, track: int, tick: int, pitch: int) -> RawEvent:
        return cls(track=track, tick=tick, kind=EventKind.NOTE_OFF, pitch=pitch)

    @classmethod
    def track_name(cls, track: int, name: str, tick: int = 0) -> RawEvent:
        return cls(track=track, tick=tick, kind=EventKind.TRACK_NAME, name=name)

    @property
    def is_note_off(self) -> bool:
        # Running-status files encode note-off as note-on with velocity 0
        return self.kind == EventKind.NOTE_OFF or (
            self.kind == EventKind.NOTE_ON and self.velocity == 0
        )


@dataclass(frozen=True)
class Note:
    """A resolved note: one paired note-on/note-off."""

    track: int
    track_name: str
    start_tick: int
    length: int  # ticks
    pitch: int

    @property
    def end_tick(self) -> int:
        return self.start_tick + self.length
