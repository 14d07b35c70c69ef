"""Pair note-on/note-off events into discrete notes."""

from __future__ import annotations

import logging
from collections import defaultdict, deque
from collections.abc import Callable, Iterable, Mapping

from radialscore.models import EventKind, Note, RawEvent, ZeroLengthPolicy

logger = logging.getLogger(__name__)

NotePredicate = Callable[[Note], bool]


def resolve_track_names(events: Iterable[RawEvent]) -> dict[int, str]:
    """Map track id -> name, keeping the first TrackName seen per track."""
    names: dict[int, str] = {}
    for event in events:
        if event.kind == EventKind.TRACK_NAME and event.track not in names:
            names[event.track] = event.name
    return names


def extract_notes(
    events: Iterable[RawEvent],
    zero_length: ZeroLengthPolicy = ZeroLengthPolicy.KEEP,
) -> list[Note]:
    """Turn an ordered event stream into notes sorted by start tick.

    Pairing is FIFO per (track, pitch): a note-off closes the oldest open
    note-on for the same pitch on the same track. Note-offs with nothing
    open, and note-ons still open when the stream ends, are discarded.

    Args:
        events: Events ordered by tick within each track; iterators are fine.
        zero_length: Policy for notes that end on their start tick.
    """
    events = list(events)
    names = resolve_track_names(events)
    pending: defaultdict[tuple[int, int], deque[int]] = defaultdict(deque)
    closed: list[tuple[int, int, int, int]] = []  # (track, start, length, pitch)
    orphans = 0

    for event in events:
        if event.kind == EventKind.TRACK_NAME:
            continue

        key = (event.track, event.pitch)
        if event.is_note_off:
            queue = pending.get(key)
            if not queue:
                orphans += 1
                continue
            start = queue.popleft()
            length = event.tick - start
            if length == 0:
                if zero_length == ZeroLengthPolicy.DROP:
                    continue
                if zero_length == ZeroLengthPolicy.MIN_ONE:
                    length = 1
            closed.append((event.track, start, length, event.pitch))
        else:
            pending[key].append(event.tick)

    unterminated = sum(len(q) for q in pending.values())
    if orphans:
        logger.debug("Discarded %d note-off events without a pending note-on", orphans)
    if unterminated:
        logger.debug("Dropped %d note-on events never closed before end of stream", unterminated)

    notes = [
        Note(
            track=track,
            track_name=names.get(track, ""),
            start_tick=start,
            length=length,
            pitch=pitch,
        )
        for track, start, length, pitch in closed
    ]
    notes.sort(key=lambda n: (n.start_tick, n.track, n.pitch))
    return notes


def exclude_notes(notes: Iterable[Note], predicate: NotePredicate) -> list[Note]:
    """Return the notes for which ``predicate`` is false."""
    return [n for n in notes if not predicate(n)]


def exclude_pitches(mapping: Mapping[str, Iterable[int]]) -> NotePredicate:
    """Build a predicate matching given pitches on tracks with the given names.

    e.g. ``exclude_pitches({"Timpani": [40]})`` flags every E2 on the Timpani track.
    """
    table = {name: frozenset(pitches) for name, pitches in mapping.items()}

    def _matches(note: Note) -> bool:
        return note.pitch in table.get(note.track_name, ())

    return _matches
