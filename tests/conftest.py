"""Shared fixtures."""

import os

import mido
import pytest

# pygame must not try to open a real display during tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


@pytest.fixture
def piano_midi(tmp_path):
    """A one-track file: C4 for 100 ticks, then C5 for 200 ticks, on track 'piano'."""
    mid = mido.MidiFile(type=1, ticks_per_beat=480)
    track = mido.MidiTrack()
    track.append(mido.MetaMessage("track_name", name="piano", time=0))
    track.append(mido.MetaMessage("set_tempo", tempo=600_000, time=0))
    track.append(mido.Message("note_on", note=60, velocity=80, time=0))
    track.append(mido.Message("control_change", control=64, value=127, time=50))
    track.append(mido.Message("note_off", note=60, velocity=0, time=50))
    track.append(mido.Message("note_on", note=72, velocity=80, time=0))
    track.append(mido.Message("note_off", note=72, velocity=0, time=200))
    mid.tracks.append(track)
    path = tmp_path / "piano.mid"
    mid.save(str(path))
    return path
