"""Entry point for `python -m radialscore` or the `radialscore` console script."""

from __future__ import annotations

import argparse
import logging
import sys
from collections import defaultdict

from radialscore.config import PNG_SIZE
from radialscore.extractor import exclude_pitches
from radialscore.midi_loader import MidiLoadError, TrackSplitStrategy
from radialscore.models import ZeroLengthPolicy
from radialscore.pipeline import render_midi_file

logger = logging.getLogger("radialscore")


def parse_exclusion(text: str) -> tuple[str, int]:
    """Parse TRACK_NAME:PITCH; the name may itself contain colons."""
    name, sep, pitch = text.rpartition(":")
    try:
        if not sep:
            raise ValueError
        value = int(pitch)
        if not 0 <= value <= 127:
            raise ValueError
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid exclusion '{text}', expected TRACK_NAME:PITCH, e.g. Drums:42"
        ) from None
    return name, value


def parse_png_size(text: str) -> int:
    try:
        size = int(text)
        if size <= 0:
            raise ValueError
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid PNG size '{text}', expected a positive integer") from None
    return size


def setup_logging(verbosity: int) -> None:
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a MIDI file as a radial SVG plot")
    parser.add_argument("input_midi", help="Path to a .mid/.midi file")
    parser.add_argument("output_svg", help="Where to write the SVG document")
    parser.add_argument("--png", default=None, help="Also write a PNG preview to this path")
    parser.add_argument("--png-size", type=parse_png_size, default=PNG_SIZE, help="PNG preview edge in pixels")
    parser.add_argument(
        "--split-by", choices=("track", "channel"), default="track",
        help="Group notes by MIDI track (default) or by channel for type 0 files",
    )
    parser.add_argument(
        "--zero-length", choices=("keep", "drop", "min-one"), default="keep",
        help="Policy for notes whose note-off shares their start tick",
    )
    parser.add_argument(
        "--exclude", type=parse_exclusion, action="append", default=[], metavar="TRACK_NAME:PITCH",
        help="Leave out a pitch on a named track (repeatable)",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="-v for info, -vv for debug")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    exclude = None
    if args.exclude:
        table: defaultdict[str, set[int]] = defaultdict(set)
        for name, pitch in args.exclude:
            table[name].add(pitch)
        exclude = exclude_pitches(table)

    try:
        render_midi_file(
            args.input_midi,
            args.output_svg,
            split=TrackSplitStrategy["BY_" + args.split_by.upper()],
            zero_length=ZeroLengthPolicy[args.zero_length.upper().replace("-", "_")],
            exclude=exclude,
            png_path=args.png,
            png_size=args.png_size,
        )
    except MidiLoadError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
