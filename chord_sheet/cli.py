"""Command-line interface for chord-sheet.

Usage:
    chord-sheet transpose (-u N | -d N | -f FROM -t TO) [FILE ...]
    chord-sheet align [--span-char C] [--single-span] [FILE ...]
    chord-sheet check [FILE ...]

Examples:
    chord-sheet transpose -u 2 song.txt
    chord-sheet transpose -f C -t a song.txt
    chord-sheet align song.txt
    chord-sheet transpose -d 3 song.txt | chord-sheet align
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterator
from pathlib import Path

from chord_sheet.chords import is_valid_chord
from chord_sheet.config import AlignConfig, ConfigError, TransposeConfig
from chord_sheet.sheet import align_line, tokenize_line, transpose_line

logger = logging.getLogger(__name__)

STDIN = "-"


def iter_lines(paths: list[Path]) -> Iterator[tuple[str, int, str]]:
    """Yield (source name, line number, line) for every input line.

    Reads standard input when no paths are given or a path is "-".
    Trailing newline characters are removed.
    """
    for path in paths or [Path(STDIN)]:
        if str(path) == STDIN:
            logger.debug("Reading standard input")
            for lineno, line in enumerate(sys.stdin, 1):
                yield "<stdin>", lineno, line.rstrip("\r\n")
            continue

        logger.debug("Reading %s", path)
        with path.open(encoding="utf-8") as f:
            for lineno, line in enumerate(f, 1):
                yield str(path), lineno, line.rstrip("\r\n")


def run_transpose(args: argparse.Namespace) -> int:
    """Transpose the chords of every input line."""
    try:
        config = TransposeConfig.from_options(
            up=args.up,
            down=args.down,
            from_chord=args.from_chord,
            to_chord=args.to_chord,
        )
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.debug("Transposing by %d semitones", config.semitones)
    for _, _, line in iter_lines(args.files):
        print(transpose_line(line, config.semitones))
    return 0


def run_align(args: argparse.Namespace) -> int:
    """Convert every input line to chord-above-lyrics layout."""
    try:
        config = AlignConfig(span_char=args.span_char, multi_span=not args.single_span)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for _, _, line in iter_lines(args.files):
        print(align_line(line, config))
    return 0


def run_check(args: argparse.Namespace) -> int:
    """Report chords with an unknown root or quality."""
    bad_count = 0
    for source, lineno, line in iter_lines(args.files):
        for chord in tokenize_line(line).chords():
            if not is_valid_chord(chord):
                bad_count += 1
                print(f"{source}:{lineno}: invalid chord [{chord.text}]")

    if bad_count:
        print(f"{bad_count} invalid chord(s) found", file=sys.stderr)
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="chord-sheet",
        description="Transpose and lay out lyric sheets with inline [chords]",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Chords are written between square brackets, eg. [Bbmaj7]. A root chord
is A-G, A#-G#, Ab-Gb, A##-G## or Abb-Gbb. The part after the root is kept
unchanged, except that any note following a '/' is also transposed,
eg. [C7/G] to [D7/A].

Examples:
  %(prog)s transpose -u 2 song.txt
  %(prog)s transpose -f G7 -t E7 song.txt   # '7' is ignored
  %(prog)s align song.txt
        """,
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    transpose = subparsers.add_parser(
        "transpose",
        help="Transpose chords up or down",
    )
    amount = transpose.add_mutually_exclusive_group()
    amount.add_argument(
        "-u", "--up",
        type=int,
        metavar="N",
        help="Number of semitones to transpose up",
    )
    amount.add_argument(
        "-d", "--down",
        type=int,
        metavar="N",
        help="Number of semitones to transpose down",
    )
    transpose.add_argument(
        "-f", "--from",
        dest="from_chord",
        metavar="FROM_CHORD",
        help="Chord to transpose from (use with -t)",
    )
    transpose.add_argument(
        "-t", "--to",
        dest="to_chord",
        metavar="TO_CHORD",
        help="Chord to transpose to (use with -f)",
    )
    transpose.set_defaults(func=run_transpose)

    align = subparsers.add_parser(
        "align",
        help="Convert to chord-above-lyrics layout",
    )
    align.add_argument(
        "--span-char",
        default="_",
        help="Character that extends a syllable under a wide chord (default: _)",
    )
    align.add_argument(
        "--single-span",
        action="store_true",
        help="Insert a single span character followed by spaces",
    )
    align.set_defaults(func=run_align)

    check = subparsers.add_parser(
        "check",
        help="List chords with an unknown root or quality",
    )
    check.set_defaults(func=run_check)

    for subparser in (transpose, align, check):
        subparser.add_argument(
            "files",
            nargs="*",
            type=Path,
            help="Input text files (default: stdin)",
        )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    for path in args.files:
        if str(path) != STDIN and not path.is_file():
            print(f"Error: File '{path}' must exist and be readable.", file=sys.stderr)
            return 1

    try:
        return args.func(args)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
