"""Pitch class operations for chord transposition.

This module provides the chromatic table that maps every accepted root
spelling to a pitch class (0-11, where A=0) and back to a single
canonical output spelling, along with the transposition arithmetic
built on it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chord_sheet.models import Chord

logger = logging.getLogger(__name__)

# Root shown in place of a root that cannot be transposed
BAD_ROOT = "??"

# Delimiter between the chord quality and any bass-note modifiers
BASS_DELIMITER = "/"

# Accepted input spellings, indexed by pitch class (0=A ... 11=G#).
# Columns of the same index denote the same pitch class. Searched in
# this order; the first table containing a root decides its pitch class.
INPUT_SPELLINGS: dict[str, tuple[str, ...]] = {
    # Naturals and most single sharps (except B# and E#)
    "sharp1": ("A", "A#", "B", "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#"),
    # B#, E# and all double sharps
    "sharp2": ("G##", "A#", "A##", "B#", "B##", "C##", "D#", "D##", "E#", "E##", "F##", "G#"),
    # Naturals and most single flats (except Cb and Fb)
    "flat1": ("A", "Bb", "B", "C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab"),
    # Cb, Fb and all double flats
    "flat2": ("Bbb", "Cbb", "Cb", "Dbb", "Db", "Ebb", "Fbb", "Fb", "Gbb", "Gb", "Abb", "Ab"),
}

# The one spelling ever produced for each pitch class
OUTPUT_SPELLINGS: tuple[str, ...] = (
    "A", "Bb", "B", "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#",
)


def pitch_class_of(root: str) -> int | None:
    """Look up the pitch class of a root spelling.

    Parameters
    ----------
    root : str
        Root spelling, already capitalized (e.g., "C", "F#", "Bbb").

    Returns
    -------
    int | None
        Pitch class (0-11, where A=0), or None if the spelling is unknown.

    Examples
    --------
    >>> pitch_class_of("C")
    3
    >>> pitch_class_of("Dbb")
    3
    >>> pitch_class_of("H") is None
    True
    """
    for spellings in INPUT_SPELLINGS.values():
        if root in spellings:
            return spellings.index(root)
    return None


def canonical_spelling(pitch_class: int) -> str:
    """Return the output spelling for a pitch class (taken modulo 12).

    Examples
    --------
    >>> canonical_spelling(6)
    'D#'
    >>> canonical_spelling(-11)
    'Bb'
    """
    return OUTPUT_SPELLINGS[pitch_class % 12]


def transpose_suffix(suffix: str, semitones: int) -> str:
    """Transpose the bass-note modifiers of a chord suffix.

    The part before the first delimiter (the chord quality) is kept
    unchanged. Every later part is transposed as a chord of its own.
    Empty parts are kept as they are.

    Parameters
    ----------
    suffix : str
        Chord suffix (e.g., "m7/G", "/E_bass/Fplucked").
    semitones : int
        Number of semitones to transpose (positive = up).

    Returns
    -------
    str
        The transposed suffix.

    Examples
    --------
    >>> transpose_suffix("m/Bb", 2)
    'm/C'
    >>> transpose_suffix("m/E_bass/Fplucked", 2)
    'm/F#_bass/Gplucked'
    """
    from chord_sheet.chords import parse_chord

    quality, *bass_parts = suffix.split(BASS_DELIMITER)
    transposed = [quality]
    for part in bass_parts:
        if part:
            part = transpose_chord(parse_chord(part), semitones).text
        transposed.append(part)
    return BASS_DELIMITER.join(transposed)


def transpose_chord(chord: Chord, semitones: int) -> Chord:
    """Transpose a chord by a number of semitones.

    An unrecognized root is replaced by ``BAD_ROOT`` rather than raising;
    its bass-note modifiers are still transposed.

    Parameters
    ----------
    chord : Chord
        The chord to transpose.
    semitones : int
        Number of semitones to transpose (positive = up).

    Returns
    -------
    Chord
        Transposed chord, spelled with the canonical output spellings.

    Examples
    --------
    >>> from chord_sheet.chords import parse_chord
    >>> transpose_chord(parse_chord("C7/G"), -2).text
    'Bb7/F'
    >>> transpose_chord(parse_chord("Zm"), 3).text
    '??m'
    """
    from chord_sheet.models import Chord as ChordModel

    suffix = transpose_suffix(chord.suffix, semitones)

    if chord.pitch_class is None:
        logger.debug("Unrecognized chord root %r in %r", chord.root, chord.text)
        return ChordModel(text=BAD_ROOT + suffix, root=BAD_ROOT, suffix=suffix)

    new_pc = (chord.pitch_class + semitones) % 12
    root = OUTPUT_SPELLINGS[new_pc]
    return ChordModel(text=root + suffix, root=root, suffix=suffix, pitch_class=new_pc)


def semitones_between(from_chord: Chord, to_chord: Chord) -> int | None:
    """Compute the transposition that takes one chord root to another.

    Only the roots are compared, so chord qualities are ignored. The
    result is not reduced modulo 12.

    Parameters
    ----------
    from_chord : Chord
        The chord to transpose from.
    to_chord : Chord
        The chord to transpose to.

    Returns
    -------
    int | None
        ``pitch_class(to) - pitch_class(from)``, or None if either root
        is unrecognized.

    Examples
    --------
    >>> from chord_sheet.chords import parse_chord
    >>> semitones_between(parse_chord("C"), parse_chord("Eb"))
    3
    >>> semitones_between(parse_chord("G7"), parse_chord("E7"))
    -3
    """
    if from_chord.pitch_class is None or to_chord.pitch_class is None:
        return None
    return to_chord.pitch_class - from_chord.pitch_class
