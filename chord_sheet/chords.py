"""Chord token parsing and validation.

This module splits a chord token into root and suffix and checks the
suffix against a fixed vocabulary of chord qualities.
"""

from __future__ import annotations

from chord_sheet.models import Chord
from chord_sheet.pitch_class import BASS_DELIMITER, pitch_class_of

SHARP = "#"
FLAT = "b"

# Recognized chord qualities (compared case-insensitively)
CHORD_TYPES: frozenset[str] = frozenset(
    {"+", "6", "7", "aug", "dim", "m", "m6", "m7", "maj", "maj7", "o", "sus", "sus4"}
)


def root_length(text: str) -> int:
    """Return how many leading characters of a token form its root.

    A doubled accidental (``##`` or ``bb``) after the letter gives 3, a
    single accidental gives 2, anything else gives 1. Accidentals are
    case-sensitive: ``B`` after the letter is not a flat.

    Examples
    --------
    >>> root_length("Gbbsus4"), root_length("F#m"), root_length("Am")
    (3, 2, 1)
    """
    if len(text) > 1 and text[1] in (SHARP, FLAT):
        if len(text) > 2 and text[2] == text[1]:
            return 3
        return 2
    return 1


def parse_chord(text: str) -> Chord:
    """Parse a chord token into a Chord.

    Never raises: a token whose root is not a known spelling gives a
    Chord with ``pitch_class`` set to None.

    Parameters
    ----------
    text : str
        The chord token without brackets (e.g., "Bbmaj7", "c#m/G#").

    Returns
    -------
    Chord
        The parsed chord.

    Examples
    --------
    >>> chord = parse_chord("D#maj7/F#")
    >>> chord.root, chord.suffix, chord.pitch_class
    ('D#', 'maj7/F#', 6)
    >>> parse_chord("Zm").pitch_class is None
    True
    """
    n = root_length(text)
    root = text[:n].capitalize()
    return Chord(text=text, root=root, suffix=text[n:], pitch_class=pitch_class_of(root))


def is_valid_quality(suffix: str) -> bool:
    """Check the quality part of a suffix against ``CHORD_TYPES``.

    Only the text before the first bass-note delimiter is checked; an
    empty quality (a plain major chord) is valid.

    Examples
    --------
    >>> is_valid_quality("MAJ7/G")
    True
    >>> is_valid_quality("add9")
    False
    """
    quality = suffix.split(BASS_DELIMITER, 1)[0]
    return not quality or quality.lower() in CHORD_TYPES


def is_valid_chord(chord: Chord) -> bool:
    """Check that a chord has a known root and a known quality.

    Validation is advisory; transposition never depends on it.

    Examples
    --------
    >>> is_valid_chord(parse_chord("Gbbsus4"))
    True
    >>> is_valid_chord(parse_chord("Hm"))
    False
    """
    return chord.is_root_valid and is_valid_quality(chord.suffix)
