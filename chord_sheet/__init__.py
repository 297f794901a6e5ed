"""Chord sheet library for transposing and laying out lyric sheets.

This library works on lyric sheets with chords written inline in square
brackets, next to the syllable they apply to (e.g., "[G]Mary had a
little[D7] lamb"). It can transpose every chord by a number of semitones
and convert the sheet to chord-above-lyrics layout.

Examples
--------
>>> from chord_sheet import transpose_line, align_line

>>> transpose_line("[C7/G]hold", -2)
'[Bb7/F]hold'

>>> print(align_line("[G]Or [Am]when [G/B]the"))
G  Am   G/B
Or when the

>>> # Derive the transposition from a pair of chords
>>> from chord_sheet import TransposeConfig
>>> TransposeConfig.from_chords("C", "Eb").semitones
3
>>> transpose_line("[C]x", 3)
'[D#]x'
"""

from chord_sheet.chords import is_valid_chord, parse_chord
from chord_sheet.config import AlignConfig, ConfigError, TransposeConfig
from chord_sheet.models import Chord
from chord_sheet.pitch_class import pitch_class_of, semitones_between, transpose_chord
from chord_sheet.sheet import align_line, tokenize_line, transpose_line

__all__ = [
    "AlignConfig",
    "Chord",
    "ConfigError",
    "TransposeConfig",
    "align_line",
    "is_valid_chord",
    "parse_chord",
    "pitch_class_of",
    "semitones_between",
    "tokenize_line",
    "transpose_chord",
    "transpose_line",
]
