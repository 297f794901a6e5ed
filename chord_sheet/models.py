"""Chord data model for chord-sheet.

This module provides the immutable representation of a single chord
token as written in a lyric sheet, split losslessly into its root and
suffix.
"""

from __future__ import annotations

from dataclasses import dataclass

from chord_sheet.pitch_class import BASS_DELIMITER


@dataclass(frozen=True)
class Chord:
    """A chord token split into root and suffix.

    Parameters
    ----------
    text : str
        The token as written (e.g., "D#maj7/F#").
    root : str
        The root letter plus 0-2 accidentals, capitalized (e.g., "D#").
    suffix : str
        Everything after the root, verbatim (e.g., "maj7/F#").
    pitch_class : int | None
        Position of the root on the chromatic circle (0=A ... 11=G#),
        or None if the root is not a recognized spelling.

    Examples
    --------
    >>> from chord_sheet.chords import parse_chord
    >>> chord = parse_chord("bbm7")
    >>> chord.root, chord.suffix, chord.pitch_class
    ('Bb', 'm7', 1)
    >>> str(chord)
    'Bbm7'
    """

    text: str
    root: str
    suffix: str
    pitch_class: int | None = None

    @property
    def is_root_valid(self) -> bool:
        """Whether the root is a recognized spelling."""
        return self.pitch_class is not None

    @property
    def quality(self) -> str:
        """The suffix up to the first bass-note delimiter (e.g., "m7")."""
        return self.suffix.split(BASS_DELIMITER, 1)[0]

    @property
    def bass_parts(self) -> tuple[str, ...]:
        """The delimited bass-note modifiers following the quality."""
        return tuple(self.suffix.split(BASS_DELIMITER)[1:])

    def __str__(self) -> str:
        """Return the normalized chord text (capitalized root + suffix)."""
        return self.root + self.suffix
