"""Configuration for chord-sheet.

Holds the transposition amount and the alignment fill settings. Values
are checked once when the configuration is built; a bad value raises
ConfigError before any line is processed.
"""

from __future__ import annotations

from dataclasses import dataclass

from chord_sheet.chords import parse_chord
from chord_sheet.pitch_class import semitones_between


class ConfigError(ValueError):
    """Raised for an invalid or incomplete configuration."""


@dataclass(frozen=True)
class TransposeConfig:
    """How far to transpose.

    Parameters
    ----------
    semitones : int
        Number of semitones to transpose (positive = up).

    Examples
    --------
    >>> TransposeConfig.from_chords("C", "Eb").semitones
    3
    >>> TransposeConfig.from_options(down=2).semitones
    -2
    """

    semitones: int = 0

    @classmethod
    def from_chords(cls, from_chord: str, to_chord: str) -> TransposeConfig:
        """Derive the transposition from a pair of chord names.

        Only the roots matter; ``from_chords("G7", "E7")`` is -3.

        Raises
        ------
        ConfigError
            If either root is not a recognized spelling.
        """
        source = parse_chord(from_chord.strip())
        target = parse_chord(to_chord.strip())
        if source.pitch_class is None:
            msg = f"Unrecognised FROM chord: {from_chord!r}"
            raise ConfigError(msg)
        if target.pitch_class is None:
            msg = f"Unrecognised TO chord: {to_chord!r}"
            raise ConfigError(msg)
        return cls(semitones=semitones_between(source, target))

    @classmethod
    def from_options(
        cls,
        up: int | None = None,
        down: int | None = None,
        from_chord: str | None = None,
        to_chord: str | None = None,
    ) -> TransposeConfig:
        """Build the configuration from command-line style options.

        A from/to chord pair takes precedence over ``up``/``down``.

        Raises
        ------
        ConfigError
            If only one of the chord pair is given, both ``up`` and
            ``down`` are given, a chord is not recognized, or no
            transposition is given at all.
        """
        if (from_chord is None) != (to_chord is None):
            msg = "FROM and TO chords must be given together"
            raise ConfigError(msg)
        if from_chord is not None and to_chord is not None:
            return cls.from_chords(from_chord, to_chord)
        if up is not None and down is not None:
            msg = "Give only one of up or down semitones"
            raise ConfigError(msg)
        if down is not None:
            return cls(semitones=-down)
        if up is not None:
            return cls(semitones=up)
        msg = "No transposition given: use up/down semitones or a FROM/TO chord pair"
        raise ConfigError(msg)


@dataclass(frozen=True)
class AlignConfig:
    """How to fill lyric text stretched under a wide chord.

    Parameters
    ----------
    span_char : str
        Single character used to extend a syllable. Choose one that does
        not appear in normal song text (e.g. "_" or "~", not "-"), or " " to
        turn span fill off.
    multi_span : bool
        Fill the whole gap with ``span_char`` (True), or only the first
        ``span_lead_in`` characters and then spaces (False).
    span_lead_in : int
        Number of span characters used when ``multi_span`` is False.
    """

    span_char: str = "_"
    multi_span: bool = True
    span_lead_in: int = 1

    def __post_init__(self) -> None:
        if len(self.span_char) != 1:
            msg = f"Span character must be a single character, got {self.span_char!r}"
            raise ConfigError(msg)
        if self.span_lead_in < 0:
            msg = f"Span lead-in must not be negative, got {self.span_lead_in}"
            raise ConfigError(msg)
