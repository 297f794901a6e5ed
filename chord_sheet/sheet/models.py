"""Data models for lyric lines with inline chords.

This module defines the segments a line is split into (literal lyric
runs and bracketed chord tokens) and the tokenized line that holds
them in their original order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from chord_sheet.models import Chord

SegmentKind = Literal["lyric", "chord"]

TOKEN_OPEN = "["
TOKEN_CLOSE = "]"


@dataclass(frozen=True)
class Lyric:
    """A literal run of lyric text.

    Parameters
    ----------
    text : str
        The text exactly as it appeared in the line.
    """

    text: str
    kind: Literal["lyric"] = "lyric"

    def to_text(self) -> str:
        return self.text


@dataclass(frozen=True)
class ChordToken:
    """A bracketed chord token.

    Parameters
    ----------
    raw : str
        The bracket body exactly as written (e.g., " G7 ").
    chord : Chord
        The chord parsed from the body with surrounding blanks removed.

    Examples
    --------
    >>> from chord_sheet.chords import parse_chord
    >>> token = ChordToken(raw=" G7 ", chord=parse_chord("G7"))
    >>> token.to_text()
    '[ G7 ]'
    """

    raw: str
    chord: Chord
    kind: Literal["chord"] = "chord"

    def to_text(self) -> str:
        return TOKEN_OPEN + self.raw + TOKEN_CLOSE


Segment = Lyric | ChordToken


@dataclass(frozen=True)
class TokenizedLine:
    """A line split into lyric and chord segments.

    Parameters
    ----------
    raw : str
        The original line.
    segments : tuple[Segment, ...]
        Non-empty segments in original order.
    has_tokens : bool
        False if the line contains no bracketed tokens at all.
    is_key_line : bool
        True for a "Key: [X]" annotation line.
    """

    raw: str
    segments: tuple[Segment, ...]
    has_tokens: bool = True
    is_key_line: bool = False

    @property
    def has_chords(self) -> bool:
        """Whether any segment is a chord token."""
        return any(s.kind == "chord" for s in self.segments)

    def chords(self) -> list[Chord]:
        """Return the chords of the line in order."""
        return [s.chord for s in self.segments if s.kind == "chord"]

    def to_text(self) -> str:
        """Reassemble the line from its segments."""
        return "".join(s.to_text() for s in self.segments)
