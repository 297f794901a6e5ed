"""Bracket tokenizer for lyric lines with inline chords.

This module splits a line such as ``[G]Mary had a little[D7] lamb`` into
lyric and chord segments without losing any characters.
"""

from __future__ import annotations

import re

from chord_sheet.chords import parse_chord
from chord_sheet.sheet.models import (
    TOKEN_CLOSE,
    TOKEN_OPEN,
    ChordToken,
    Lyric,
    Segment,
    TokenizedLine,
)

# Key annotation lines such as "Key: [Dm]" stay on one line when aligned
KEY_LINE_RE = re.compile(r"^\s*key:\s*\[[^\]]*\]\s*$", re.IGNORECASE)


def is_key_line(line: str) -> bool:
    """Check whether a line is a "Key: [X]" annotation.

    Examples
    --------
    >>> is_key_line("  KEY: [Dm]  ")
    True
    >>> is_key_line("Key: [Dm] and more")
    False
    """
    return KEY_LINE_RE.match(line) is not None


def tokenize_line(line: str) -> TokenizedLine:
    """Split a line into lyric and chord segments.

    Each token runs from a ``[`` to the next ``]``. An unmatched ``[``
    and everything after it is kept as lyric text, as is a token with a
    blank body (``[]``). Concatenating the segments' text reproduces the
    line exactly.

    Parameters
    ----------
    line : str
        The line to tokenize. Should not include newline characters.

    Returns
    -------
    TokenizedLine
        The segments in original order.

    Examples
    --------
    >>> tokenized = tokenize_line("[G]Mary had a little[D7] lamb")
    >>> [s.to_text() for s in tokenized.segments]
    ['[G]', 'Mary had a little', '[D7]', ' lamb']
    >>> tokenize_line("no chords").has_tokens
    False
    """
    segments: list[Segment] = []
    literal = ""
    has_tokens = False
    rest = line

    while True:
        start = rest.find(TOKEN_OPEN)
        if start < 0:
            break
        end = rest.find(TOKEN_CLOSE, start + 1)
        if end < 0:
            break

        has_tokens = True
        body = rest[start + 1 : end]
        if body.strip():
            literal += rest[:start]
            if literal:
                segments.append(Lyric(literal))
                literal = ""
            segments.append(ChordToken(raw=body, chord=parse_chord(body.strip())))
        else:
            # Blank token: no chord, keep as text
            literal += rest[: end + 1]
        rest = rest[end + 1 :]

    literal += rest
    if literal:
        segments.append(Lyric(literal))

    return TokenizedLine(
        raw=line,
        segments=tuple(segments),
        has_tokens=has_tokens,
        is_key_line=has_tokens and is_key_line(line),
    )
