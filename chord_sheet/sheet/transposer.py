"""Transposition of lyric lines with inline chords."""

from __future__ import annotations

from chord_sheet.pitch_class import transpose_chord
from chord_sheet.sheet.models import TOKEN_CLOSE, TOKEN_OPEN, TokenizedLine
from chord_sheet.sheet.tokenizer import tokenize_line


def transpose_tokens(tokenized: TokenizedLine, semitones: int) -> str:
    """Transpose every chord token of a tokenized line.

    Lyric segments are copied unchanged. Chord tokens are re-emitted in
    bracket notation without the blanks that surrounded them.

    Parameters
    ----------
    tokenized : TokenizedLine
        The line to transpose.
    semitones : int
        Number of semitones to transpose (positive = up).

    Returns
    -------
    str
        The transposed line.
    """
    parts: list[str] = []
    for segment in tokenized.segments:
        if segment.kind == "chord":
            chord = transpose_chord(segment.chord, semitones)
            parts.append(TOKEN_OPEN + chord.text + TOKEN_CLOSE)
        else:
            parts.append(segment.text)
    return "".join(parts)


def transpose_line(line: str, semitones: int) -> str:
    """Transpose the chords of a single line.

    Parameters
    ----------
    line : str
        A line of lyrics with inline chords in square brackets.
    semitones : int
        Number of semitones to transpose (positive = up).

    Returns
    -------
    str
        The line with every chord transposed.

    Examples
    --------
    >>> transpose_line("[G]Or [Am]when [G/B]the [Am]valley's [F]hushed", 2)
    "[A]Or [Bm]when [A/C#]the [Bm]valley's [G]hushed"
    >>> transpose_line("[Zm]bad chord", 3)
    '[??m]bad chord'
    """
    return transpose_tokens(tokenize_line(line), semitones)


def transpose_text(text: str, semitones: int) -> str:
    """Transpose every line of a block of text.

    Examples
    --------
    >>> transpose_text("[C]one\\r\\n[F]two", 2)
    '[D]one\\n[G]two'
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return "\n".join(transpose_line(line, semitones) for line in text.split("\n"))
