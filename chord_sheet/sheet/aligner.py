"""Chord-above-lyrics layout for lyric lines with inline chords.

This module converts a chord-between-lyrics line such as::

    [G]Mary had a little lamb, [D7]little lamb, [G]little lamb

into a chord line printed above a lyric line::

    G                       D7           G
    Mary had a little lamb, little lamb, little lamb

Each chord starts in the same column as the syllable it preceded. When
a chord is wider than its syllable, the syllable is extended with span
characters so that the following chord still has room.
"""

from __future__ import annotations

from chord_sheet.config import AlignConfig
from chord_sheet.sheet.models import TokenizedLine
from chord_sheet.sheet.tokenizer import tokenize_line

NEWLINE = "\n"


def pad(
    char_count: int,
    value: object = "",
    fill_char: str = " ",
    lead_char: str = " ",
    lead_count: int = 0,
) -> str:
    """Build a run of fill characters.

    Parameters
    ----------
    char_count : int
        Base length of the run (may be negative).
    value : object
        Anything whose text length is added to ``char_count``. None
        counts as empty.
    fill_char : str
        Character used for the run.
    lead_char : str
        Character used for the first ``lead_count`` characters.
    lead_count : int
        How many leading characters use ``lead_char``.

    Returns
    -------
    str
        The run; empty if its total length is not positive.

    Examples
    --------
    >>> pad(2, "Four")
    '      '
    >>> pad(-5, "Four")
    ''
    >>> pad(3, None, "*", "%", 1)
    '%**'
    >>> pad(3, None, "*", "%", 4)
    '%%%'
    """
    length = char_count + len("" if value is None else str(value))
    if length <= 0:
        return ""
    if lead_count <= 0:
        return fill_char * length
    if lead_count >= length:
        return lead_char * length
    return lead_char * lead_count + fill_char * (length - lead_count)


def span_fill(lyric: str, count: int, config: AlignConfig) -> str:
    """Build the fill that follows a lyric run stretched under a chord.

    A lyric already ending in a space is followed by plain spaces;
    otherwise the fill uses the configured span character.

    Examples
    --------
    >>> span_fill("la", 3, AlignConfig())
    '___'
    >>> span_fill("la", 3, AlignConfig(multi_span=False))
    '_  '
    >>> span_fill("la ", 3, AlignConfig())
    '   '
    """
    if lyric.endswith(" "):
        return pad(count)
    if config.multi_span:
        return pad(count, fill_char=config.span_char)
    return pad(count, lead_char=config.span_char, lead_count=config.span_lead_in)


def align_tokens(tokenized: TokenizedLine, config: AlignConfig | None = None) -> str:
    """Lay out a tokenized line as a chord line above a lyric line.

    Lines without chord tokens and "Key: [X]" lines are returned
    unchanged.

    Parameters
    ----------
    tokenized : TokenizedLine
        The line to lay out.
    config : AlignConfig | None
        Span fill settings; defaults to ``AlignConfig()``.

    Returns
    -------
    str
        The chord line and lyric line joined by a newline, each without
        trailing whitespace, or the original line.
    """
    if config is None:
        config = AlignConfig()
    if not tokenized.has_chords or tokenized.is_key_line:
        return tokenized.raw

    segments = tokenized.segments
    chord_line = ""
    lyric_line = ""
    pending_fill = 0

    # Padding for a segment depends on the segment after it
    for i, (segment, next_segment) in enumerate(zip(segments, segments[1:])):
        if segment.kind == "chord":
            name = segment.chord.text
            if next_segment.kind == "chord":
                chord_line += name + " "
                lyric_line += pad(0, name + " ")
            else:
                diff = len(next_segment.text) - len(name)
                if diff > 0:
                    chord_line += name + pad(diff)
                else:
                    chord_line += name + " "
                    pending_fill = 1 - diff
        else:
            if i == 0:
                chord_line += pad(len(segment.text))
            lyric_line += segment.text + span_fill(segment.text, pending_fill, config)
            pending_fill = 0

    last = segments[-1]
    if last.kind == "chord":
        chord_line += last.chord.text
    else:
        lyric_line += last.text

    return chord_line.rstrip() + NEWLINE + lyric_line.rstrip()


def align_line(line: str, config: AlignConfig | None = None) -> str:
    """Lay out a single line as a chord line above a lyric line.

    Parameters
    ----------
    line : str
        A line of lyrics with inline chords in square brackets.
    config : AlignConfig | None
        Span fill settings; defaults to ``AlignConfig()``.

    Returns
    -------
    str
        A two-line block, or the original line if it has no chords or
        is a "Key: [X]" line.

    Examples
    --------
    >>> print(align_line("[G]Mary had a little lamb, [D7]little lamb"))
    G                       D7
    Mary had a little lamb, little lamb
    >>> align_line("Key: [Dm]")
    'Key: [Dm]'
    """
    return align_tokens(tokenize_line(line), config)


def align_text(text: str, config: AlignConfig | None = None) -> str:
    """Lay out every line of a block of text."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return NEWLINE.join(align_line(line, config) for line in text.split("\n"))
