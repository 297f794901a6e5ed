"""Lyric sheet processing for lines with inline chords.

This module provides functionality to tokenize lyric lines containing
bracketed chords, transpose them, and lay them out in chord-above-lyrics
form.
"""

from chord_sheet.sheet.aligner import align_line, align_text, align_tokens, pad
from chord_sheet.sheet.models import ChordToken, Lyric, Segment, TokenizedLine
from chord_sheet.sheet.tokenizer import is_key_line, tokenize_line
from chord_sheet.sheet.transposer import transpose_line, transpose_text, transpose_tokens

__all__ = [
    "ChordToken",
    "Lyric",
    "Segment",
    "TokenizedLine",
    "align_line",
    "align_text",
    "align_tokens",
    "is_key_line",
    "pad",
    "tokenize_line",
    "transpose_line",
    "transpose_text",
    "transpose_tokens",
]
