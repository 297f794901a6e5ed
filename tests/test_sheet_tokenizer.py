"""Tests for the lyric line tokenizer."""

import pytest

from chord_sheet.sheet.models import ChordToken, Lyric
from chord_sheet.sheet.tokenizer import is_key_line, tokenize_line


def reconstruct(line: str) -> str:
    """Concatenate the segments of a tokenized line by hand."""
    parts = []
    for segment in tokenize_line(line).segments:
        if segment.kind == "chord":
            parts.append("[" + segment.raw + "]")
        else:
            parts.append(segment.text)
    return "".join(parts)


class TestTokenizeLineBasic:
    """Basic tokenization tests."""

    def test_chords_and_lyrics(self) -> None:
        """Chord tokens and lyric runs alternate in original order."""
        tokenized = tokenize_line("[G]Mary had a little[D7] lamb")
        assert [s.kind for s in tokenized.segments] == ["chord", "lyric", "chord", "lyric"]
        assert tokenized.segments[0].chord.text == "G"
        assert tokenized.segments[1] == Lyric("Mary had a little")
        assert tokenized.segments[2].chord.text == "D7"
        assert tokenized.segments[3] == Lyric(" lamb")
        assert tokenized.has_tokens
        assert tokenized.has_chords

    def test_leading_lyric(self) -> None:
        """Text before the first chord is a lyric segment."""
        tokenized = tokenize_line("Hello [G]world")
        assert tokenized.segments[0] == Lyric("Hello ")
        assert tokenized.segments[1].kind == "chord"

    def test_back_to_back_chords(self) -> None:
        """Adjacent chords produce no empty lyric between them."""
        tokenized = tokenize_line("[G][C]la")
        assert [s.kind for s in tokenized.segments] == ["chord", "chord", "lyric"]

    def test_chords(self) -> None:
        """chords() lists the parsed chords in order."""
        tokenized = tokenize_line("[Am]one [F]two [C/E]three")
        assert [c.text for c in tokenized.chords()] == ["Am", "F", "C/E"]


class TestTokenizeLineNoTokens:
    """Lines without bracketed tokens."""

    def test_plain_line(self) -> None:
        """A plain line is a single lyric segment."""
        tokenized = tokenize_line("no chords here")
        assert tokenized.segments == (Lyric("no chords here"),)
        assert not tokenized.has_tokens
        assert not tokenized.has_chords

    def test_empty_line(self) -> None:
        """An empty line has no segments."""
        tokenized = tokenize_line("")
        assert tokenized.segments == ()
        assert not tokenized.has_tokens


class TestTokenizeLineMalformed:
    """Malformed bracket handling."""

    def test_unmatched_open_bracket(self) -> None:
        """An unmatched "[" is kept as text to the end of the line."""
        tokenized = tokenize_line("ab[cd")
        assert tokenized.segments == (Lyric("ab[cd"),)
        assert not tokenized.has_tokens

    def test_unmatched_after_chord(self) -> None:
        """Text after the last complete token is kept, bracket included."""
        tokenized = tokenize_line("a[G]b[cd")
        assert tokenized.segments[-1] == Lyric("b[cd")
        assert [c.text for c in tokenized.chords()] == ["G"]

    def test_empty_brackets_are_text(self) -> None:
        """Blank tokens carry no chord and merge into the lyric text."""
        tokenized = tokenize_line("a[]b[ ]c[G]d")
        assert tokenized.segments[0] == Lyric("a[]b[ ]c")
        assert tokenized.segments[1].chord.text == "G"
        assert tokenized.segments[2] == Lyric("d")

    def test_only_empty_brackets(self) -> None:
        """A line with only blank tokens has tokens but no chords."""
        tokenized = tokenize_line("x[]y")
        assert tokenized.has_tokens
        assert not tokenized.has_chords

    def test_token_runs_to_next_close(self) -> None:
        """A token extends from "[" to the next "]"."""
        tokenized = tokenize_line("[[G]x")
        assert tokenized.segments[0].chord.text == "[G"
        assert tokenized.segments[0].chord.pitch_class is None

    def test_stray_close_bracket(self) -> None:
        """A "]" with no "[" before it is text."""
        tokenized = tokenize_line("x]y[G]z")
        assert tokenized.segments[0] == Lyric("x]y")


class TestTokenizeLineWhitespace:
    """Blanks inside brackets."""

    def test_blanks_around_chord(self) -> None:
        """The chord is parsed without blanks; the raw body keeps them."""
        tokenized = tokenize_line("[ Am ]la")
        token = tokenized.segments[0]
        assert isinstance(token, ChordToken)
        assert token.raw == " Am "
        assert token.chord.text == "Am"
        assert token.to_text() == "[ Am ]"


class TestTokenizeLineRoundTrip:
    """Segments always reproduce the line."""

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "plain",
            "[G]x",
            "[G]Mary had a little[D7] lamb",
            "[G][C]",
            "  [ Am ] la ",
            "a[]b",
            "a[ ]b",
            "ab[cd",
            "x]y[G",
            "[[G]x",
            "a[G]b[C",
            "Key: [Dm]",
            "[Zm]bad chord",
            "[]",
        ],
    )
    def test_round_trip(self, line: str) -> None:
        """Concatenating the segments gives back the original line."""
        assert reconstruct(line) == line
        assert tokenize_line(line).to_text() == line

    @pytest.mark.parametrize("line", ["[G]x", "a[]b", "[G][C]", "ab[cd", "  [ Am ] la "])
    def test_no_empty_segments(self, line: str) -> None:
        """Empty segments are never kept."""
        for segment in tokenize_line(line).segments:
            assert segment.to_text()


class TestKeyLine:
    """Key annotation lines."""

    @pytest.mark.parametrize("line", ["Key: [Dm]", "  key:[C]  ", "KEY:  [F#m]", "Key: [ Bb ]"])
    def test_key_lines(self, line: str) -> None:
        """Key lines are recognized case-insensitively."""
        assert is_key_line(line)
        assert tokenize_line(line).is_key_line

    @pytest.mark.parametrize("line", ["Key: Dm", "Key: [Dm] and more", "The key: [Dm]", "[Dm]"])
    def test_not_key_lines(self, line: str) -> None:
        """Other lines are not key lines."""
        assert not is_key_line(line)
        assert not tokenize_line(line).is_key_line

    def test_key_line_still_has_chord(self) -> None:
        """The chord on a key line is tokenized normally."""
        tokenized = tokenize_line("Key: [Dm]")
        assert [c.text for c in tokenized.chords()] == ["Dm"]
