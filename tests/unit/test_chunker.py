"""Unit tests for text chunking."""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from ttsplay.tts.chunker import split_text
from ttsplay.tts.constants import MAX_CHUNK_CHARS

M = MAX_CHUNK_CHARS


def texts(chunks) -> list[str]:
    return [chunk.text for chunk in chunks]


class TestSplitTextBasics:
    """Test simple inputs that need at most one cut."""

    def test_empty_text_yields_no_chunks(self) -> None:
        assert split_text("") == []

    def test_short_text_is_single_chunk(self) -> None:
        chunks = split_text("Hello world. How are you?")

        assert texts(chunks) == ["Hello world. How are you?"]
        assert chunks[0].index == 0

    def test_text_of_exactly_max_length_is_single_chunk(self) -> None:
        text = "x" * M

        assert texts(split_text(text)) == [text]

    def test_invalid_max_chars_raises_value_error(self) -> None:
        with pytest.raises(ValueError, match="max_chars must be at least 1"):
            split_text("abc", max_chars=0)


class TestSplitTextBoundaries:
    """Test where cuts land."""

    def test_cut_lands_after_sentence_terminator(self) -> None:
        """A ". " at M-3 makes the first chunk end at M-1, not M."""
        text = "a" * (M - 3) + ". " + "b" * 11
        assert len(text) == M + 10

        chunks = split_text(text)

        assert len(chunks[0].text) == M - 1
        assert chunks[0].text.endswith(". ")
        assert chunks[1].text == "b" * 11

    def test_hard_cut_without_boundaries(self) -> None:
        chunks = split_text("z" * (2 * M))

        assert [len(c.text) for c in chunks] == [M, M]

    def test_marker_priority_beats_position(self) -> None:
        """An earlier ". " wins over a later newline inside the limit."""
        text = "Hi. abcdefghijk\nlmnopqrstuvwxyz"

        chunks = split_text(text, max_chars=20)

        assert chunks[0].text == "Hi. "

    @pytest.mark.parametrize("marker", ["? ", "! ", "\n"])
    def test_each_marker_is_a_boundary(self, marker: str) -> None:
        text = "abcdef" + marker + "ghijklmnopqrstuvwxyz"

        chunks = split_text(text, max_chars=12)

        assert chunks[0].text == "abcdef" + marker

    def test_marker_straddling_the_limit_is_ignored(self) -> None:
        """A marker that would push the chunk past the limit forces a hard cut."""
        text = "abcdefghi. rest of text"

        chunks = split_text(text, max_chars=10)

        assert chunks[0].text == "abcdefghi."
        assert all(len(c.text) <= 10 for c in chunks)

    def test_leading_newline_gives_one_character_chunk(self) -> None:
        chunks = split_text("\n" + "q" * 30, max_chars=10)

        assert chunks[0].text == "\n"


class TestSplitTextInvariants:
    """Test properties that must hold for any input."""

    @pytest.mark.parametrize(
        "text,max_chars",
        [
            ("One. Two? Three! Four\nFive", 6),
            ("no boundaries at all in this one", 7),
            ("Ünïcödé sëntence. Ànother one here! ok", 9),
            ("\n\n\n\n\n\n", 2),
            (". . . . . . . .", 3),
            ("x" * (3 * M + 17), M),
            (("Sentence number something. " * 400), M),
        ],
    )
    def test_chunks_rebuild_input_and_respect_bound(
        self, text: str, max_chars: int
    ) -> None:
        chunks = split_text(text, max_chars=max_chars)

        assert "".join(texts(chunks)) == text
        assert all(0 < len(c.text) <= max_chars for c in chunks)
        assert [c.index for c in chunks] == list(range(len(chunks)))
