"""Unit and property-based tests for word wrapping."""
from hypothesis import given
from hypothesis import strategies as st
from rich.cells import cell_len, get_character_cell_size

from gemchat.ui.config import MIN_WRAP_WIDTH
from gemchat.ui.wrapping import wrap_text

words = st.text(
    alphabet=st.sampled_from("abcdefghijklmnopqrstuvwxyz日本語😀é"),
    min_size=1,
    max_size=30,
)
sentences = st.lists(words, min_size=1, max_size=25).map(" ".join)
widths = st.integers(min_value=MIN_WRAP_WIDTH, max_value=80)


class TestWrapText:
    """Tests for wrap_text."""

    def test_empty_input_yields_single_empty_line(self):
        assert wrap_text("", 20) == [""]

    def test_whitespace_only_yields_single_empty_line(self):
        assert wrap_text("   \n\t  ", 20) == [""]

    def test_short_text_fits_on_one_line(self):
        assert wrap_text("hello world", 20) == ["hello world"]

    def test_words_move_to_next_line_when_full(self):
        assert wrap_text("aaaa bbbb cccc", 10) == ["aaaa bbbb", "cccc"]

    def test_exact_fit_stays_on_line(self):
        # 5 + 1 + 4 == 10
        assert wrap_text("aaaaa bbbb", 10) == ["aaaaa bbbb"]

    def test_whitespace_is_collapsed(self):
        assert wrap_text("a   b\n\nc", 20) == ["a b c"]

    def test_long_word_is_broken_into_chunks(self):
        assert wrap_text("x" * 25, 10) == ["x" * 10, "x" * 10, "x" * 5]

    def test_long_word_flushes_current_line_first(self):
        assert wrap_text("hi " + "y" * 12, 10) == ["hi", "y" * 10, "yy"]

    def test_width_below_floor_is_raised(self):
        assert wrap_text("abcdefghijkl", 3) == ["abcdefghij", "kl"]

    def test_wide_characters_count_two_columns(self):
        # Each CJK glyph is two cells wide: five fit in ten columns
        lines = wrap_text("日" * 7, 10)
        assert lines == ["日" * 5, "日" * 2]
        assert all(cell_len(line) <= 10 for line in lines)

    def test_wide_character_never_split_across_boundary(self):
        # Nine narrow cells leave one column: the wide glyph starts the next chunk
        lines = wrap_text("a" * 9 + "日" + "b", 10)
        assert lines == ["a" * 9, "日b"]

    def test_emoji_is_measured_by_display_width(self):
        lines = wrap_text("😀😀😀😀😀😀", 10)
        assert lines == ["😀" * 5, "😀"]

    @given(sentences, widths)
    def test_lines_never_exceed_width(self, text: str, width: int):
        """Property: every line fits unless it is one over-wide character."""
        for line in wrap_text(text, width):
            if cell_len(line) > width:
                assert len(line) == 1
                assert get_character_cell_size(line) > width

    @given(st.lists(st.text(alphabet="abcdefgh", min_size=1, max_size=10), min_size=1), widths)
    def test_rejoining_lines_restores_words(self, word_list: list[str], width: int):
        """Property: with no over-long words, lines rejoin to the word sequence."""
        text = "  ".join(word_list)
        assert " ".join(wrap_text(text, width)) == " ".join(text.split())

    @given(sentences, widths)
    def test_no_characters_are_dropped(self, text: str, width: int):
        """Property: all non-space characters survive wrapping in order."""
        joined = "".join(wrap_text(text, width)).replace(" ", "")
        assert joined == text.replace(" ", "")

    @given(st.text(), widths)
    def test_always_returns_at_least_one_line(self, text: str, width: int):
        assert len(wrap_text(text, width)) >= 1

    @given(sentences, widths)
    def test_wrapping_is_deterministic(self, text: str, width: int):
        assert wrap_text(text, width) == wrap_text(text, width)
