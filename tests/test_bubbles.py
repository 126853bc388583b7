"""Tests for bubble rendering and conversation layout."""
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from rich.cells import cell_len

from gemchat.ui.bubbles import (
    LoadingIndicator,
    render_bubble,
    render_conversation,
    render_loading,
    render_message,
    spinner_glyph,
)
from gemchat.ui.config import SPINNER_FRAMES
from gemchat.ui.models import ChatMessage, Sender
from gemchat.ui.state import AppState


def assert_rectangular(lines: list[str]) -> None:
    widths = {cell_len(line) for line in lines}
    assert len(widths) == 1, f"ragged bubble: {widths}"


class TestRemoteBubble:
    """Tests for left-aligned remote bubbles."""

    def test_structure(self, remote_message):
        lines = render_message(remote_message, 80).plain_lines()

        assert lines[0].startswith("╭─ 🤖 Gemini 14:03:09 ")
        assert lines[0].endswith("╮")
        assert lines[-1].startswith("╰") and lines[-1].endswith("╯")
        for body in lines[1:-1]:
            assert body.startswith("│ ") and body.endswith(" │")

    def test_is_rectangular(self, remote_message):
        assert_rectangular(render_message(remote_message, 40).plain_lines())

    def test_is_left_aligned(self, remote_message):
        lines = render_message(remote_message, 120).plain_lines()
        assert all(not line.startswith(" ") for line in lines)

    def test_markers_are_not_displayed(self, remote_message):
        body = "".join(render_message(remote_message, 200).plain_lines()[1:-1])
        assert "**" not in body
        assert "doing great" in body

    def test_bold_runs_are_styled(self, remote_message):
        bubble = render_message(remote_message, 200)
        body = bubble.lines[1]
        bold = [body.plain[span.start:span.end] for span in body.spans if span.style.bold]
        assert "doing great" in bold

    def test_content_wraps_to_area(self, fixed_time):
        message = ChatMessage("word " * 40, Sender.REMOTE, fixed_time)
        bubble = render_message(message, 40)
        assert bubble.height > 3
        assert bubble.width <= 40

    def test_short_message_is_widened_to_header(self, fixed_time):
        message = ChatMessage("ok", Sender.REMOTE, fixed_time)
        lines = render_message(message, 80).plain_lines()
        assert "🤖 Gemini 14:03:09" in lines[0]
        assert_rectangular(lines)

    def test_wide_glyphs_keep_borders_aligned(self, fixed_time):
        message = ChatMessage("日本語のテキスト mixed with ascii 😀 and more 日本語", Sender.REMOTE, fixed_time)
        assert_rectangular(render_message(message, 30).plain_lines())

    def test_empty_message_renders_one_body_line(self, fixed_time):
        bubble = render_message(ChatMessage("", Sender.REMOTE, fixed_time), 60)
        assert bubble.height == 3


class TestUserBubble:
    """Tests for right-aligned user bubbles."""

    def test_header_and_prefix(self, user_message):
        lines = render_message(user_message, 80).plain_lines()
        assert "╭─ You 14:03:09 " in lines[0]
        assert "│ You: Hello Gemini!" in lines[1]

    def test_is_right_aligned(self, user_message):
        lines = render_message(user_message, 80).plain_lines()
        assert all(cell_len(line) == 80 for line in lines)
        assert all(line.startswith(" ") for line in lines)
        assert all(line.endswith(("╮", "│", "╯")) for line in lines)

    def test_prefix_is_bold(self, user_message):
        body = render_message(user_message, 80).lines[1]
        bold = [body.plain[span.start:span.end] for span in body.spans if span.style.bold]
        assert "You: " in bold

    def test_every_wrapped_line_has_prefix(self, fixed_time):
        message = ChatMessage("lorem ipsum " * 20, Sender.USER, fixed_time)
        lines = render_message(message, 50).plain_lines()
        assert len(lines) > 3
        assert all("You: " in line for line in lines[1:-1])


class TestLoadingBubble:
    """Tests for the spinner bubble."""

    def test_contents(self):
        lines = render_loading(0, 80).plain_lines()
        assert "Gemini is thinking..." in lines[0]
        assert f"{SPINNER_FRAMES[0]} Processing your message..." in lines[1]
        assert len(lines) == 3

    def test_spinner_cycles_with_frame(self):
        assert spinner_glyph(0) == spinner_glyph(len(SPINNER_FRAMES))
        assert render_loading(3, 80).plain_lines()[1] != render_loading(4, 80).plain_lines()[1]

    def test_render_bubble_dispatches_loading_indicator(self):
        assert render_bubble(LoadingIndicator(7), 80).plain_lines() == render_loading(7, 80).plain_lines()


class TestBubbleGeometry:
    """Property tests for borders and padding."""

    @settings(max_examples=50)
    @given(
        st.text(alphabet=st.sampled_from("ab 日😀*"), max_size=120),
        st.integers(min_value=20, max_value=120),
        st.sampled_from(list(Sender)),
    )
    def test_every_bubble_is_a_rectangle(self, content: str, width: int, sender: Sender):
        lines = render_bubble(ChatMessage(content, sender), width).plain_lines()
        assert_rectangular(lines)

    @settings(max_examples=50)
    @given(st.text(alphabet=st.sampled_from("abc 日"), max_size=200), st.integers(min_value=30, max_value=120))
    def test_user_bubble_fills_area_exactly(self, content: str, width: int):
        lines = render_bubble(ChatMessage(content, Sender.USER), width).plain_lines()
        assert all(cell_len(line) == width for line in lines)


class TestConversationLayout:
    """Tests for render_conversation."""

    def test_empty_state_has_no_lines(self):
        layout = render_conversation(AppState(), 80)
        assert layout.lines == []
        assert layout.anchors == []

    def test_anchors_point_at_top_borders(self):
        state = AppState()
        state.append_message("first", Sender.USER)
        state.append_message("second reply", Sender.REMOTE)

        layout = render_conversation(state, 80)

        assert len(layout.anchors) == 2
        for anchor in layout.anchors:
            assert "╭─" in layout.lines[anchor].plain
        # Three bubble lines plus one separator each
        assert layout.anchors == [0, 4]
        assert len(layout.lines) == 8

    def test_loading_bubble_appended_after_messages(self):
        state = AppState()
        state.append_message("question", Sender.USER)
        state.is_loading = True

        layout = render_conversation(state, 80)

        assert len(layout.anchors) == 1
        assert "Gemini is thinking..." in layout.lines[4].plain
        assert len(state.messages) == 1

    @pytest.mark.parametrize("width", [1, 5, 12])
    def test_tiny_area_does_not_crash(self, width: int):
        state = AppState()
        state.append_message("some text that is long", Sender.USER)
        state.append_message("reply", Sender.REMOTE)
        state.is_loading = True
        layout = render_conversation(state, width)
        assert layout.lines
