"""Unicode-aware word wrapping.

Hides how text is split into display lines. All measurements are in
terminal cells as reported by Rich, so wide glyphs (CJK, emoji) count for
two columns and combining marks for none.
"""

from rich.cells import cell_len, get_character_cell_size

from .config import MIN_WRAP_WIDTH


def _split_long_word(word: str, width: int) -> list[str]:
    """Break a word wider than ``width`` into successive chunks.

    Each chunk is filled greedily up to ``width`` cells. A character that is
    wider than ``width`` on its own is emitted as a chunk by itself.
    """
    chunks: list[str] = []
    current: list[str] = []
    current_width = 0

    for char in word:
        char_width = get_character_cell_size(char)
        if current and current_width + char_width > width:
            chunks.append("".join(current))
            current = []
            current_width = 0
        current.append(char)
        current_width += char_width

    if current:
        chunks.append("".join(current))
    return chunks


def wrap_text(text: str, width: int) -> list[str]:
    """Wrap text into lines no wider than ``width`` display cells.

    Words are separated by any run of whitespace and re-joined with single
    spaces. Words that do not fit on a line of their own are broken into
    chunks. ``width`` is raised to ``MIN_WRAP_WIDTH`` when smaller.

    Args:
        text: Text to wrap
        width: Column budget per line

    Returns:
        Wrapped lines. Always at least one (empty input yields ``[""]``).
    """
    width = max(width, MIN_WRAP_WIDTH)
    lines: list[str] = []
    current_line = ""
    current_width = 0

    for word in text.split():
        word_width = cell_len(word)

        if word_width > width:
            if current_line:
                lines.append(current_line)
                current_line = ""
                current_width = 0
            lines.extend(_split_long_word(word, width))
        elif not current_line:
            current_line = word
            current_width = word_width
        elif current_width + 1 + word_width <= width:
            current_line = f"{current_line} {word}"
            current_width += 1 + word_width
        else:
            lines.append(current_line)
            current_line = word
            current_width = word_width

    if current_line:
        lines.append(current_line)

    if not lines:
        lines.append("")

    return lines
