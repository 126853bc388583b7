"""Inline emphasis parsing.

Only one marker is understood: a pair of asterisks (``**bold**``). Anything
else, including an unterminated pair, is kept as literal text so no
characters are ever lost.
"""

from rich.style import Style
from rich.text import Text

from .config import TEXT_COLOR
from .models import RunStyle, StyledRun

MARKER = "**"


def parse_markup(line: str) -> list[StyledRun]:
    """Split a line into plain and bold runs.

    A marker opens bold mode and the next marker closes it, so bold spans
    do not nest. When no closing marker follows, the opening marker and the
    rest of the line are emitted as plain text.

    Args:
        line: A single display line

    Returns:
        Runs in left-to-right order. Empty runs are never emitted.
    """
    runs: list[StyledRun] = []
    plain: list[str] = []
    pos = 0

    while pos < len(line):
        start = line.find(MARKER, pos)
        if start == -1:
            plain.append(line[pos:])
            break

        end = line.find(MARKER, start + len(MARKER))
        if end == -1:
            plain.append(line[pos:])
            break

        plain.append(line[pos:start])
        if any(plain):
            runs.append(StyledRun("".join(plain)))
        plain = []

        bold = line[start + len(MARKER):end]
        if bold:
            runs.append(StyledRun(bold, RunStyle.BOLD))
        pos = end + len(MARKER)

    if any(plain):
        runs.append(StyledRun("".join(plain)))

    return runs


def strip_markup(line: str) -> str:
    """Return the visible text of a line, without emphasis markers."""
    return "".join(run.text for run in parse_markup(line))


def runs_to_text(runs: list[StyledRun], color: str = TEXT_COLOR) -> Text:
    """Convert runs to a Rich ``Text`` in the given foreground color."""
    text = Text()
    plain_style = Style(color=color)
    bold_style = Style(color=color, bold=True)
    for run in runs:
        text.append(run.text, bold_style if run.style is RunStyle.BOLD else plain_style)
    return text
