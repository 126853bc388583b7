"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, footer)

The palette mirrors the classic 16-color terminal look of the chat
bubbles: black background, green success, yellow warning.
"""

from textual.theme import Theme

TERMINAL_CLASSIC = Theme(
    name="terminal-classic",
    primary="#00afd7",      # Cyan - user bubbles, focus
    secondary="#d75fd7",    # Magenta - input and trace log
    accent="#ffd75f",       # Yellow - highlights
    foreground="#e4e4e4",   # Light text
    background="#000000",   # Plain black
    success="#5fd75f",      # Green - remote bubbles, idle status
    warning="#ffd700",      # Yellow - loading
    error="#ff5f5f",        # Red - errors
    surface="#121212",
    panel="#1c1c1c",
    dark=True,
    variables={
        "border": "#444444",
        "border-blurred": "#303030",
        "scrollbar": "#303030",
        "scrollbar-hover": "#444444",
        "scrollbar-active": "#00afd7",
        "scrollbar-background": "#121212",
        "scrollbar-corner-color": "#121212",
        "footer-foreground": "#bcbcbc",
        "footer-background": "#000000",
        "footer-key-foreground": "#ffd75f",
        "footer-key-background": "#303030",
        "text-muted": "#808080",
    },
)
