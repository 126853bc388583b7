"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.

Layout: title (3 rows), chat (remaining), input (3 rows), status (3 rows),
with the trace log docked to the right when shown.
"""

APP_CSS = """
Screen {
    layout: vertical;
    background: $background;
    padding: 1;
}

/* ============================================
   Title Banner
   ============================================ */
#title {
    height: 3;
    width: 100%;
    content-align: center middle;
    text-style: bold;
    border: round $primary;
    background: black;
}

/* ============================================
   Chat Panel - Primary Focus Area
   ============================================ */
#chat-view {
    height: 1fr;
    background: black;
    border: round white;
    border-title-color: white;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    #chat-lines {
        width: 100%;
        height: auto;
    }
}

/* ============================================
   Input Line
   ============================================ */
#input-line {
    height: 3;
    border: round magenta;
    border-title-color: magenta;
    padding: 0 1;

    &:focus {
        border: round $accent;
    }
}

/* ============================================
   Status Bar
   ============================================ */
#status-bar {
    height: 3;
    border: round $success;
    border-title-color: $success;
    padding: 0 1;

    &.-loading {
        border: round $warning;
        border-title-color: $warning;
    }
}

/* ============================================
   Trace Log Panel
   ============================================ */
#debug-panel {
    dock: right;
    width: 45%;
    height: 100%;
    background: $panel;
    border: round $secondary 60%;
    border-title-color: $secondary;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    scrollbar-gutter: stable;
}
"""
