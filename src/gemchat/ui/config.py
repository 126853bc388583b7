"""UI configuration constants.

Centralizes magic numbers and configuration values for the UI module.
"""


class LogLevel:
    """Log level constants with numeric values for comparison.

    Standard logging hierarchy: DEBUG < INFO < WARNING < ERROR
    Lower numeric value = more verbose (shows more messages).
    """

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    _names = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARNING",
        ERROR: "ERROR",
    }

    _from_string = {
        "debug": DEBUG,
        "info": INFO,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def name(cls, level: int) -> str:
        """Get the name for a log level."""
        return cls._names.get(level, "UNKNOWN")

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Convert string to log level. Returns DEBUG if invalid."""
        return cls._from_string.get(level_str.lower(), cls.DEBUG)


# Event loop timing
TICK_INTERVAL = 0.1  # Seconds between animation ticks / input poll timeout
ANIMATION_PERIOD = 100  # animation_frame wraps modulo this value

# Wrapping
MIN_WRAP_WIDTH = 10  # Floor for the column budget passed to wrap_text

# Bubble chrome
USER_CHROME_WIDTH = 10  # Columns reserved around user bubbles
REMOTE_CHROME_WIDTH = 8  # Columns reserved around remote bubbles
USER_PREFIX = "You: "
USER_LABEL = "You"
REMOTE_LABEL = "🤖 Gemini"
LOADING_LABEL = "Gemini is thinking..."
LOADING_TEXT = "Processing your message..."
SPINNER_FRAMES = ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")

# Bubble colors
USER_COLOR = "cyan"
REMOTE_COLOR = "green"
LOADING_COLOR = "yellow"
TEXT_COLOR = "white"

# Title banner
TITLE_TEXT = "GEMINI CHAT TUI"
RAINBOW_COLORS = ("red", "yellow", "green", "cyan", "blue", "magenta")

# Timestamps
TIMESTAMP_FORMAT = "%H:%M:%S"
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"

# Status bar text
STATUS_READY = "Ready to chat with Gemini! 🚀"
STATUS_SENDING = "Sending message to Gemini..."
STATUS_RECEIVED = "Response received! 🎉"
STATUS_ERROR = "Error occurred 😞"
STATUS_CANCELLED = "Message cancelled"
STATUS_DEMO = "Demo Mode - Press any key to continue, Ctrl+C to exit"

# Input line
INPUT_PLACEHOLDER = "Type your message here... (Press Enter to send, Ctrl+C to quit)"
