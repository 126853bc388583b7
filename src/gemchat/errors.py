"""Exception hierarchy for gemchat."""


class GemchatError(Exception):
    """Base class for gemchat errors."""


class ConfigError(GemchatError):
    """Configuration could not be read, parsed, written or is incomplete (fatal)."""


class TransportError(GemchatError):
    """The remote service failed or returned an unusable reply (non-fatal)."""
