"""zedbridge exception hierarchy.

Discovery, probing and coverage checks never raise: their failures are
reported as data (``None``, unknown versions, coverage results). The
exceptions below cover the few places where a caller has handed us
something we cannot work with.
"""


class ZedBridgeError(Exception):
    """Base exception for all zedbridge errors."""


class ConfigError(ZedBridgeError):
    """Raised when an editor settings file cannot be loaded.

    Covers unreadable files, YAML syntax errors, documents of the wrong
    shape, and unknown project-generation flag names.
    """
