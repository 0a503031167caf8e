"""
Custom exceptions for passgen.
"""


class PassgenException(Exception):
    """Base exception for passgen."""

    pass


class ConfigurationError(PassgenException):
    """Invalid option value or option combination."""

    pass


class EmptyCharsetError(ConfigurationError):
    """Exclusions removed every character of every enabled class."""

    pass


class WordListError(PassgenException):
    """Word list missing, unreadable or without usable words."""

    pass


class OutputError(PassgenException):
    """Output file could not be written."""

    pass


class ClipboardUnavailableError(PassgenException):
    """No clipboard mechanism available."""

    pass
