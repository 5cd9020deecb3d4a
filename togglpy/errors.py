"""Exceptions raised by togglPy."""


class TogglPyError(Exception):
    """Base class for all togglPy errors."""


class ConfigError(TogglPyError):
    """A required setting is missing from the environment."""


class ParseError(TogglPyError):
    """A date expression could not be understood."""


class NetworkError(TogglPyError):
    """A request to the Toggl API failed."""


class DecodeError(TogglPyError):
    """A Toggl API response did not have the expected shape."""


class ExportError(TogglPyError):
    """A summary export file could not be written."""
