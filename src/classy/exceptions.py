"""Custom exceptions for classy."""


class ClassyError(Exception):
    """Base exception for classy operations."""


class ConfigError(ClassyError):
    """Invalid configuration value (flag or environment override)."""


class TraversalError(ClassyError):
    """Error while walking the source directory."""


class DocumentReadError(ClassyError):
    """A markup file could not be opened or read."""


class ParseError(ClassyError):
    """A markup file could not be parsed."""
