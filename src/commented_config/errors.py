"""Exceptions raised while loading or saving commented configuration files."""


class CommentedConfigError(Exception):
    """Base class for all commented-config errors."""


class ConfigArgumentError(CommentedConfigError, ValueError):
    """Raised when a path cannot hold a configuration file (e.g. it is a directory)."""


class ConfigIOError(CommentedConfigError, OSError):
    """Raised when a configuration file cannot be created, read or written."""


class ConfigParseError(CommentedConfigError, ValueError):
    """Raised when the encoded configuration text is not a valid YAML mapping."""
