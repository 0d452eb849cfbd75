"""Exception types for configuration and programming errors.

Input problems (missing paths, unreadable or unparseable files) are never
raised; they are logged and turn into "no findings" for the affected file.
"""


class CodeAnalyzerError(Exception):
    """Base class for errors surfaced to the caller."""


class ConfigError(CodeAnalyzerError, ValueError):
    """A configuration value cannot be used (bad threshold, malformed allow-list entry)."""
