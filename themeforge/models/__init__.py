"""Data models for themeforge."""

from .config import (
    RedactSettings,
    ScaffoldSettings,
    ThemeforgeSettings,
    parse_repository,
)
from .exceptions import (
    AbortedByOperatorError,
    AuthenticationFailedError,
    CommandFailedError,
    ConfigurationError,
    FileOperationError,
    MissingCredentialError,
    MissingDependencyError,
    PushFailedError,
    ThemeforgeError,
)
from .interfaces import (
    ArchiveResult,
    AuthMethod,
    AuthStatus,
    CommandResult,
    ReplacementRule,
)
from .theme import TemplateFile, ThemeLayout

__all__ = [
    "AbortedByOperatorError",
    "ArchiveResult",
    "AuthMethod",
    "AuthStatus",
    "AuthenticationFailedError",
    "CommandFailedError",
    "CommandResult",
    "ConfigurationError",
    "FileOperationError",
    "MissingCredentialError",
    "MissingDependencyError",
    "PushFailedError",
    "RedactSettings",
    "ReplacementRule",
    "ScaffoldSettings",
    "TemplateFile",
    "ThemeLayout",
    "ThemeforgeError",
    "ThemeforgeSettings",
    "parse_repository",
]
