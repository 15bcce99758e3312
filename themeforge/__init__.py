"""
themeforge - scaffold and publish storefront themes, and scrub leaked secrets from history.
"""

# CLI import removed to avoid circular imports
from .core.redactor import HistoryRedactor, RedactionResult
from .core.scaffolder import Scaffolder, ScaffoldResult
from .models.exceptions import (
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
from .models.interfaces import (
    ArchiverInterface,
    AuthMethod,
    AuthStatus,
    CommandResult,
    HistoryRewriterInterface,
    HostingSessionInterface,
    ReplacementRule,
    SecretSourceInterface,
    VersionControlClientInterface,
)

__version__ = "0.1.0"
__description__ = "Scaffold and publish storefront themes, and scrub leaked secrets from repository history"

__all__ = [
    "AbortedByOperatorError",
    "ArchiverInterface",
    "AuthMethod",
    "AuthStatus",
    "AuthenticationFailedError",
    "CommandFailedError",
    "CommandResult",
    "ConfigurationError",
    "FileOperationError",
    "HistoryRedactor",
    "HistoryRewriterInterface",
    "HostingSessionInterface",
    "MissingCredentialError",
    "MissingDependencyError",
    "PushFailedError",
    "RedactionResult",
    "ReplacementRule",
    "ScaffoldResult",
    "Scaffolder",
    "SecretSourceInterface",
    "ThemeforgeError",
    "VersionControlClientInterface",
]
