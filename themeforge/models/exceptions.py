"""Exception hierarchy for themeforge."""

from typing import Any


class ThemeforgeError(Exception):
    """Base exception class for all themeforge errors.

    Attributes:
        message: Human-readable error message
        details: Additional error details for debugging
        exit_code: Suggested exit code for CLI
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None, exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.exit_code = exit_code

    def __str__(self) -> str:
        return self.message


class MissingCredentialError(ThemeforgeError):
    """Raised when neither a hosting session nor an access token is available."""

    def __init__(
        self,
        message: str = "No GitHub authentication available.",
        token_env_var: str | None = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        if token_env_var:
            self.details["token_env_var"] = token_env_var


class AuthenticationFailedError(ThemeforgeError):
    """Raised when a supplied access token cannot establish a hosting session."""

    def __init__(self, message: str = "gh auth login failed.", stderr: str | None = None, **kwargs):
        super().__init__(message, **kwargs)
        if stderr:
            self.details["stderr"] = stderr


class PushFailedError(ThemeforgeError):
    """Raised when pushing to the remote repository fails."""

    def __init__(self, message: str, remote_url: str | None = None, stderr: str | None = None, **kwargs):
        super().__init__(message, **kwargs)
        if remote_url:
            self.details["remote_url"] = remote_url
        if stderr:
            self.details["stderr"] = stderr


class MissingDependencyError(ThemeforgeError):
    """Raised when a required external tool is not installed."""

    def __init__(self, tool_name: str, install_hint: str | None = None, **kwargs):
        message = f"{tool_name} not found"
        super().__init__(message, **kwargs)
        self.details["tool_name"] = tool_name
        if install_hint:
            self.details["install_hint"] = install_hint


class AbortedByOperatorError(ThemeforgeError):
    """Raised when the operator declines to continue or supplies no input."""

    def __init__(self, message: str, reason: str | None = None, **kwargs):
        super().__init__(message, **kwargs)
        if reason:
            self.details["reason"] = reason


class CommandFailedError(ThemeforgeError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(
        self,
        message: str,
        command: str | None = None,
        returncode: int | None = None,
        stderr: str | None = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        if command:
            self.details["command"] = command
        if returncode is not None:
            self.details["returncode"] = returncode
        if stderr:
            self.details["stderr"] = stderr


class ConfigurationError(ThemeforgeError):
    """Raised when settings or the configuration file are invalid."""

    def __init__(self, message: str, file_path: str | None = None, **kwargs):
        super().__init__(message, **kwargs)
        if file_path:
            self.details["file_path"] = file_path


class FileOperationError(ThemeforgeError):
    """Exception raised during file operations.

    Used for directory reset, file writing, or permission issues.
    """

    def __init__(self, message: str, file_path: str | None = None, operation: str | None = None, **kwargs):
        super().__init__(message, **kwargs)
        if file_path:
            self.details["file_path"] = file_path
        if operation:
            self.details["operation"] = operation
