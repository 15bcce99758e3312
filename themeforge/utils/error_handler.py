"""Operator-facing error reporting with remediation guidance."""

import logging
from typing import Any

from rich.console import Console
from rich.markup import escape

from ..models.exceptions import (
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

logger = logging.getLogger(__name__)


class ErrorReporter:
    """Turns themeforge errors into readable messages with next steps."""

    def __init__(self, console: Console | None = None, show_messages: bool = True):
        """Initialize error reporter.

        Args:
            console: Console to print to (stderr by default)
            show_messages: Whether to print messages in addition to logging them
        """
        self.console = console or Console(stderr=True)
        self.show_messages = show_messages
        self.errors_encountered: list[dict[str, Any]] = []

    def report(self, error: ThemeforgeError, operation_name: str) -> int:
        """Record, log and print ``error``.

        Returns:
            Exit code to terminate with
        """
        self.errors_encountered.append(
            {"operation": operation_name, "error": str(error), "type": type(error).__name__},
        )
        logger.error(f"{operation_name} failed: {error}")

        if self.show_messages:
            self.console.print(f"\n[red]ERROR:[/red] {escape(str(error))}")
            for line in self.remediation(error):
                self.console.print(f"  {line}", markup=False)
            self.console.print()
        return error.exit_code

    def remediation(self, error: ThemeforgeError) -> list[str]:
        """Build the guidance shown beneath an error."""
        if isinstance(error, MissingCredentialError):
            env_var = error.details.get("token_env_var", "GITHUB_PAT")
            return [
                "Either run: gh auth login",
                "Or export a PAT locally before running (example):",
                f"  export {env_var}='your_token_here'",
            ]
        if isinstance(error, AuthenticationFailedError):
            lines = ["Ensure your token is valid and the gh CLI is installed (https://cli.github.com)."]
            if error.details.get("stderr"):
                lines.append(f"gh said: {error.details['stderr']}")
            return lines
        if isinstance(error, PushFailedError):
            lines = [
                "Authenticate with 'gh auth login' or export a valid token and re-run.",
                "Check that the remote repository exists and you have write access.",
            ]
            if error.details.get("stderr"):
                lines.append(f"git said: {error.details['stderr']}")
            return lines
        if isinstance(error, MissingDependencyError):
            hint = error.details.get("install_hint")
            lines = [f"Install it first: {hint}"] if hint else []
            lines.append("Or use the BFG Repo-Cleaner instead.")
            return lines
        if isinstance(error, AbortedByOperatorError):
            return ["Nothing was cloned, rewritten or pushed."]
        if isinstance(error, CommandFailedError):
            lines = [f"Command: {error.details.get('command', 'unknown')} (exit {error.details.get('returncode')})"]
            if error.details.get("stderr"):
                lines.append(f"Output: {error.details['stderr']}")
            lines.append("No retry was attempted. Inspect the state above and re-run when resolved.")
            return lines
        if isinstance(error, ConfigurationError):
            file_path = error.details.get("file_path")
            lines = [f"Check {file_path}"] if file_path else []
            lines.append("Run 'themeforge config' to see the effective settings.")
            return lines
        if isinstance(error, FileOperationError):
            return ["Check permissions on the target path."]
        return []
