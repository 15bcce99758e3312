"""Hosting provider session backed by the GitHub CLI (gh)."""

from ..models.interfaces import CommandResult, HostingSessionInterface
from .command_runner import CommandRunner


class GhSession(HostingSessionInterface):
    """Checks and establishes a ``gh`` session.

    The token is written to ``gh auth login --with-token`` on stdin; it never
    appears in the argument list.
    """

    def __init__(self, runner: CommandRunner | None = None, executable: str = "gh"):
        self.runner = runner or CommandRunner()
        self.executable = executable

    def is_available(self) -> bool:
        return self.runner.which(self.executable) is not None

    def is_active(self) -> bool:
        if not self.is_available():
            return False
        result = self.runner.run([self.executable, "auth", "status"], tolerated=True)
        return result.ok

    def login(self, token: str) -> CommandResult:
        if not self.is_available():
            return CommandResult(
                args=[self.executable, "auth", "login", "--with-token"],
                returncode=127,
                stderr=f"{self.executable} is not installed",
            )
        return self.runner.run(
            [self.executable, "auth", "login", "--with-token"],
            input_text=token + "\n",
        )
