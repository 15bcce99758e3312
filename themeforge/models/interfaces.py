"""Core interfaces that define system boundaries for themeforge."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

LINE_BREAKS = frozenset("\r\n")


class AuthMethod(Enum):
    """How the hosting provider session was obtained."""

    SESSION = "session"
    TOKEN = "token"
    NONE = "none"


@dataclass(frozen=True)
class AuthStatus:
    """Result of the credential check, consumed by the publish step."""

    authenticated: bool
    method: AuthMethod = AuthMethod.NONE

    @classmethod
    def unauthenticated(cls) -> "AuthStatus":
        return cls(authenticated=False, method=AuthMethod.NONE)


@dataclass
class CommandResult:
    """Outcome of a single external command invocation.

    ``args`` never carries credentials; those travel on stdin.
    """

    args: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@dataclass
class ArchiveResult:
    """Outcome of an archiving attempt."""

    path: Path
    success: bool
    error: str | None = None


@dataclass(frozen=True)
class ReplacementRule:
    """A single secret -> placeholder substitution applied across history."""

    secret: str = field(repr=False)
    placeholder: str = "[REDACTED_TOKEN]"

    def __post_init__(self) -> None:
        if not self.secret or LINE_BREAKS.intersection(self.secret):
            raise ValueError("Replacement secret must be non-empty and a single line")

    def to_line(self) -> str:
        """Render the rule in git-filter-repo's --replace-text format.

        The ``literal:`` prefix keeps a secret that itself starts with
        ``regex:`` or ``glob:`` from being read as a pattern.
        """
        return f"literal:{self.secret}==>{self.placeholder}\n"


class HostingSessionInterface(ABC):
    """Hosting provider command-line session (e.g. ``gh``)."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check whether the session tool is installed."""

    @abstractmethod
    def is_active(self) -> bool:
        """Check whether an authenticated session exists."""

    @abstractmethod
    def login(self, token: str) -> CommandResult:
        """Establish a session using the supplied access token."""


class VersionControlClientInterface(ABC):
    """Version-control client operations used by both workflows."""

    @abstractmethod
    def init(self, repo_path: Path) -> CommandResult:
        """Initialize a repository."""

    @abstractmethod
    def add_all(self, repo_path: Path) -> CommandResult:
        """Stage every file in the working tree."""

    @abstractmethod
    def commit(self, repo_path: Path, message: str) -> CommandResult:
        """Create a commit with the given message."""

    @abstractmethod
    def rename_branch(self, repo_path: Path, branch: str) -> CommandResult:
        """Force-rename the current branch."""

    @abstractmethod
    def set_remote(self, repo_path: Path, name: str, url: str) -> CommandResult:
        """Point the named remote at ``url``, replacing any existing entry."""

    @abstractmethod
    def push(self, repo_path: Path, remote: str, branch: str) -> CommandResult:
        """Push ``branch`` to ``remote`` and set upstream."""

    @abstractmethod
    def clone_mirror(self, url: str, destination: Path) -> CommandResult:
        """Clone ``url`` as a bare mirror into ``destination``."""

    @abstractmethod
    def expire_reflog(self, repo_path: Path) -> CommandResult:
        """Expire every reflog entry immediately."""

    @abstractmethod
    def gc(self, repo_path: Path) -> CommandResult:
        """Run aggressive garbage collection, pruning unreachable objects now."""

    @abstractmethod
    def push_mirror(self, repo_path: Path, url: str) -> CommandResult:
        """Force-push every ref of the mirror to ``url``."""


class HistoryRewriterInterface(ABC):
    """External history-rewriting utility."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check whether the utility is installed."""

    @abstractmethod
    def rewrite(self, repo_path: Path, rule: ReplacementRule, rules_file: Path) -> CommandResult:
        """Replace text across all history of ``repo_path``."""


class ArchiverInterface(ABC):
    """Best-effort archiving of a directory."""

    @abstractmethod
    def archive(self, source_dir: Path, destination: Path) -> ArchiveResult:
        """Compress ``source_dir`` into ``destination``. Never raises."""


class SecretSourceInterface(ABC):
    """Somewhere a sensitive value can be obtained from."""

    @abstractmethod
    def get_secret(self) -> str | None:
        """Return the secret, or None when this source has none."""
