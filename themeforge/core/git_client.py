"""Version-control client backed by the git command line."""

from pathlib import Path

from ..models.interfaces import CommandResult, VersionControlClientInterface
from .command_runner import CommandRunner


class GitClient(VersionControlClientInterface):
    """Runs git subcommands. The exit status is the only signal consulted."""

    def __init__(self, runner: CommandRunner | None = None, executable: str = "git"):
        self.runner = runner or CommandRunner()
        self.executable = executable

    def _git(self, repo_path: Path | None, *args: str, tolerated: bool = False) -> CommandResult:
        return self.runner.run([self.executable, *args], cwd=repo_path, tolerated=tolerated)

    def is_available(self) -> bool:
        return self.runner.which(self.executable) is not None

    def init(self, repo_path: Path) -> CommandResult:
        return self._git(repo_path, "init")

    def add_all(self, repo_path: Path) -> CommandResult:
        return self._git(repo_path, "add", "--all")

    def commit(self, repo_path: Path, message: str) -> CommandResult:
        return self._git(repo_path, "commit", "-m", message, tolerated=True)

    def rename_branch(self, repo_path: Path, branch: str) -> CommandResult:
        return self._git(repo_path, "branch", "-M", branch)

    def set_remote(self, repo_path: Path, name: str, url: str) -> CommandResult:
        """Replace the remote ``name``; a missing remote is not an error."""
        self._git(repo_path, "remote", "remove", name, tolerated=True)
        return self._git(repo_path, "remote", "add", name, url)

    def push(self, repo_path: Path, remote: str, branch: str) -> CommandResult:
        return self._git(repo_path, "push", "-u", remote, branch)

    def clone_mirror(self, url: str, destination: Path) -> CommandResult:
        return self._git(destination.parent, "clone", "--mirror", url, str(destination))

    def expire_reflog(self, repo_path: Path) -> CommandResult:
        return self._git(repo_path, "reflog", "expire", "--expire=now", "--all")

    def gc(self, repo_path: Path) -> CommandResult:
        return self._git(repo_path, "gc", "--prune=now", "--aggressive")

    def push_mirror(self, repo_path: Path, url: str) -> CommandResult:
        return self._git(repo_path, "push", "--force", "--mirror", url)
