"""Shared fakes for themeforge tests."""

from pathlib import Path

import pytest

from themeforge.models.config import RedactSettings, ScaffoldSettings
from themeforge.models.interfaces import (
    ArchiveResult,
    ArchiverInterface,
    CommandResult,
    HistoryRewriterInterface,
    HostingSessionInterface,
    ReplacementRule,
    VersionControlClientInterface,
)


def ok(*args: str) -> CommandResult:
    return CommandResult(args=list(args), returncode=0)


def failed(*args: str, stderr: str = "boom") -> CommandResult:
    return CommandResult(args=list(args), returncode=1, stderr=stderr)


class FakeSession(HostingSessionInterface):
    def __init__(self, active: bool = False, available: bool = True, login_ok: bool = True):
        self.active = active
        self.available = available
        self.login_ok = login_ok
        self.login_tokens: list[str] = []

    def is_available(self) -> bool:
        return self.available

    def is_active(self) -> bool:
        return self.active

    def login(self, token: str) -> CommandResult:
        self.login_tokens.append(token)
        if self.login_ok:
            self.active = True
            return ok("gh", "auth", "login")
        return failed("gh", "auth", "login", stderr="bad credentials")


class FakeVCS(VersionControlClientInterface):
    """Records calls; individual steps can be made to fail by name."""

    def __init__(self, fail: set[str] | None = None):
        self.fail = fail or set()
        self.calls: list[tuple] = []

    def _result(self, name: str, *args) -> CommandResult:
        self.calls.append((name, *args))
        if name in self.fail:
            return failed("git", name)
        return ok("git", name)

    @property
    def call_names(self) -> list[str]:
        return [call[0] for call in self.calls]

    def init(self, repo_path: Path) -> CommandResult:
        return self._result("init", repo_path)

    def add_all(self, repo_path: Path) -> CommandResult:
        return self._result("add_all", repo_path)

    def commit(self, repo_path: Path, message: str) -> CommandResult:
        return self._result("commit", repo_path, message)

    def rename_branch(self, repo_path: Path, branch: str) -> CommandResult:
        return self._result("rename_branch", repo_path, branch)

    def set_remote(self, repo_path: Path, name: str, url: str) -> CommandResult:
        return self._result("set_remote", repo_path, name, url)

    def push(self, repo_path: Path, remote: str, branch: str) -> CommandResult:
        return self._result("push", repo_path, remote, branch)

    def clone_mirror(self, url: str, destination: Path) -> CommandResult:
        if "clone_mirror" not in self.fail:
            destination.mkdir(parents=True, exist_ok=True)
        return self._result("clone_mirror", url, destination)

    def expire_reflog(self, repo_path: Path) -> CommandResult:
        return self._result("expire_reflog", repo_path)

    def gc(self, repo_path: Path) -> CommandResult:
        return self._result("gc", repo_path)

    def push_mirror(self, repo_path: Path, url: str) -> CommandResult:
        return self._result("push_mirror", repo_path, url)


class FakeRewriter(HistoryRewriterInterface):
    def __init__(self, available: bool = True, succeed: bool = True):
        self.available = available
        self.succeed = succeed
        self.rules: list[ReplacementRule] = []
        self.rules_file_contents: list[str] = []

    def is_available(self) -> bool:
        return self.available

    def rewrite(self, repo_path: Path, rule: ReplacementRule, rules_file: Path) -> CommandResult:
        self.rules.append(rule)
        self.rules_file_contents.append(rule.to_line())
        if self.succeed:
            return ok("git-filter-repo", "--replace-text")
        return failed("git-filter-repo", "--replace-text")


class FakeArchiver(ArchiverInterface):
    def __init__(self, succeed: bool = True):
        self.succeed = succeed
        self.calls: list[tuple[Path, Path]] = []

    def archive(self, source_dir: Path, destination: Path) -> ArchiveResult:
        self.calls.append((source_dir, destination))
        if self.succeed:
            return ArchiveResult(path=destination, success=True)
        return ArchiveResult(path=destination, success=False, error="zip unavailable")


@pytest.fixture
def scaffold_settings(tmp_path: Path) -> ScaffoldSettings:
    """Scaffold settings pointing into a temporary directory."""
    assets = tmp_path / "Downloads"
    assets.mkdir()
    return ScaffoldSettings(
        base_path=tmp_path / "Desktop",
        assets_source=assets,
        repository="octo/shop-theme",
    )


@pytest.fixture
def redact_settings() -> RedactSettings:
    return RedactSettings(repository_url="https://github.com/octo/shop-theme.git")
