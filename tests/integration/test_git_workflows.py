"""End-to-end workflows against real git repositories on the local filesystem."""

import shutil
import subprocess
import zipfile
from pathlib import Path

import pytest
from conftest import FakeSession

from themeforge.core.archiver import ZipArchiver
from themeforge.core.git_client import GitClient
from themeforge.core.history_rewriter import FilterRepoRewriter
from themeforge.core.redactor import HistoryRedactor
from themeforge.core.scaffolder import Scaffolder
from themeforge.core.secret_source import StaticSecretSource
from themeforge.models.config import RedactSettings, ScaffoldSettings

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")

SECRET = "ghp_0123456789abcdefLEAKED"


def git(cwd: Path, *args: str) -> str:
    completed = subprocess.run(["git", *args], cwd=cwd, capture_output=True, text=True, check=True)
    return completed.stdout


@pytest.fixture(autouse=True)
def isolated_git(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Give git a known identity and ignore the developer's own configuration."""
    global_config = tmp_path / "gitconfig"
    global_config.write_text("", encoding="utf-8")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(global_config))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    for prefix in ("GIT_AUTHOR", "GIT_COMMITTER"):
        monkeypatch.setenv(f"{prefix}_NAME", "Theme Tester")
        monkeypatch.setenv(f"{prefix}_EMAIL", "tester@example.invalid")


@pytest.fixture
def bare_origin(tmp_path: Path) -> Path:
    origin = tmp_path / "origin.git"
    subprocess.run(["git", "init", "--bare", str(origin)], capture_output=True, check=True)
    return origin


def test_scaffold_pushes_theme(tmp_path: Path, bare_origin: Path) -> None:
    assets = tmp_path / "Downloads"
    assets.mkdir()
    (assets / "favicon.ico").write_bytes(b"\x00\x00\x01\x00icon")
    settings = ScaffoldSettings(
        base_path=tmp_path / "Desktop",
        assets_source=assets,
        repository="octo/shop",
        remote_url_template=bare_origin.as_uri(),
    )
    scaffolder = Scaffolder(
        settings=settings,
        session=FakeSession(active=True),
        vcs=GitClient(),
        archiver=ZipArchiver(),
        token_source=StaticSecretSource(None),
    )

    result = scaffolder.run()

    assert result.committed
    files = set(git(bare_origin, "ls-tree", "-r", "--name-only", "main").split())
    assert "sections/age-verification.liquid" in files
    assert "assets/favicon.ico" in files
    assert "config/settings_schema.json" in files
    assert git(bare_origin, "log", "--format=%s", "main").strip() == settings.commit_message

    with zipfile.ZipFile(settings.archive_path) as zf:
        assert "sinful-lust-shopify-theme/layout/theme.liquid" in zf.namelist()


@pytest.mark.skipif(shutil.which("git-filter-repo") is None, reason="git-filter-repo is not installed")
def test_redaction_removes_secret_from_all_history(tmp_path: Path, bare_origin: Path) -> None:
    work = tmp_path / "work"
    subprocess.run(["git", "clone", str(bare_origin), str(work)], capture_output=True, check=True)
    (work / "deploy.sh").write_text(f"export GITHUB_PAT={SECRET}\n", encoding="utf-8")
    git(work, "add", "deploy.sh")
    git(work, "commit", "-m", "Add deploy script")
    (work / "deploy.sh").write_text("export GITHUB_PAT=$GITHUB_PAT\n", encoding="utf-8")
    git(work, "commit", "-am", "Stop hardcoding the token")
    git(work, "branch", "-M", "main")
    git(work, "push", "origin", "main")
    assert SECRET in git(bare_origin, "log", "--all", "-p")

    workspace = tmp_path / "scratch"
    redactor = HistoryRedactor(
        settings=RedactSettings(repository_url=bare_origin.as_uri()),
        vcs=GitClient(),
        rewriter=FilterRepoRewriter(),
        secret_source=StaticSecretSource(SECRET),
        confirm=lambda: "yes",
        workspace_factory=lambda: workspace.mkdir() or workspace,
    )

    result = redactor.run()

    history = git(bare_origin, "log", "--all", "-p")
    assert SECRET not in history
    assert "[REDACTED_TOKEN]" in history
    assert len(git(bare_origin, "log", "--format=%H", "main").split()) == 2
    assert not (workspace / "replacements.txt").exists()
    assert result.workspace_retained


@pytest.mark.skipif(shutil.which("git-filter-repo") is None, reason="git-filter-repo is not installed")
def test_pattern_like_secret_is_replaced_literally(tmp_path: Path, bare_origin: Path) -> None:
    work = tmp_path / "work"
    subprocess.run(["git", "clone", str(bare_origin), str(work)], capture_output=True, check=True)
    (work / "settings.env").write_text("pass=glob:pw*\nunrelated=pwd_rotation\n", encoding="utf-8")
    git(work, "add", "settings.env")
    git(work, "commit", "-m", "Add settings")
    git(work, "branch", "-M", "main")
    git(work, "push", "origin", "main")

    workspace = tmp_path / "scratch"
    redactor = HistoryRedactor(
        settings=RedactSettings(repository_url=bare_origin.as_uri()),
        vcs=GitClient(),
        rewriter=FilterRepoRewriter(),
        secret_source=StaticSecretSource("glob:pw*"),
        confirm=lambda: "yes",
        workspace_factory=lambda: workspace.mkdir() or workspace,
    )

    redactor.run()

    assert git(bare_origin, "show", "main:settings.env") == "pass=[REDACTED_TOKEN]\nunrelated=pwd_rotation\n"
