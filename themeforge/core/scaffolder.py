"""Scaffold-and-publish workflow."""

from dataclasses import dataclass, field
from pathlib import Path

from ..models.config import ScaffoldSettings
from ..models.exceptions import (
    AuthenticationFailedError,
    CommandFailedError,
    MissingCredentialError,
    PushFailedError,
)
from ..models.interfaces import (
    ArchiveResult,
    ArchiverInterface,
    AuthMethod,
    AuthStatus,
    CommandResult,
    HostingSessionInterface,
    SecretSourceInterface,
    VersionControlClientInterface,
)
from ..models.theme import ThemeLayout
from ..utils.file_ops import FileOperations
from ..utils.logger import get_logger
from .theme_builder import ThemeBuilder

REMOTE_NAME = "origin"


@dataclass
class ScaffoldResult:
    """What a scaffold run produced."""

    theme_path: Path
    auth_method: AuthMethod
    written_files: list[Path] = field(default_factory=list)
    copied_assets: list[Path] = field(default_factory=list)
    skipped_assets: list[str] = field(default_factory=list)
    archive: ArchiveResult | None = None
    committed: bool = False
    remote_url: str | None = None
    branch: str | None = None


class Scaffolder:
    """Builds a theme tree, archives it and publishes it as a fresh repository.

    Steps run strictly in order and each external call blocks. Fatal errors
    stop the run without rolling back what was already written.
    """

    def __init__(
        self,
        settings: ScaffoldSettings,
        session: HostingSessionInterface,
        vcs: VersionControlClientInterface,
        archiver: ArchiverInterface,
        token_source: SecretSourceInterface,
        file_ops: FileOperations | None = None,
        layout: ThemeLayout | None = None,
    ):
        self.settings = settings
        self.session = session
        self.vcs = vcs
        self.archiver = archiver
        self.token_source = token_source
        self.file_ops = file_ops or FileOperations()
        self.layout = layout or ThemeLayout(store_name=settings.store_name)
        self.builder = ThemeBuilder(self.layout)

    def run(self) -> ScaffoldResult:
        """Execute the whole workflow."""
        logger = get_logger()
        self.settings.validate()
        remote_url = self.settings.remote_url()

        auth_status = self.check_credentials()

        theme_path = self.settings.theme_path
        result = ScaffoldResult(theme_path=theme_path, auth_method=auth_status.method)

        logger.info(f"Creating theme directory at: {theme_path}")
        self.file_ops.reset_directory(theme_path, self.layout.subdirectories)

        result.copied_assets, result.skipped_assets = self.copy_assets(theme_path)
        result.written_files = self.write_templates(theme_path)

        archive = self.archiver.archive(theme_path, self.settings.archive_path)
        if archive.success:
            logger.info(f"Theme ZIP created at {archive.path}")
        else:
            logger.warning(f"Could not create theme ZIP (continuing): {archive.error}", archive_path=str(archive.path))
        result.archive = archive

        result.committed = self.publish(theme_path, auth_status, remote_url)
        result.remote_url = remote_url
        result.branch = self.settings.branch

        logger.log_operation(
            operation="scaffold",
            status="success",
            details={
                "theme_path": str(theme_path),
                "files_written": len(result.written_files),
                "assets_copied": len(result.copied_assets),
                "archive_created": archive.success,
                "remote_url": remote_url,
            },
        )
        return result

    def check_credentials(self) -> AuthStatus:
        """Determine how the hosting provider can be reached.

        Raises:
            MissingCredentialError: If there is neither a session nor a token
            AuthenticationFailedError: If the token cannot establish a session
        """
        logger = get_logger()

        if self.session.is_active():
            logger.debug("Existing hosting session found")
            return AuthStatus(authenticated=True, method=AuthMethod.SESSION)

        token = self.token_source.get_secret()
        if not token:
            raise MissingCredentialError(token_env_var=self.settings.token_env_var)

        if not self.session.is_available():
            raise AuthenticationFailedError(
                "Cannot use the provided access token: the gh CLI is not installed.",
            )

        logger.info("Authenticating gh CLI using provided access token (local only)...")
        login = self.session.login(token)
        if not login.ok:
            raise AuthenticationFailedError(stderr=login.stderr.strip() or None)

        return AuthStatus(authenticated=True, method=AuthMethod.TOKEN)

    def copy_assets(self, theme_path: Path) -> tuple[list[Path], list[str]]:
        """Copy the optional binary assets that exist in the asset source."""
        logger = get_logger()
        copied: list[Path] = []
        skipped: list[str] = []
        assets_dir = theme_path / "assets"

        for name in self.layout.optional_assets:
            destination = self.file_ops.copy_if_present(self.settings.assets_source / name, assets_dir)
            if destination is None:
                logger.info(f"{name} not found in {self.settings.assets_source}, skipping")
                skipped.append(name)
            else:
                logger.info(f"Copied {name}")
                copied.append(destination)
        return copied, skipped

    def write_templates(self, theme_path: Path) -> list[Path]:
        """Write every generated file of the theme."""
        logger = get_logger()
        written: list[Path] = []
        for template in self.builder.build():
            target = template.target(theme_path)
            self.file_ops.safe_write_file(target, template.content)
            logger.log_file_written(str(template.relative_path), "generated")
            written.append(target)
        logger.info(f"Created {len(written)} theme files")
        return written

    def publish(self, theme_path: Path, auth_status: AuthStatus, remote_url: str) -> bool:
        """Initialize a fresh repository at ``theme_path`` and push it.

        Returns:
            Whether the commit succeeded

        Raises:
            MissingCredentialError: If ``auth_status`` is not authenticated
            CommandFailedError: If a local git step fails
            PushFailedError: If the push fails
        """
        logger = get_logger()
        if not auth_status.authenticated:
            raise MissingCredentialError(
                "Refusing to publish without an authenticated session.",
                token_env_var=self.settings.token_env_var,
            )

        if self.file_ops.remove_tree(theme_path / ".git"):
            logger.info("Existing git data found, removed to start fresh")

        self._require(self.vcs.init(theme_path), "git init failed")
        self._require(self.vcs.add_all(theme_path), "git add failed")

        commit = self.vcs.commit(theme_path, self.settings.commit_message)
        if not commit.ok:
            logger.info("No changes to commit or commit failed")

        self._require(self.vcs.rename_branch(theme_path, self.settings.branch), "git branch rename failed")
        self._require(self.vcs.set_remote(theme_path, REMOTE_NAME, remote_url), "Could not set remote origin")

        logger.info(f"Pushing to {remote_url}...")
        push = self.vcs.push(theme_path, REMOTE_NAME, self.settings.branch)
        if not push.ok:
            raise PushFailedError(
                f"Push to {remote_url} failed",
                remote_url=remote_url,
                stderr=push.stderr.strip() or None,
            )
        logger.info(f"Theme pushed to {remote_url}")
        return commit.ok

    @staticmethod
    def _require(result: CommandResult, message: str) -> None:
        if not result.ok:
            raise CommandFailedError(
                message,
                command=" ".join(result.args[:2]),
                returncode=result.returncode,
                stderr=result.stderr.strip() or None,
            )
