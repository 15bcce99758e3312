"""History-redaction workflow."""

import tempfile
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..models.config import RedactSettings
from ..models.exceptions import (
    AbortedByOperatorError,
    CommandFailedError,
    MissingDependencyError,
    PushFailedError,
)
from ..models.interfaces import (
    LINE_BREAKS,
    CommandResult,
    HistoryRewriterInterface,
    ReplacementRule,
    SecretSourceInterface,
    VersionControlClientInterface,
)
from ..utils.file_ops import FileOperations
from ..utils.logger import get_logger
from .history_rewriter import INSTALL_HINT

CONFIRMATION_WORD = "yes"
MIRROR_DIRNAME = "repo.git"
RULES_FILENAME = "replacements.txt"


@dataclass
class RedactionResult:
    """Where the rewritten mirror lives and what was pushed."""

    remote_url: str
    workspace: Path
    mirror_path: Path
    placeholder: str
    workspace_retained: bool = True


class HistoryRedactor:
    """Rewrites a remote repository's history to replace a leaked secret.

    Rewriting history does not revoke a credential, so the operator must
    confirm revocation first. Nothing is retried: every failure after the
    clone is fatal and leaves the workspace for inspection.
    """

    def __init__(
        self,
        settings: RedactSettings,
        vcs: VersionControlClientInterface,
        rewriter: HistoryRewriterInterface,
        secret_source: SecretSourceInterface,
        confirm: Callable[[], str],
        file_ops: FileOperations | None = None,
        workspace_factory: Callable[[], Path] | None = None,
    ):
        self.settings = settings
        self.vcs = vcs
        self.rewriter = rewriter
        self.secret_source = secret_source
        self.confirm = confirm
        self.file_ops = file_ops or FileOperations()
        self.workspace_factory = workspace_factory or _make_workspace

    def run(self) -> RedactionResult:
        """Execute the whole workflow.

        Raises:
            AbortedByOperatorError: If revocation is not confirmed or no secret is entered
            MissingDependencyError: If the history-rewriting tool is missing
            CommandFailedError: If clone, rewrite or compaction fails
            PushFailedError: If the force-push fails
        """
        logger = get_logger()
        self.settings.validate()
        remote_url = str(self.settings.repository_url)

        answer = self.confirm()
        if answer.strip() != CONFIRMATION_WORD:
            raise AbortedByOperatorError(
                "Abort: revoke the token first, then run this command again.",
                reason="revocation_not_confirmed",
            )

        if not self.rewriter.is_available():
            raise MissingDependencyError("git-filter-repo", install_hint=INSTALL_HINT)

        secret = self.secret_source.get_secret()
        if not secret:
            raise AbortedByOperatorError("No token entered; aborting.", reason="empty_secret")
        if LINE_BREAKS.intersection(secret):
            raise AbortedByOperatorError("The token contains a line break; aborting.", reason="multiline_secret")
        rule = ReplacementRule(secret=secret, placeholder=self.settings.placeholder)

        workspace = self.workspace_factory()
        mirror_path = workspace / MIRROR_DIRNAME
        logger.info("Mirror-cloning repository...", workspace=str(workspace))
        self._require(self.vcs.clone_mirror(remote_url, mirror_path), "Mirror clone failed")

        logger.info("Running git-filter-repo to remove the token from history...")
        self._require(
            self.rewriter.rewrite(mirror_path, rule, workspace / RULES_FILENAME),
            "History rewrite failed",
        )

        logger.info("Expiring reflog and running gc...")
        self._require(self.vcs.expire_reflog(mirror_path), "Reflog expiry failed")
        self._require(self.vcs.gc(mirror_path), "Garbage collection failed")

        logger.info("Force-pushing cleaned history back to origin (mirror)...")
        push = self.vcs.push_mirror(mirror_path, remote_url)
        if not push.ok:
            raise PushFailedError(
                f"Force-push of rewritten history to {remote_url} failed",
                remote_url=remote_url,
                stderr=push.stderr.strip() or None,
            )

        result = RedactionResult(
            remote_url=remote_url,
            workspace=workspace,
            mirror_path=mirror_path,
            placeholder=rule.placeholder,
        )
        if self.settings.cleanup:
            self.file_ops.remove_tree(workspace)
            result.workspace_retained = False
            logger.info(f"Removed workspace {workspace}")
        else:
            logger.info(f"Workspace kept for inspection: {workspace}")

        logger.log_operation(
            operation="redact",
            status="success",
            details={"remote_url": remote_url, "workspace_retained": result.workspace_retained},
        )
        return result

    @staticmethod
    def _require(result: CommandResult, message: str) -> None:
        if not result.ok:
            raise CommandFailedError(
                message,
                command=" ".join(result.args[:2]),
                returncode=result.returncode,
                stderr=result.stderr.strip() or None,
            )


def _make_workspace() -> Path:
    return Path(tempfile.mkdtemp(prefix="themeforge-redact-"))
