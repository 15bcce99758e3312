"""History rewriting backed by git-filter-repo."""

from pathlib import Path

from ..models.interfaces import CommandResult, HistoryRewriterInterface, ReplacementRule
from ..utils.logger import get_logger
from .command_runner import CommandRunner

INSTALL_HINT = "pip install git-filter-repo"


class FilterRepoRewriter(HistoryRewriterInterface):
    """Replaces text across every revision and ref with ``git-filter-repo --replace-text``."""

    def __init__(self, runner: CommandRunner | None = None, executable: str = "git-filter-repo"):
        self.runner = runner or CommandRunner()
        self.executable = executable

    def is_available(self) -> bool:
        return self.runner.which(self.executable) is not None

    def rewrite(self, repo_path: Path, rule: ReplacementRule, rules_file: Path) -> CommandResult:
        """Write the rule file, run the rewrite, then delete the rule file.

        The rule file holds the secret, so it is removed even when the
        rewrite fails.
        """
        rules_file.parent.mkdir(parents=True, exist_ok=True)
        rules_file.write_text(rule.to_line(), encoding="utf-8")
        rules_file.chmod(0o600)
        try:
            return self.runner.run(
                [self.executable, "--replace-text", str(rules_file)],
                cwd=repo_path,
            )
        finally:
            rules_file.unlink(missing_ok=True)
            get_logger().debug("Removed replacement rule file", rules_file=str(rules_file))
