"""Blocking execution of external commands."""

import shutil
import subprocess
from pathlib import Path

from ..models.interfaces import CommandResult
from ..utils.logger import get_logger


class CommandRunner:
    """Runs external commands and reports their outcome as a CommandResult.

    Commands block until they exit; there is no timeout and no retry.
    """

    def run(
        self,
        args: list[str],
        cwd: Path | None = None,
        input_text: str | None = None,
        tolerated: bool = False,
    ) -> CommandResult:
        """Run ``args`` and capture its output.

        Args:
            args: Program and arguments. Must not contain secrets.
            cwd: Working directory for the command
            input_text: Text written to the command's stdin
            tolerated: Log a failure at info level instead of warning

        Returns:
            CommandResult; a missing program is reported as returncode 127
        """
        logger = get_logger()
        logger.debug(f"Running: {' '.join(args[:2])}", cwd=str(cwd) if cwd else None)

        try:
            completed = subprocess.run(
                args,
                cwd=cwd,
                input=input_text,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as e:
            result = CommandResult(args=list(args), returncode=127, stderr=str(e))
        else:
            result = CommandResult(
                args=list(args),
                returncode=completed.returncode,
                stdout=completed.stdout or "",
                stderr=completed.stderr or "",
            )

        logger.log_command(result.args, result.returncode, tolerated=tolerated)
        if not result.ok and result.stderr:
            logger.debug("Command error output", stderr=result.stderr.strip())
        return result

    def which(self, program: str) -> str | None:
        """Locate ``program`` on PATH."""
        return shutil.which(program)
