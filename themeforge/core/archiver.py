"""Zip archiving of generated themes."""

import contextlib
import zipfile
from pathlib import Path

from ..models.interfaces import ArchiveResult, ArchiverInterface


class ZipArchiver(ArchiverInterface):
    """Compresses a directory into a zip whose entries are rooted at the directory name."""

    def archive(self, source_dir: Path, destination: Path) -> ArchiveResult:
        """Create ``destination`` from ``source_dir``.

        Failures are reported in the result, never raised; a half-written
        archive is removed.
        """
        try:
            if not source_dir.is_dir():
                return ArchiveResult(path=destination, success=False, error=f"Not a directory: {source_dir}")

            destination.parent.mkdir(parents=True, exist_ok=True)
            with zipfile.ZipFile(destination, "w", compression=zipfile.ZIP_DEFLATED) as zip_ref:
                zip_ref.write(source_dir, arcname=source_dir.name)
                for path in sorted(source_dir.rglob("*")):
                    arcname = Path(source_dir.name) / path.relative_to(source_dir)
                    zip_ref.write(path, arcname=arcname.as_posix())
        except (OSError, zipfile.BadZipFile, ValueError) as e:
            with contextlib.suppress(OSError):
                destination.unlink(missing_ok=True)
            return ArchiveResult(path=destination, success=False, error=str(e))

        return ArchiveResult(path=destination, success=True)
