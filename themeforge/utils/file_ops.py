"""File operations utilities for theme directory handling."""

import shutil
from pathlib import Path

from ..models.exceptions import FileOperationError


class FileOperations:
    """Handles destructive resets, atomic writes and optional copies."""

    def reset_directory(self, root: Path, subdirectories: tuple[str, ...] | list[str]) -> None:
        """Delete ``root`` recursively and recreate it with ``subdirectories``.

        Anything previously at ``root`` is lost.

        Args:
            root: Directory to recreate
            subdirectories: Names of the subdirectories to create beneath it

        Raises:
            FileOperationError: If deletion or creation fails
        """
        try:
            if root.is_symlink() or root.is_file():
                root.unlink()
            elif root.exists():
                shutil.rmtree(root)

            root.mkdir(parents=True)
            for name in subdirectories:
                (root / name).mkdir()
        except OSError as e:
            raise FileOperationError(f"Failed to reset directory {root}: {e}", file_path=str(root), operation="reset") from e

    def remove_tree(self, path: Path) -> bool:
        """Remove a directory tree if present.

        Returns:
            True if something was removed
        """
        if not path.exists():
            return False
        try:
            shutil.rmtree(path)
        except OSError as e:
            raise FileOperationError(f"Failed to remove {path}: {e}", file_path=str(path), operation="remove") from e
        return True

    def safe_write_file(self, file_path: Path, content: str) -> None:
        """Write content to a file atomically as UTF-8.

        Args:
            file_path: Path to the file to write
            content: Content to write to the file

        Raises:
            FileOperationError: If file writing fails
        """
        temp_path = file_path.with_suffix(file_path.suffix + ".tmp")
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)

            try:
                # newline="" keeps the content byte-identical across platforms
                with open(temp_path, "w", encoding="utf-8", newline="") as f:
                    f.write(content)
                temp_path.replace(file_path)
            except Exception:
                if temp_path.exists():
                    temp_path.unlink()
                raise

        except OSError as e:
            raise FileOperationError(f"Failed to write file {file_path}: {e}", file_path=str(file_path), operation="write") from e

    def copy_if_present(self, source: Path, destination_dir: Path) -> Path | None:
        """Copy ``source`` into ``destination_dir`` when it exists.

        Returns:
            Path of the copy, or None when the source is absent
        """
        if not source.is_file():
            return None

        destination = destination_dir / source.name
        try:
            shutil.copy2(source, destination)
        except OSError as e:
            raise FileOperationError(f"Failed to copy {source}: {e}", file_path=str(source), operation="copy") from e
        return destination
