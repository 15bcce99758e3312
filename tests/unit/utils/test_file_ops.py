"""Unit tests for file operations helper."""

from pathlib import Path

import pytest

from themeforge.models.exceptions import FileOperationError
from themeforge.utils.file_ops import FileOperations


class TestFileOperations:
    """Ensure reset, write, and copy routines behave safely."""

    def test_reset_directory_wipes_previous_contents(self, tmp_path: Path) -> None:
        root = tmp_path / "theme"
        (root / "old" / "deep").mkdir(parents=True)
        (root / "old" / "deep" / "file.txt").write_text("x", encoding="utf-8")

        FileOperations().reset_directory(root, ["assets", "config"])

        assert sorted(p.name for p in root.iterdir()) == ["assets", "config"]
        assert list((root / "assets").iterdir()) == []

    def test_reset_directory_replaces_file_at_root(self, tmp_path: Path) -> None:
        root = tmp_path / "theme"
        root.write_text("a file where a directory should be", encoding="utf-8")

        FileOperations().reset_directory(root, ["assets"])

        assert root.is_dir()
        assert (root / "assets").is_dir()

    def test_reset_directory_does_not_follow_symlink(self, tmp_path: Path) -> None:
        target = tmp_path / "elsewhere"
        target.mkdir()
        (target / "keep.txt").write_text("keep", encoding="utf-8")
        root = tmp_path / "theme"
        root.symlink_to(target, target_is_directory=True)

        FileOperations().reset_directory(root, ["assets"])

        assert not root.is_symlink()
        assert (target / "keep.txt").read_text(encoding="utf-8") == "keep"

    def test_reset_directory_failure_raises(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("x", encoding="utf-8")

        with pytest.raises(FileOperationError) as exc_info:
            FileOperations().reset_directory(blocker / "theme", ["assets"])

        assert exc_info.value.details["operation"] == "reset"

    def test_remove_tree(self, tmp_path: Path) -> None:
        target = tmp_path / ".git"
        (target / "objects").mkdir(parents=True)
        ops = FileOperations()

        assert ops.remove_tree(target) is True
        assert not target.exists()
        assert ops.remove_tree(target) is False

    def test_safe_write_file_is_exact(self, tmp_path: Path) -> None:
        target = tmp_path / "nested" / "settings_data.json"

        FileOperations().safe_write_file(target, "line one\nline two\n")

        assert target.read_bytes() == b"line one\nline two\n"
        assert not target.with_suffix(".json.tmp").exists()

    def test_safe_write_file_overwrites(self, tmp_path: Path) -> None:
        target = tmp_path / "custom.css"
        target.write_text("old", encoding="utf-8")

        FileOperations().safe_write_file(target, "new")

        assert target.read_text(encoding="utf-8") == "new"

    def test_safe_write_file_failure_raises(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("x", encoding="utf-8")

        with pytest.raises(FileOperationError, match="Failed to write file"):
            FileOperations().safe_write_file(blocker / "out.txt", "data")

    def test_copy_if_present(self, tmp_path: Path) -> None:
        source = tmp_path / "logo.png"
        source.write_bytes(b"\x89PNG\r\n\x1a\n\x00binary")
        destination_dir = tmp_path / "assets"
        destination_dir.mkdir()

        copied = FileOperations().copy_if_present(source, destination_dir)

        assert copied == destination_dir / "logo.png"
        assert copied.read_bytes() == source.read_bytes()

    def test_copy_if_present_missing_source(self, tmp_path: Path) -> None:
        assert FileOperations().copy_if_present(tmp_path / "favicon.ico", tmp_path) is None
