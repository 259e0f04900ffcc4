from pathlib import Path

import pytest

from dev_noindex.config import MARKER_NAME
from dev_noindex.marker import MarkOutcome, MarkResult, mark_directory


class TestMarkDirectory:
    def test_creates_empty_marker(self, tmp_path: Path) -> None:
        result = mark_directory(tmp_path, dry_run=False)

        assert result.outcome is MarkOutcome.MARKED
        assert result.path == tmp_path
        marker = tmp_path / MARKER_NAME
        assert marker.is_file()
        assert marker.stat().st_size == 0

    def test_existing_marker_is_already_marked(self, tmp_path: Path) -> None:
        (tmp_path / MARKER_NAME).touch()

        result = mark_directory(tmp_path, dry_run=False)

        assert result.outcome is MarkOutcome.ALREADY_MARKED
        assert result.error is None

    def test_existing_marker_content_is_untouched(self, tmp_path: Path) -> None:
        marker = tmp_path / MARKER_NAME
        marker.write_text("keep", encoding="utf-8")

        mark_directory(tmp_path, dry_run=False)

        assert marker.read_text(encoding="utf-8") == "keep"

    def test_dry_run_does_not_write(self, tmp_path: Path) -> None:
        result = mark_directory(tmp_path, dry_run=True)

        assert result.outcome is MarkOutcome.WOULD_MARK
        assert not (tmp_path / MARKER_NAME).exists()

    def test_dry_run_reports_existing_marker(self, tmp_path: Path) -> None:
        (tmp_path / MARKER_NAME).touch()

        assert mark_directory(tmp_path, dry_run=True).outcome is MarkOutcome.ALREADY_MARKED

    def test_missing_directory_is_skipped(self, tmp_path: Path) -> None:
        missing = tmp_path / "nope"

        result = mark_directory(missing, dry_run=False)

        assert result.outcome is MarkOutcome.SKIPPED_MISSING
        assert not missing.exists()

    def test_regular_file_is_skipped(self, tmp_path: Path) -> None:
        target = tmp_path / "file.txt"
        target.write_text("x", encoding="utf-8")

        assert mark_directory(target, dry_run=False).outcome is MarkOutcome.SKIPPED_MISSING

    def test_accepts_string_path(self, tmp_path: Path) -> None:
        result = mark_directory(str(tmp_path), dry_run=False)

        assert result.path == tmp_path
        assert result.outcome is MarkOutcome.MARKED

    def test_group_is_carried(self, tmp_path: Path) -> None:
        assert mark_directory(tmp_path, dry_run=True, group="editor").group == "editor"

    def test_write_failure_is_warned(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def _read_only(*_args: object, **_kwargs: object) -> None:
            raise OSError(30, "Read-only file system")

        monkeypatch.setattr("dev_noindex.marker.open", _read_only, raising=False)

        result = mark_directory(tmp_path, dry_run=False)

        assert result.outcome is MarkOutcome.WARNED
        assert result.error is not None
        assert "Read-only file system" in result.error

    def test_permission_denied_is_warned(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def _denied(*_args: object, **_kwargs: object) -> None:
            raise PermissionError(13, "Permission denied")

        monkeypatch.setattr("dev_noindex.marker.open", _denied, raising=False)

        assert mark_directory(tmp_path, dry_run=False).outcome is MarkOutcome.WARNED

    def test_concurrent_creation_is_already_marked(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def _raced(*_args: object, **_kwargs: object) -> None:
            raise FileExistsError(17, "File exists")

        monkeypatch.setattr("dev_noindex.marker.open", _raced, raising=False)

        assert mark_directory(tmp_path, dry_run=False).outcome is MarkOutcome.ALREADY_MARKED

    def test_directory_vanishing_is_skipped(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def _vanished(*_args: object, **_kwargs: object) -> None:
            raise FileNotFoundError(2, "No such file or directory")

        monkeypatch.setattr("dev_noindex.marker.open", _vanished, raising=False)

        assert mark_directory(tmp_path, dry_run=False).outcome is MarkOutcome.SKIPPED_MISSING


class TestMarkResult:
    def test_marker_path(self, tmp_path: Path) -> None:
        result = MarkResult(tmp_path, MarkOutcome.MARKED)
        assert result.marker_path == tmp_path / MARKER_NAME

    def test_is_frozen(self, tmp_path: Path) -> None:
        result = MarkResult(tmp_path, MarkOutcome.MARKED)
        with pytest.raises(AttributeError):
            result.outcome = MarkOutcome.WARNED  # type: ignore[misc]
