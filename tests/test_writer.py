"""Tests for the file writer overwrite policy."""
from pathlib import Path

import pytest

from monolith.models.artifact import WriteStatus
from monolith.scaffold.writer import FileWriter, make_executable


class TestFileWriter:
    """Test skip-if-exists and --force semantics."""

    def test_writes_new_file_and_creates_parents(self, tmp_path):
        target = tmp_path / ".github" / "workflows" / "ci.yml"

        status = FileWriter().write(target, "name: CI\n")

        assert status is WriteStatus.WRITTEN
        assert target.read_text() == "name: CI\n"

    def test_skips_existing_file_without_overwrite(self, tmp_path):
        target = tmp_path / "Dockerfile"
        target.write_text("FROM custom\n")

        status = FileWriter(overwrite=False).write(target, "FROM generated\n")

        assert status is WriteStatus.SKIPPED
        assert target.read_text() == "FROM custom\n"

    def test_overwrite_replaces_whole_content(self, tmp_path):
        target = tmp_path / "Dockerfile"
        target.write_text("FROM custom\nlots of old lines\n")

        status = FileWriter(overwrite=True).write(target, "FROM generated\n")

        assert status is WriteStatus.WRITTEN
        assert target.read_text() == "FROM generated\n"

    def test_preserve_existing_wins_over_overwrite(self, tmp_path):
        target = tmp_path / ".dockerignore"
        target.write_text("mine\n")

        status = FileWriter(overwrite=True).write(target, "generated\n", preserve_existing=True)

        assert status is WriteStatus.SKIPPED
        assert target.read_text() == "mine\n"

    def test_preserve_existing_still_writes_missing_file(self, tmp_path):
        target = tmp_path / ".dockerignore"

        assert FileWriter().write(target, "x\n", preserve_existing=True) is WriteStatus.WRITTEN
        assert target.exists()

    def test_executable_flag(self, tmp_path):
        target = tmp_path / "scripts" / "deploy.sh"

        FileWriter().write(target, "#!/bin/sh\n", executable=True)

        mode = target.stat().st_mode
        assert mode & 0o100, "script not executable by owner"
        assert not (mode & 0o002), "script is world-writable"

    def test_plain_file_not_executable(self, tmp_path):
        target = tmp_path / "Dockerfile"

        FileWriter().write(target, "FROM x\n")

        assert not (target.stat().st_mode & 0o111)

    def test_chmod_failure_is_not_fatal(self, tmp_path, monkeypatch):
        def refuse_chmod(self, mode):
            raise PermissionError("filesystem has no execute bit")

        monkeypatch.setattr(Path, "chmod", refuse_chmod)
        target = tmp_path / "deploy.sh"

        status = FileWriter().write(target, "#!/bin/sh\n", executable=True)

        assert status is WriteStatus.WRITTEN
        assert target.read_text() == "#!/bin/sh\n"

    def test_other_io_errors_propagate(self, tmp_path):
        blocker = tmp_path / "scripts"
        blocker.write_text("I am a file, not a directory")

        with pytest.raises(OSError):
            FileWriter().write(blocker / "deploy.sh", "#!/bin/sh\n")


class TestMakeExecutable:
    """Test the executable-bit helper."""

    def test_returns_true_on_success(self, tmp_path):
        target = tmp_path / "run.sh"
        target.write_text("")

        assert make_executable(target) is True
        assert target.stat().st_mode & 0o111 == 0o111

    def test_returns_false_when_missing(self, tmp_path):
        assert make_executable(tmp_path / "missing.sh") is False
