"""Tests for the post-run summary output."""
from io import StringIO

import pytest
from rich.console import Console

from monolith.models.artifact import Artifact, ArtifactOutcome, ScaffoldReport, WriteStatus
from monolith.models.scaffold import PipelineMode
from monolith.scaffold.summary import REQUIRED_SECRETS, print_outcomes, print_summary


@pytest.fixture
def console():
    return Console(file=StringIO(), width=200, color_system=None)


def output(console):
    return console.file.getvalue()


def make_report(tmp_path, *entries):
    report = ScaffoldReport(project_root=tmp_path)
    for target, status, error in entries:
        artifact = Artifact("key", target, description="what it does")
        report.outcomes.append(ArtifactOutcome(artifact, tmp_path / target, status, error=error))
    return report


class TestPrintOutcomes:
    """Test per-file outcome lines."""

    def test_lines_per_status(self, console, tmp_path):
        report = make_report(
            tmp_path,
            (".github/workflows/ci.yml", WriteStatus.WRITTEN, None),
            ("Dockerfile", WriteStatus.SKIPPED, None),
            ("scripts/deploy.sh", WriteStatus.FAILED, "Permission denied"),
        )

        print_outcomes(console, report)
        text = output(console)

        assert "Written: .github/workflows/ci.yml" in text
        assert "what it does" in text
        assert "Skipped (already exists): Dockerfile" in text
        assert "Failed: scripts/deploy.sh" in text
        assert "Permission denied" in text
        assert "--force" in text

    def test_no_force_hint_without_skips(self, console, tmp_path):
        report = make_report(tmp_path, ("Dockerfile", WriteStatus.WRITTEN, None))

        print_outcomes(console, report)

        assert "--force" not in output(console)

    def test_markup_in_paths_is_escaped(self, console, tmp_path):
        report = make_report(tmp_path, ("[bold]odd.yml", WriteStatus.WRITTEN, None))

        print_outcomes(console, report)

        assert "[bold]odd.yml" in output(console)


class TestPrintSummary:
    """Test mode-specific follow-up steps."""

    def test_production_summary(self, console, tmp_path, make_config):
        report = make_report(tmp_path, (".github/workflows/deploy.yml", WriteStatus.WRITTEN, None))

        print_summary(console, report, make_config(prod_branch="master", staging_branch="develop"))
        text = output(console)

        assert "production CI/CD pipeline" in text
        for name, _ in REQUIRED_SECRETS:
            assert name in text
        assert "mkdir -p /opt/scripts/myapp" in text
        assert "mkdir -p /etc/myapp" in text
        assert "Merge to develop" in text
        assert "Merge to master" in text

    def test_simple_summary(self, console, tmp_path, make_config):
        report = make_report(tmp_path, (".github/workflows/monolith.yml", WriteStatus.WRITTEN, None))

        print_summary(console, report, make_config(mode=PipelineMode.SIMPLE))
        text = output(console)

        assert "simple CI/CD pipeline" in text
        assert "WORK_DIR" in text
        assert "DEPLOY_SSH_KEY" not in text
        assert "main / staging" in text
