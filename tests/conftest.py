"""Shared test fixtures for Monolith tests."""
import pytest

from monolith.core.config import set_settings
from monolith.models.scaffold import PipelineMode, ScaffoldConfig, Stack


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read MONOLITH_* environment variables in every test."""
    set_settings(None)
    yield
    set_settings(None)


@pytest.fixture
def project_dir(tmp_path):
    """Empty project root to scaffold into."""
    root = tmp_path / "my-app"
    root.mkdir()
    return root


@pytest.fixture
def make_config():
    """Factory for ScaffoldConfig with production/node defaults."""
    def _make(**overrides):
        values = {
            'project_name': 'My App',
            'stack': Stack.NODE,
            'install_command': 'npm ci',
            'lint_command': 'npm run lint',
            'test_command': 'npm test',
            'use_docker': True,
            'mode': PipelineMode.PRODUCTION,
            'migration_command': '',
        }
        values.update(overrides)
        return ScaffoldConfig(**values)
    return _make

