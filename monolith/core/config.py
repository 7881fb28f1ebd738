"""Monolith runtime configuration and settings."""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class Settings:
    """Runtime settings for scaffolding runs.

    Attributes:
        templates_dir: Override for the bundled template directory
        presets_dir: Override for the bundled stack presets directory
        workflows_dir: Workflow output directory, relative to the project root
        scripts_dir: Server script output directory, relative to the project root
        prod_branch: Default production branch offered by the prompts
        staging_branch: Default staging branch offered by the prompts
    """

    templates_dir: Optional[Path] = None
    presets_dir: Optional[Path] = None

    # Output layout
    workflows_dir: str = ".github/workflows"
    scripts_dir: str = "scripts"

    # Prompt defaults
    prod_branch: str = "main"
    staging_branch: str = "staging"

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from environment variables.

        Environment variables:
            MONOLITH_TEMPLATES_DIR: Directory holding *.template files
            MONOLITH_PRESETS_DIR: Directory holding <stack>.yml presets
            MONOLITH_WORKFLOWS_DIR: Workflow output directory
            MONOLITH_SCRIPTS_DIR: Script output directory
            MONOLITH_PROD_BRANCH: Default production branch
            MONOLITH_STAGING_BRANCH: Default staging branch

        Returns:
            Settings instance with values from environment or defaults
        """
        templates_dir = os.getenv("MONOLITH_TEMPLATES_DIR")
        presets_dir = os.getenv("MONOLITH_PRESETS_DIR")
        return cls(
            templates_dir=Path(templates_dir) if templates_dir else None,
            presets_dir=Path(presets_dir) if presets_dir else None,
            workflows_dir=os.getenv("MONOLITH_WORKFLOWS_DIR", cls.workflows_dir),
            scripts_dir=os.getenv("MONOLITH_SCRIPTS_DIR", cls.scripts_dir),
            prod_branch=os.getenv("MONOLITH_PROD_BRANCH", cls.prod_branch),
            staging_branch=os.getenv("MONOLITH_STAGING_BRANCH", cls.staging_branch),
        )


# Global settings instance (can be overridden)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global Monolith settings.

    Returns:
        Settings instance (creates from environment if not set)
    """
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def set_settings(settings: Optional[Settings]):
    """Set the global Monolith settings.

    Args:
        settings: Settings instance to use globally, or None to re-read the environment
    """
    global _settings
    _settings = settings
