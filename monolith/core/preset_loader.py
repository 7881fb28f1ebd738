"""Stack presets: default ports, runtimes and commands per technology stack."""
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import yaml

from monolith.core.logger import get_logger

logger = get_logger(__name__)

DEFAULT_PORT = 3000
DEFAULT_RUNTIME_VERSION = "latest"
DEFAULT_BUILD_COMMAND = 'echo "No build step"'
DEFAULT_HEALTH_PATH = "/health"


@dataclass(frozen=True)
class Preset:
    """Read-only defaults for one stack."""
    slug: str
    name: str
    description: str = ""
    default_port: int = DEFAULT_PORT
    runtime_version: str = DEFAULT_RUNTIME_VERSION
    install_command: str = ""
    lint_command: str = ""
    test_command: str = ""
    build_command: str = DEFAULT_BUILD_COMMAND
    health_path: str = DEFAULT_HEALTH_PATH
    file_path: Optional[Path] = None


class PresetLoader:
    """Loads stack presets from YAML files."""

    def __init__(self, presets_dir: Optional[Path] = None):
        """Initialize preset loader.

        Args:
            presets_dir: Directory containing <stack>.yml files.
                        Defaults to monolith/presets/
        """
        if presets_dir is None:
            self.presets_dir = Path(__file__).parent.parent / "presets"
        else:
            self.presets_dir = Path(presets_dir)

    def load_preset(self, stack: str) -> Preset:
        """Load the preset for a stack.

        Args:
            stack: Stack slug (e.g. 'node', 'java', 'python')

        Returns:
            Preset object

        Raises:
            FileNotFoundError: Preset file not found
            ValueError: Invalid preset format
        """
        preset_file = self.presets_dir / f"{stack}.yml"

        if not preset_file.exists():
            raise FileNotFoundError(f"Preset not found: {stack}")

        with open(preset_file, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Invalid preset format in {preset_file}: expected a mapping")

        # Empty values fall back to the built-in defaults
        return Preset(
            slug=stack,
            name=data.get("name") or stack,
            description=data.get("description") or "",
            default_port=int(data.get("default_port") or DEFAULT_PORT),
            runtime_version=str(data.get("runtime_version") or DEFAULT_RUNTIME_VERSION),
            install_command=data.get("install_command") or "",
            lint_command=data.get("lint_command") or "",
            test_command=data.get("test_command") or "",
            build_command=data.get("build_command") or DEFAULT_BUILD_COMMAND,
            health_path=data.get("health_path") or DEFAULT_HEALTH_PATH,
            file_path=preset_file,
        )

    def list_presets(self) -> List[Preset]:
        """List available presets sorted by slug."""
        presets = []

        if not self.presets_dir.exists():
            logger.warning(f"Preset directory not found: {self.presets_dir}")
            return presets

        for yaml_file in sorted(self.presets_dir.glob("*.yml")):
            try:
                presets.append(self.load_preset(yaml_file.stem))
            except (OSError, ValueError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load preset {yaml_file.stem}: {e}")

        return presets
