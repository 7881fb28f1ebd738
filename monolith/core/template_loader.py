"""Template loading for scaffolded CI/CD files."""
from pathlib import Path
from typing import List, Optional

TEMPLATE_SUFFIX = ".template"


class TemplateNotFoundError(FileNotFoundError):
    """Raised when a logical template key has no file behind it."""

    def __init__(self, key: str, path: Path):
        self.key = key
        self.path = path
        super().__init__(f"Template '{key}' not found at {path}")


class TemplateLoader:
    """Resolves logical template keys to raw template text."""

    def __init__(self, templates_dir: Optional[Path] = None):
        """Initialize template loader.

        Args:
            templates_dir: Path to templates directory. Defaults to monolith/templates/
        """
        if templates_dir is None:
            # Loader is in monolith/core/, templates are in monolith/templates/
            templates_dir = Path(__file__).parent.parent / "templates"
        self.templates_dir = Path(templates_dir)

    def path_for(self, key: str) -> Path:
        """Return the on-disk location of a logical key."""
        return self.templates_dir / f"{key}{TEMPLATE_SUFFIX}"

    def exists(self, key: str) -> bool:
        return self.path_for(key).is_file()

    def load(self, key: str) -> str:
        """Load a template's raw text.

        Args:
            key: Logical template key (e.g. 'workflows/ci.node.yml')

        Returns:
            Template content, unmodified

        Raises:
            TemplateNotFoundError: If the template doesn't exist
        """
        template_path = self.path_for(key)
        if not template_path.is_file():
            raise TemplateNotFoundError(key, template_path)

        return template_path.read_text(encoding="utf-8")

    def list_templates(self, prefix: str = "") -> List[str]:
        """List logical keys of all available templates.

        Args:
            prefix: Optional subdirectory to restrict the listing to (e.g. 'workflows')

        Returns:
            Sorted list of template keys (without the .template suffix)
        """
        search_dir = self.templates_dir / prefix if prefix else self.templates_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.templates_dir).as_posix()[: -len(TEMPLATE_SUFFIX)]
            for p in search_dir.rglob(f"*{TEMPLATE_SUFFIX}")
        )
