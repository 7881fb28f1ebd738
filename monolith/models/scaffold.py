"""Scaffold configuration models collected from the prompts."""
import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Stack(str, Enum):
    """Supported technology stacks."""
    NODE = "node"
    JAVA = "java"
    PYTHON = "python"

    @property
    def label(self) -> str:
        return _STACK_LABELS[self]


_STACK_LABELS = {
    Stack.NODE: "Node.js (Express / Next.js)",
    Stack.JAVA: "Java (Spring Boot)",
    Stack.PYTHON: "Python (FastAPI / Flask)",
}


class PipelineMode(str, Enum):
    """Pipeline layout to generate."""
    SIMPLE = "simple"          # single monolith.yml, local Docker smoke test
    PRODUCTION = "production"  # five workflows, GHCR, SSH deploy, environments

    @property
    def label(self) -> str:
        if self is PipelineMode.SIMPLE:
            return "Simple - single monolith.yml file, one job, local Docker smoke test"
        return "Production - 5 workflow files, GHCR registry, SSH deploy, staging + production environments"


_IMAGE_NAME_STRIP = re.compile(r"[^a-z0-9-_]")


def slugify_image_name(name: str) -> str:
    """Lowercase a project name and strip anything outside [a-z0-9-_].

    The result is safe for container names, image names and filesystem paths.
    """
    return _IMAGE_NAME_STRIP.sub("", name.lower())


class ScaffoldConfig(BaseModel):
    """Answers for one scaffolding run. Immutable once built."""

    model_config = ConfigDict(frozen=True, extra='forbid')

    project_name: str
    stack: Stack
    prod_branch: str = "main"
    staging_branch: str = "staging"
    install_command: str = ""
    lint_command: str = ""
    test_command: str = ""
    build_command: Optional[str] = Field(None, description="Overrides the preset build command")
    migration_command: str = Field("", description="Empty means no migration step")
    use_docker: bool = True
    mode: PipelineMode = PipelineMode.PRODUCTION

    @field_validator('prod_branch', 'staging_branch')
    @classmethod
    def validate_branch(cls, v: str) -> str:
        """Branch names must be non-empty."""
        v = v.strip()
        if not v:
            raise ValueError("Branch name must not be empty")
        return v

    @field_validator('migration_command')
    @classmethod
    def strip_migration(cls, v: str) -> str:
        return v.strip()

    @property
    def image_name(self) -> str:
        return slugify_image_name(self.project_name)

    @property
    def has_migrations(self) -> bool:
        """Migrations only exist in the production layout."""
        return self.mode is PipelineMode.PRODUCTION and bool(self.migration_command)
