"""Core scaffolding: decides which CI/CD files a project gets and writes them."""
from pathlib import Path
from typing import Dict, List, Optional

from monolith.core.config import Settings, get_settings
from monolith.core.logger import get_logger
from monolith.core.preset_loader import DEFAULT_HEALTH_PATH, Preset, PresetLoader
from monolith.core.template_loader import TemplateLoader
from monolith.models.artifact import (
    Artifact,
    ArtifactOutcome,
    ScaffoldReport,
    WriteStatus,
)
from monolith.models.scaffold import PipelineMode, ScaffoldConfig
from monolith.scaffold.blocks import remove_step_blocks
from monolith.scaffold.templates import TemplateEngine
from monolith.scaffold.writer import FileWriter

logger = get_logger(__name__)

MIGRATION_STEP = "Run migrations"

# (template key, output name, description)
PRODUCTION_SCRIPTS = [
    ("scripts/deploy.sh", "deploy.sh", "SSH server-side: pull GHCR image & restart"),
    ("scripts/rollback.sh", "rollback.sh", "SSH server-side: restore exact previous image"),
    ("scripts/health-check.sh", "health-check.sh", "poll {health_path} until 2xx or timeout"),
]


class ScaffoldError(Exception):
    """Raised when a run stops on a missing template or an I/O failure.

    Attributes:
        report: Outcomes up to and including the failed artifact
    """

    def __init__(self, message: str, report: ScaffoldReport):
        super().__init__(message)
        self.report = report


class ScaffoldManager:
    """Manages CI/CD scaffolding for a single project directory.

    All filesystem access goes through the injected loader and writer, so
    tests can swap either for a double.
    """

    def __init__(
        self,
        project_root: Path,
        template_loader: Optional[TemplateLoader] = None,
        preset_loader: Optional[PresetLoader] = None,
        writer: Optional[FileWriter] = None,
        settings: Optional[Settings] = None,
    ):
        self.project_root = Path(project_root)
        self.settings = settings or get_settings()
        self.template_loader = template_loader or TemplateLoader(self.settings.templates_dir)
        self.preset_loader = preset_loader or PresetLoader(self.settings.presets_dir)
        self.writer = writer or FileWriter()
        self.engine = TemplateEngine()

    def build_variables(self, config: ScaffoldConfig, preset: Preset) -> Dict[str, str]:
        """Derive the placeholder values for a run."""
        image_name = config.image_name
        return {
            "APP_NAME": image_name,
            "IMAGE_NAME": image_name,
            "PORT": str(preset.default_port),
            "RUNTIME_VERSION": preset.runtime_version,
            "INSTALL_COMMAND": config.install_command,
            "LINT_COMMAND": config.lint_command,
            "TEST_COMMAND": config.test_command,
            "BUILD_COMMAND": config.build_command or preset.build_command,
            "PROD_BRANCH": config.prod_branch,
            "STAGING_BRANCH": config.staging_branch,
            "MIGRATION_COMMAND": config.migration_command if config.has_migrations else "",
            "HEALTH_PATH": preset.health_path,
        }

    def plan(self, config: ScaffoldConfig, preset: Optional[Preset] = None) -> List[Artifact]:
        """Select the artifacts for a configuration.

        Raises:
            ValueError: If two artifacts would target the same path
        """
        stack = config.stack.value
        workflows = self.settings.workflows_dir.rstrip("/")
        scripts = self.settings.scripts_dir.rstrip("/")
        artifacts: List[Artifact] = []

        if config.mode is PipelineMode.SIMPLE:
            artifacts.append(Artifact(
                f"workflows/monolith.{stack}.yml",
                f"{workflows}/monolith.yml",
                "single-file: CI -> Docker build -> smoke test",
            ))
        else:
            build_variant = "docker" if config.use_docker else "basic"
            deploy_strip = () if config.has_migrations else (MIGRATION_STEP,)
            artifacts.extend([
                Artifact(f"workflows/ci.{stack}.yml", f"{workflows}/ci.yml",
                         "lint + test on every push/PR"),
                Artifact(f"workflows/build.{build_variant}.yml", f"{workflows}/build.yml",
                         "Docker build -> push to GHCR + Trivy scan" if config.use_docker
                         else "build artifact upload"),
                Artifact("workflows/deploy.yml", f"{workflows}/deploy.yml",
                         "staging (auto) -> production (approval gate)",
                         strip_steps=deploy_strip),
                Artifact("workflows/rollback.yml", f"{workflows}/rollback.yml",
                         "manual rollback to any SHA"),
                Artifact("workflows/security-scan.yml", f"{workflows}/security-scan.yml",
                         "weekly Trivy FS + Gitleaks secret scan"),
            ])
            health_path = preset.health_path if preset else DEFAULT_HEALTH_PATH
            for key, name, description in PRODUCTION_SCRIPTS:
                artifacts.append(Artifact(
                    key,
                    f"{scripts}/{name}",
                    description.format(health_path=health_path),
                    executable=True,
                ))

        if config.use_docker:
            artifacts.append(Artifact(
                f"docker/Dockerfile.{stack}", "Dockerfile",
                "multi-stage, non-root, HEALTHCHECK",
            ))
            artifacts.append(Artifact(
                "docker/dockerignore", ".dockerignore",
                "excludes secrets, dependencies, .git",
                preserve_existing=True,
            ))

        targets = [a.target for a in artifacts]
        duplicates = {t for t in targets if targets.count(t) > 1}
        if duplicates:
            raise ValueError(f"Duplicate output paths in plan: {', '.join(sorted(duplicates))}")

        return artifacts

    def render(self, artifact: Artifact, variables: Dict[str, str]) -> str:
        """Load, strip and substitute one artifact's template."""
        text = self.template_loader.load(artifact.template_key)
        if artifact.strip_steps:
            text = remove_step_blocks(text, artifact.strip_steps)
        rendered = self.engine.render(text, variables)

        unresolved = self.engine.unresolved(rendered)
        if unresolved:
            logger.debug(
                f"{artifact.target}: unresolved placeholders {', '.join(sorted(unresolved))}"
            )
        return rendered

    def scaffold(self, config: ScaffoldConfig) -> ScaffoldReport:
        """Generate every artifact for *config* under the project root.

        Returns:
            Report with one outcome per artifact

        Raises:
            ScaffoldError: On the first missing, undecodable or unwritable file.
                Files written before the failure stay on disk.
        """
        preset = self.preset_loader.load_preset(config.stack.value)
        variables = self.build_variables(config, preset)
        artifacts = self.plan(config, preset)
        report = ScaffoldReport(project_root=self.project_root, variables=variables)

        logger.debug(
            f"Scaffolding {config.mode.value} pipeline for '{config.image_name}' "
            f"({config.stack.value}, docker={config.use_docker}) into {self.project_root}"
        )

        for artifact in artifacts:
            path = self.project_root / artifact.target
            try:
                content = self.render(artifact, variables)
                status = self.writer.write(
                    path,
                    content,
                    executable=artifact.executable,
                    preserve_existing=artifact.preserve_existing,
                )
            except (OSError, UnicodeDecodeError) as e:
                report.outcomes.append(
                    ArtifactOutcome(artifact, path, WriteStatus.FAILED, error=str(e))
                )
                logger.debug(f"Failed on {artifact.target}: {e}")
                raise ScaffoldError(f"{artifact.target}: {e}", report) from e

            report.outcomes.append(ArtifactOutcome(artifact, path, status))

        logger.debug(
            f"Done: {len(report.written)} written, {len(report.skipped)} skipped"
        )
        return report
