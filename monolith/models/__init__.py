"""Data models for Monolith."""
from monolith.models.artifact import (
    Artifact,
    ArtifactOutcome,
    ScaffoldReport,
    WriteStatus,
)
from monolith.models.scaffold import (
    PipelineMode,
    ScaffoldConfig,
    Stack,
    slugify_image_name,
)

__all__ = [
    'Artifact',
    'ArtifactOutcome',
    'PipelineMode',
    'ScaffoldConfig',
    'ScaffoldReport',
    'Stack',
    'WriteStatus',
    'slugify_image_name',
]
