"""Output artifact and run report models."""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Tuple


class WriteStatus(str, Enum):
    """Outcome of materializing one file."""
    WRITTEN = "written"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class Artifact:
    """One file to generate: where it comes from and where it goes."""
    template_key: str
    target: str  # relative to the project root, POSIX separators
    description: str = ""
    executable: bool = False
    preserve_existing: bool = False  # never overwritten, even with --force
    strip_steps: Tuple[str, ...] = ()


@dataclass
class ArtifactOutcome:
    """What happened to an artifact during a run."""
    artifact: Artifact
    path: Path
    status: WriteStatus
    error: Optional[str] = None


@dataclass
class ScaffoldReport:
    """Ordered per-file outcomes of a scaffolding run."""
    project_root: Path
    variables: Dict[str, str] = field(default_factory=dict)
    outcomes: List[ArtifactOutcome] = field(default_factory=list)

    def _with_status(self, status: WriteStatus) -> List[ArtifactOutcome]:
        return [o for o in self.outcomes if o.status is status]

    @property
    def written(self) -> List[ArtifactOutcome]:
        return self._with_status(WriteStatus.WRITTEN)

    @property
    def skipped(self) -> List[ArtifactOutcome]:
        return self._with_status(WriteStatus.SKIPPED)

    @property
    def failed(self) -> List[ArtifactOutcome]:
        return self._with_status(WriteStatus.FAILED)

    @property
    def ok(self) -> bool:
        return not self.failed

    def __len__(self) -> int:
        return len(self.outcomes)
