"""Writes rendered files into the target project."""
import stat
from pathlib import Path

from monolith.core.logger import get_logger
from monolith.models.artifact import WriteStatus

logger = get_logger(__name__)

_EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


class FileWriter:
    """Writes whole files with a skip-if-exists policy.

    Args:
        overwrite: Replace files that already exist (the --force flag)
    """

    def __init__(self, overwrite: bool = False):
        self.overwrite = overwrite

    def write(
        self,
        path: Path,
        content: str,
        executable: bool = False,
        preserve_existing: bool = False,
    ) -> WriteStatus:
        """Write *content* to *path*.

        Returns:
            WriteStatus.SKIPPED if the file exists and may not be replaced,
            WriteStatus.WRITTEN otherwise

        Raises:
            OSError: Any I/O failure other than setting the executable bit
        """
        path = Path(path)
        if path.exists() and (preserve_existing or not self.overwrite):
            logger.debug(f"Skipping existing file: {path}")
            return WriteStatus.SKIPPED

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        logger.debug(f"Wrote {path} ({len(content)} bytes)")

        if executable:
            make_executable(path)

        return WriteStatus.WRITTEN


def make_executable(path: Path) -> bool:
    """Add execute bits to *path*. Returns False if the filesystem refused."""
    try:
        current = path.stat().st_mode
        path.chmod(current | _EXECUTE_BITS)
    except OSError as e:
        # Some filesystems (e.g. Windows mounts) have no execute bit
        logger.info(f"Could not mark {path.name} executable: {e}")
        return False
    return True
