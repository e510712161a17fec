"""File helpers for writing generated feeds."""

import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def write_file_atomic(file_path: Path, content: str) -> None:
    """Write a text file atomically.

    Content goes to a temporary file in the target directory, is synced to
    disk, and then renamed over the target, so readers never see a partial
    feed.

    Args:
        file_path: Target file path
        content: File content

    Raises:
        OSError: If the write or rename fails
    """
    file_path.parent.mkdir(parents=True, exist_ok=True)
    temp_fd, temp_path = tempfile.mkstemp(
        dir=file_path.parent, prefix=".tmp_", suffix=file_path.suffix
    )

    try:
        with open(temp_fd, "w", encoding="utf-8") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())

        Path(temp_path).replace(file_path)
    except Exception:
        Path(temp_path).unlink(missing_ok=True)
        raise

    logger.debug("Wrote %d bytes to %s", len(content.encode("utf-8")), file_path)
