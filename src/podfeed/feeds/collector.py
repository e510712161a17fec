"""Discovery of candidate audio files from directories and file paths."""

import logging
import os
from collections.abc import Sequence
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

AUDIO_SUFFIX = ".mp3"

PathInput = Union[str, os.PathLike]
SourceInput = Union[PathInput, Sequence[PathInput]]


def normalize_sources(sources: SourceInput) -> list[Path]:
    """Resolve a single path or a sequence of paths into a list of paths.

    Strings and path-like objects are one source; any other sequence is a
    list of sources. A string is never iterated character by character.

    Args:
        sources: One path or an ordered sequence of paths

    Returns:
        List of paths in the given order
    """
    if isinstance(sources, (str, os.PathLike)):
        return [Path(sources)]
    return [Path(source) for source in sources]


def list_audio_files(directory: Path) -> list[Path]:
    """List audio files directly inside a directory, sorted by name.

    Args:
        directory: Directory to scan (not recursive)

    Returns:
        Matching file paths in lexical order
    """
    matches = [
        entry
        for entry in directory.iterdir()
        if entry.suffix == AUDIO_SUFFIX and entry.is_file()
    ]
    return sorted(matches, key=lambda entry: entry.name)


def collect_sources(sources: SourceInput) -> list[Path]:
    """Collect candidate audio files from one or more sources.

    Directories contribute their `.mp3` files. File paths are taken as-is,
    without extension filtering or an existence check.

    Args:
        sources: One path or an ordered sequence of paths

    Returns:
        Ordered list of audio file paths
    """
    collected: list[Path] = []

    for source in normalize_sources(sources):
        if source.is_dir():
            files = list_audio_files(source)
            logger.debug("Found %d audio file(s) in %s", len(files), source)
            collected.extend(files)
        else:
            collected.append(source)

    return collected
