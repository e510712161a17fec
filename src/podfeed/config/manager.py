"""Configuration manager for locating, loading and saving channel files."""

import logging
from collections.abc import Sequence
from pathlib import Path

import yaml

from podfeed.config.schema import ChannelConfig
from podfeed.utils.errors import ConfigNotFoundError, InvalidConfigError

logger = logging.getLogger(__name__)

# Looked up in this order inside a source directory
CHANNEL_FILE_NAMES = ("channel.yaml", "channel.yml")

DEFAULT_CHANNEL_CONTENT = """\
# podfeed channel configuration
# Command-line options override the values in this file.

title: "My Podcast"
url: "https://example.com/"
description: "A short description of the podcast"
enclosure_base: "https://example.com/episodes/"

# author: "Jane Doe"
# image_url: "https://example.com/cover.jpg"
# categories:
#   - Technology
# language: en-us
# subtitle: "A longer tagline"
# explicit: false
"""


class ConfigManager:
    """Manages channel configuration files."""

    def __init__(self, channel_file: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            channel_file: Explicit channel file. When None, it is searched
                for in the source directories.
        """
        self.channel_file = channel_file

    def find_channel_file(self, sources: Sequence[Path]) -> Path | None:
        """Locate the channel file to use for a build.

        The explicit file wins. Otherwise the first directory among the
        sources is searched for `channel.yaml`, then `channel.yml`.

        Args:
            sources: Source paths given for the build

        Returns:
            Path to the channel file, or None if there is none
        """
        if self.channel_file is not None:
            return self.channel_file

        directory = next((Path(source) for source in sources if Path(source).is_dir()), None)
        if directory is None:
            return None

        for name in CHANNEL_FILE_NAMES:
            candidate = directory / name
            if candidate.is_file():
                logger.debug("Using channel file %s", candidate)
                return candidate

        return None

    def load_channel_config(self, path: Path) -> ChannelConfig:
        """Load and validate a channel file.

        Args:
            path: Channel file to read

        Returns:
            Validated ChannelConfig

        Raises:
            ConfigNotFoundError: If the file doesn't exist
            InvalidConfigError: If the file isn't a valid channel mapping
        """
        if not path.exists():
            raise ConfigNotFoundError(f"Channel file not found: {path}")

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise InvalidConfigError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise InvalidConfigError(
                f"Invalid channel configuration in {path}: expected a mapping"
            )

        try:
            return ChannelConfig(**{str(key): value for key, value in data.items()})
        except Exception as e:
            raise InvalidConfigError(
                f"Invalid channel configuration in {path}: {e}"
            ) from e

    def load_for_sources(self, sources: Sequence[Path]) -> ChannelConfig:
        """Load the channel file that applies to a build, if any.

        Args:
            sources: Source paths given for the build

        Returns:
            ChannelConfig from the file, or an empty one
        """
        path = self.find_channel_file(sources)
        if path is None:
            return ChannelConfig()
        return self.load_channel_config(path)

    def create_default_channel_file(self, directory: Path, overwrite: bool = False) -> Path:
        """Write a starter channel.yaml into a directory.

        Args:
            directory: Directory to write into
            overwrite: Whether to replace an existing file

        Returns:
            Path to the written file

        Raises:
            FileExistsError: If the file exists and overwrite=False
        """
        path = directory / CHANNEL_FILE_NAMES[0]
        if path.exists() and not overwrite:
            raise FileExistsError(f"Channel file already exists: {path}")

        directory.mkdir(parents=True, exist_ok=True)
        path.write_text(DEFAULT_CHANNEL_CONTENT, encoding="utf-8")
        return path
