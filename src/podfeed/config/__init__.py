"""Channel configuration and logging setup for podfeed."""

from podfeed.config.manager import CHANNEL_FILE_NAMES, ConfigManager
from podfeed.config.schema import ChannelConfig, merge_options

__all__ = ["CHANNEL_FILE_NAMES", "ChannelConfig", "ConfigManager", "merge_options"]
