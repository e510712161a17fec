"""podfeed - Build podcast RSS feeds from directories of audio files."""

from podfeed.feeds.channel import Channel
from podfeed.feeds.models import Episode
from podfeed.utils.errors import (
    MalformedUrlError,
    MetadataReadError,
    MissingAttributeError,
    PodfeedError,
)

__version__ = "0.1.0"

__all__ = [
    "Channel",
    "Episode",
    "PodfeedError",
    "MissingAttributeError",
    "MetadataReadError",
    "MalformedUrlError",
    "__version__",
]
