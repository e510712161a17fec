"""Feed assembly: source collection, episode resolution and rendering."""

from podfeed.feeds.channel import Channel
from podfeed.feeds.collector import collect_sources, normalize_sources
from podfeed.feeds.metadata import MetadataSource, MutagenMetadataSource
from podfeed.feeds.models import ChannelDefaults, Episode, TrackMetadata
from podfeed.feeds.renderer import FeedRenderer
from podfeed.feeds.resolver import EpisodeResolver, build_enclosure_url

__all__ = [
    "Channel",
    "ChannelDefaults",
    "Episode",
    "EpisodeResolver",
    "FeedRenderer",
    "MetadataSource",
    "MutagenMetadataSource",
    "TrackMetadata",
    "build_enclosure_url",
    "collect_sources",
    "normalize_sources",
]
