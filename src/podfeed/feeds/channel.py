"""Podcast channel: validated feed attributes plus the episodes behind them."""

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from podfeed.feeds.collector import SourceInput, collect_sources
from podfeed.feeds.metadata import MetadataSource
from podfeed.feeds.models import ChannelDefaults, Episode
from podfeed.feeds.renderer import FeedRenderer
from podfeed.feeds.resolver import EpisodeResolver
from podfeed.utils.errors import MissingAttributeError

logger = logging.getLogger(__name__)

# Checked in this order; the first missing one is reported
MANDATORY_ATTRIBUTES = ("title", "url", "description", "enclosure_base")

TYPED_ATTRIBUTES = MANDATORY_ATTRIBUTES + ("author", "image_url", "categories")


def is_blank(value: Any) -> bool:
    """Check whether an option value counts as missing."""
    if value is None:
        return True
    return not str(value).strip()


def _as_categories(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,) if value.strip() else ()
    return tuple(str(category) for category in value)


class Channel:
    """A podcast feed built from a set of audio files.

    The mandatory attributes are `title`, `url`, `description` and
    `enclosure_base`. `author` and `image_url` are optional and serve as
    episode defaults. Every other option is kept in `extras` for the
    template, in the order given.

    The list of source files is fixed when the channel is created. Episodes
    are rebuilt from those files on every call to `items()`.

    Example:
        >>> channel = Channel(
        ...     "episodes/",
        ...     {
        ...         "title": "My Show",
        ...         "url": "https://example.com/",
        ...         "description": "A show",
        ...         "enclosure_base": "https://example.com/media",
        ...     },
        ... )
        >>> rss = channel.render()
    """

    def __init__(
        self,
        sources: SourceInput,
        options: Mapping[str, Any],
        *,
        metadata_source: MetadataSource | None = None,
        renderer: FeedRenderer | None = None,
    ) -> None:
        """Create a channel.

        Args:
            sources: One file or directory path, or a sequence of them
            options: Channel attributes
            metadata_source: Source of track metadata (default: mutagen)
            renderer: Feed renderer (default: packaged RSS template)

        Raises:
            MissingAttributeError: If a mandatory attribute is missing or blank
        """
        for attribute in MANDATORY_ATTRIBUTES:
            if is_blank(options.get(attribute)):
                raise MissingAttributeError(attribute)

        self._title = str(options["title"])
        self._url = str(options["url"])
        self._description = str(options["description"])
        self._enclosure_base = str(options["enclosure_base"])
        self._author = str(options.get("author") or "")
        self._image_url = str(options.get("image_url") or "")
        self._categories = _as_categories(options.get("categories"))
        self._extras = {
            key: value for key, value in options.items() if key not in TYPED_ATTRIBUTES
        }

        self._resolver = EpisodeResolver(metadata_source)
        self._renderer = renderer
        self._source_files = tuple(collect_sources(sources))

        logger.info(
            "Channel '%s' has %d source file(s)", self._title, len(self._source_files)
        )

    @property
    def title(self) -> str:
        return self._title

    @property
    def url(self) -> str:
        return self._url

    @property
    def description(self) -> str:
        return self._description

    @property
    def enclosure_base(self) -> str:
        return self._enclosure_base

    @property
    def author(self) -> str:
        return self._author

    @property
    def image_url(self) -> str:
        return self._image_url

    @property
    def categories(self) -> list[str]:
        return list(self._categories)

    @property
    def extras(self) -> Mapping[str, Any]:
        """Pass-through attributes, read-only."""
        return MappingProxyType(self._extras)

    @property
    def source_files(self) -> tuple[Path, ...]:
        """Audio files collected when the channel was created."""
        return self._source_files

    @property
    def attributes(self) -> dict[str, Any]:
        """All channel attributes, typed and pass-through, in one mapping."""
        return {
            "title": self._title,
            "url": self._url,
            "description": self._description,
            "enclosure_base": self._enclosure_base,
            "author": self._author,
            "image_url": self._image_url,
            "categories": self.categories,
            **self._extras,
        }

    @property
    def defaults(self) -> ChannelDefaults:
        """Channel values applied to every episode."""
        return ChannelDefaults(
            enclosure_base=self._enclosure_base,
            author=self._author,
            image_url=self._image_url,
        )

    def items(self) -> list[Episode]:
        """Build all episodes, newest first.

        Episodes with equal publish dates keep the order in which their files
        were collected.

        Returns:
            Episodes sorted by publish date, descending

        Raises:
            MetadataReadError: If any source file cannot be read
            MalformedUrlError: If any download URL is invalid
        """
        defaults = self.defaults
        episodes = [self._resolver.resolve(path, defaults) for path in self._source_files]
        logger.info("Built %d episode(s) for '%s'", len(episodes), self._title)
        return sorted(episodes, key=lambda episode: episode.pub_date, reverse=True)

    def render(self) -> str:
        """Render this channel as an RSS document.

        Returns:
            Feed document text

        Raises:
            MetadataReadError: If any source file cannot be read
            TemplateRenderError: If the template fails
        """
        renderer = self._renderer or FeedRenderer()
        return renderer.render(self)

    def __repr__(self) -> str:
        return f"Channel(title={self._title!r}, files={len(self._source_files)})"
