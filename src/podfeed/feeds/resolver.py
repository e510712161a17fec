"""Build episodes from audio files and channel defaults."""

import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from urllib.parse import quote, urlsplit, urlunsplit

from podfeed.feeds.metadata import MetadataSource, MutagenMetadataSource
from podfeed.feeds.models import ChannelDefaults, Episode
from podfeed.utils.errors import MalformedUrlError

logger = logging.getLogger(__name__)

# Publish date used when neither the tags nor the filesystem provide one
DEFAULT_PUB_DATE = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Characters left unescaped in both the enclosure base path and the file name
URL_SAFE_CHARS = "/:@!$&'()*+,;=-._~"

# An existing percent escape in the enclosure base
PERCENT_ESCAPE = re.compile(r"(%[0-9A-Fa-f]{2})")


def escape_url_part(text: str) -> str:
    """Percent-encode unsafe URL characters."""
    return quote(text, safe=URL_SAFE_CHARS)


def escape_base_part(text: str, safe: str = URL_SAFE_CHARS) -> str:
    """Percent-encode unsafe characters, keeping existing `%XX` escapes as they are."""
    return "".join(
        piece if PERCENT_ESCAPE.fullmatch(piece) else quote(piece, safe=safe)
        for piece in PERCENT_ESCAPE.split(text)
    )


def build_enclosure_url(enclosure_base: str, file_name: str) -> str:
    """Compose the absolute download URL for an episode file.

    The escaped file name is appended to the base path, which gets exactly
    one trailing slash. The host is taken verbatim and must be ASCII.
    Escapes already present in the base are kept byte for byte. A query
    or fragment on the base stays after the file name.

    Args:
        enclosure_base: Absolute URL prefix for episode files
        file_name: Base name of the audio file

    Returns:
        Absolute enclosure URL

    Raises:
        MalformedUrlError: If the result is not an absolute URL
    """
    try:
        base = urlsplit(enclosure_base)
    except ValueError as e:
        raise MalformedUrlError(enclosure_base) from e
    if not base.netloc.isascii():
        raise MalformedUrlError(enclosure_base)

    path = escape_base_part(base.path)
    if not path.endswith("/"):
        path += "/"

    url = urlunsplit(
        (
            base.scheme,
            base.netloc,
            path + escape_url_part(file_name),
            escape_base_part(base.query, safe=URL_SAFE_CHARS + "?"),
            escape_base_part(base.fragment, safe=URL_SAFE_CHARS + "?"),
        )
    )

    if not base.scheme or not base.netloc:
        raise MalformedUrlError(url)

    return url


class EpisodeResolver:
    """Turn one audio file into an Episode, applying channel defaults."""

    def __init__(self, metadata_source: MetadataSource | None = None) -> None:
        """Initialize the resolver.

        Args:
            metadata_source: Source of track metadata (default: mutagen)
        """
        self.metadata_source = metadata_source or MutagenMetadataSource()

    def resolve(self, file_path: Path, defaults: ChannelDefaults) -> Episode:
        """Build an Episode for one file.

        Args:
            file_path: Audio file to describe
            defaults: Channel values used for fallbacks and the download URL

        Returns:
            Episode for the file

        Raises:
            MetadataReadError: If the file's metadata cannot be read
            MalformedUrlError: If the download URL is invalid
        """
        file_path = Path(file_path)
        metadata = self.metadata_source.read(file_path)

        pub_date = metadata.pub_date
        if pub_date is None:
            logger.debug("No publish date for %s, using default", file_path)
            pub_date = DEFAULT_PUB_DATE
        elif pub_date.tzinfo is None:
            pub_date = pub_date.replace(tzinfo=timezone.utc)

        return Episode(
            file_path=file_path,
            file_name=file_path.name,
            title=metadata.title,
            artist=metadata.artist or defaults.author,
            duration=metadata.duration,
            pub_date=pub_date,
            image_url=metadata.image_url or defaults.image_url,
            url=build_enclosure_url(defaults.enclosure_base, file_path.name),
            file_size=metadata.file_size,
            guid=metadata.guid,
            summary=metadata.summary,
        )
