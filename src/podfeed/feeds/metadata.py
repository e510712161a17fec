"""Audio metadata sources.

The default source reads ID3 tags and stream information with mutagen.
Anything with a matching `read(path)` method can stand in for it, which is
how tests feed canned metadata into the pipeline.
"""

import hashlib
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Protocol

import mutagen
from mutagen.id3 import ID3

from podfeed.feeds.models import TrackMetadata
from podfeed.utils.errors import MetadataReadError

logger = logging.getLogger(__name__)

HASH_CHUNK_SIZE = 64 * 1024


class MetadataSource(Protocol):
    """Anything that can turn an audio file path into track metadata."""

    def read(self, path: Path) -> TrackMetadata:
        """Read metadata for one file.

        Raises:
            MetadataReadError: If the file cannot be read
        """
        ...


def file_digest(path: Path) -> str:
    """Compute the SHA-1 hex digest of a file's contents."""
    digest = hashlib.sha1()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(HASH_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def modification_time(path: Path) -> datetime:
    """Return the file's last-modified time as an aware UTC datetime."""
    return datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)


class MutagenMetadataSource:
    """Read episode metadata from audio files using mutagen.

    Field mapping (ID3):
    - artist: TPE1
    - title: TIT2
    - summary: USLT (lyrics), else COMM
    - image_url: WXXX (user-defined URL)
    - pub_date: TDRC when it holds a full date, else the file's mtime
    """

    def read(self, path: Path) -> TrackMetadata:
        """Read metadata for one audio file.

        Args:
            path: Audio file to read

        Returns:
            TrackMetadata with best-effort values

        Raises:
            MetadataReadError: If the file is missing, unreadable, or not audio
        """
        try:
            audio = mutagen.File(path)
        except (mutagen.MutagenError, OSError) as e:
            raise MetadataReadError(path, str(e)) from e

        if audio is None:
            raise MetadataReadError(path, "unrecognized audio format")

        tags = audio.tags if isinstance(audio.tags, ID3) else None
        if tags is None:
            logger.debug("No ID3 tags in %s", path)

        try:
            file_size = path.stat().st_size
            guid = file_digest(path)
            pub_date = self._recording_date(tags) or modification_time(path)
        except OSError as e:
            raise MetadataReadError(path, str(e)) from e

        info = getattr(audio, "info", None)
        duration = float(getattr(info, "length", 0.0) or 0.0)

        return TrackMetadata(
            artist=self._text(tags, "TPE1"),
            title=self._text(tags, "TIT2"),
            duration=duration,
            image_url=self._url(tags, "WXXX"),
            pub_date=pub_date,
            file_size=file_size,
            guid=guid,
            summary=self._lyrics(tags) or self._text(tags, "COMM"),
        )

    @staticmethod
    def _frames(tags: ID3 | None, frame_id: str) -> list[Any]:
        if tags is None:
            return []
        return tags.getall(frame_id)

    def _text(self, tags: ID3 | None, frame_id: str) -> str:
        for frame in self._frames(tags, frame_id):
            values = [str(value).strip() for value in frame.text if str(value).strip()]
            if values:
                return values[0]
        return ""

    def _lyrics(self, tags: ID3 | None) -> str:
        for frame in self._frames(tags, "USLT"):
            if frame.text and frame.text.strip():
                return frame.text.strip()
        return ""

    def _url(self, tags: ID3 | None, frame_id: str) -> str:
        for frame in self._frames(tags, frame_id):
            if frame.url and frame.url.strip():
                return frame.url.strip()
        return ""

    def _recording_date(self, tags: ID3 | None) -> datetime | None:
        for frame in self._frames(tags, "TDRC"):
            for stamp in frame.text:
                if not (stamp.year and stamp.month and stamp.day):
                    continue
                try:
                    return datetime(
                        stamp.year,
                        stamp.month,
                        stamp.day,
                        stamp.hour or 0,
                        stamp.minute or 0,
                        stamp.second or 0,
                        tzinfo=timezone.utc,
                    )
                except ValueError:
                    logger.debug("Ignoring invalid recording date %s", stamp.text)
        return None
