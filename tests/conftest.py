"""Shared fixtures for podfeed tests."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from mutagen.id3 import COMM, ID3, TDRC, TIT2, TPE1, USLT, WXXX

from podfeed.feeds.models import TrackMetadata
from podfeed.utils.errors import MetadataReadError

# MPEG-1 Layer III, 128 kbps, 44.1 kHz, no padding: 417 bytes per frame
MP3_FRAME = b"\xff\xfb\x90\x00" + b"\x00" * 413


class FakeMetadataSource:
    """Metadata source returning canned values keyed by file name."""

    def __init__(self, records: dict[str, TrackMetadata] | None = None) -> None:
        self.records: dict[str, TrackMetadata] = dict(records or {})
        self.calls: list[Path] = []

    def add(self, file_name: str, **fields: Any) -> None:
        self.records[file_name] = TrackMetadata(**fields)

    def read(self, path: Path) -> TrackMetadata:
        self.calls.append(path)
        if path.name not in self.records:
            raise MetadataReadError(path, "no such file")
        return self.records[path.name]


@pytest.fixture
def fake_metadata() -> FakeMetadataSource:
    """Empty fake metadata source; tests register files with `add`."""
    return FakeMetadataSource()


@pytest.fixture
def channel_options() -> dict[str, Any]:
    """Minimal valid channel options."""
    return {
        "title": "Test Podcast",
        "url": "http://example.com/",
        "description": "A podcast for tests",
        "enclosure_base": "http://example.com/audio",
    }


@pytest.fixture
def sample_channel_dict() -> dict[str, Any]:
    """Channel file contents with optional fields filled in."""
    return {
        "title": "Sample Show",
        "url": "https://example.com/",
        "description": "Sample description",
        "enclosure_base": "https://example.com/media/",
        "author": "Sample Host",
        "image_url": "https://example.com/cover.jpg",
        "categories": ["Technology"],
        "language": "en-us",
        "owner_email": "host@example.com",
    }


@pytest.fixture
def make_mp3(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a small, valid MP3 file with optional ID3 tags."""

    def _make(
        name: str,
        directory: Path | None = None,
        artist: str | None = None,
        title: str | None = None,
        date: str | None = None,
        image_url: str | None = None,
        lyrics: str | None = None,
        comment: str | None = None,
        frames: int = 40,
    ) -> Path:
        target_dir = directory or tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / name
        path.write_bytes(MP3_FRAME * frames)

        tags = ID3()
        if artist is not None:
            tags.add(TPE1(encoding=3, text=[artist]))
        if title is not None:
            tags.add(TIT2(encoding=3, text=[title]))
        if date is not None:
            tags.add(TDRC(encoding=3, text=[date]))
        if image_url is not None:
            tags.add(WXXX(encoding=3, desc="image", url=image_url))
        if lyrics is not None:
            tags.add(USLT(encoding=3, lang="eng", desc="", text=lyrics))
        if comment is not None:
            tags.add(COMM(encoding=3, lang="eng", desc="", text=[comment]))
        if len(tags):
            tags.save(str(path))

        return path

    return _make
