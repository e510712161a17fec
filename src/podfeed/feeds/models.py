"""Data models for podcast episodes and their raw track metadata."""

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

AUDIO_MIME_TYPE = "audio/mpeg"


class TrackMetadata(BaseModel):
    """Raw values read from one audio file.

    Text fields that the file does not carry are empty strings.
    """

    artist: str = ""
    title: str = ""
    duration: float = Field(default=0.0, ge=0, description="Length in seconds")
    image_url: str = ""
    pub_date: datetime | None = None
    file_size: int = Field(default=0, ge=0, description="File size in bytes")
    guid: str = ""
    summary: str = ""


class ChannelDefaults(BaseModel):
    """Channel-level values an episode needs while it is being resolved."""

    model_config = ConfigDict(frozen=True)

    enclosure_base: str
    author: str = ""
    image_url: str = ""


class Episode(BaseModel):
    """Represents a single podcast episode built from one audio file."""

    model_config = ConfigDict(frozen=True)

    file_path: Path
    file_name: str
    title: str
    artist: str
    duration: float = Field(..., ge=0, description="Length in seconds")
    pub_date: datetime
    image_url: str
    url: str  # Absolute enclosure URL
    file_size: int = Field(default=0, ge=0)
    guid: str = ""
    summary: str = ""
    mime_type: str = AUDIO_MIME_TYPE

    @property
    def display_title(self) -> str:
        """Title to show in the feed, falling back to the file name."""
        return self.title or self.file_name
