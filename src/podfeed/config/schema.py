"""Configuration schema models using Pydantic."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ChannelConfig(BaseModel):
    """Channel options as stored in a channel file.

    Every field is optional here; the mandatory ones are enforced when the
    Channel is built, after command-line options have been merged in.
    Unknown keys are kept and passed through to the feed template.
    """

    model_config = ConfigDict(extra="allow")

    title: str | None = None
    url: str | None = None
    description: str | None = None
    enclosure_base: str | None = None
    author: str | None = None
    image_url: str | None = None
    categories: list[str] = Field(default_factory=list)

    # Presentation attributes understood by the default template
    language: str | None = None
    subtitle: str | None = None
    copyright: str | None = None
    explicit: bool | str | None = None
    keywords: list[str] | str | None = None

    @field_validator("categories", mode="before")
    @classmethod
    def _single_category(cls, value: Any) -> Any:
        """Allow `categories: Technology` as shorthand for a one-item list."""
        if isinstance(value, str):
            return [value]
        if value is None:
            return []
        return value

    def to_options(self) -> dict[str, Any]:
        """Convert to a Channel options mapping, dropping unset values."""
        options = self.model_dump(mode="python", exclude_none=True)
        if not options.get("categories"):
            options.pop("categories", None)
        return options


def merge_options(*layers: dict[str, Any]) -> dict[str, Any]:
    """Merge option mappings; later layers win, None values never override.

    Args:
        layers: Option mappings, lowest precedence first

    Returns:
        Merged options
    """
    merged: dict[str, Any] = {}
    for layer in layers:
        for key, value in layer.items():
            if value is None:
                continue
            merged[key] = value
    return merged
