"""Utility functions and helpers for podfeed."""

from podfeed.utils.errors import (
    ConfigError,
    ConfigNotFoundError,
    FeedError,
    InvalidConfigError,
    MalformedUrlError,
    MetadataReadError,
    MissingAttributeError,
    PodfeedError,
    TemplateRenderError,
)

__all__ = [
    "PodfeedError",
    "ConfigError",
    "InvalidConfigError",
    "ConfigNotFoundError",
    "FeedError",
    "MissingAttributeError",
    "MetadataReadError",
    "MalformedUrlError",
    "TemplateRenderError",
]
