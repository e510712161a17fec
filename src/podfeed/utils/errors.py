"""Custom exceptions for podfeed."""

from pathlib import Path


class PodfeedError(Exception):
    """Base exception for all podfeed errors."""

    pass


class ConfigError(PodfeedError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass


class ConfigNotFoundError(ConfigError):
    """Configuration file not found."""

    pass


class FeedError(PodfeedError):
    """Feed assembly errors."""

    pass


class MissingAttributeError(FeedError):
    """A mandatory channel attribute is absent or blank."""

    def __init__(self, attribute: str) -> None:
        super().__init__(f"Missing mandatory channel attribute: {attribute}")
        self.attribute = attribute


class MetadataReadError(FeedError):
    """Audio metadata could not be read from a source file."""

    def __init__(self, path: Path | str, reason: str | None = None) -> None:
        message = f"Could not read metadata from {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.path = Path(path)


class MalformedUrlError(FeedError):
    """An enclosure URL could not be composed into a valid absolute URL."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Malformed enclosure URL: {url}")
        self.url = url


class TemplateRenderError(FeedError):
    """The feed template could not be loaded or rendered."""

    pass
