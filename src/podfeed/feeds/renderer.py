"""Render a channel into an RSS 2.0 feed document with Jinja2."""

import logging
from datetime import datetime, timezone
from email.utils import format_datetime
from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import Environment, FileSystemLoader, PackageLoader, Template, TemplateError

from podfeed.utils.errors import TemplateRenderError

if TYPE_CHECKING:
    from podfeed.feeds.channel import Channel

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_NAME = "channel.rss.j2"


def format_rfc822(value: datetime) -> str:
    """Format a datetime for RSS date elements (RFC 2822)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return format_datetime(value)


def format_duration(seconds: float) -> str:
    """Format a length in seconds as HH:MM:SS for itunes:duration."""
    total = int(round(seconds or 0))
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def _build_environment(loader=None) -> Environment:
    env = Environment(
        loader=loader,
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["rfc822"] = format_rfc822
    env.filters["duration"] = format_duration
    return env


class FeedRenderer:
    """Render channels through a Jinja2 template.

    The template is always handed in explicitly: as template source text,
    as a file path via `from_path`, or as the template shipped inside the
    package when nothing is given.

    Example:
        >>> renderer = FeedRenderer.from_path(Path("my-feed.rss.j2"))
        >>> rss = renderer.render(channel)
    """

    def __init__(
        self, template_source: str | None = None, *, template: Template | None = None
    ) -> None:
        """Initialize the renderer.

        Args:
            template_source: Jinja2 template text (default: packaged template)
            template: Already loaded template; takes precedence over template_source

        Raises:
            TemplateRenderError: If the template cannot be loaded or parsed
        """
        if template is not None:
            self.template: Template = template
            return

        try:
            if template_source is None:
                env = _build_environment(PackageLoader("podfeed", "templates"))
                self.template = env.get_template(DEFAULT_TEMPLATE_NAME)
            else:
                self.template = _build_environment().from_string(template_source)
        except TemplateError as e:
            raise TemplateRenderError(f"Could not load feed template: {e}") from e

    @classmethod
    def from_path(cls, path: Path) -> "FeedRenderer":
        """Create a renderer from a template file.

        Args:
            path: Path to a Jinja2 template file

        Returns:
            FeedRenderer using that template

        Raises:
            TemplateRenderError: If the file cannot be read or parsed
        """
        path = Path(path)
        try:
            env = _build_environment(FileSystemLoader(str(path.parent)))
            template = env.get_template(path.name)
        except TemplateError as e:
            raise TemplateRenderError(f"Could not load feed template {path}: {e}") from e
        logger.debug("Loaded feed template from %s", path)
        return cls(template=template)

    def render(self, channel: "Channel") -> str:
        """Render the channel and its episodes.

        Args:
            channel: Channel to render; its items are computed here

        Returns:
            Feed document text

        Raises:
            TemplateRenderError: If rendering fails
            MetadataReadError: If an episode cannot be resolved
        """
        items = channel.items()

        try:
            return self.template.render(
                channel=channel,
                items=items,
                build_date=datetime.now(timezone.utc),
            )
        except TemplateError as e:
            raise TemplateRenderError(f"Could not render feed: {e}") from e
