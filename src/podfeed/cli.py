"""CLI entry point for podfeed."""

import sys
from pathlib import Path

import typer
from rich.console import Console

from podfeed.config.logging import setup_logging
from podfeed.config.manager import ConfigManager
from podfeed.config.schema import merge_options
from podfeed.feeds.channel import Channel
from podfeed.feeds.renderer import FeedRenderer
from podfeed.utils.errors import (
    ConfigError,
    MissingAttributeError,
    PodfeedError,
)
from podfeed.utils.files import write_file_atomic

app = typer.Typer(
    name="podfeed",
    help="Build podcast RSS feeds from directories of audio files",
    no_args_is_help=True,
)
# Feeds go to stdout, so everything meant for humans goes to stderr
console = Console(stderr=True)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"
    ),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Write logs to file"
    ),
) -> None:
    """podfeed - Turn a folder of MP3 files into a podcast feed."""
    setup_logging(verbose=verbose, log_file=log_file)


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from podfeed import __version__

    typer.echo(f"podfeed v{__version__}")


@app.command("init")
def init_channel(
    directory: Path = typer.Argument(
        Path("."), help="Directory to write channel.yaml into"
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite an existing channel file"
    ),
) -> None:
    """Create a starter channel.yaml.

    Examples:
        podfeed init ~/podcast/episodes
    """
    try:
        path = ConfigManager().create_default_channel_file(directory, overwrite=force)
    except FileExistsError as e:
        console.print(f"[red]✗[/red] {e}")
        console.print("[dim]  Use --force to overwrite it[/dim]")
        sys.exit(1)

    console.print(f"[green]✓[/green] Created {path}")


@app.command("build")
def build_feed(
    sources: list[Path] = typer.Argument(
        ..., help="MP3 files or directories containing MP3 files"
    ),
    title: str | None = typer.Option(None, "--title", help="Podcast title"),
    url: str | None = typer.Option(None, "--url", help="Podcast website URL"),
    description: str | None = typer.Option(
        None, "--description", help="Short description of the podcast"
    ),
    enclosure_base: str | None = typer.Option(
        None, "--enclosure-base", "-e", help="Base URL the audio files are served from"
    ),
    author: str | None = typer.Option(
        None, "--author", help="Default author for episodes"
    ),
    image_url: str | None = typer.Option(
        None, "--image-url", help="Cover image URL, also the episode default"
    ),
    language: str | None = typer.Option(
        None, "--language", help="Feed language (e.g., en-us)"
    ),
    subtitle: str | None = typer.Option(None, "--subtitle", help="Podcast subtitle"),
    categories: list[str] | None = typer.Option(
        None, "--category", "-c", help="iTunes category (repeatable)"
    ),
    channel_file: Path | None = typer.Option(
        None, "--channel-file", help="Channel YAML file (default: channel.yaml in the first directory)"
    ),
    template: Path | None = typer.Option(
        None, "--template", help="Custom Jinja2 feed template"
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write the feed to this file instead of stdout"
    ),
) -> None:
    """Build an RSS feed from audio files.

    Channel attributes come from channel.yaml and can be overridden on the
    command line. Title, URL, description and enclosure base are required.

    Examples:
        podfeed build ~/podcast/episodes -o feed.rss

        podfeed build ep1.mp3 ep2.mp3 --title "My Show" --url https://example.com \\
            --description "A show" --enclosure-base https://example.com/media
    """
    try:
        config = ConfigManager(channel_file).load_for_sources(sources)
        options = merge_options(
            config.to_options(),
            {
                "title": title,
                "url": url,
                "description": description,
                "enclosure_base": enclosure_base,
                "author": author,
                "image_url": image_url,
                "language": language,
                "subtitle": subtitle,
                "categories": categories or None,
            },
        )

        renderer = FeedRenderer.from_path(template) if template else None
        channel = Channel(sources, options, renderer=renderer)
        rss = channel.render()

        if output is None:
            sys.stdout.write(rss)
        else:
            write_file_atomic(output, rss)
            console.print(
                f"[green]✓[/green] Wrote {len(channel.source_files)} episode(s) to {output}"
            )

    except MissingAttributeError as e:
        flag = e.attribute.replace("_", "-")
        console.print(f"[red]✗[/red] {e}")
        console.print(f"[dim]  Pass --{flag} or set '{e.attribute}' in channel.yaml[/dim]")
        sys.exit(1)
    except ConfigError as e:
        console.print(f"[red]✗[/red] {e}")
        sys.exit(1)
    except PodfeedError as e:
        console.print(f"[red]✗[/red] Error: {e}")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]✗[/red] File error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    app()
