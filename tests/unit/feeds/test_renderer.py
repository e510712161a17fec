"""Tests for the feed renderer and the packaged RSS template."""

import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import patch

import feedparser
import pytest
from jinja2 import Environment

from podfeed.feeds.channel import Channel
from podfeed.feeds.renderer import FeedRenderer, format_duration, format_rfc822
from podfeed.utils.errors import MetadataReadError, TemplateRenderError

ITUNES = "{http://www.itunes.com/dtds/podcast-1.0.dtd}"


class TestFilters:
    """Tests for template filters."""

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [
            (0, "00:00:00"),
            (59.6, "00:01:00"),
            (61, "00:01:01"),
            (3600, "01:00:00"),
            (5025.2, "01:23:45"),
        ],
    )
    def test_format_duration(self, seconds: float, expected: str) -> None:
        """Seconds become HH:MM:SS."""
        assert format_duration(seconds) == expected

    def test_format_rfc822(self) -> None:
        """Datetimes are formatted for RSS date elements."""
        value = datetime(2021, 6, 1, 8, 30, tzinfo=timezone.utc)
        assert format_rfc822(value) == "Tue, 01 Jun 2021 08:30:00 +0000"

    def test_format_rfc822_naive(self) -> None:
        """Naive datetimes are treated as UTC."""
        assert format_rfc822(datetime(2021, 6, 1)) == "Tue, 01 Jun 2021 00:00:00 +0000"


class TestDefaultTemplate:
    """Tests for the packaged RSS template."""

    @pytest.fixture
    def channel(self, sample_channel_dict: dict, fake_metadata) -> Channel:
        fake_metadata.add(
            "ep1.mp3",
            title="First & Foremost",
            artist="Guest",
            duration=125,
            pub_date=datetime(2021, 1, 1, tzinfo=timezone.utc),
            file_size=1000,
            guid="guid-1",
            summary="Notes <b>one</b>",
        )
        fake_metadata.add(
            "ep 2.mp3",
            title="Second",
            duration=3600,
            pub_date=datetime(2021, 6, 1, tzinfo=timezone.utc),
            file_size=2000,
            guid="guid-2",
        )
        return Channel(
            ["/feed/ep1.mp3", "/feed/ep 2.mp3"],
            sample_channel_dict,
            metadata_source=fake_metadata,
        )

    def test_output_is_well_formed_xml(self, channel: Channel) -> None:
        """The rendered feed parses as XML with an RSS 2.0 root."""
        root = ET.fromstring(channel.render().encode("utf-8"))

        assert root.tag == "rss"
        assert root.attrib["version"] == "2.0"

    def test_channel_elements(self, channel: Channel) -> None:
        """Channel attributes, including pass-through ones, are rendered."""
        root = ET.fromstring(channel.render().encode("utf-8"))
        element = root.find("channel")

        assert element.findtext("title") == "Sample Show"
        assert element.findtext("link") == "https://example.com/"
        assert element.findtext("description") == "Sample description"
        assert element.findtext("language") == "en-us"
        assert element.findtext(f"{ITUNES}author") == "Sample Host"
        assert element.find(f"{ITUNES}image").attrib["href"] == "https://example.com/cover.jpg"
        assert element.find(f"{ITUNES}category").attrib["text"] == "Technology"
        assert element.find(f"{ITUNES}owner").findtext(f"{ITUNES}email") == "host@example.com"
        assert element.findtext(f"{ITUNES}explicit") == "no"

    def test_items_in_feed_order(self, channel: Channel) -> None:
        """Items appear newest first with escaped enclosure URLs."""
        parsed = feedparser.parse(channel.render())

        assert [entry.title for entry in parsed.entries] == ["Second", "First & Foremost"]
        assert parsed.entries[0].enclosures[0].href == (
            "https://example.com/media/ep%202.mp3"
        )
        assert parsed.entries[1].enclosures[0].href == "https://example.com/media/ep1.mp3"

    def test_item_elements(self, channel: Channel) -> None:
        """Per-episode values land in the right elements."""
        root = ET.fromstring(channel.render().encode("utf-8"))
        items = root.find("channel").findall("item")
        first = items[1]

        enclosure = first.find("enclosure")
        assert enclosure.attrib["length"] == "1000"
        assert enclosure.attrib["type"] == "audio/mpeg"
        assert first.findtext("guid") == "guid-1"
        assert first.findtext("pubDate") == "Fri, 01 Jan 2021 00:00:00 +0000"
        assert first.findtext(f"{ITUNES}duration") == "00:02:05"
        assert first.findtext(f"{ITUNES}author") == "Guest"
        assert first.findtext("description") == "Notes <b>one</b>"

    def test_episode_inherits_channel_author_and_image(self, channel: Channel) -> None:
        """Episodes without their own values show the channel's."""
        root = ET.fromstring(channel.render().encode("utf-8"))
        second = root.find("channel").findall("item")[0]

        assert second.findtext(f"{ITUNES}author") == "Sample Host"
        assert second.find(f"{ITUNES}image").attrib["href"] == "https://example.com/cover.jpg"

    def test_special_characters_escaped(self, channel: Channel) -> None:
        """Text is XML-escaped."""
        rss = channel.render()

        assert "First &amp; Foremost" in rss
        assert "<b>one</b>" not in rss

    def test_optional_elements_omitted(self, channel_options: dict) -> None:
        """Unset optional attributes produce no empty elements."""
        rss = Channel([], channel_options).render()

        assert "<language>" not in rss
        assert "itunes:image" not in rss
        assert "itunes:category" not in rss

    def test_explicit_flag(self, channel_options: dict) -> None:
        """A true explicit flag renders as 'yes'."""
        channel_options["explicit"] = True

        assert "<itunes:explicit>yes</itunes:explicit>" in Channel([], channel_options).render()

    def test_keyword_list_joined(self, channel_options: dict) -> None:
        """Keyword lists are joined with commas."""
        channel_options["keywords"] = ["python", "audio"]

        rss = Channel([], channel_options).render()

        assert "<itunes:keywords>python,audio</itunes:keywords>" in rss

    def test_render_failure_propagates(self, channel_options: dict, fake_metadata) -> None:
        """A metadata error during rendering is not swallowed."""
        channel = Channel(["/feed/nope.mp3"], channel_options, metadata_source=fake_metadata)

        with pytest.raises(MetadataReadError):
            FeedRenderer().render(channel)


class TestCustomTemplates:
    """Tests for injected templates."""

    def test_template_source(self, channel_options: dict) -> None:
        """Template text can be passed in directly."""
        renderer = FeedRenderer("{{ channel.title }}|{{ items | length }}")

        assert renderer.render(Channel([], channel_options)) == "Test Podcast|0"

    def test_template_sees_pass_through_attributes(self, channel_options: dict) -> None:
        """Unknown channel options are reachable from the template."""
        channel_options["mood"] = "cheerful"
        renderer = FeedRenderer("{{ channel.extras.mood }}/{{ channel.attributes.mood }}")

        assert renderer.render(Channel([], channel_options)) == "cheerful/cheerful"

    def test_template_from_path(self, tmp_path: Path, channel_options: dict) -> None:
        """Templates can be loaded from a file."""
        template = tmp_path / "feed.j2"
        template.write_text("<feed>{{ channel.description }}</feed>")

        renderer = FeedRenderer.from_path(template)

        assert renderer.render(Channel([], channel_options)) == "<feed>A podcast for tests</feed>"

    def test_loaded_template_passed_in(self, channel_options: dict) -> None:
        """A template loaded elsewhere is used as is."""
        template = Environment().from_string("{{ channel.url }}")

        renderer = FeedRenderer(template=template)

        assert renderer.template is template
        assert renderer.render(Channel([], channel_options)) == "http://example.com/"

    def test_from_path_initializes_renderer(
        self, tmp_path: Path, channel_options: dict
    ) -> None:
        """from_path goes through the regular constructor."""
        template = tmp_path / "feed.j2"
        template.write_text("{{ channel.title }}")

        with patch.object(FeedRenderer, "__init__", autospec=True, return_value=None) as init:
            FeedRenderer.from_path(template)

        init.assert_called_once()
        assert init.call_args.kwargs["template"].render(channel={"title": "x"}) == "x"

    def test_template_path_missing(self, tmp_path: Path) -> None:
        """A missing template file raises TemplateRenderError."""
        with pytest.raises(TemplateRenderError):
            FeedRenderer.from_path(tmp_path / "missing.j2")

    def test_template_syntax_error(self) -> None:
        """Broken template syntax raises TemplateRenderError."""
        with pytest.raises(TemplateRenderError, match="Could not load"):
            FeedRenderer("{% for item in items %}")

    def test_template_runtime_error(self, channel_options: dict) -> None:
        """Errors while rendering raise TemplateRenderError."""
        renderer = FeedRenderer("{{ channel.missing.deeper }}")

        with pytest.raises(TemplateRenderError, match="Could not render"):
            renderer.render(Channel([], channel_options))
