"""Awesome-list README parsing, source HTTP handling and RSS feed parsing."""

from datetime import datetime, timezone

import pytest
import requests

from skillscope.modules.ingestion import (
    AwesomeListSource,
    SkillLink,
    extract_author,
    extract_skill_links,
    fetch_feed,
    parse_feed,
)
from skillscope.shared.errors import IngestionError
from skillscope.shared.types import ContentType, SkillCategory

TREE = "https://github.com/openclaw/skills/tree/main/skills"
RAW = "https://raw.githubusercontent.com/openclaw/skills/main/skills"

README = f"""# Awesome OpenClaw Skills

- [intro]({TREE}/zed/intro/SKILL.md) - before any section

<details>
<summary><h3 style="display:inline">Git & GitHub</h3></summary>

- [gh-pr]({TREE}/alice/gh-pr/SKILL.md) - Pull requests
- [gh-pr again]({TREE}/alice/gh-pr/SKILL.md) - Duplicate

</details>
<details>
<summary><h3>Security & Passwords</h3></summary>

- [vault]({TREE}/bob/vault/SKILL.md) - Secrets | [audit]({TREE}/bob/audit/SKILL.md)

</details>
<summary><h3>Brand New Section</h3></summary>

- [misc]({TREE}/carol/misc/SKILL.md)
"""

RSS = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>AI Daily Brief</title>
    <item>
      <title>Agents Everywhere</title>
      <link>https://example.com/episodes/1</link>
      <description>&lt;p&gt;Agents &lt;b&gt;everywhere&lt;/b&gt;&lt;/p&gt;</description>
      <pubDate>Mon, 02 Feb 2026 10:00:00 GMT</pubDate>
    </item>
    <item>
      <title>Missing link</title>
    </item>
    <item>
      <title>Bare Episode</title>
      <link>https://example.com/episodes/2</link>
    </item>
  </channel>
</rss>
"""


class FakeResponse:
    def __init__(self, text="", status=200):
        self.text = text
        self.content = text.encode("utf-8")
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requested = []

    def get(self, url, timeout=None):
        self.requested.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.response


class TestExtractSkillLinks:
    def test_links_are_raw_urls_in_readme_order(self):
        links = extract_skill_links(README, cap=100)
        assert [link.raw_url for link in links] == [
            f"{RAW}/zed/intro/SKILL.md",
            f"{RAW}/alice/gh-pr/SKILL.md",
            f"{RAW}/bob/vault/SKILL.md",
            f"{RAW}/bob/audit/SKILL.md",
            f"{RAW}/carol/misc/SKILL.md",
        ]

    def test_categories_follow_sections(self):
        categories = [link.category for link in extract_skill_links(README, cap=100)]
        assert categories == [
            SkillCategory.UNCATEGORIZED,
            SkillCategory.BUILDING_AGENTS,
            SkillCategory.SECURITY,
            SkillCategory.SECURITY,
            SkillCategory.UNCATEGORIZED,
        ]

    def test_cap(self):
        assert len(extract_skill_links(README, cap=2)) == 2

    def test_empty_readme(self):
        assert extract_skill_links("", cap=10) == []


def test_extract_author():
    assert extract_author(f"{RAW}/alice/gh-pr/SKILL.md") == "alice"
    assert extract_author("https://example.com/README.md") is None


class TestAwesomeListSource:
    def test_fetch_listing(self, config):
        session = FakeSession(FakeResponse(README))
        source = AwesomeListSource(config, session=session)
        assert len(source.fetch_listing()) == 5
        assert session.requested == [
            (config.skills_index_url, config.listing_timeout_seconds)
        ]

    @pytest.mark.parametrize(
        "session",
        [
            FakeSession(error=requests.ConnectionError("offline")),
            FakeSession(FakeResponse("", status=503)),
        ],
    )
    def test_listing_failure_is_fatal(self, config, session):
        with pytest.raises(IngestionError, match="skills listing"):
            AwesomeListSource(config, session=session).fetch_listing()

    def test_fetch_document(self, config):
        session = FakeSession(FakeResponse("---\nname: x\n---\n"))
        source = AwesomeListSource(config, session=session)
        link = SkillLink(raw_url=f"{RAW}/a/x/SKILL.md")
        assert source.fetch_document(link) == "---\nname: x\n---\n"
        assert session.requested == [(link.raw_url, config.fetch_timeout_seconds)]

    def test_fetch_document_http_error_propagates(self, config):
        source = AwesomeListSource(config, session=FakeSession(FakeResponse("", status=404)))
        with pytest.raises(requests.HTTPError):
            source.fetch_document(SkillLink(raw_url=f"{RAW}/a/x/SKILL.md"))


class TestFeed:
    def test_parse_feed(self):
        items = parse_feed(RSS)
        assert [item.url for item in items] == [
            "https://example.com/episodes/1",
            "https://example.com/episodes/2",
        ]
        first, second = items
        assert first.title == "Agents Everywhere"
        assert first.content_type == ContentType.PODCAST
        assert first.description == "Agents everywhere"
        assert first.published_at == datetime(2026, 2, 2, 10, 0, tzinfo=timezone.utc)
        assert second.description == "Bare Episode"
        assert second.published_at is not None

    def test_fetch_feed(self, config):
        assert len(fetch_feed(config, session=FakeSession(FakeResponse(RSS)))) == 2

    def test_fetch_feed_failure_yields_nothing(self, config):
        session = FakeSession(error=requests.Timeout("slow"))
        assert fetch_feed(config, session=session) == []
