"""HTTP access for ingestion sources."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import List, Optional, Protocol

import feedparser
import requests

from skillscope.shared.config import Config
from skillscope.shared.errors import IngestionError
from skillscope.shared.types import ContentType
from skillscope.shared.utils import utcnow
from ..public.types import ContentCandidate, SkillLink
from .listing import extract_skill_links

logger = logging.getLogger(__name__)

_HTML_TAG_RE = re.compile(r"<[^>]+>")


def build_session(config: Config) -> requests.Session:
    session = requests.Session()
    session.headers.update({"User-Agent": config.user_agent})
    return session


class SkillSource(Protocol):
    """Where skill documents come from."""

    def fetch_listing(self) -> List[SkillLink]: ...

    def fetch_document(self, link: SkillLink) -> str: ...


class AwesomeListSource:
    """Skills linked from the awesome-openclaw-skills README."""

    def __init__(self, config: Config, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or build_session(config)

    def fetch_listing(self) -> List[SkillLink]:
        url = self.config.skills_index_url
        try:
            resp = self.session.get(url, timeout=self.config.listing_timeout_seconds)
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise IngestionError(f"Failed to fetch skills listing {url}: {exc}") from exc
        return extract_skill_links(resp.text, self.config.listing_cap)

    def fetch_document(self, link: SkillLink) -> str:
        resp = self.session.get(link.raw_url, timeout=self.config.fetch_timeout_seconds)
        resp.raise_for_status()
        return resp.text


def _published(entry) -> Optional[datetime]:
    parsed = entry.get("published_parsed") or entry.get("updated_parsed")
    if not parsed:
        return None
    return datetime(*parsed[:6], tzinfo=timezone.utc)


def parse_feed(payload: bytes | str) -> List[ContentCandidate]:
    """Podcast episodes from an RSS document. Items without title or link are skipped."""
    feed = feedparser.parse(payload)
    items: List[ContentCandidate] = []
    for entry in feed.entries:
        title = (entry.get("title") or "").strip()
        link = (entry.get("link") or "").strip()
        if not title or not link:
            continue
        description = _HTML_TAG_RE.sub("", entry.get("summary") or entry.get("description") or "")
        items.append(
            ContentCandidate(
                title=title,
                content_type=ContentType.PODCAST,
                description=description.strip() or title,
                url=link,
                published_at=_published(entry) or utcnow(),
            )
        )
    return items


def fetch_feed(config: Config, session: Optional[requests.Session] = None) -> List[ContentCandidate]:
    """Fetch and parse the content feed. Failures are logged and yield no items."""
    session = session or build_session(config)
    try:
        resp = session.get(config.content_feed_url, timeout=config.feed_timeout_seconds)
        resp.raise_for_status()
    except requests.RequestException as exc:
        logger.warning("Could not fetch content feed %s, skipping: %s", config.content_feed_url, exc)
        return []
    return parse_feed(resp.content)


__all__ = [
    "SkillSource",
    "AwesomeListSource",
    "build_session",
    "parse_feed",
    "fetch_feed",
]
