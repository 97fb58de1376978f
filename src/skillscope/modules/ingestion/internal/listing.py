"""Awesome-list README parsing.

The README links each skill as
``github.com/openclaw/skills/tree/main/skills/{author}/{name}/SKILL.md`` and
groups links under ``<summary><h3>Heading</h3></summary>`` sections.
"""

from __future__ import annotations

import re
from typing import List, Optional

from skillscope.shared.types import SkillCategory
from ..public.types import SkillLink

_B = SkillCategory.BUILDING_AGENTS
_R = SkillCategory.REAL_BUILDS

CATEGORY_MAP: dict[str, SkillCategory] = {
    "Coding Agents & IDEs": _B,
    "Git & GitHub": _B,
    "Web & Frontend Development": _B,
    "DevOps & Cloud": _B,
    "Browser & Automation": _B,
    "Image & Video Generation": _B,
    "AI & LLMs": _B,
    "CLI Utilities": _B,
    "Moltbook": _B,
    "Data & Analytics": _B,
    "Search & Research": _B,
    "Clawdbot Tools": _B,
    "Notes & PKM": _B,
    "PDF & Documents": _B,
    "Self-Hosted & Automation": _B,
    "iOS & macOS Development": _B,
    "Apple Apps & Services": _B,
    "Speech & Transcription": _B,
    "Smart Home & IoT": _B,
    "Security & Passwords": SkillCategory.SECURITY,
    "Agent-to-Agent Protocols": SkillCategory.MULTI_AGENT,
    "Marketing & Sales": _R,
    "Productivity & Tasks": _R,
    "Finance": _R,
    "Media & Streaming": _R,
    "Communication": _R,
    "Transportation": _R,
    "Shopping & E-commerce": _R,
    "Calendar & Scheduling": _R,
    "Gaming": _R,
    "Personal Development": _R,
    "Health & Fitness": _R,
}

TREE_URL_RE = re.compile(
    r"https://github\.com/openclaw/skills/tree/main/skills/[^\s)]+/SKILL\.md"
)
SECTION_RE = re.compile(r"<summary><h3[^>]*>(.*?)</h3></summary>", re.IGNORECASE)
AUTHOR_RE = re.compile(r"/skills/([^/]+)/[^/]+/SKILL\.md$")

TREE_PREFIX = "github.com/openclaw/skills/tree/main/"
RAW_PREFIX = "raw.githubusercontent.com/openclaw/skills/main/"


def to_raw_url(tree_url: str) -> str:
    return tree_url.replace(TREE_PREFIX, RAW_PREFIX, 1)


def extract_skill_links(readme: str, cap: int) -> List[SkillLink]:
    """Unique links in README order, tagged with their section's category, at most ``cap``."""
    category = SkillCategory.UNCATEGORIZED
    seen: set[str] = set()
    links: List[SkillLink] = []

    for line in readme.splitlines():
        section = SECTION_RE.search(line)
        if section:
            category = CATEGORY_MAP.get(section.group(1).strip(), SkillCategory.UNCATEGORIZED)

        for url in TREE_URL_RE.findall(line):
            if url in seen:
                continue
            seen.add(url)
            links.append(SkillLink(raw_url=to_raw_url(url), category=category))
            if len(links) >= cap:
                return links

    return links


def extract_author(raw_url: str) -> Optional[str]:
    match = AUTHOR_RE.search(raw_url)
    return match.group(1) if match else None


__all__ = [
    "CATEGORY_MAP",
    "to_raw_url",
    "extract_skill_links",
    "extract_author",
]
