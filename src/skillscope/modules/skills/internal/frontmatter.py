"""Tolerant front-matter readers.

Skill documents in the wild carry a loose YAML subset: quoted and bare
scalars, folded descriptions, inline and block lists. These helpers read
exactly that subset with regular expressions and never raise; anything
they cannot read comes back empty.
"""

from __future__ import annotations

import re
from typing import List, Tuple

FRONTMATTER_RE = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*\r?$",
    re.DOTALL | re.MULTILINE,
)
BLOCK_INDICATORS = {">", "|", ">-", "|-", ">+", "|+"}
_BINS_RE = re.compile(r"bins:[ \t]*\[([^\]]*)\]")
_QUOTES_RE = re.compile(r"^[\"']|[\"']$")


def split_frontmatter(content: str) -> Tuple[str, str]:
    """Return (frontmatter, body). Without an opening delimiter the whole input is body."""
    match = FRONTMATTER_RE.match(content)
    if not match:
        return "", content
    return match.group(1).rstrip("\r\n"), content[match.end():]


def strip_quotes(value: str) -> str:
    return _QUOTES_RE.sub("", value.strip()).strip()


def extract_scalar(frontmatter: str, key: str) -> str:
    """Read ``key: "v"``, ``key: 'v'`` or ``key: v``. Empty string when absent."""
    pattern = re.compile(
        rf"^{re.escape(key)}:[ \t]*(?:\"([^\"\n]*)\"|'([^'\n]*)'|(\S.*))",
        re.MULTILINE,
    )
    match = pattern.search(frontmatter)
    if not match:
        return ""
    for group in match.groups():
        if group is not None:
            return group.strip()
    return ""


def extract_description(frontmatter: str) -> str:
    """Description scalar, unfolding indented block scalars (``>``, ``|``, ``>-``, ``|-``)."""
    description = extract_scalar(frontmatter, "description")
    if description in BLOCK_INDICATORS:
        description = ""
    if description or not frontmatter:
        return description

    block = re.search(
        r"^description:[ \t]*(?:[>|][-+]?)?[ \t]*\r?\n((?:[ \t]+\S[^\n]*(?:\n|\Z))+)",
        frontmatter,
        re.MULTILINE,
    )
    if not block:
        return ""
    return " ".join(line.strip() for line in block.group(1).splitlines() if line.strip())


def _split_inline(items: str) -> List[str]:
    results: List[str] = []
    for item in items.split(","):
        cleaned = strip_quotes(item)
        if cleaned:
            results.append(cleaned)
    return results


def extract_array(frontmatter: str, key: str) -> List[str]:
    """Read ``key: [a, "b"]`` or an indented ``- item`` block list. Inline form wins."""
    inline = re.search(
        rf"^{re.escape(key)}:[ \t]*\[([^\]]*)\]", frontmatter, re.MULTILINE
    )
    if inline:
        return _split_inline(inline.group(1))

    block = re.search(
        rf"^{re.escape(key)}:[ \t]*\r?\n((?:[ \t]+-[^\n]*(?:\n|\Z))*)",
        frontmatter,
        re.MULTILINE,
    )
    if not block:
        return []

    results: List[str] = []
    for line in block.group(1).splitlines():
        item = re.match(r"^\s+-\s+(.+)", line)
        if item:
            cleaned = strip_quotes(item.group(1))
            if cleaned:
                results.append(cleaned)
    return results


def extract_bins(frontmatter: str) -> List[str]:
    """Collect every nested ``bins: [...]`` list (tool-dependency metadata)."""
    results: List[str] = []
    for match in _BINS_RE.finditer(frontmatter):
        results.extend(_split_inline(match.group(1)))
    return results


__all__ = [
    "split_frontmatter",
    "strip_quotes",
    "extract_scalar",
    "extract_description",
    "extract_array",
    "extract_bins",
    "BLOCK_INDICATORS",
]
