"""Regex-based extractors used by the document parser."""

from .frontmatter import (
    extract_array,
    extract_bins,
    extract_description,
    extract_scalar,
    split_frontmatter,
    strip_quotes,
)
from .tools import (
    TOOL_STOP_WORDS,
    ToolAccumulator,
    extract_legacy_tools,
    extract_section_tools,
    extract_tools,
)
from .triggers import extract_triggers

__all__ = [
    "split_frontmatter",
    "strip_quotes",
    "extract_scalar",
    "extract_description",
    "extract_array",
    "extract_bins",
    "TOOL_STOP_WORDS",
    "ToolAccumulator",
    "extract_section_tools",
    "extract_legacy_tools",
    "extract_tools",
    "extract_triggers",
]
