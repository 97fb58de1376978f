"""Public API for the skills module."""

from .public.install import get_install_info
from .public.parse import UNKNOWN_NAME, build_embedding_text, parse_skill_document
from .public.types import InstallInfo, ParsedSkill

__all__ = [
    "parse_skill_document",
    "build_embedding_text",
    "get_install_info",
    "ParsedSkill",
    "InstallInfo",
    "UNKNOWN_NAME",
]
