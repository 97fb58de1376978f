"""Public API for the catalog module."""

from .internal.lance import LanceCatalogStore
from .public.factory import open_store
from .public.store import CatalogStore, SkillOrder
from .public.types import ContentRecord, CrawlLog, SkillRecord

__all__ = [
    "CatalogStore",
    "SkillOrder",
    "LanceCatalogStore",
    "open_store",
    "SkillRecord",
    "ContentRecord",
    "CrawlLog",
]
