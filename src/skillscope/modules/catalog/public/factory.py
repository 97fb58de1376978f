from skillscope.shared.config import Config
from ..internal.lance import LanceCatalogStore
from .store import CatalogStore


def open_store(config: Config) -> CatalogStore:
    """Open (creating if needed) the catalog at ``config.db_path``."""
    return LanceCatalogStore(config)


__all__ = ["open_store"]
