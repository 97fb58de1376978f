from .config import Config, SKILLSCOPE_HOME
from .errors import (
    EmbeddingError,
    IngestionError,
    InvalidRequestError,
    NotFoundError,
    ServiceUnavailableError,
    SkillscopeError,
    UnauthorizedError,
)
from .types import ContentType, CrawlStatus, FrozenModel, SkillCategory, SourceType

__all__ = [
    "Config",
    "SKILLSCOPE_HOME",
    "SkillscopeError",
    "InvalidRequestError",
    "NotFoundError",
    "UnauthorizedError",
    "ServiceUnavailableError",
    "EmbeddingError",
    "IngestionError",
    "FrozenModel",
    "SourceType",
    "SkillCategory",
    "ContentType",
    "CrawlStatus",
]
