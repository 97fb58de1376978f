"""Error taxonomy shared by modules and interfaces.

Modules raise these; interfaces map them to HTTP statuses or exit codes.
"""

from __future__ import annotations

from typing import Iterable


class SkillscopeError(Exception):
    """Base class for all SkillScope errors."""


class InvalidRequestError(SkillscopeError):
    """Bad, missing or out-of-range input. Nothing was processed."""


class NotFoundError(SkillscopeError):
    """One or more identifiers did not resolve."""

    def __init__(self, missing_ids: Iterable[str], kind: str = "Skill"):
        self.missing_ids = list(missing_ids)
        noun = kind if len(self.missing_ids) == 1 else f"{kind}s"
        super().__init__(f"{noun} not found: {', '.join(self.missing_ids)}")


class UnauthorizedError(SkillscopeError):
    """Missing or mismatched credentials for a privileged operation."""


class ServiceUnavailableError(SkillscopeError):
    """A required collaborator (e.g. the embedding provider) is not configured."""


class EmbeddingError(SkillscopeError):
    """The embedding provider failed or exhausted its retries."""


class IngestionError(SkillscopeError):
    """A pipeline-fatal failure; the ingestion run was aborted."""


__all__ = [
    "SkillscopeError",
    "InvalidRequestError",
    "NotFoundError",
    "UnauthorizedError",
    "ServiceUnavailableError",
    "EmbeddingError",
    "IngestionError",
]
