"""Shared base types and enums used across modules."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class FrozenModel(BaseModel):
    """Immutable pydantic model for values returned across module boundaries."""

    model_config = ConfigDict(frozen=True)


class SourceType(str, Enum):
    CLAWHUB = "clawhub"
    GITHUB = "github"
    MANUAL = "manual"
    CAMPCLAW = "campclaw"
    X_TWITTER = "x_twitter"
    RSS = "rss"


class SkillCategory(str, Enum):
    GETTING_STARTED = "getting_started"
    BUILDING_AGENTS = "building_agents"
    MULTI_AGENT = "multi_agent"
    SECURITY = "security"
    REAL_BUILDS = "real_builds"
    AIDB_EPISODES = "aidb_episodes"
    COMMUNITY_SUBMITTED = "community_submitted"
    UNCATEGORIZED = "uncategorized"


class ContentType(str, Enum):
    PODCAST = "podcast"
    TRAINING = "training"
    NEWSLETTER = "newsletter"
    INTEL = "intel"
    PROGRAM = "program"


class CrawlStatus(str, Enum):
    RUNNING = "running"
    SUCCESS = "success"
    ERROR = "error"


__all__ = [
    "FrozenModel",
    "SourceType",
    "SkillCategory",
    "ContentType",
    "CrawlStatus",
]
