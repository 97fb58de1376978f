from datetime import datetime

SECONDS_PER_DAY = 86400.0
HOT_SCORE_PRECISION = 2


def age_in_days(first_seen_at: datetime, now: datetime) -> float:
    """Fractional days elapsed since ``first_seen_at``."""
    return (now - first_seen_at).total_seconds() / SECONDS_PER_DAY


def hot_score(mention_count: int, age_days: float) -> float:
    """Mentions per day of age, with age floored at one day."""
    return round(mention_count / max(1.0, age_days), HOT_SCORE_PRECISION)


__all__ = ["age_in_days", "hot_score"]
