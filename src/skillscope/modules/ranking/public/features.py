"""Set-overlap helpers for comparing tool and trigger lists."""

from __future__ import annotations

from typing import Sequence


def _ordered_unique(values: Sequence[str]) -> list[str]:
    return list(dict.fromkeys(values))


def shared_features(groups: Sequence[Sequence[str]]) -> list[str]:
    """Values present in every group, in the first group's order."""
    if not groups:
        return []
    others = [set(group) for group in groups[1:]]
    return [v for v in _ordered_unique(groups[0]) if all(v in other for other in others)]


def unique_features(groups: Sequence[Sequence[str]], index: int) -> list[str]:
    """Values of ``groups[index]`` that no other group contains."""
    union: set[str] = set()
    for i, group in enumerate(groups):
        if i != index:
            union.update(group)
    return [v for v in _ordered_unique(groups[index]) if v not in union]


__all__ = ["shared_features", "unique_features"]
