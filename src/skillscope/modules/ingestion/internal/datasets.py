"""Packaged YAML datasets (seed skills, curated resources, editorial content)."""

from __future__ import annotations

from importlib import resources
from typing import Any, Dict, List

import yaml

DATA_PACKAGE = "skillscope.data"


def load_dataset(filename: str, key: str) -> List[Dict[str, Any]]:
    text = resources.files(DATA_PACKAGE).joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{filename}: expected a mapping at the top level")
    items = data.get(key) or []
    if not isinstance(items, list):
        raise ValueError(f"{filename}: '{key}' must be a list")
    return items


def load_seed_skills() -> List[Dict[str, Any]]:
    return load_dataset("seed_skills.yaml", "skills")


def load_curated_resources() -> List[Dict[str, Any]]:
    return load_dataset("resources.yaml", "resources")


def load_editorial_content() -> List[Dict[str, Any]]:
    return load_dataset("content.yaml", "content")


__all__ = [
    "load_dataset",
    "load_seed_skills",
    "load_curated_resources",
    "load_editorial_content",
]
