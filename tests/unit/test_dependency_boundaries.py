"""Dependency boundary checks between modules and heavy third-party stacks."""

from __future__ import annotations

import os
import re
import subprocess
import sys
from pathlib import Path

import pytest

PACKAGE_ROOT = Path(__file__).resolve().parents[2] / "src" / "skillscope"
MODULES_ROOT = PACKAGE_ROOT / "modules"

INTERNAL_IMPORT_RE = re.compile(r"skillscope\.modules\.(\w+)\.internal")


@pytest.mark.parametrize(
    "module",
    [
        "skillscope.modules.skills",
        "skillscope.modules.ranking",
        "skillscope.modules.embeddings",
    ],
)
def test_pure_modules_do_not_load_server_deps(module: str):
    code = rf"""
import sys
import {module}  # noqa: F401
blocked = {{"lancedb", "fastapi", "fastmcp", "openai", "google.genai", "requests"}}
loaded = set(sys.modules)
found = sorted(name for name in blocked if name in loaded)
if found:
    raise SystemExit(f"Unexpected imports: {{found}}")
"""
    result = subprocess.run(
        [sys.executable, "-c", code],
        env={**os.environ, "PYTHONPATH": str(PACKAGE_ROOT.parent)},
        capture_output=True,
        text=True,
        check=False,
    )
    assert result.returncode == 0, result.stderr or result.stdout


def test_modules_use_each_others_public_api_only():
    offenders: list[str] = []
    for path in MODULES_ROOT.rglob("*.py"):
        owner = path.relative_to(MODULES_ROOT).parts[0]
        text = path.read_text(encoding="utf-8")
        for match in INTERNAL_IMPORT_RE.finditer(text):
            if match.group(1) != owner:
                offenders.append(f"{path.relative_to(PACKAGE_ROOT)} -> {match.group(0)}")

    assert not offenders, f"Cross-module internal imports: {offenders}"


def test_interfaces_do_not_reach_into_module_internals():
    offenders = [
        path.relative_to(PACKAGE_ROOT)
        for path in (PACKAGE_ROOT / "interfaces").rglob("*.py")
        if INTERNAL_IMPORT_RE.search(path.read_text(encoding="utf-8"))
    ]

    assert not offenders, f"Interfaces importing module internals: {offenders}"
