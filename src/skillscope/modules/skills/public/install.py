import re
from typing import Optional

from skillscope.shared.types import SourceType
from .types import InstallInfo

INSTALL_SCRIPT = "curl -fsSL https://openclaw.ai/install.sh | bash"
INSTALLABLE_SOURCES = {SourceType.GITHUB, SourceType.CLAWHUB}

_SKILL_PATH_RE = re.compile(r"/skills/[^/]+/([^/]+)/SKILL\.md$")
# Slugs end up pasted into terminals.
_UNSAFE_SLUG_RE = re.compile(r"[^A-Za-z0-9_-]")


def get_install_info(source_url: str, source_type: SourceType | str) -> Optional[InstallInfo]:
    """Install commands for skills published under ``.../skills/{author}/{slug}/SKILL.md``.

    Only github/clawhub skills are installable; everything else returns None.
    """
    try:
        kind = SourceType(source_type)
    except ValueError:
        return None
    if kind not in INSTALLABLE_SOURCES:
        return None

    match = _SKILL_PATH_RE.search(source_url or "")
    if not match:
        return None
    slug = _UNSAFE_SLUG_RE.sub("", match.group(1))
    if not slug:
        return None

    return InstallInfo(
        slug=slug,
        command=f"clawhub install {slug}",
        npx_command=f"npx clawhub install {slug}",
        raw_url=source_url,
        install_script=INSTALL_SCRIPT,
    )


__all__ = ["get_install_info", "INSTALL_SCRIPT"]
