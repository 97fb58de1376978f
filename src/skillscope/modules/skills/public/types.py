from pydantic import Field

from skillscope.shared.types import FrozenModel


class ParsedSkill(FrozenModel):
    """Structured fields read from one raw skill document."""

    name: str = Field(default="Unknown", description="Front-matter name or 'Unknown'")
    description: str = Field(default="", description="Front-matter description")
    full_instructions: str = Field(default="", description="Body after front matter, trimmed")
    tools_used: list[str] = Field(default_factory=list, description="Lowercased, de-duplicated")
    triggers: list[str] = Field(default_factory=list, description="Lowercased trigger phrases")
    raw_content: str = Field(default="", description="Verbatim source document")


class InstallInfo(FrozenModel):
    """How to install a catalogued skill locally."""

    slug: str
    command: str = Field(..., description="CLI install command")
    npx_command: str = Field(..., description="Install command without a global CLI")
    raw_url: str = Field(..., description="Direct link to the raw SKILL.md")
    install_script: str = Field(..., description="One-line installer for the CLI itself")


__all__ = ["ParsedSkill", "InstallInfo"]
