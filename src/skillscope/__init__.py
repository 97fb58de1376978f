"""SkillScope: catalog, embed and rank agent skills."""

__version__ = "0.3.0"
