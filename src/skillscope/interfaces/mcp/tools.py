from typing import Any, Dict, List

from skillscope.modules.query import QueryService


class CatalogTools:
    """MCP tool implementations over the query service.

    Methods keep their ``__name__`` and ``__doc__`` so they register
    directly as tools; each returns the same JSON shape as the HTTP API.
    """

    def __init__(self, service: QueryService):
        self.service = service

    def search_skills(self, query: str, limit: int = 10, offset: int = 0) -> Dict[str, Any]:
        """Find skills matching a task description by meaning.

        Args:
            query: What you want to do (e.g., "review pull requests"). 1-500 characters.
            limit: Max results (1-50).
            offset: Results to skip for paging.

        Returns:
            results: Skills with relevance_score, plus one shared related-content match.
        """
        return self.service.search(query, limit=limit, offset=offset).model_dump(mode="json")

    def trending_skills(self, window: str = "7d", sort: str = "hot", limit: int = 20) -> Dict[str, Any]:
        """List skills first seen recently.

        Args:
            window: "24h", "7d" or "30d".
            sort: "hot" (mentions per day), "mentions" or "new".
            limit: Max results (1-100).
        """
        return self.service.trending(window=window, sort=sort, limit=limit).model_dump(mode="json")

    def compare_skills(self, skill_ids: List[str]) -> Dict[str, Any]:
        """Compare 2-5 skills: pairwise similarity, shared and unique tools/triggers.

        Args:
            skill_ids: IDs from search_skills or trending_skills.
        """
        return self.service.compare(skill_ids).model_dump(mode="json")

    def get_skill(self, skill_id: str) -> Dict[str, Any]:
        """Full skill record with similar skills, related content and install commands.

        Args:
            skill_id: ID from search_skills or trending_skills.
        """
        return self.service.detail(skill_id).model_dump(mode="json")
