"""Web search through the Google Custom Search JSON API."""

from __future__ import annotations

import src.config as config

PAGE_SIZE = 10  # API maximum per request
MAX_RESULTS = 100  # API refuses start > 91


class GoogleSearchProvider:
    """SearchProvider returning results in rank order."""

    def __init__(self, api_key: str | None = None, engine_id: str | None = None, service=None):
        self.engine_id = engine_id or config.GOOGLE_SEARCH_ENGINE_ID
        if not self.engine_id:
            raise ValueError("GOOGLE_SEARCH_ENGINE_ID not set. Add it to your .env file.")
        if service is None:
            api_key = api_key or config.GOOGLE_SEARCH_API_KEY
            if not api_key:
                raise ValueError("GOOGLE_SEARCH_API_KEY not set. Add it to your .env file.")
            from googleapiclient.discovery import build
            service = build("customsearch", "v1", developerKey=api_key, cache_discovery=False)
        self.service = service

    def search(self, query: str, limit: int = 10) -> list[dict]:
        """Fetch up to ``limit`` results, paging 10 at a time.

        Args:
            query: Search query (the tracked keyword).
            limit: Number of results wanted, capped at 100.

        Returns:
            List of dicts with title, url and snippet, best rank first.
        """
        limit = max(0, min(limit, MAX_RESULTS))
        results: list[dict] = []
        start = 1
        while len(results) < limit:
            num = min(PAGE_SIZE, limit - len(results))
            response = (
                self.service.cse()
                .list(q=query, cx=self.engine_id, num=num, start=start)
                .execute()
            )
            items = response.get("items", [])
            for item in items:
                results.append({
                    "title": item.get("title", ""),
                    "url": item.get("link", ""),
                    "snippet": item.get("snippet", ""),
                })
            if len(items) < num:
                break
            start += len(items)
        return results[:limit]
