"""You.com web search client for drug interaction evidence.

Provides the snippet corpus the evidence matcher scans for medication pairs.
Results are web text, not authoritative interaction data.
"""

from typing import Any

import httpx

from ..constants import (
    PROJECT_NAME,
    SEARCH_QUERY_TEMPLATE,
    SEARCH_RESULT_LIMIT,
    SEARCH_TIMEOUT,
    VERSION,
    YOU_API_KEY,
    YOU_SEARCH_URL,
)
from ..utils.logging import logger


class SearchAPIError(Exception):
    """Raised when the search API fails or cannot be reached."""

    def __init__(self, message: str, status_code: int = None):
        """Initialize with error message and optional status code."""
        self.status_code = status_code
        super().__init__(message)


def build_query(medications: list[str]) -> str:
    """Compose the natural-language search query for a medication list."""
    return SEARCH_QUERY_TEMPLATE.format(medications=" and ".join(medications))


def build_snippet_corpus(
    web_results: list[dict[str, Any]], limit: int = SEARCH_RESULT_LIMIT
) -> list[str]:
    """Flatten search results into one text blob per result.

    Each blob is the result description followed by its snippets, joined by a
    space. Results without any text are dropped, as are non-text parts.
    """
    corpus = []
    for result in web_results[:limit]:
        if not isinstance(result, dict):
            continue
        parts = []
        description = result.get("description")
        if description and isinstance(description, str):
            parts.append(description)
        snippets = result.get("snippets")
        if isinstance(snippets, list):
            parts.extend(s for s in snippets if isinstance(s, str) and s)
        blob = " ".join(parts)
        if blob:
            corpus.append(blob)
    return corpus


class YouSearchClient:
    """Client for the You.com search API."""

    BASE_URL = YOU_SEARCH_URL

    def __init__(self, api_key: str = None):
        """Initialize the search client with an HTTP session."""
        api_key = api_key or YOU_API_KEY
        if not api_key:
            logger.warning("YOU_API_KEY not found in environment")

        self.session = httpx.AsyncClient(
            timeout=SEARCH_TIMEOUT,
            headers={
                # Identify our application to the API server
                "User-Agent": f"{PROJECT_NAME}/{VERSION}",
                "Accept": "application/json",
                "X-API-Key": api_key or "",
            },
        )

    async def __aenter__(self):
        """Enter the async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit the async context manager."""
        await self.session.aclose()

    def _unexpected_body(self, data: Any) -> SearchAPIError:
        logger.error(f"You.com returned an unexpected body: {str(data)[:200]}")
        return SearchAPIError("You.com returned an unexpected response shape")

    async def search(self, query: str) -> list[dict[str, Any]]:
        """Run a web search and return the raw web results."""
        logger.info(f"You.com search: {query}")

        try:
            response = await self.session.get(self.BASE_URL, params={"query": query})
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"You.com API error {e.response.status_code}: {e}")
            raise SearchAPIError(
                f"You.com API returned {e.response.status_code}",
                e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"You.com connection error: {e}")
            raise SearchAPIError(f"You.com connection failed: {e}") from e
        except ValueError as e:
            logger.error(f"You.com returned invalid JSON: {e}")
            raise SearchAPIError(f"You.com returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise self._unexpected_body(data)
        results = data.get("results") or {}
        if not isinstance(results, dict):
            raise self._unexpected_body(data)
        web_results = results.get("web") or []
        if not isinstance(web_results, list):
            raise self._unexpected_body(data)

        logger.info(f"You.com returned {len(web_results)} web results")
        return web_results

    async def get_snippets(self, medications: list[str]) -> list[str]:
        """Search for interactions between the medications and return the snippet corpus."""
        web_results = await self.search(build_query(medications))
        return build_snippet_corpus(web_results)
