"""Interaction checking for a medication list, cache first and web search on a miss."""

import asyncio
from typing import Protocol

from ..clients.you_search import SearchAPIError, YouSearchClient
from ..constants import MIN_MEDICATIONS
from ..utils.log_failed_lookup import log_failed_lookup
from ..utils.logging import logger
from .cache import InteractionCache
from .evidence import match
from .models import InteractionFinding
from .pairs import generate_pairs


class InvalidInputError(Exception):
    """Raised when the caller supplies malformed or insufficient data."""

    pass


class UpstreamUnavailableError(Exception):
    """Raised when the search provider fails or cannot be reached."""

    def __init__(self, medications: list[str], status_code: int = None):
        """Initialize with the medications being checked and optional status code."""
        self.medications = medications
        self.status_code = status_code
        super().__init__(
            f"Interaction search failed for {' + '.join(medications)}"
        )


class SnippetSource(Protocol):
    """Anything able to return a snippet corpus for a medication list."""

    async def get_snippets(self, medications: list[str]) -> list[str]: ...


class InteractionOrchestrator:
    """Compose cache, search and evidence matching into one lookup."""

    def __init__(self, search_client: SnippetSource, cache: InteractionCache = None):
        """Initialize with a snippet source and an optional client-side cache."""
        self.search_client = search_client
        self.cache = cache
        # Guards the lookup-then-store sequence against concurrent misses
        self._lock = asyncio.Lock()

    async def get_interactions(self, names: list[str]) -> list[InteractionFinding]:
        """Return interaction findings for a medication list.

        Args:
            names: Medication names, at least two

        Returns:
            Findings in pair order, possibly empty

        Raises:
            InvalidInputError: If fewer than two names are given
            UpstreamUnavailableError: If the search provider fails

        """
        if not isinstance(names, list) or len(names) < MIN_MEDICATIONS:
            raise InvalidInputError("Provide at least two medication names")
        if not all(isinstance(name, str) for name in names):
            raise InvalidInputError("Medication names must be strings")

        async with self._lock:
            if self.cache is not None:
                cached = self.cache.lookup(names)
                if cached is not None:
                    return cached

            try:
                snippets = await self.search_client.get_snippets(names)
            except SearchAPIError as e:
                logger.error(f"Drug interaction check error: {e}")
                log_failed_lookup(names, "you_search")
                raise UpstreamUnavailableError(names, e.status_code) from e

            findings = match(generate_pairs(names), snippets)

            if self.cache is not None:
                self.cache.store(names, findings)

        logger.info(f"Found {len(findings)} interactions for {len(names)} medications")
        return findings


async def get_interactions_safe(
    names: list[str], cache: InteractionCache = None
) -> list[InteractionFinding]:
    """Check interactions with a short-lived search client."""
    async with YouSearchClient() as client:
        orchestrator = InteractionOrchestrator(client, cache)
        return await orchestrator.get_interactions(names)
