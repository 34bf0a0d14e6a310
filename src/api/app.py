"""Kaathu HTTP API exposing the interaction check."""

from collections.abc import AsyncIterator

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..clients.you_search import YouSearchClient
from ..constants import PROJECT_NAME, VERSION
from ..interactions.orchestrator import (
    InteractionOrchestrator,
    InvalidInputError,
    UpstreamUnavailableError,
)
from ..utils.logging import logger

app = FastAPI(title=f"{PROJECT_NAME} API", version=VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


async def get_search_client() -> AsyncIterator[YouSearchClient]:
    """Provide a search client scoped to one request."""
    async with YouSearchClient() as client:
        yield client


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Render framework errors (404, 405) with the same body shape as ours."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.post("/interactions")
async def route_interactions(
    request: Request, search_client: YouSearchClient = Depends(get_search_client)
):
    """Check interactions between the posted medications.

    Body: ``{"medications": ["Aspirin", "Ibuprofen"]}``. Handlers are
    stateless, so no cache is attached here; caching happens client side.
    """
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    medications = payload.get("medications") if isinstance(payload, dict) else None

    try:
        orchestrator = InteractionOrchestrator(search_client)
        findings = await orchestrator.get_interactions(medications)
    except InvalidInputError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except UpstreamUnavailableError:
        return JSONResponse(
            status_code=500, content={"error": "Failed to check drug interactions"}
        )

    logger.info(f"Returning {len(findings)} interactions")
    return {"interactions": [finding.model_dump(mode="json") for finding in findings]}
