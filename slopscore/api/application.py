"""Module assembling the FastAPI application."""

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from slopscore.api.router import lifespan
from slopscore.api.router import router as main_router
from slopscore.configuration import config

description = """
**Slop Score** rates how strongly a text shows patterns typical of AI-generated
prose on a scale from 0 to 100.

## Signals

- **Overused words** (60%), e.g. *delve*, *tapestry*, *vibrant*.
- **Contrast patterns** (25%), such as *"not X, but Y"*.
- **Overused trigrams** (15%), e.g. *"it is important"*.
"""


def create_app() -> FastAPI:
    """
    Create the application serving the slop scoring API.

    Returns:
        FastAPI: The application with all routes mounted under `/v1`.
    """
    fastapi_app = FastAPI(
        title=config.project_name,
        summary="Slop Score API rates AI-typical patterns in texts.",
        description=description,
        lifespan=lifespan,
        docs_url="/v1/docs",
        openapi_url="/v1/openapi.json",
        redoc_url="/v1/redoc",
    )

    @fastapi_app.get("/")
    async def root() -> RedirectResponse:
        """Redirect root to docs."""
        return RedirectResponse(url="/v1/docs")

    @fastapi_app.get("/v1")
    async def root_v1() -> RedirectResponse:
        """Redirect /v1 to docs."""
        return RedirectResponse(url="/v1/docs")

    fastapi_app.include_router(main_router, prefix="/v1")
    return fastapi_app
