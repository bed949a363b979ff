"""
Newsdesk API Server

FastAPI application providing endpoints for:
- User removal (auth + users table)
- Feed validation
- Daily scan status
- Fetching and ranking today's articles
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .config import config, state
from .feeds import FeedParser
from .providers import get_provider_from_env
from .ranker import Ranker
from .routes import feeds_router, misc_router, scans_router, users_router
from .store import SupabaseStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize application resources."""
    # Startup - skip if already initialized (e.g., by tests)
    if state.feed_parser is None:
        state.feed_parser = FeedParser()

        if config.has_store_credentials():
            state.store = SupabaseStore.from_credentials(
                config.SUPABASE_URL, config.SUPABASE_SERVICE_ROLE_KEY
            )
        else:
            logger.warning(
                "SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY not set. "
                "User and scan endpoints will fail."
            )

        state.provider = get_provider_from_env(
            openai_key=config.OPENAI_API_KEY or None,
            default_model=config.RANKING_MODEL,
        )
        if state.provider:
            state.ranker = Ranker(provider=state.provider, model=config.RANKING_MODEL)
            logger.info(f"LLM provider initialized: {state.provider.name}")
        else:
            logger.warning("OPENAI_API_KEY not set. Article ranking disabled.")

    yield


app = FastAPI(
    title="Newsdesk API",
    version=__version__,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[config.CORS_ORIGIN],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as {"message": ...}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed bodies with 400 before any handler runs."""
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'][1:]) or 'body'}: {error['msg']}"
        for error in exc.errors()
    )
    return JSONResponse(status_code=400, content={"message": f"Invalid request: {problems}"})


# Include routers
app.include_router(misc_router)
app.include_router(users_router)
app.include_router(feeds_router)
app.include_router(scans_router)


def main():
    """Run the API server."""
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"Server running on http://localhost:{config.PORT}")
    uvicorn.run(app, host="0.0.0.0", port=config.PORT)


if __name__ == "__main__":
    main()
