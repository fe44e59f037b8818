"""FastAPI web application for the Rostrum debate trainer."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rostrum import __version__
from rostrum.config.settings import AppConfig, get_default_config
from rostrum.debate_engine.core import DebateEngine
from rostrum.web.debate_manager import build_debate_engine
from rostrum.web.endpoints.arguments import router as arguments_router
from rostrum.web.endpoints.debates import router as debates_router
from rostrum.web.endpoints.system import router as system_router

logger: logging.Logger = logging.getLogger(__name__)

config: AppConfig = get_default_config()

# Global debate engine
debate_engine: DebateEngine = build_debate_engine(config)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application lifespan - startup and shutdown."""
    logger.info("Rostrum API starting")

    yield

    debate_engine.cancel_timers()
    logger.info("Phase timers stopped")


# FastAPI app
app: FastAPI = FastAPI(
    title="Rostrum Debate Trainer",
    description="Practice debating against an AI opponent with per-argument scoring",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware setup
if config.system.allowed_origins:
    logger.info(f"Setting CORS allowed origins: {config.system.allowed_origins}")

    # Production: Use specific origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.system.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
else:
    logger.info("No allowed_origins set, using development CORS settings")

    # Development: Allow any localhost/127.0.0.1
    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=r"https?://(localhost|127\.0\.0\.1)(:\d+)?",
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(system_router)
app.include_router(debates_router)
app.include_router(arguments_router)
