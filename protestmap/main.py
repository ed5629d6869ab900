from contextlib import asynccontextmanager
from pathlib import Path

import sentry_sdk
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration

from protestmap.config.database import run_migrations_online
from protestmap.config.logging import setup_logging
from protestmap.config.settings import settings
from protestmap.map_view.router import router as map_view_router
from protestmap.protests.features.create_protest.router import (
    protests_validation_exception_handler,
)
from protestmap.protests.routers import router as protests_router
from protestmap.routers.healthz.router import router as healthz_router

STATIC_DIR = Path(__file__).parent / "map_view" / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.RUN_MIGRATIONS_ON_STARTUP:
        await run_migrations_online()
    yield


setup_logging()

if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        profiles_sample_rate=settings.SENTRY_PROFILES_SAMPLE_RATE,
        integrations=[
            StarletteIntegration(transaction_style="endpoint"),
            FastApiIntegration(transaction_style="endpoint"),
        ],
        send_default_pii=False,
    )

app = FastAPI(
    title="Protest Map API",
    description="API for listing and adding protests shown on the map",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(RequestValidationError, protests_validation_exception_handler)

app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

# Include routers
app.include_router(healthz_router, prefix="/healthz", tags=["Healthz"])
app.include_router(protests_router, tags=["Protests"])
app.include_router(map_view_router, tags=["Map"])
