# -*- coding: utf-8 -*-
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hireloop.config import CORSConfig, SwaggerConfig, setup_logging
from hireloop.db.database import init_db
from hireloop.routes import (
    analytics,
    candidates,
    contact,
    integrations,
    interviews,
    jobs,
    outreach,
    scorecards,
    settings,
    sourcing,
    templates,
)

logger = logging.getLogger("hireloop.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    # Init DB tables + column migrations on startup
    init_db()
    logger.info("Database initialized successfully")
    yield


app = FastAPI(
    title=SwaggerConfig.TITLE,
    description=SwaggerConfig.DESCRIPTION,
    version=SwaggerConfig.VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORSConfig.ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for module in (
    jobs,
    candidates,
    sourcing,
    outreach,
    interviews,
    scorecards,
    templates,
    settings,
    integrations,
    contact,
    analytics,
):
    app.include_router(module.router)


@app.get("/api/health", summary="Liveness check")
async def health_check():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}
