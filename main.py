"""
Entry point for the Fincast analytics API server.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI

from analytics.registry import default_registry
from analytics.selector import EngineSelector
from api.routes import router
from api.routes.common import set_selector
from config import FINCAST_HOST, FINCAST_PORT

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    stream=sys.stdout,
)
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    selector = EngineSelector(default_registry())
    set_selector(selector)
    status = selector.health_check()
    log.info(
        "Analytics engines ready (statistical=%s, advanced=%s)",
        status.statistical,
        status.advanced,
    )
    try:
        yield
    finally:
        set_selector(None)


app = FastAPI(
    title="Fincast Analytics Engine",
    description="Statistical forecasting and anomaly detection over business revenue and expense series.",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(router, prefix="/api/v1")


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=FINCAST_HOST,
        port=FINCAST_PORT,
        log_level="info",
        access_log=True,
    )
