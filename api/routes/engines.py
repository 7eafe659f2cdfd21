"""
Engine introspection routes: health, capabilities, monitoring metrics and backend recommendations.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from analytics.models import DataProfile
from api.routes.common import get_selector
from api.routes.exception import handle_exceptions

router = APIRouter(tags=["Engines"])


@router.get("/analytics/engines/health", summary="Availability of statistical and advanced engines")
@handle_exceptions
async def engine_health() -> Dict[str, Any]:
    return get_selector().health_check().model_dump()


@router.get("/analytics/engines/capabilities", summary="Capabilities offered by the registered engines")
@handle_exceptions
async def engine_capabilities() -> Dict[str, Any]:
    return {"capabilities": [c.value for c in get_selector().get_available_capabilities()]}


@router.get("/analytics/engines/metrics", summary="Monitoring metrics of the forecasting engine")
@handle_exceptions
async def engine_metrics() -> Dict[str, Any]:
    return get_selector().get_forecasting_engine(0).get_model_metrics().model_dump()


@router.post("/analytics/engines/recommendations", summary="Recommend an engine for a data profile")
@handle_exceptions
async def engine_recommendations(profile: DataProfile) -> Dict[str, Any]:
    return get_selector().get_engine_recommendations(profile).model_dump()
