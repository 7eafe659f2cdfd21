"""
Forecast routes: generate a revenue or expense forecast and validate the forecasting model for a submitted series.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from api.requests import ForecastRequest, ValidateModelRequest
from api.routes.common import get_selector, run_engine
from api.routes.exception import handle_exceptions

router = APIRouter(tags=["Forecast"])


@router.post("/analytics/forecast", summary="Forecast future periods of a financial series")
@handle_exceptions
async def generate_forecast(req: ForecastRequest) -> Dict[str, Any]:
    engine = get_selector().get_forecasting_engine(
        len(req.data.values), req.complexity, req.prefer_advanced
    )
    result = await run_engine(engine.generate_forecast, req.data, req.options)
    return result.model_dump()


@router.post("/analytics/forecast/validate", summary="Cross-validate the forecasting model on a series")
@handle_exceptions
async def validate_model(req: ValidateModelRequest) -> Dict[str, Any]:
    engine = get_selector().get_forecasting_engine(len(req.data.values), prefer_advanced=req.prefer_advanced)
    validation = await run_engine(engine.validate_model, req.data)
    return validation.model_dump()
