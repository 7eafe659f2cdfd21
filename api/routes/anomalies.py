"""
Anomaly routes: flag unusual periods in a financial series and report recurring patterns among them.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from analytics.models import DataCharacteristics
from analytics.profile import seasonality_strength
from api.requests import AnomalyRequest
from api.routes.common import get_selector, run_engine
from api.routes.exception import handle_exceptions

router = APIRouter(tags=["Anomalies"])


@router.post("/analytics/anomalies", summary="Detect anomalous periods in a financial series")
@handle_exceptions
async def detect_anomalies(req: AnomalyRequest) -> Dict[str, Any]:
    series = req.data.time_series
    values = series.values if series is not None else []
    traits = DataCharacteristics(
        size=len(values),
        dimensions=req.dimensions,
        has_seasonality=bool(values) and seasonality_strength(values) > 0,
    )
    engine = get_selector().get_anomaly_detection_engine(traits, req.prefer_advanced)
    result = await run_engine(engine.detect_anomalies, req.data, req.sensitivity)
    return result.model_dump()
