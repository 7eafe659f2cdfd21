from __future__ import annotations

from pydantic import BaseModel, Field

from analytics.enums import AnomalySensitivity, Complexity
from analytics.models import AnalyticsData, ForecastingOptions, TimeSeriesData


class ForecastRequest(BaseModel):
    data: TimeSeriesData
    options: ForecastingOptions = Field(default_factory=ForecastingOptions)
    complexity: Complexity = Complexity.simple
    prefer_advanced: bool = False


class ValidateModelRequest(BaseModel):
    data: TimeSeriesData
    prefer_advanced: bool = False


class AnomalyRequest(BaseModel):
    data: AnalyticsData
    sensitivity: AnomalySensitivity = AnomalySensitivity.medium
    dimensions: int = Field(default=1, ge=1)
    prefer_advanced: bool = False
