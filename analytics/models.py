"""
Value objects exchanged with the analytics engines: input series, forecasting options and result structures.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

import numpy as np
from pydantic import BaseModel, Field, field_validator, model_serializer, model_validator

from analytics.enums import (
    AnomalySeverity,
    EngineType,
    ForecastMethod,
    PatternType,
)


def _coerce(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: _coerce(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_coerce(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    return obj


class NpModel(BaseModel):

    @model_serializer(mode="wrap")
    def _serialize(self, handler: Any) -> Any:
        return _coerce(handler(self))


class DataQuality(NpModel):

    completeness: float = Field(default=1.0, ge=0.0, le=1.0)
    accuracy: float = Field(default=1.0, ge=0.0, le=1.0)
    consistency: float = Field(default=1.0, ge=0.0, le=1.0)
    timeliness: float = Field(default=1.0, ge=0.0, le=1.0)


class DateRange(NpModel):

    start_date: datetime
    end_date: datetime


class TimeSeriesData(NpModel):
    # Shape and value checks live in analytics.validation so that callers
    # receive the engine's ValidationError rather than a pydantic one.
    values: List[float]
    timestamps: List[datetime]
    quality: DataQuality = Field(default_factory=DataQuality)
    date_range: Optional[DateRange] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _derive_date_range(self) -> TimeSeriesData:
        if self.date_range is None and self.timestamps:
            self.date_range = DateRange(
                start_date=min(self.timestamps),
                end_date=max(self.timestamps),
            )
        return self


class AnalyticsData(NpModel):

    time_series: Optional[TimeSeriesData] = None
    organization_id: Optional[str] = None
    data_type: Optional[str] = None


class ForecastingOptions(NpModel):

    method: ForecastMethod = ForecastMethod.linear
    periods: int = Field(default=6, gt=0)
    confidence: float = Field(default=0.95, gt=0.0, lt=1.0)
    include_seasonality: bool = False
    domain_context: bool = False

    @field_validator("method", mode="before")
    @classmethod
    def _fallback_method(cls, value: Any) -> ForecastMethod:
        return ForecastMethod.parse(value)


class ForecastPoint(NpModel):

    timestamp: datetime
    value: float
    confidence: float


class ConfidenceInterval(NpModel):

    lower: float
    upper: float
    probability: float


class ModelAccuracy(NpModel):

    mape: float
    rmse: float
    r2: float
    confidence: float


class ForecastResult(NpModel):

    method: ForecastMethod
    predictions: List[ForecastPoint]
    confidence_intervals: List[ConfidenceInterval]
    accuracy: ModelAccuracy
    insights: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)


class AnomalyPoint(NpModel):

    index: int
    timestamp: datetime
    value: float
    expected_value: float
    severity: AnomalySeverity
    methods: List[str]
    explanation: str


class AnomalyPattern(NpModel):

    type: PatternType
    frequency: float
    description: str


class AnomalyResult(NpModel):

    anomalies: List[AnomalyPoint] = Field(default_factory=list)
    severities: List[AnomalySeverity] = Field(default_factory=list)
    patterns: List[AnomalyPattern] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)


class ValidationMetrics(NpModel):

    cross_validation_score: float
    holdout_score: float
    stability_score: float


class ModelValidation(NpModel):

    is_valid: bool
    metrics: ValidationMetrics
    recommendations: List[str] = Field(default_factory=list)


class ModelMetrics(NpModel):

    accuracy: float = Field(ge=0.0, le=1.0)
    precision: float = Field(ge=0.0, le=1.0)
    recall: float = Field(ge=0.0, le=1.0)
    f1_score: float = Field(ge=0.0, le=1.0)
    mape: float = Field(ge=0.0)
    rmse: float = Field(ge=0.0)


class DataCharacteristics(NpModel):

    size: int = 0
    dimensions: int = 1
    has_seasonality: bool = False


class DataProfile(NpModel):

    size: int = 0
    complexity: float = 0.0
    accuracy_requirement: float = 0.0
    performance_requirement: float = 0.0


class EngineRecommendation(NpModel):

    recommended: EngineType
    alternatives: List[EngineType] = Field(default_factory=list)
    reasoning: str


class HealthStatus(NpModel):

    statistical: bool
    advanced: bool
    overall: bool
