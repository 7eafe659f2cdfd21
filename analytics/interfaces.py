"""
Engine interfaces shared by the statistical implementations and any future advanced backend registered with the engine registry.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Optional, Tuple, Union

from analytics.enums import AnomalySensitivity, Capability, EngineType
from analytics.models import (
    AnalyticsData,
    AnomalyResult,
    ForecastingOptions,
    ForecastResult,
    ModelMetrics,
    ModelValidation,
    TimeSeriesData,
)


class AnalyticsEngine(ABC):
    engine_type: ClassVar[EngineType]
    version: ClassVar[str]
    capabilities: ClassVar[Tuple[Capability, ...]]


class ForecastingEngine(AnalyticsEngine):

    @abstractmethod
    def generate_forecast(
        self,
        data: TimeSeriesData,
        options: Optional[ForecastingOptions] = None,
    ) -> ForecastResult:
        ...

    @abstractmethod
    def validate_model(self, data: TimeSeriesData) -> ModelValidation:
        ...

    @abstractmethod
    def get_model_metrics(self) -> ModelMetrics:
        ...


class AnomalyDetectionEngine(AnalyticsEngine):

    @abstractmethod
    def detect_anomalies(
        self,
        data: Union[AnalyticsData, TimeSeriesData, None],
        sensitivity: AnomalySensitivity = AnomalySensitivity.medium,
    ) -> AnomalyResult:
        ...

    @abstractmethod
    def train_model(self, historical: Union[AnalyticsData, TimeSeriesData, None]) -> None:
        ...

    @abstractmethod
    def update_model(self, new_data: Union[AnalyticsData, TimeSeriesData, None]) -> None:
        ...
