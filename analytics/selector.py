"""
Engine selection over the registry: picks a forecasting or anomaly engine from data size, complexity and a prefer-advanced flag, and exposes recommendation, capability and health introspection. Selection never raises; unusable requests degrade to the statistical engines and are logged.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import math
from typing import Any, List, Mapping, Optional, Type, Union

from analytics.enums import Capability, Complexity, EngineType, PredictiveUseCase
from analytics.exceptions import UnsupportedFeature
from analytics.interfaces import AnalyticsEngine, AnomalyDetectionEngine, ForecastingEngine
from analytics.models import DataCharacteristics, DataProfile, EngineRecommendation, HealthStatus
from analytics.registry import EngineRegistry
from config import (
    ADVANCED_ANOMALY,
    ADVANCED_FORECASTING,
    STATISTICAL_ANOMALY,
    STATISTICAL_FORECASTING,
    settings,
)

log = logging.getLogger(__name__)


def _coerce_size(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return 0


def _coerce_ratio(value: Any) -> float:
    try:
        ratio = float(value)
    except (TypeError, ValueError):
        return 0.0
    return ratio if math.isfinite(ratio) else 0.0


def _coerce_characteristics(value: Union[DataCharacteristics, Mapping[str, Any], None]) -> DataCharacteristics:
    if isinstance(value, DataCharacteristics):
        return value
    if isinstance(value, Mapping):
        return DataCharacteristics(
            size=_coerce_size(value.get("size")),
            dimensions=_coerce_size(value.get("dimensions", 1)),
            has_seasonality=bool(value.get("has_seasonality", False)),
        )
    return DataCharacteristics()


def _coerce_profile(value: Union[DataProfile, Mapping[str, Any], None]) -> DataProfile:
    if isinstance(value, DataProfile):
        return value
    if isinstance(value, Mapping):
        return DataProfile(
            size=_coerce_size(value.get("size")),
            complexity=_coerce_ratio(value.get("complexity")),
            accuracy_requirement=_coerce_ratio(value.get("accuracy_requirement")),
            performance_requirement=_coerce_ratio(value.get("performance_requirement")),
        )
    return DataProfile()


class EngineSelector:

    def __init__(
        self,
        registry: EngineRegistry,
        min_forecast_size: Optional[int] = None,
        min_anomaly_size: Optional[int] = None,
        min_recommendation_size: Optional[int] = None,
    ) -> None:
        self._registry = registry
        self._min_forecast_size = (
            settings.selector_min_forecast_size if min_forecast_size is None else min_forecast_size
        )
        self._min_anomaly_size = (
            settings.selector_min_anomaly_size if min_anomaly_size is None else min_anomaly_size
        )
        self._min_recommendation_size = (
            settings.selector_min_recommendation_size
            if min_recommendation_size is None
            else min_recommendation_size
        )

    @property
    def registry(self) -> EngineRegistry:
        return self._registry

    def _build(self, key: str, fallback_key: str) -> AnalyticsEngine:
        engine_cls: Optional[Type[AnalyticsEngine]] = self._registry.get(key)
        if engine_cls is not None and key != fallback_key:
            try:
                return engine_cls()
            except Exception as exc:
                log.warning("Engine %s failed to initialise, falling back to %s: %s", key, fallback_key, exc)
        return self._registry.get(fallback_key)()

    def _use_advanced(self, key: str, size: int, minimum: int, prefer_advanced: bool, kind: str) -> bool:
        if not prefer_advanced:
            return False
        if key not in self._registry:
            log.info("Advanced %s engine requested but not registered, using statistical engine", kind)
            return False
        if size < minimum:
            log.info(
                "Advanced %s engine requested with %d data points (minimum %d), using statistical engine",
                kind,
                size,
                minimum,
            )
            return False
        return True

    def get_forecasting_engine(
        self,
        data_size: Any,
        complexity: Union[Complexity, str, None] = Complexity.simple,
        prefer_advanced: bool = False,
    ) -> ForecastingEngine:
        size = _coerce_size(data_size)
        level = Complexity.parse(complexity)
        if level is None:
            log.warning("Unrecognised complexity %r, treating as %s", complexity, Complexity.simple.value)
            level = Complexity.simple

        if self._use_advanced(ADVANCED_FORECASTING, size, self._min_forecast_size, prefer_advanced, "forecasting"):
            log.info("Using advanced forecasting engine (size=%d, complexity=%s)", size, level.value)
            return self._build(ADVANCED_FORECASTING, STATISTICAL_FORECASTING)

        log.info("Using statistical forecasting engine (size=%d, complexity=%s)", size, level.value)
        return self._build(STATISTICAL_FORECASTING, STATISTICAL_FORECASTING)

    def get_anomaly_detection_engine(
        self,
        characteristics: Union[DataCharacteristics, Mapping[str, Any], None],
        prefer_advanced: bool = False,
    ) -> AnomalyDetectionEngine:
        traits = _coerce_characteristics(characteristics)

        if self._use_advanced(ADVANCED_ANOMALY, traits.size, self._min_anomaly_size, prefer_advanced, "anomaly"):
            log.info("Using advanced anomaly detection engine (size=%d)", traits.size)
            return self._build(ADVANCED_ANOMALY, STATISTICAL_ANOMALY)

        log.info("Using statistical anomaly detection engine (size=%d)", traits.size)
        return self._build(STATISTICAL_ANOMALY, STATISTICAL_ANOMALY)

    def get_predictive_engine(self, use_case: Union[PredictiveUseCase, str]) -> AnalyticsEngine:
        name = use_case.value if isinstance(use_case, PredictiveUseCase) else str(use_case)
        raise UnsupportedFeature(f"Predictive engine for {name} not yet implemented")

    def is_advanced_available(self) -> bool:
        return self._registry.has_advanced()

    def get_engine_recommendations(
        self,
        profile: Union[DataProfile, Mapping[str, Any], None],
    ) -> EngineRecommendation:
        profile = _coerce_profile(profile)
        advanced = self.is_advanced_available()
        if profile.size < self._min_recommendation_size:
            shortfall = self._min_recommendation_size - profile.size
            return EngineRecommendation(
                recommended=EngineType.statistical,
                alternatives=[],
                reasoning=(
                    f"Insufficient data for advanced approaches: {profile.size} points, "
                    f"{shortfall} short of the {self._min_recommendation_size} required"
                ),
            )

        if profile.accuracy_requirement > settings.selector_accuracy_threshold and advanced:
            return EngineRecommendation(
                recommended=EngineType.advanced,
                alternatives=[EngineType.statistical],
                reasoning="High accuracy requirements with sufficient data favor the advanced engine",
            )

        return EngineRecommendation(
            recommended=EngineType.statistical,
            alternatives=[EngineType.advanced] if advanced else [],
            reasoning="Statistical methods provide good balance of speed and accuracy",
        )

    def get_available_capabilities(self) -> List[Capability]:
        return list(self._registry.capabilities())

    def health_check(self) -> HealthStatus:
        statistical = self._registry.has_statistical()
        advanced = self._registry.has_advanced()
        return HealthStatus(statistical=statistical, advanced=advanced, overall=statistical or advanced)
