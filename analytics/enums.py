"""
Enumerations for Forecast Methods, Sensitivity, Severity, Complexity and Engine Capabilities

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ForecastMethod(str, Enum):
    linear = "linear"
    exponential = "exponential"
    seasonal = "seasonal"
    adaptive = "adaptive"

    @classmethod
    def parse(cls, value: Any) -> ForecastMethod:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.adaptive


class AnomalySensitivity(str, Enum):
    low = "LOW"
    medium = "MEDIUM"
    high = "HIGH"

    @classmethod
    def _missing_(cls, value: object) -> AnomalySensitivity | None:
        if isinstance(value, str):
            upper = value.strip().upper()
            for member in cls:
                if member.value == upper:
                    return member
        return None


class AnomalySeverity(str, Enum):
    low = "LOW"
    medium = "MEDIUM"
    high = "HIGH"
    critical = "CRITICAL"

    @classmethod
    def from_consensus(cls, agreement: float) -> AnomalySeverity:
        from config import settings

        if agreement >= settings.severity_score_critical:
            return cls.critical
        if agreement >= settings.severity_score_high:
            return cls.high
        if agreement >= settings.severity_score_medium:
            return cls.medium
        return cls.low


class Complexity(str, Enum):
    simple = "SIMPLE"
    moderate = "MODERATE"
    complex = "COMPLEX"

    @classmethod
    def parse(cls, value: Any, default: Complexity | None = None) -> Complexity | None:
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().upper()
        for member in cls:
            if member.value == text:
                return member
        return default


class PatternType(str, Enum):
    clustering = "CLUSTERING"
    periodic = "PERIODIC"


class EngineType(str, Enum):
    statistical = "STATISTICAL"
    advanced = "ADVANCED"


class Capability(str, Enum):
    forecasting = "FORECASTING"
    anomaly_detection = "ANOMALY_DETECTION"
    trend_analysis = "TREND_ANALYSIS"
    pattern_recognition = "PATTERN_RECOGNITION"
    predictive_modeling = "PREDICTIVE_MODELING"
    risk_assessment = "RISK_ASSESSMENT"


class PredictiveUseCase(str, Enum):
    customer_behavior = "CUSTOMER_BEHAVIOR"
    cash_flow = "CASH_FLOW"
    risk_assessment = "RISK_ASSESSMENT"
