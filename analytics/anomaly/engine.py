"""
Statistical anomaly detection engine: runs the detector ensemble over a revenue or expense series, merges the results by consensus, mines patterns among the flagged periods and produces recommendations.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import List, Union

from analytics.anomaly.consensus import combine
from analytics.anomaly.detectors import DETECTORS, seasonal_baseline, seasonal_ready
from analytics.anomaly.patterns import detect_patterns
from analytics.enums import AnomalySensitivity, AnomalySeverity, Capability, EngineType, PatternType
from analytics.interfaces import AnomalyDetectionEngine
from analytics.models import AnalyticsData, AnomalyPattern, AnomalyPoint, AnomalyResult, TimeSeriesData
from analytics.validation import unwrap_series, validate_series
from config import settings

log = logging.getLogger(__name__)

_PURPOSE = "anomaly detection"


def generate_recommendations(anomalies: List[AnomalyPoint], patterns: List[AnomalyPattern]) -> List[str]:
    recommendations: List[str] = []

    if len(anomalies) > settings.anomaly_volume_threshold:
        recommendations.append("High number of anomalies detected - review data quality and business processes")

    critical = sum(1 for a in anomalies if a.severity == AnomalySeverity.critical)
    if critical:
        recommendations.append(f"{critical} critical anomalies require immediate attention")

    for pattern in patterns:
        if pattern.type == PatternType.clustering:
            recommendations.append("Clustered anomalies suggest systematic issues - investigate root causes")
        elif pattern.type == PatternType.periodic:
            recommendations.append(
                f"Periodic anomalies every {pattern.frequency:g} days - check for recurring events"
            )

    recommendations.extend(settings.domain_anomaly_recommendations)
    return recommendations


class StatisticalAnomalyEngine(AnomalyDetectionEngine):
    engine_type = EngineType.statistical
    version = "2.0.0"
    capabilities = (Capability.anomaly_detection, Capability.pattern_recognition)

    def detect_anomalies(
        self,
        data: Union[AnalyticsData, TimeSeriesData, None],
        sensitivity: AnomalySensitivity = AnomalySensitivity.medium,
    ) -> AnomalyResult:
        sensitivity = AnomalySensitivity(sensitivity)
        log.info("Detecting anomalies with %s sensitivity", sensitivity.value)

        series = unwrap_series(data, _PURPOSE)
        arr = validate_series(series, _PURPOSE)

        results = [(name, detector(arr, sensitivity)) for name, detector in DETECTORS]
        seasonal = seasonal_baseline(arr)[0] if seasonal_ready(len(arr)) else None
        anomalies = combine(results, arr, series.timestamps, seasonal)
        patterns = detect_patterns(anomalies)

        log.debug(
            "Detector hits: %s",
            ", ".join(f"{name}={len(indices)}" for name, indices in results),
        )
        return AnomalyResult(
            anomalies=anomalies,
            severities=[a.severity for a in anomalies],
            patterns=patterns,
            recommendations=generate_recommendations(anomalies, patterns),
        )

    def train_model(self, historical: Union[AnalyticsData, TimeSeriesData, None]) -> None:
        log.info("Statistical anomaly engine has no model to train")

    def update_model(self, new_data: Union[AnalyticsData, TimeSeriesData, None]) -> None:
        log.info("Statistical anomaly engine has no model to update")
