"""
Meta-pattern mining over detected anomalies: temporal clusters of nearby anomalies and periodic recurrence.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from analytics.enums import PatternType
from analytics.models import AnomalyPattern, AnomalyPoint
from config import SECONDS_PER_DAY, settings


def find_clusters(anomalies: List[AnomalyPoint], max_gap_days: float | None = None) -> List[List[AnomalyPoint]]:
    if max_gap_days is None:
        max_gap_days = settings.anomaly_cluster_gap_days
    max_gap = max_gap_days * SECONDS_PER_DAY

    clusters: List[List[AnomalyPoint]] = []
    current: List[AnomalyPoint] = []
    for anomaly in anomalies:
        if current and (anomaly.timestamp - current[-1].timestamp).total_seconds() > max_gap:
            if len(current) >= settings.anomaly_cluster_min_size:
                clusters.append(current)
            current = []
        current.append(anomaly)
    if len(current) >= settings.anomaly_cluster_min_size:
        clusters.append(current)
    return clusters


def periodic_pattern(anomalies: List[AnomalyPoint]) -> Optional[AnomalyPattern]:
    if len(anomalies) < settings.anomaly_periodic_min_count:
        return None
    gaps = np.array([
        (b.timestamp - a.timestamp).total_seconds() / SECONDS_PER_DAY
        for a, b in zip(anomalies, anomalies[1:])
    ])
    mean_gap = float(gaps.mean())
    if mean_gap <= 0:
        return None
    if float(gaps.std()) / mean_gap >= settings.anomaly_periodic_cv_threshold:
        return None
    period_days = round(mean_gap, 2)
    return AnomalyPattern(
        type=PatternType.periodic,
        frequency=period_days,
        description=f"Anomalies occur approximately every {period_days:g} day(s)",
    )


def detect_patterns(anomalies: List[AnomalyPoint]) -> List[AnomalyPattern]:
    patterns: List[AnomalyPattern] = []
    clusters = find_clusters(anomalies)
    if clusters:
        patterns.append(AnomalyPattern(
            type=PatternType.clustering,
            frequency=float(len(clusters)),
            description=f"{len(clusters)} anomaly cluster(s) detected",
        ))
    periodic = periodic_pattern(anomalies)
    if periodic is not None:
        patterns.append(periodic)
    return patterns
