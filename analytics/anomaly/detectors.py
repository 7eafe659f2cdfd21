"""
Independent statistical detectors for anomalous periods in a financial series: global z-score, interquartile range, local density and seasonal-phase deviation. Each returns the flagged indices and never depends on the others.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Callable, List, Tuple

import numpy as np

from analytics.enums import AnomalySensitivity
from analytics.profile import phase_means
from config import settings


def _threshold(table: dict, sensitivity: AnomalySensitivity) -> float:
    return float(table[AnomalySensitivity(sensitivity).value])


def zscore_anomalies(arr: np.ndarray, sensitivity: AnomalySensitivity) -> np.ndarray:
    std = arr.std()
    if std == 0:
        return np.array([], dtype=int)
    z = np.abs(arr - arr.mean()) / std
    return np.flatnonzero(z > _threshold(settings.anomaly_zscore_thresholds, sensitivity))


def iqr_anomalies(arr: np.ndarray, sensitivity: AnomalySensitivity) -> np.ndarray:
    q1, q3 = np.quantile(arr, [0.25, 0.75])
    iqr = q3 - q1
    k = _threshold(settings.anomaly_iqr_multipliers, sensitivity)
    return np.flatnonzero((arr < q1 - k * iqr) | (arr > q3 + k * iqr))


def local_window(n: int) -> int:
    return max(settings.anomaly_local_window_min, int(n * settings.anomaly_local_window_fraction))


def local_density_anomalies(arr: np.ndarray, sensitivity: AnomalySensitivity) -> np.ndarray:
    threshold = _threshold(settings.anomaly_local_thresholds, sensitivity)
    window = local_window(len(arr))
    flagged: List[int] = []
    for i, value in enumerate(arr):
        local = arr[max(0, i - window): i + window + 1]
        std = local.std()
        if std > 0 and abs(value - local.mean()) / std > threshold:
            flagged.append(i)
    return np.array(flagged, dtype=int)


def seasonal_baseline(arr: np.ndarray, period: int | None = None) -> Tuple[np.ndarray, np.ndarray]:
    if period is None:
        period = settings.season_length
    means = phase_means(arr, period)
    stds = np.array([arr[p::period].std() if len(arr[p::period]) > 1 else 0.0 for p in range(period)])
    return means, stds


def seasonal_ready(n: int) -> bool:
    return n >= settings.season_length * settings.seasonal_min_cycles


def seasonal_anomalies(arr: np.ndarray, sensitivity: AnomalySensitivity) -> np.ndarray:
    if not seasonal_ready(len(arr)):
        return np.array([], dtype=int)
    threshold = _threshold(settings.anomaly_seasonal_thresholds, sensitivity)
    period = settings.season_length
    means, stds = seasonal_baseline(arr, period)
    flagged: List[int] = []
    for i, value in enumerate(arr):
        phase = i % period
        if stds[phase] > 0 and abs(value - means[phase]) / stds[phase] > threshold:
            flagged.append(i)
    return np.array(flagged, dtype=int)


Detector = Callable[[np.ndarray, AnomalySensitivity], np.ndarray]

DETECTORS: Tuple[Tuple[str, Detector], ...] = (
    ("Z-Score", zscore_anomalies),
    ("IQR", iqr_anomalies),
    ("Local Density", local_density_anomalies),
    ("Seasonal", seasonal_anomalies),
)
