"""
Series profiling helpers: least-squares trend fit, goodness of fit, volatility, seasonality strength and the SIMPLE/MODERATE/COMPLEX classification shared by the adaptive forecaster and the engine selector.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from scipy.stats import linregress

from analytics.enums import Complexity
from config import settings


def linear_fit(vals: Sequence[float]) -> tuple[float, float]:
    v = np.asarray(vals, dtype=float)
    if len(v) < 2:
        return 0.0, float(v[0]) if len(v) else 0.0
    if np.all(v == v[0]):
        return 0.0, float(v[0])
    fit = linregress(np.arange(len(v), dtype=float), v)
    return float(fit.slope), float(fit.intercept)


def r_squared(actual: Sequence[float], fitted: Sequence[float]) -> float:
    a = np.asarray(actual, dtype=float)
    f = np.asarray(fitted, dtype=float)
    ss_res = float(np.sum((a - f) ** 2))
    ss_tot = float(np.sum((a - np.mean(a)) ** 2))
    if ss_tot == 0:
        return 1.0 if ss_res == 0 else 0.0
    return min(1.0, 1.0 - ss_res / ss_tot)


def coefficient_of_variation(vals: Sequence[float]) -> float:
    arr = np.asarray(vals, dtype=float)
    mean = float(np.mean(np.abs(arr))) if len(arr) else 0.0
    if mean == 0:
        return 0.0
    return float(np.std(arr) / mean)


def phase_means(vals: Sequence[float], period: int) -> np.ndarray:
    arr = np.asarray(vals, dtype=float)
    return np.array([arr[p::period].mean() if len(arr[p::period]) else 0.0 for p in range(period)])


def seasonality_strength(vals: Sequence[float], period: int | None = None) -> float:
    if period is None:
        period = settings.season_length
    arr = np.asarray(vals, dtype=float)
    if len(arr) < period * settings.seasonal_min_cycles:
        return 0.0
    total_var = float(np.var(arr))
    if total_var == 0:
        return 0.0
    return float(np.var(phase_means(arr, period)) / total_var)


def classify_complexity(vals: Sequence[float]) -> Complexity:
    if seasonality_strength(vals) > settings.complexity_seasonality_threshold:
        return Complexity.complex
    if coefficient_of_variation(vals) > settings.complexity_cv_threshold:
        return Complexity.moderate
    return Complexity.simple
