"""
Forecasting methods for financial time series: least-squares trend extrapolation, single exponential smoothing and additive seasonal decomposition, plus the adaptive selection that chooses between them from the series' complexity.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from analytics.enums import Complexity, ForecastMethod
from analytics.models import ForecastingOptions
from analytics.profile import classify_complexity, linear_fit, phase_means, r_squared
from config import settings

log = logging.getLogger(__name__)

_ADAPTIVE_CHOICE = {
    Complexity.simple: ForecastMethod.linear,
    Complexity.moderate: ForecastMethod.exponential,
    Complexity.complex: ForecastMethod.seasonal,
}


@dataclass(frozen=True)
class ModelFit:
    method: ForecastMethod
    fitted: np.ndarray
    forecast: np.ndarray
    r2: float


def remove_outliers(arr: np.ndarray, k: float | None = None) -> np.ndarray:
    if k is None:
        k = settings.forecast_outlier_iqr_k
    q1, q3 = np.quantile(arr, [0.25, 0.75])
    iqr = q3 - q1
    outside = (arr < q1 - k * iqr) | (arr > q3 + k * iqr)
    if not outside.any():
        return arr.copy()
    return np.where(outside, float(np.median(arr)), arr)


def _seasonal_ready(n: int) -> bool:
    return n >= settings.season_length * settings.seasonal_min_cycles


def resolve_method(arr: np.ndarray, options: ForecastingOptions) -> ForecastMethod:
    method = options.method
    if method == ForecastMethod.adaptive:
        complexity = classify_complexity(arr)
        chosen = _ADAPTIVE_CHOICE[complexity]
        log.debug("Adaptive forecast classified series as %s, using %s", complexity.value, chosen.value)
        return chosen
    if method == ForecastMethod.seasonal and not (options.include_seasonality and _seasonal_ready(len(arr))):
        log.info(
            "Seasonal forecast needs include_seasonality and %d points (got %d), degrading to linear",
            settings.season_length * settings.seasonal_min_cycles,
            len(arr),
        )
        return ForecastMethod.linear
    return method


def fit_linear(arr: np.ndarray, periods: int) -> ModelFit:
    slope, intercept = linear_fit(arr)
    idx = np.arange(len(arr), dtype=float)
    future = np.arange(len(arr), len(arr) + periods, dtype=float)
    fitted = intercept + slope * idx
    return ModelFit(
        method=ForecastMethod.linear,
        fitted=fitted,
        forecast=intercept + slope * future,
        r2=r_squared(arr, fitted),
    )


def _smooth(arr: np.ndarray, alpha: float) -> np.ndarray:
    level = np.zeros(len(arr))
    level[0] = arr[0]
    for i in range(1, len(arr)):
        level[i] = alpha * arr[i] + (1 - alpha) * level[i - 1]
    return level


def choose_alpha(arr: np.ndarray) -> float:
    """Smoothing factor with the lowest mean squared one-step-ahead error."""
    best_alpha = settings.forecast_smoothing_alphas[0]
    best_mse = float("inf")
    for alpha in settings.forecast_smoothing_alphas:
        level = _smooth(arr, alpha)
        errors = arr[1:] - level[:-1]
        mse = float(np.mean(errors ** 2)) if len(errors) else 0.0
        if mse < best_mse:
            best_mse = mse
            best_alpha = alpha
    return best_alpha


def fit_exponential(arr: np.ndarray, periods: int) -> ModelFit:
    alpha = choose_alpha(arr)
    level = _smooth(arr, alpha)
    fitted = np.concatenate(([arr[0]], level[:-1]))
    return ModelFit(
        method=ForecastMethod.exponential,
        fitted=fitted,
        forecast=np.full(periods, level[-1]),
        r2=r_squared(arr, fitted),
    )


def fit_seasonal(arr: np.ndarray, periods: int, period: int | None = None) -> ModelFit:
    if period is None:
        period = settings.season_length
    slope, intercept = linear_fit(arr)
    idx = np.arange(len(arr))
    future = np.arange(len(arr), len(arr) + periods)
    trend = intercept + slope * idx
    seasonal = phase_means(arr - trend, period)
    seasonal = seasonal - seasonal.mean()
    fitted = trend + seasonal[idx % period]
    return ModelFit(
        method=ForecastMethod.seasonal,
        fitted=fitted,
        forecast=intercept + slope * future + seasonal[future % period],
        r2=r_squared(arr, fitted),
    )


_FITTERS = {
    ForecastMethod.linear: fit_linear,
    ForecastMethod.exponential: fit_exponential,
    ForecastMethod.seasonal: fit_seasonal,
}


def fit(arr: np.ndarray, method: ForecastMethod, periods: int) -> ModelFit:
    # callers resolve adaptive first; anything else unexpected is fitted linearly
    fitter = _FITTERS.get(method, fit_linear)
    return fitter(np.asarray(arr, dtype=float), periods)
