"""
Accuracy and uncertainty estimation for forecasts: backtested MAPE/RMSE on a recent holdout, per-point confidence and horizon-dependent confidence intervals.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from typing import List, Sequence

import numpy as np
from scipy.stats import norm

from analytics.enums import ForecastMethod
from analytics.forecast.methods import ModelFit, fit
from analytics.models import ConfidenceInterval, ModelAccuracy
from config import settings


def mape(actual: Sequence[float], predicted: Sequence[float]) -> float:
    a = np.asarray(actual, dtype=float)
    p = np.asarray(predicted, dtype=float)
    mask = a != 0
    if not mask.any():
        return 0.0 if np.allclose(a, p) else 100.0
    return float(np.mean(np.abs((a[mask] - p[mask]) / a[mask])) * 100.0)


def rmse(actual: Sequence[float], predicted: Sequence[float]) -> float:
    a = np.asarray(actual, dtype=float)
    p = np.asarray(predicted, dtype=float)
    return float(np.sqrt(np.mean((a - p) ** 2)))


def score_from_mape(value: float) -> float:
    return float(min(1.0, max(0.0, 1.0 - value / 100.0)))


def holdout_size(n: int) -> int:
    return min(max(1, int(n * settings.forecast_holdout_fraction)), settings.forecast_holdout_max)


def holdout_accuracy(arr: np.ndarray, method: ForecastMethod, model: ModelFit) -> ModelAccuracy:
    n = len(arr)
    test = holdout_size(n)
    if n - test >= 2:
        backtest = fit(arr[:-test], method, test)
        actual = arr[-test:]
        predicted = np.maximum(backtest.forecast, 0.0)
    else:
        # too short to hold anything out; compare against the in-sample fit
        backtest = model
        actual = arr
        predicted = model.fitted
    m = mape(actual, predicted)
    return ModelAccuracy(
        mape=round(m, 4),
        rmse=round(rmse(actual, predicted), 4),
        r2=round(backtest.r2, 4),
        confidence=round(score_from_mape(m), 4),
    )


def prediction_confidence(r2: float, n: int, horizon: int) -> float:
    w = settings.forecast_confidence_fit_weight
    base = w * max(r2, 0.0) + (1.0 - w) * (1.0 - 1.0 / math.sqrt(max(n, 1)))
    decayed = base / (1.0 + settings.forecast_confidence_horizon_decay * (horizon - 1))
    return round(min(1.0, max(0.0, decayed)), 4)


def confidence_intervals(
    arr: np.ndarray,
    model: ModelFit,
    values: Sequence[float],
    probability: float,
) -> List[ConfidenceInterval]:
    residuals = arr - model.fitted
    sigma = float(np.std(residuals, ddof=1)) if len(residuals) > 2 else float(np.std(residuals))
    z = float(norm.ppf(0.5 + probability / 2.0))
    fit_quality = max(model.r2, 0.0)

    intervals: List[ConfidenceInterval] = []
    for h, value in enumerate(values, start=1):
        half = z * sigma * math.sqrt(h) * (2.0 - fit_quality)
        intervals.append(ConfidenceInterval(
            lower=round(max(0.0, value - half), 4),
            upper=round(value + half, 4),
            probability=probability,
        ))
    return intervals
