"""
Model validation for the statistical forecaster: rolling-origin cross-validation, recent holdout scoring and residual stability, independent of generating a forecast.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import List

import numpy as np
from sklearn.model_selection import TimeSeriesSplit

from analytics.enums import ForecastMethod
from analytics.forecast.accuracy import mape, score_from_mape
from analytics.forecast.methods import fit
from analytics.models import ModelValidation, ValidationMetrics
from config import settings

log = logging.getLogger(__name__)

_MIN_TRAIN = 2


class ModelValidator:

    def __init__(self, method: ForecastMethod = ForecastMethod.linear) -> None:
        self.method = method

    def _score(self, train: np.ndarray, test: np.ndarray) -> float:
        predicted = np.maximum(fit(train, self.method, len(test)).forecast, 0.0)
        return score_from_mape(mape(test, predicted))

    def cross_validation_score(self, arr: np.ndarray) -> float:
        n_splits = min(settings.validation_folds, len(arr) - _MIN_TRAIN)
        if n_splits < 2:
            return self.holdout_score(arr)
        scores: List[float] = []
        for train_idx, test_idx in TimeSeriesSplit(n_splits=n_splits).split(arr):
            if len(train_idx) < _MIN_TRAIN:
                continue
            scores.append(self._score(arr[train_idx], arr[test_idx]))
        return float(np.mean(scores)) if scores else 0.0

    def holdout_score(self, arr: np.ndarray) -> float:
        test = max(1, int(len(arr) * settings.forecast_holdout_fraction))
        if len(arr) - test < _MIN_TRAIN:
            return 0.0
        return self._score(arr[:-test], arr[-test:])

    def stability_score(self, arr: np.ndarray) -> float:
        residuals = arr - fit(arr, self.method, 0).fitted
        mean = float(np.mean(arr))
        if mean <= 0:
            return 0.0 if np.any(residuals) else 1.0
        cv = float(np.std(residuals)) / mean
        return 1.0 / (1.0 + cv)

    def validate(self, arr: np.ndarray) -> ModelValidation:
        try:
            cv_score = self.cross_validation_score(arr)
            holdout = self.holdout_score(arr)
            stability = self.stability_score(arr)
        except (ValueError, FloatingPointError, np.linalg.LinAlgError) as exc:
            log.warning("Model validation could not be completed: %s", exc)
            return ModelValidation(
                is_valid=False,
                metrics=ValidationMetrics(cross_validation_score=0.0, holdout_score=0.0, stability_score=0.0),
                recommendations=["Validation could not be completed - review the series for degenerate values"],
            )

        is_valid = (
            cv_score > settings.validation_cv_threshold
            and holdout > settings.validation_holdout_threshold
            and stability > settings.validation_stability_threshold
        )

        recommendations: List[str] = []
        if not is_valid:
            if cv_score <= settings.validation_cv_threshold:
                recommendations.append("Increase data quality or quantity")
            if holdout <= settings.validation_holdout_threshold:
                recommendations.append("Model may be overfitting - recent periods are poorly predicted")
            if stability <= settings.validation_stability_threshold:
                recommendations.append("Data shows high volatility")

        return ModelValidation(
            is_valid=is_valid,
            metrics=ValidationMetrics(
                cross_validation_score=round(cv_score, 4),
                holdout_score=round(holdout, 4),
                stability_score=round(stability, 4),
            ),
            recommendations=recommendations,
        )
