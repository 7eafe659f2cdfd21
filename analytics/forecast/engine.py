"""
Statistical forecasting engine producing point forecasts, confidence intervals, backtested accuracy and narrative insights for revenue and expense series.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import calendar
import logging
from datetime import datetime, timedelta
from typing import List, Optional

import numpy as np

from analytics.enums import Capability, EngineType
from analytics.exceptions import ValidationError
from analytics.forecast.accuracy import confidence_intervals, holdout_accuracy, prediction_confidence
from analytics.forecast.insights import apply_domain_context, generate_insights, generate_recommendations
from analytics.forecast.methods import fit, remove_outliers, resolve_method
from analytics.forecast.validator import ModelValidator
from analytics.interfaces import ForecastingEngine
from analytics.models import (
    ForecastingOptions,
    ForecastPoint,
    ForecastResult,
    ModelMetrics,
    ModelValidation,
    TimeSeriesData,
    ValidationMetrics,
)
from analytics.validation import check_alignment, unwrap_series, validate_series, validate_values
from config import settings

log = logging.getLogger(__name__)

_MONTHLY_GAP_DAYS = (28.0, 31.0)


def _add_months(ts: datetime, months: int) -> datetime:
    month_index = ts.month - 1 + months
    year = ts.year + month_index // 12
    month = month_index % 12 + 1
    day = min(ts.day, calendar.monthrange(year, month)[1])
    return ts.replace(year=year, month=month, day=day)


def future_timestamps(timestamps: List[datetime], periods: int) -> List[datetime]:
    gaps = [(b - a).total_seconds() for a, b in zip(timestamps, timestamps[1:])]
    step_seconds = float(np.median(gaps)) if gaps else 86400.0
    last = timestamps[-1]
    step_days = step_seconds / 86400.0
    if _MONTHLY_GAP_DAYS[0] <= step_days <= _MONTHLY_GAP_DAYS[1]:
        return [_add_months(last, i) for i in range(1, periods + 1)]
    step = timedelta(seconds=step_seconds)
    return [last + step * i for i in range(1, periods + 1)]


class StatisticalForecastingEngine(ForecastingEngine):
    engine_type = EngineType.statistical
    version = "2.0.0"
    capabilities = (Capability.forecasting, Capability.trend_analysis)

    def generate_forecast(
        self,
        data: Optional[TimeSeriesData],
        options: Optional[ForecastingOptions] = None,
    ) -> ForecastResult:
        if options is None:
            options = ForecastingOptions()
        log.info("Generating %d-period forecast using %s method", options.periods, options.method.value)

        data = unwrap_series(data, "forecasting")
        arr = remove_outliers(validate_series(data, "forecasting"))
        method = resolve_method(arr, options)
        model = fit(arr, method, options.periods)

        n = len(arr)
        values = [round(max(0.0, float(v)), 4) for v in model.forecast]
        predictions = [
            ForecastPoint(
                timestamp=ts,
                value=value,
                confidence=prediction_confidence(model.r2, n, h),
            )
            for h, (ts, value) in enumerate(zip(future_timestamps(data.timestamps, options.periods), values), start=1)
        ]

        insights = generate_insights(arr, predictions, method)
        recommendations = generate_recommendations(arr, predictions, options, method)
        if options.domain_context:
            apply_domain_context(insights, recommendations)

        return ForecastResult(
            method=method,
            predictions=predictions,
            confidence_intervals=confidence_intervals(arr, model, values, options.confidence),
            accuracy=holdout_accuracy(arr, method, model),
            insights=insights,
            recommendations=recommendations,
        )

    def validate_model(self, data: Optional[TimeSeriesData]) -> ModelValidation:
        series = unwrap_series(data, "model validation")
        arr = remove_outliers(validate_values(series, "model validation"))
        try:
            check_alignment(series)
        except ValidationError as exc:
            log.warning("Model validation skipped for misaligned series: %s", exc)
            return ModelValidation(
                is_valid=False,
                metrics=ValidationMetrics(cross_validation_score=0.0, holdout_score=0.0, stability_score=0.0),
                recommendations=[f"{exc.message} - {exc.remediation}"],
            )
        return ModelValidator().validate(arr)

    def get_model_metrics(self) -> ModelMetrics:
        precision = settings.monitoring_precision
        recall = settings.monitoring_recall
        f1 = 2 * precision * recall / (precision + recall) if precision + recall else 0.0
        return ModelMetrics(
            accuracy=settings.monitoring_accuracy,
            precision=precision,
            recall=recall,
            f1_score=round(f1, 4),
            mape=settings.monitoring_mape,
            rmse=settings.monitoring_rmse,
        )
