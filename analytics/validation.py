"""
Input validation shared by the forecasting and anomaly engines. Every check runs before any computation so that a rejected series never yields a partial result.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Optional, Union

import numpy as np

from analytics.exceptions import ValidationError
from analytics.models import AnalyticsData, TimeSeriesData
from config import settings


def unwrap_series(data: Union[AnalyticsData, TimeSeriesData, None], purpose: str) -> TimeSeriesData:
    series: Optional[TimeSeriesData]
    if isinstance(data, AnalyticsData):
        series = data.time_series
    else:
        series = data
    if series is None:
        raise ValidationError(
            f"Time series data is required for {purpose}",
            defect="missing_series",
        )
    return series


def validate_values(series: TimeSeriesData, purpose: str) -> np.ndarray:
    values = series.values or []
    n = len(values)
    if n < settings.min_data_points:
        raise ValidationError(
            f"Insufficient data points for {purpose}: "
            f"got {n}, need at least {settings.min_data_points}",
            defect="insufficient_data",
            required=settings.min_data_points,
            received=n,
        )

    arr = np.asarray(values, dtype=float)
    if not np.all(np.isfinite(arr)) or np.any(arr < 0):
        raise ValidationError("Invalid data values detected", defect="invalid_values")
    return arr


def check_alignment(series: TimeSeriesData) -> None:
    n = len(series.values)
    if len(series.timestamps) != n:
        raise ValidationError(
            "timestamps and values arrays must have the same length "
            f"({len(series.timestamps)} timestamps, {n} values)",
            defect="length_mismatch",
        )

    for prev, cur in zip(series.timestamps, series.timestamps[1:]):
        if cur <= prev:
            raise ValidationError(
                "timestamps must be strictly ascending",
                defect="unordered_timestamps",
            )


def validate_series(series: TimeSeriesData, purpose: str) -> np.ndarray:
    """Check a series and return its values as a float array.

    The order of the checks matters: a series that is both too short and
    mismatched reports the shortage first.
    """
    arr = validate_values(series, purpose)
    check_alignment(series)
    return arr
