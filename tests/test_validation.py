"""
Tests for input validation shared by the forecasting and anomaly engines, covering the rejection messages, defect codes and remediation hints.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import math

import pytest

from analytics.anomaly import StatisticalAnomalyEngine
from analytics.exceptions import ValidationError
from analytics.forecast import StatisticalForecastingEngine
from analytics.models import AnalyticsData, ForecastingOptions
from analytics.validation import unwrap_series, validate_series


def test_two_points_rejected_by_both_engines(make_series):
    series = make_series([100, 110])

    with pytest.raises(ValidationError, match="Insufficient data points") as forecast_err:
        StatisticalForecastingEngine().generate_forecast(series, ForecastingOptions(method="linear", periods=3))
    with pytest.raises(ValidationError, match="Insufficient data points") as anomaly_err:
        StatisticalAnomalyEngine().detect_anomalies(AnalyticsData(time_series=series))

    for err in (forecast_err.value, anomaly_err.value):
        assert err.defect == "insufficient_data"
        assert err.required == 3
        assert err.received == 2
        assert err.remediation == "need at least 1 more data point(s)"


def test_three_points_is_enough(make_series):
    arr = validate_series(make_series([1, 2, 3]), "forecasting")
    assert arr.tolist() == [1.0, 2.0, 3.0]


def test_length_mismatch_rejected(make_series, monthly_stamps):
    series = make_series([100, 110, 120, 130, 140], timestamps=monthly_stamps(4))
    with pytest.raises(ValidationError, match="timestamps and values arrays must have the same length") as err:
        StatisticalForecastingEngine().generate_forecast(series)
    assert err.value.defect == "length_mismatch"


def test_shortage_reported_before_mismatch(make_series, monthly_stamps):
    series = make_series([100, 110], timestamps=monthly_stamps(5))
    with pytest.raises(ValidationError, match="Insufficient data points"):
        validate_series(series, "forecasting")


@pytest.mark.parametrize("bad", [math.nan, math.inf, -5.0])
def test_invalid_values_rejected(make_series, bad):
    series = make_series([100, bad, 120, 130])
    with pytest.raises(ValidationError, match="Invalid data values detected") as err:
        validate_series(series, "anomaly detection")
    assert err.value.defect == "invalid_values"


def test_unordered_timestamps_rejected(make_series, daily_stamps):
    stamps = daily_stamps(4)
    stamps[1], stamps[2] = stamps[2], stamps[1]
    with pytest.raises(ValidationError, match="strictly ascending"):
        validate_series(make_series([1, 2, 3, 4], timestamps=stamps), "forecasting")


def test_duplicate_timestamps_rejected(make_series, daily_stamps):
    stamps = daily_stamps(3)
    stamps[2] = stamps[1]
    with pytest.raises(ValidationError) as err:
        validate_series(make_series([1, 2, 3], timestamps=stamps), "forecasting")
    assert err.value.defect == "unordered_timestamps"


def test_missing_series_rejected():
    with pytest.raises(ValidationError, match="Time series data is required for anomaly detection") as err:
        unwrap_series(AnalyticsData(), "anomaly detection")
    assert err.value.defect == "missing_series"
    assert err.value.to_dict()["remediation"] == "provide a time series to analyse"


def test_validation_error_is_value_error(make_series):
    # callers that only know about ValueError still catch rejections
    with pytest.raises(ValueError):
        validate_series(make_series([1]), "forecasting")


def test_min_data_points_from_settings(monkeypatch, make_series):
    monkeypatch.setattr("config.settings.min_data_points", 5)
    with pytest.raises(ValidationError) as err:
        validate_series(make_series([1, 2, 3, 4]), "forecasting")
    assert err.value.remediation == "need at least 1 more data point(s)"


def test_forecast_without_series_rejected():
    with pytest.raises(ValidationError, match="Time series data is required for forecasting") as err:
        StatisticalForecastingEngine().generate_forecast(None)
    assert err.value.defect == "missing_series"


def test_forecast_accepts_analytics_envelope(make_series, trending_values):
    result = StatisticalForecastingEngine().generate_forecast(
        AnalyticsData(time_series=make_series(trending_values)), ForecastingOptions(periods=2)
    )
    assert len(result.predictions) == 2
