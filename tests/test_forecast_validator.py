"""
Tests for forecasting model validation, accuracy helpers, smoothing and the monitoring metrics surface.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import numpy as np
import pytest

from analytics.enums import ForecastMethod
from analytics.forecast import ModelValidator, StatisticalForecastingEngine
from analytics.forecast.accuracy import holdout_size, mape, prediction_confidence, rmse
from analytics.forecast.methods import choose_alpha, fit, remove_outliers
from analytics.models import ForecastingOptions


def test_validate_model_accepts_steady_trend(make_series, trending_values):
    validation = StatisticalForecastingEngine().validate_model(make_series(trending_values))

    assert validation.is_valid is True
    assert validation.recommendations == []
    metrics = validation.metrics
    for score in (metrics.cross_validation_score, metrics.holdout_score, metrics.stability_score):
        assert 0.0 <= score <= 1.0


def test_validate_model_flags_volatile_series(make_series):
    validation = StatisticalForecastingEngine().validate_model(
        make_series([10, 200, 5, 180, 15, 220, 8, 190, 12, 210])
    )
    assert validation.is_valid is False
    assert "Data shows high volatility" in validation.recommendations


def test_validate_model_on_minimum_series(make_series):
    validation = StatisticalForecastingEngine().validate_model(make_series([100, 110, 120]))
    assert 0.0 <= validation.metrics.cross_validation_score <= 1.0
    assert 0.0 <= validation.metrics.stability_score <= 1.0


def test_validate_model_rejects_short_series(make_series):
    with pytest.raises(ValueError, match="Insufficient data points for model validation"):
        StatisticalForecastingEngine().validate_model(make_series([1, 2]))


def test_validator_thresholds_from_settings(monkeypatch, make_series, trending_values):
    monkeypatch.setattr("config.settings.validation_stability_threshold", 0.999)
    validation = StatisticalForecastingEngine().validate_model(make_series(trending_values))
    assert validation.is_valid is False
    assert validation.recommendations == ["Data shows high volatility"]


def test_stability_score_of_perfect_line():
    arr = np.array([10.0, 20.0, 30.0, 40.0, 50.0])
    assert ModelValidator().stability_score(arr) == pytest.approx(1.0)


def test_cross_validation_falls_back_to_holdout_for_tiny_series():
    validator = ModelValidator()
    arr = np.array([100.0, 110.0, 120.0])
    assert validator.cross_validation_score(arr) == validator.holdout_score(arr)


def test_get_model_metrics_bounded():
    metrics = StatisticalForecastingEngine().get_model_metrics()
    for value in (metrics.accuracy, metrics.precision, metrics.recall, metrics.f1_score):
        assert 0.0 <= value <= 1.0
    assert metrics.mape >= 0.0
    assert metrics.rmse >= 0.0
    assert metrics.f1_score == pytest.approx(2 * 0.82 * 0.88 / (0.82 + 0.88), abs=1e-4)


def test_mape_skips_zero_actuals():
    assert mape([100.0, 0.0], [90.0, 5.0]) == pytest.approx(10.0)
    assert mape([0.0, 0.0], [0.0, 0.0]) == 0.0
    assert mape([0.0], [1.0]) == 100.0


def test_rmse():
    assert rmse([1.0, 2.0, 3.0], [1.0, 2.0, 3.0]) == 0.0
    assert rmse([0.0, 0.0], [3.0, 4.0]) == pytest.approx(np.sqrt(12.5))


def test_holdout_size_is_bounded():
    assert holdout_size(3) == 1
    assert holdout_size(12) == 2
    assert holdout_size(100) == 6


def test_prediction_confidence_bounded():
    assert 0.0 <= prediction_confidence(-3.0, 3, 1) <= 1.0
    assert prediction_confidence(1.0, 100, 1) > prediction_confidence(1.0, 100, 10)


def test_remove_outliers_replaces_with_median():
    arr = np.array([10.0, 11.0, 12.0, 11.0, 10.0, 200.0])
    cleaned = remove_outliers(arr)
    assert cleaned[-1] == pytest.approx(11.0)
    assert cleaned[:-1].tolist() == arr[:-1].tolist()


def test_choose_alpha_tracks_level_shift():
    arr = np.array([10.0] * 5 + [50.0] * 5)
    assert choose_alpha(arr) == pytest.approx(0.9)


def test_fit_dispatch_and_shapes():
    arr = np.array([5.0, 7.0, 9.0, 11.0])
    model = fit(arr, ForecastMethod.linear, 3)
    assert model.method == ForecastMethod.linear
    assert model.fitted.shape == (4,)
    assert np.allclose(model.forecast, [13.0, 15.0, 17.0])
    assert model.r2 == pytest.approx(1.0)


def test_validate_model_reports_length_mismatch(make_series, monthly_stamps, trending_values):
    series = make_series(trending_values[:6], timestamps=monthly_stamps(5))
    validation = StatisticalForecastingEngine().validate_model(series)

    assert validation.is_valid is False
    assert validation.metrics.cross_validation_score == 0.0
    assert validation.recommendations == [
        "timestamps and values arrays must have the same length (5 timestamps, 6 values)"
        " - supply exactly one timestamp per value"
    ]


def test_validate_model_reports_unordered_timestamps(make_series, daily_stamps):
    stamps = daily_stamps(6)
    stamps[2], stamps[3] = stamps[3], stamps[2]
    validation = StatisticalForecastingEngine().validate_model(
        make_series([100, 110, 105, 120, 115, 130], timestamps=stamps)
    )

    assert validation.is_valid is False
    assert validation.recommendations[0].startswith("timestamps must be strictly ascending")


def test_validate_model_still_rejects_bad_values(make_series):
    with pytest.raises(ValueError, match="Invalid data values detected"):
        StatisticalForecastingEngine().validate_model(make_series([100, -1, 120, 130]))
    with pytest.raises(ValueError, match="Time series data is required for model validation"):
        StatisticalForecastingEngine().validate_model(None)


def test_accuracy_r2_comes_from_the_backtest_fit(make_series, trending_values):
    result = StatisticalForecastingEngine().generate_forecast(
        make_series(trending_values), ForecastingOptions(method="linear", periods=3)
    )
    # 12 points hold out the last 2
    train = np.array(trending_values[:-2], dtype=float)
    assert result.accuracy.r2 == pytest.approx(round(fit(train, ForecastMethod.linear, 2).r2, 4))
    assert result.accuracy.r2 != pytest.approx(round(fit(np.array(trending_values, dtype=float), ForecastMethod.linear, 3).r2, 4))
