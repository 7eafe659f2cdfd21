"""
Narrative insights and recommendations attached to a forecast, with the optional fixed business-context overlay.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List

import numpy as np

from analytics.enums import ForecastMethod
from analytics.models import ForecastingOptions, ForecastPoint
from analytics.profile import coefficient_of_variation, linear_fit
from config import settings


def generate_insights(arr: np.ndarray, predictions: List[ForecastPoint], method: ForecastMethod) -> List[str]:
    insights: List[str] = []

    slope, _ = linear_fit(arr)
    mean = float(np.mean(arr))
    relative_slope = slope / mean if mean > 0 else 0.0
    if relative_slope > settings.forecast_trend_threshold:
        insights.append("Strong upward trend detected in historical data")
    elif relative_slope < -settings.forecast_trend_threshold:
        insights.append("Declining trend observed in recent periods")
    else:
        insights.append("Stable trend with minimal growth or decline")

    volatility = coefficient_of_variation(arr)
    if volatility > settings.forecast_volatility_high:
        insights.append("High volatility detected - consider risk management strategies")
    elif volatility < settings.forecast_volatility_low:
        insights.append("Low volatility indicates stable business performance")

    if predictions:
        avg_confidence = sum(p.confidence for p in predictions) / len(predictions)
        if avg_confidence > settings.forecast_confidence_high:
            insights.append("High confidence in forecast accuracy")
        elif avg_confidence < settings.forecast_confidence_low:
            insights.append("Lower confidence due to data variability - monitor closely")

    insights.append(f"Forecast produced with the {method.value} method")
    return insights


def generate_recommendations(
    arr: np.ndarray,
    predictions: List[ForecastPoint],
    options: ForecastingOptions,
    method: ForecastMethod,
) -> List[str]:
    recommendations: List[str] = []

    if len(arr) < settings.forecast_min_history:
        recommendations.append("Collect more historical data to improve forecast accuracy")

    if options.periods > len(arr) / 2:
        recommendations.append("Consider shorter forecast periods for better accuracy")

    if options.method == ForecastMethod.seasonal and method != ForecastMethod.seasonal:
        recommendations.append(
            f"Enable seasonality and provide at least "
            f"{settings.season_length * settings.seasonal_min_cycles} periods for seasonal forecasts"
        )

    if predictions:
        avg_predicted = sum(p.value for p in predictions) / len(predictions)
        avg_historical = float(np.mean(arr))
        if avg_predicted > avg_historical * settings.forecast_growth_ratio:
            recommendations.append("Prepare for increased demand - consider scaling operations")
        elif avg_predicted < avg_historical * settings.forecast_decline_ratio:
            recommendations.append("Declining forecast - review business strategy and market conditions")

    return recommendations


def apply_domain_context(insights: List[str], recommendations: List[str]) -> None:
    insights.extend(settings.domain_forecast_insights)
    recommendations.extend(settings.domain_forecast_recommendations)
