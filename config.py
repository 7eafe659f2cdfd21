"""
Constants and configuration for Fincast.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import Dict, List

from pydantic_settings import BaseSettings


FINCAST_HOST = os.getenv("FINCAST_HOST", "0.0.0.0")
FINCAST_PORT = int(os.getenv("FINCAST_PORT", "4330"))

# capability keys used by the engine registry
STATISTICAL_FORECASTING = "statistical-forecasting"
STATISTICAL_ANOMALY = "statistical-anomaly"
ADVANCED_FORECASTING = "advanced-forecasting"
ADVANCED_ANOMALY = "advanced-anomaly"

SECONDS_PER_DAY = 86400.0


class Settings(BaseSettings):
    # series validation
    min_data_points: int = 3

    # severity consensus cutoffs (fraction of detectors agreeing)
    severity_score_critical: float = 0.75
    severity_score_high: float = 0.50
    severity_score_medium: float = 0.25

    # seasonality
    season_length: int = 12
    seasonal_min_cycles: int = 2

    # complexity classification
    complexity_seasonality_threshold: float = 0.3
    complexity_cv_threshold: float = 0.3

    # anomaly detector thresholds keyed by sensitivity
    anomaly_zscore_thresholds: Dict[str, float] = {"LOW": 3.0, "MEDIUM": 2.5, "HIGH": 2.0}
    anomaly_iqr_multipliers: Dict[str, float] = {"LOW": 2.0, "MEDIUM": 1.5, "HIGH": 1.0}
    anomaly_local_thresholds: Dict[str, float] = {"LOW": 2.5, "MEDIUM": 2.0, "HIGH": 1.5}
    anomaly_seasonal_thresholds: Dict[str, float] = {"LOW": 2.5, "MEDIUM": 2.0, "HIGH": 1.5}
    anomaly_local_window_min: int = 3
    anomaly_local_window_fraction: float = 0.1

    # anomaly pattern mining
    anomaly_cluster_gap_days: float = 7.0
    anomaly_cluster_min_size: int = 2
    anomaly_periodic_min_count: int = 3
    anomaly_periodic_cv_threshold: float = 0.3
    anomaly_volume_threshold: int = 10

    # forecasting
    forecast_outlier_iqr_k: float = 1.5
    forecast_smoothing_alphas: List[float] = [0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9]
    forecast_holdout_fraction: float = 0.2
    forecast_holdout_max: int = 6
    forecast_confidence_fit_weight: float = 0.6
    forecast_confidence_horizon_decay: float = 0.02
    forecast_trend_threshold: float = 0.01
    forecast_volatility_high: float = 0.3
    forecast_volatility_low: float = 0.1
    forecast_confidence_high: float = 0.8
    forecast_confidence_low: float = 0.6
    forecast_min_history: int = 12
    forecast_growth_ratio: float = 1.2
    forecast_decline_ratio: float = 0.8

    # model validation
    validation_folds: int = 5
    validation_cv_threshold: float = 0.6
    validation_holdout_threshold: float = 0.6
    validation_stability_threshold: float = 0.7

    # monitoring figures reported by the statistical forecaster
    monitoring_accuracy: float = 0.85
    monitoring_precision: float = 0.82
    monitoring_recall: float = 0.88
    monitoring_mape: float = 15.2
    monitoring_rmse: float = 0.12

    # engine selection
    selector_min_forecast_size: int = 100
    selector_min_anomaly_size: int = 200
    selector_min_recommendation_size: int = 50
    selector_accuracy_threshold: float = 0.8

    # fixed business-context overlay
    domain_forecast_insights: List[str] = [
        "Revenue in this market follows seasonal business cycles around harvest and holiday periods",
    ]
    domain_forecast_recommendations: List[str] = [
        "Consider seasonal factors specific to local market conditions",
        "Monitor mobile money and other alternative payment channels for shifts in collection patterns",
        "Plan cash reserves ahead of tax and regulatory filing deadlines",
    ]
    domain_anomaly_recommendations: List[str] = [
        "Consider seasonal factors specific to local market conditions",
        "Monitor for mobile money transaction anomalies during peak periods",
    ]

    model_config = {
        "env_prefix": "FINCAST_",
        "extra": "ignore",
    }


settings = Settings()
