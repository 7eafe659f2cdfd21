"""
Statistical forecasting for financial time series: trend, smoothing and seasonal methods with backtested accuracy, confidence intervals and model validation.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from analytics.forecast.engine import StatisticalForecastingEngine
from analytics.forecast.methods import ModelFit, fit, resolve_method
from analytics.forecast.validator import ModelValidator

__all__ = ["StatisticalForecastingEngine", "ModelFit", "fit", "resolve_method", "ModelValidator"]
