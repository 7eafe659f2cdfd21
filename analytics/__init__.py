"""
Analytics core for Fincast: statistical forecasting and anomaly detection over revenue and expense time series, with registry-backed engine selection.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from analytics.enums import AnomalySensitivity, AnomalySeverity, Complexity, ForecastMethod
from analytics.exceptions import ComputationError, UnsupportedFeature, ValidationError
from analytics.registry import EngineRegistry, default_registry
from analytics.selector import EngineSelector

__all__ = [
    "AnomalySensitivity",
    "AnomalySeverity",
    "Complexity",
    "ForecastMethod",
    "ComputationError",
    "UnsupportedFeature",
    "ValidationError",
    "EngineRegistry",
    "default_registry",
    "EngineSelector",
]
