"""
Anomaly detection for financial time series using an ensemble of statistical detectors (z-score, IQR, local density, seasonal deviation) merged by consensus, with clustering and periodicity mining over the flagged periods.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from analytics.anomaly.engine import StatisticalAnomalyEngine
from analytics.anomaly.detectors import DETECTORS
from analytics.anomaly.patterns import detect_patterns

__all__ = ["StatisticalAnomalyEngine", "DETECTORS", "detect_patterns"]
