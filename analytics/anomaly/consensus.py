"""
Consensus merge of detector outputs into anomaly points. Severity reflects only how many detectors agree on a period, never the size of the deviation.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from analytics.enums import AnomalySeverity
from analytics.models import AnomalyPoint


def expected_values(arr: np.ndarray, flagged: Sequence[int], seasonal: Optional[np.ndarray]) -> np.ndarray:
    if seasonal is not None:
        return np.array([seasonal[i % len(seasonal)] for i in range(len(arr))], dtype=float)
    mask = np.ones(len(arr), dtype=bool)
    mask[list(flagged)] = False
    reference = arr[mask] if mask.any() else arr
    return np.full(len(arr), float(reference.mean()))


def combine(
    results: Sequence[Tuple[str, np.ndarray]],
    arr: np.ndarray,
    timestamps: Sequence[datetime],
    seasonal: Optional[np.ndarray] = None,
) -> List[AnomalyPoint]:
    votes: Dict[int, List[str]] = {}
    for name, indices in results:
        for idx in indices:
            votes.setdefault(int(idx), []).append(name)

    expected = expected_values(arr, list(votes), seasonal)
    total = len(results)
    points: List[AnomalyPoint] = []
    for idx in sorted(votes):
        methods = votes[idx]
        points.append(AnomalyPoint(
            index=idx,
            timestamp=timestamps[idx],
            value=float(arr[idx]),
            expected_value=round(float(expected[idx]), 4),
            severity=AnomalySeverity.from_consensus(len(methods) / total),
            methods=methods,
            explanation=f"Detected by {', '.join(methods)} method(s)",
        ))
    return points
