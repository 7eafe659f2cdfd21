"""
Tests for series profiling helpers: trend fit, R², coefficient of variation, seasonality strength and complexity classification.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import math

import numpy as np
import pytest

from analytics.enums import Complexity
from analytics.profile import (
    classify_complexity,
    coefficient_of_variation,
    linear_fit,
    phase_means,
    r_squared,
    seasonality_strength,
)


def test_linear_fit_recovers_line():
    slope, intercept = linear_fit([3.0, 5.0, 7.0, 9.0])
    assert slope == pytest.approx(2.0)
    assert intercept == pytest.approx(3.0)


def test_linear_fit_constant_and_short():
    assert linear_fit([4.0, 4.0, 4.0]) == (0.0, 4.0)
    assert linear_fit([7.0]) == (0.0, 7.0)
    assert linear_fit([]) == (0.0, 0.0)


def test_r_squared_bounds():
    actual = [1.0, 2.0, 3.0, 4.0]
    assert r_squared(actual, actual) == pytest.approx(1.0)
    # a fit worse than the mean is negative but never above one
    assert r_squared(actual, [4.0, 3.0, 2.0, 1.0]) < 0
    assert r_squared([5.0, 5.0], [5.0, 5.0]) == 1.0
    assert r_squared([5.0, 5.0], [4.0, 6.0]) == 0.0


def test_coefficient_of_variation():
    assert coefficient_of_variation([10.0, 10.0, 10.0]) == 0.0
    assert coefficient_of_variation([0.0, 0.0]) == 0.0
    assert coefficient_of_variation([5.0, 15.0]) == pytest.approx(0.5)


def test_phase_means_and_seasonality_strength():
    pattern = [100 + 30 * math.sin(2 * math.pi * i / 12) for i in range(12)]
    vals = pattern * 3
    assert np.allclose(phase_means(vals, 12), pattern)
    assert seasonality_strength(vals) == pytest.approx(1.0)
    # fewer than two cycles carries no seasonal signal
    assert seasonality_strength(pattern) == 0.0


def test_classify_complexity():
    pattern = [100 + 30 * math.sin(2 * math.pi * i / 12) for i in range(12)]
    assert classify_complexity(pattern * 3) == Complexity.complex
    assert classify_complexity([10, 50, 20, 80, 15, 60, 30, 90, 25, 70]) == Complexity.moderate
    assert classify_complexity([100, 101, 102, 103, 104, 105]) == Complexity.simple
