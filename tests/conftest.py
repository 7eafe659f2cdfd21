import os
import sys
from datetime import datetime, timedelta

import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from analytics.models import TimeSeriesData


def monthly(n: int, start: datetime = datetime(2021, 1, 1)) -> list:
    out = []
    for i in range(n):
        month_index = start.month - 1 + i
        out.append(start.replace(year=start.year + month_index // 12, month=month_index % 12 + 1))
    return out


def daily(n: int, start: datetime = datetime(2024, 1, 1)) -> list:
    return [start + timedelta(days=i) for i in range(n)]


@pytest.fixture
def make_series():
    """Build a TimeSeriesData from values, monthly by default."""

    def _make(values, timestamps=None, freq="monthly"):
        if timestamps is None:
            timestamps = monthly(len(values)) if freq == "monthly" else daily(len(values))
        return TimeSeriesData(values=list(values), timestamps=list(timestamps))

    return _make


@pytest.fixture
def trending_values():
    return [100, 110, 105, 120, 115, 130, 125, 140, 135, 150, 145, 160]


@pytest.fixture
def spike_values():
    return [98, 102, 95, 105, 100, 97, 103, 99, 101, 96, 104, 100, 500, 98, 102, 99, 101, 103, 97, 100]


@pytest.fixture
def monthly_stamps():
    return monthly


@pytest.fixture
def daily_stamps():
    return daily
