"""
Registry of Analytics Engine Implementations

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Tuple, Type

from analytics.anomaly import StatisticalAnomalyEngine
from analytics.enums import Capability
from analytics.forecast import StatisticalForecastingEngine
from analytics.interfaces import AnalyticsEngine
from config import (
    ADVANCED_ANOMALY,
    ADVANCED_FORECASTING,
    STATISTICAL_ANOMALY,
    STATISTICAL_FORECASTING,
)

log = logging.getLogger(__name__)

_REQUIRED_KEYS: Tuple[str, ...] = (STATISTICAL_FORECASTING, STATISTICAL_ANOMALY)
_ADVANCED_KEYS: Tuple[str, ...] = (ADVANCED_FORECASTING, ADVANCED_ANOMALY)


class EngineRegistry:
    __slots__ = ("_engines",)

    def __init__(self, engines: Mapping[str, Type[AnalyticsEngine]]) -> None:
        missing = [key for key in _REQUIRED_KEYS if key not in engines]
        if missing:
            raise ValueError(f"Engine registry is missing required engines: {missing}")
        self._engines: Mapping[str, Type[AnalyticsEngine]] = MappingProxyType(dict(engines))
        log.info("Initialized engine registry with %d engines", len(self._engines))

    def get(self, key: str) -> Optional[Type[AnalyticsEngine]]:
        return self._engines.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._engines

    def __iter__(self) -> Iterator[str]:
        return iter(self._engines)

    def __len__(self) -> int:
        return len(self._engines)

    @property
    def engines(self) -> Mapping[str, Type[AnalyticsEngine]]:
        return self._engines

    def has_statistical(self) -> bool:
        return all(key in self._engines for key in _REQUIRED_KEYS)

    def has_advanced(self) -> bool:
        return any(key in self._engines for key in _ADVANCED_KEYS)

    def capabilities(self) -> Tuple[Capability, ...]:
        offered = set()
        for engine_cls in self._engines.values():
            offered.update(getattr(engine_cls, "capabilities", ()))
        return tuple(c for c in Capability if c in offered)


def default_registry(**advanced: Type[AnalyticsEngine]) -> EngineRegistry:
    """Registry with the statistical engines plus any advanced ones given.

    Advanced engines are passed by keyword using the capability key with
    underscores, e.g. ``advanced_forecasting=MyEngine``.
    """
    engines: dict = {
        STATISTICAL_FORECASTING: StatisticalForecastingEngine,
        STATISTICAL_ANOMALY: StatisticalAnomalyEngine,
    }
    for name, engine_cls in advanced.items():
        key = name.replace("_", "-")
        if key not in _ADVANCED_KEYS:
            raise ValueError(f"Unknown advanced engine key '{key}'. Valid keys: {list(_ADVANCED_KEYS)}")
        engines[key] = engine_cls
    return EngineRegistry(engines)
