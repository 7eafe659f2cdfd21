"""
Shared utilities and dependencies for API route modules.

Holds the engine selector composed at startup and the helper that runs
CPU-bound engine calls off the event loop.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Optional, TypeVar

from analytics.registry import default_registry
from analytics.selector import EngineSelector

_T = TypeVar("_T")
_selector: Optional[EngineSelector] = None


def get_selector() -> EngineSelector:
    global _selector
    if _selector is None:
        _selector = EngineSelector(default_registry())
    return _selector


def set_selector(selector: Optional[EngineSelector]) -> None:
    global _selector
    _selector = selector


async def run_engine(func: Callable[..., _T], *args: Any) -> _T:
    return await asyncio.to_thread(func, *args)
