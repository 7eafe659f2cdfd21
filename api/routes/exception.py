"""
Centralized exception handling decorator for API route functions.

The :func:`handle_exceptions` decorator wraps an endpoint handler and maps
analytics errors onto HTTP responses.  A rejected series becomes a ``422``
whose detail carries the defect code and remediation text, an unsupported
engine request becomes a ``501``, and HTTPExceptions raised by the handler are
propagated untouched.  Everything else is turned into a ``500`` error with the
exception message as the response detail.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import inspect
import logging
from functools import wraps
from typing import Any, Callable, TypeVar, cast

from fastapi import HTTPException

from analytics.exceptions import UnsupportedFeature, ValidationError

F = TypeVar("F", bound=Callable[..., Any])

log = logging.getLogger(__name__)


def _translate(exc: Exception) -> HTTPException:
    if isinstance(exc, ValidationError):
        return HTTPException(status_code=422, detail=exc.to_dict())
    if isinstance(exc, UnsupportedFeature):
        return HTTPException(status_code=501, detail=str(exc))
    log.exception("Unhandled analytics failure")
    return HTTPException(status_code=500, detail=str(exc))


def handle_exceptions(func: F) -> F:
    """Decorator that converts uncaught exceptions to HTTP errors.

    The decorator works with both regular and async functions.
    """

    if inspect.iscoroutinefunction(func):
        @wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as exc:
                raise _translate(exc) from exc

        return cast(F, async_wrapper)

    @wraps(func)
    def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except HTTPException:
            raise
        except Exception as exc:
            raise _translate(exc) from exc

    return cast(F, sync_wrapper)
