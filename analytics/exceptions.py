# analytics/exceptions.py

from __future__ import annotations

from typing import Optional


class AnalyticsError(Exception):
    pass


class ValidationError(AnalyticsError, ValueError):
    """Input series rejected before any computation started.

    ``defect`` is a stable machine-readable code so callers can branch on the
    kind of failure instead of parsing the message.
    """

    def __init__(
        self,
        message: str,
        defect: str,
        required: Optional[int] = None,
        received: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.defect = defect
        self.required = required
        self.received = received

    @property
    def remediation(self) -> str:
        if self.defect == "insufficient_data" and self.required is not None:
            missing = max(1, self.required - (self.received or 0))
            return f"need at least {missing} more data point(s)"
        if self.defect == "invalid_values":
            return "remove NaN or negative values from the series"
        if self.defect == "length_mismatch":
            return "supply exactly one timestamp per value"
        if self.defect == "unordered_timestamps":
            return "sort the series by timestamp and drop duplicate periods"
        if self.defect == "missing_series":
            return "provide a time series to analyse"
        return "check the submitted series"

    def to_dict(self) -> dict:
        return {
            "message": self.message,
            "defect": self.defect,
            "remediation": self.remediation,
        }


class UnsupportedFeature(AnalyticsError, NotImplementedError):
    pass


class ComputationError(AnalyticsError):
    pass
