"""
Custom exceptions for geomagnetic field evaluation.
"""

from enum import Enum, auto
from typing import Optional


class GeoMagError(Exception):
    """Base exception for all geomag errors."""
    pass


class EpochOutOfRangeError(GeoMagError):
    """Requested epoch is not covered by the model set."""
    def __init__(self, epoch: float, first: float, last: Optional[float] = None):
        self.epoch = epoch
        self.first = first
        self.last = last
        if epoch < first:
            message = f"Epoch {epoch:.4f} precedes the first model epoch {first:.4f}"
        else:
            message = (f"Epoch {epoch:.4f} is after the last model epoch {last:.4f} "
                       f"and no secular variation is available")
        super().__init__(message)


class EmptyModelSetError(GeoMagError):
    """Selection was invoked on a model set without snapshots."""
    def __init__(self):
        super().__init__("Model set is empty")


class InvalidCoordinateKindError(GeoMagError):
    """Evaluator received a position in an unsupported frame."""
    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"Invalid coordinate kind: {kind}")


class MalformedCoefficientFileError(GeoMagError):
    """Coefficient file could not be turned into a consistent model set."""
    def __init__(self, reason: str, line_number: Optional[int] = None):
        self.reason = reason
        self.line_number = line_number
        if line_number is not None:
            super().__init__(f"Line {line_number}: {reason}")
        else:
            super().__init__(reason)


class DateTimeErrorCode(Enum):
    """Reasons a date/time string is rejected."""
    INVALID_YEAR = auto()
    INVALID_MONTH = auto()
    INVALID_DAY = auto()
    INVALID_HOUR = auto()
    INVALID_MINUTE = auto()
    INVALID_SECOND = auto()
    INVALID_MICROSECOND = auto()
    INVALID_ISO8601_FORMAT = auto()


class InvalidDateTimeError(GeoMagError, ValueError):
    """Exception for date/time parsing errors."""
    def __init__(self, code: DateTimeErrorCode, text: str):
        self.code = code
        self.text = text
        super().__init__(f"{code.name.lower()}: {text!r}")


class ConfigurationError(GeoMagError):
    """Exception for configuration validation errors."""
    pass
