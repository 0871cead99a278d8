"""Domain exceptions for calorie plan calculation."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from nutrisync.domain.shared.errors import NutriSyncError


class ErrorCode(str, Enum):
    """Error codes exposed by the calorie service."""

    INVALID_INPUT = "INVALID_INPUT"
    API_ERROR = "API_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"
    PARSING_ERROR = "PARSING_ERROR"


@dataclass(frozen=True)
class FieldViolation:
    """A single profile field that failed validation."""

    field: str
    message: str

    def __str__(self) -> str:
        return self.message


class CalorieServiceError(NutriSyncError):
    """Base exception for calorie plan errors.

    Attributes:
        code: Machine readable error code
    """

    code: ErrorCode = ErrorCode.API_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(CalorieServiceError):
    """Raised when a calorie profile fails range validation.

    Terminal: callers must not retry with the same data.
    """

    code = ErrorCode.INVALID_INPUT

    def __init__(self, violations: Sequence[FieldViolation]):
        self.violations: List[FieldViolation] = list(violations)
        joined = ", ".join(v.message for v in self.violations)
        super().__init__(f"Invalid input data: {joined}")

    @property
    def fields(self) -> List[str]:
        """Names of the violated fields, in validation order."""
        return [v.field for v in self.violations]


class ApiError(CalorieServiceError):
    """Raised on a non-2xx status or a malformed envelope from the AI endpoint."""

    code = ErrorCode.API_ERROR

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

    @property
    def is_transient(self) -> bool:
        """Whether retrying the same request may succeed."""
        return self.status_code is not None and (
            self.status_code == 429 or self.status_code >= 500
        )


class NetworkError(CalorieServiceError):
    """Raised when the AI endpoint cannot be reached in time."""

    code = ErrorCode.NETWORK_ERROR


class ParsingError(CalorieServiceError):
    """Raised when AI text does not contain a usable calorie plan."""

    code = ErrorCode.PARSING_ERROR

    def __init__(self, message: str, raw_text: str = ""):
        super().__init__(message)
        self.raw_text = raw_text
