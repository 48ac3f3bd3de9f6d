"""Error taxonomy and boundary results for the delivery alert pipeline."""
from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel


class ErrorKind(str, Enum):
    """Why a pipeline step did not produce a normal result."""

    TRANSPORT = "transport"  # Network failure or non-success status
    MALFORMED_DATA = "malformed_data"  # Missing or wrong-shaped field
    EMPTY_RESULT = "empty_result"  # Informational, zero records returned

    def __str__(self) -> str:
        """Return the string value of the kind."""
        return self.value


class DeliveryAlertsError(Exception):
    """Base class for errors raised inside a pipeline step."""

    kind: ErrorKind = ErrorKind.TRANSPORT


class TransportError(DeliveryAlertsError):
    """An HTTP call failed or returned a non-success status."""

    kind = ErrorKind.TRANSPORT


class MalformedDataError(DeliveryAlertsError):
    """A record is missing a field or has the wrong shape."""

    kind = ErrorKind.MALFORMED_DATA


class StepResult(BaseModel):
    """Outcome of one pipeline step.

    Steps never raise to their caller. ``value`` always holds something usable
    (an empty list, the original order, ...) so the caller can keep going,
    while ``kind`` says what went wrong or what is worth noting.
    ``EMPTY_RESULT`` is reported with ``ok=True``.
    """

    ok: bool = True
    value: Any = None
    kind: Optional[ErrorKind] = None
    detail: Optional[str] = None

    @classmethod
    def success(cls, value: Any = None) -> "StepResult":
        return cls(ok=True, value=value)

    @classmethod
    def notice(
        cls, kind: ErrorKind, value: Any = None, detail: Optional[str] = None
    ) -> "StepResult":
        return cls(ok=True, value=value, kind=kind, detail=detail)

    @classmethod
    def failure(
        cls, kind: ErrorKind, value: Any = None, detail: Optional[str] = None
    ) -> "StepResult":
        return cls(ok=False, value=value, kind=kind, detail=detail)
