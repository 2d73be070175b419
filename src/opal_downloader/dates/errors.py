"""Structured errors for date resolution failures.

Every failure of the date pipeline is a ``ParseError`` tagged with one member
of the closed ``ParseErrorKind`` enum. The payload carries exactly the data
needed to render the message; mapping a kind to a process exit status is left
to the calling layer.
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping


class ParseErrorKind(str, Enum):
    """Enum for the stages at which date resolution can fail."""

    COULD_NOT_PARSE_DATE = "could_not_parse_date"
    COULD_NOT_PARSE_NUMERIC_COMPONENT = "could_not_parse_numeric_component"
    INVALID_MONTH = "invalid_month"
    INVALID_DATE_FOR_MONTH = "invalid_date_for_month"
    NO_SINGLE_DATE = "no_single_date"


class ParseError(Exception):
    """Permanent input-validation failure with kind and offending data."""

    def __init__(self, kind: ParseErrorKind, message: str, **payload: Any):
        self.kind = kind
        self.payload: Mapping[str, Any] = MappingProxyType(dict(payload))
        super().__init__(message)

    def __repr__(self) -> str:
        fields = ", ".join(f"{key}={value!r}" for key, value in self.payload.items())
        return f"ParseError({self.kind.name}, {fields})"

    @classmethod
    def could_not_parse_date(cls, text: str) -> "ParseError":
        return cls(
            ParseErrorKind.COULD_NOT_PARSE_DATE,
            f"Could not extract components from date string '{text}'.",
            text=text,
        )

    @classmethod
    def could_not_parse_numeric_component(
        cls, index: int, component: str
    ) -> "ParseError":
        return cls(
            ParseErrorKind.COULD_NOT_PARSE_NUMERIC_COMPONENT,
            f"Could not parse number from component '{component}' at index {index}.",
            index=index,
            component=component,
        )

    @classmethod
    def invalid_month(cls, month: int) -> "ParseError":
        return cls(
            ParseErrorKind.INVALID_MONTH,
            f"Month {month} is not a valid month.",
            month=month,
        )

    @classmethod
    def invalid_date_for_month(cls, month: int, day: int) -> "ParseError":
        return cls(
            ParseErrorKind.INVALID_DATE_FOR_MONTH,
            f"Month {month} does not have {day} days in it",
            month=month,
            day=day,
        )

    @classmethod
    def no_single_date(cls, year: int, month: int, day: int) -> "ParseError":
        return cls(
            ParseErrorKind.NO_SINGLE_DATE,
            f"{year}-{month}-{day} could not be converted into a single date.",
            year=year,
            month=month,
            day=day,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to structured dict for logging."""
        return {
            "error_type": "ParseError",
            "kind": self.kind.value,
            "message": str(self),
            **self.payload,
        }


class WindowError(ValueError):
    """Raised when a bounding window is inverted (``min > max``).

    This is a configuration problem, not bad user input: no date can satisfy
    an empty window.
    """

    def __init__(self, lower: Any, upper: Any):
        self.lower = lower
        self.upper = upper
        super().__init__(
            f"Bounding window is empty: minimum {lower.isoformat()} is after "
            f"maximum {upper.isoformat()}."
        )
