"""Domain-level results for appeal code validation."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

from .models import NoticeType


class DecodeFailure(str, Enum):
    MALFORMED_LENGTH = "malformed_length"
    MALFORMED_FIELD = "malformed_field"
    UNKNOWN_NOTICE_TYPE = "unknown_notice_type"
    CHECKSUM_MISMATCH = "checksum_mismatch"


FAILURE_MESSAGES = {
    DecodeFailure.MALFORMED_LENGTH: "Code must be 6 characters long",
    DecodeFailure.MALFORMED_FIELD: "Invalid code format",
    DecodeFailure.UNKNOWN_NOTICE_TYPE: "Invalid notice type",
    DecodeFailure.CHECKSUM_MISMATCH: "Invalid check digit",
}

INVALID_RANGE_MESSAGE = "Start date must be on or before end date"
DEFAULT_DATE_FORMAT = "%d/%m/%Y"


@dataclass(frozen=True)
class DecodedAppealCode:
    """Outcome of decoding a code; either fully valid or rejected with a reason."""

    code: str
    valid: bool
    issued_on: date | None = None
    notice_type: NoticeType | None = None
    reason: DecodeFailure | None = None

    @classmethod
    def success(cls, code: str, issued_on: date, notice_type: NoticeType) -> "DecodedAppealCode":
        return cls(code=code, valid=True, issued_on=issued_on, notice_type=notice_type)

    @classmethod
    def failure(cls, code: str, reason: DecodeFailure) -> "DecodedAppealCode":
        return cls(code=code, valid=False, reason=reason)

    def describe(self, date_format: str = DEFAULT_DATE_FORMAT) -> str:
        if self.valid:
            return f"Valid code for {self.issued_on.strftime(date_format)} - {self.notice_type.label}"
        return FAILURE_MESSAGES[self.reason]


class InvalidDateRangeError(ValueError):
    """Raised when bulk generation is asked for a range that ends before it starts."""

    def __init__(self, start: date, end: date) -> None:
        super().__init__(f"{INVALID_RANGE_MESSAGE} (got {start.isoformat()} > {end.isoformat()})")
        self.start = start
        self.end = end
