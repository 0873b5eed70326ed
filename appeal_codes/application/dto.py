"""Application-level DTOs for appeal code workflows."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from appeal_codes.domain.results import DecodedAppealCode


@dataclass(slots=True, frozen=True)
class ValidationRequest:
    code: str
    today: date | None = None


@dataclass(slots=True, frozen=True)
class ValidationResponse:
    result: DecodedAppealCode
    message: str

    @property
    def valid(self) -> bool:
        return self.result.valid


@dataclass(slots=True, frozen=True)
class ExportRequest:
    start: date
    end: date
    export_format: str = "csv"


@dataclass(slots=True, frozen=True)
class ExportResponse:
    filename: str
    content: bytes
    mime_type: str
    row_count: int
