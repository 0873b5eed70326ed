"""Application services orchestrating appeal code generation and validation."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from appeal_codes.application.dto import (
    ExportRequest,
    ExportResponse,
    ValidationRequest,
    ValidationResponse,
)
from appeal_codes.config import SETTINGS, Settings
from appeal_codes.domain.services import AppealCodeCipher
from appeal_codes.presentation.export_report import RENDERERS, rows_to_dataframe

LOGGER = logging.getLogger(__name__)

MIME_TYPES = {
    "csv": "text/csv",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
}


@dataclass(slots=True)
class AppealCodeContext:
    cipher: AppealCodeCipher
    settings: Settings


def build_context(settings: Settings | None = None) -> AppealCodeContext:
    settings = settings or SETTINGS
    return AppealCodeContext(cipher=AppealCodeCipher(settings.notice_types), settings=settings)


class ValidateAppealCodeUseCase:
    def __init__(self, context: AppealCodeContext) -> None:
        self._context = context

    def execute(self, request: ValidationRequest) -> ValidationResponse:
        code = request.code.strip().upper()
        result = self._context.cipher.decode(code, today=request.today)
        if result.valid:
            LOGGER.debug("Appeal code %s decoded to %s", code, result.issued_on)
        else:
            LOGGER.info("Rejected appeal code %r: %s", code, result.reason.value)
        return ValidationResponse(result=result, message=result.describe(self._context.settings.date_format))


class GenerateAppealCodeUseCase:
    def __init__(self, context: AppealCodeContext) -> None:
        self._context = context

    def execute(self, issued_on: date, notice_digit: int) -> str:
        notice_type = self._context.settings.notice_types.get(notice_digit)
        if notice_type is None:
            raise ValueError(f"Unknown notice type {notice_digit}")
        return self._context.cipher.encode(issued_on, notice_type)


class ExportAppealCodesUseCase:
    def __init__(self, context: AppealCodeContext) -> None:
        self._context = context

    def execute(self, request: ExportRequest) -> ExportResponse:
        renderer = RENDERERS.get(request.export_format)
        if renderer is None:
            raise ValueError(f"Unsupported export format: {request.export_format}")

        settings = self._context.settings
        rows = self._context.cipher.generate_for_date_range(request.start, request.end)
        frame = rows_to_dataframe(rows, columns=settings.export_columns, date_format=settings.date_format)
        filename = settings.export_filename_template.format(
            start=request.start.isoformat(),
            end=request.end.isoformat(),
            ext=request.export_format,
        )
        LOGGER.info(
            "Exported %d appeal codes for %s to %s as %s",
            len(frame),
            request.start,
            request.end,
            request.export_format,
        )
        return ExportResponse(
            filename=filename,
            content=renderer(frame),
            mime_type=MIME_TYPES[request.export_format],
            row_count=len(frame),
        )
