"""Notice appeal code generation and validation toolkit."""
from appeal_codes.application.use_cases import (
    AppealCodeContext,
    ExportAppealCodesUseCase,
    GenerateAppealCodeUseCase,
    ValidateAppealCodeUseCase,
    build_context,
)
from appeal_codes.domain.models import AppealCodeRow, NoticeType, NoticeTypeTable
from appeal_codes.domain.results import DecodedAppealCode, DecodeFailure, InvalidDateRangeError
from appeal_codes.domain.services import AppealCodeCipher

__all__ = [
    "AppealCodeCipher",
    "AppealCodeContext",
    "AppealCodeRow",
    "DecodedAppealCode",
    "DecodeFailure",
    "ExportAppealCodesUseCase",
    "GenerateAppealCodeUseCase",
    "InvalidDateRangeError",
    "NoticeType",
    "NoticeTypeTable",
    "ValidateAppealCodeUseCase",
    "build_context",
]
