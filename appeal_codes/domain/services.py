"""Domain services implementing the appeal code cipher."""
from __future__ import annotations

from datetime import date, timedelta
from typing import Callable, Iterator

from .checksum import alphabet_position, check_character
from .models import AppealCodeRow, NoticeType, NoticeTypeTable
from .results import DecodedAppealCode, DecodeFailure, InvalidDateRangeError

CODE_LENGTH = 6
COMPLEMENT_BASE = 100
LAST_MONTH_CHAR = "L"


def _is_ascii_digits(text: str) -> bool:
    return text.isascii() and text.isdigit()


class AppealCodeCipher:
    """Encodes (date, notice type) pairs into six character codes and back.

    Layout: two digits of ``100 - day``, the month as a letter (A=Jan ... L=Dec),
    the last digit of the year, the notice digit, then a check character.
    Only one digit of the year is kept, so decoding assumes the code was issued
    within the last ten years relative to ``today``.
    """

    def __init__(self, notice_types: NoticeTypeTable, today: Callable[[], date] | None = None) -> None:
        self._notice_types = notice_types
        self._today = today or date.today

    @property
    def notice_types(self) -> NoticeTypeTable:
        return self._notice_types

    def encode(self, issued_on: date, notice_type: NoticeType) -> str:
        if notice_type.digit not in self._notice_types:
            raise ValueError(f"Notice type {notice_type.digit} is not configured")
        complement = COMPLEMENT_BASE - issued_on.day
        month_char = chr(ord("A") + issued_on.month - 1)
        year_digit = issued_on.year % 10
        base = f"{complement:02d}{month_char}{year_digit}{notice_type.digit}"
        return base + self.checksum(complement, month_char, year_digit, notice_type.digit)

    @staticmethod
    def checksum(complement: int, month_char: str, year_digit: int, notice_digit: int) -> str:
        return check_character(complement, month_char, year_digit, notice_digit)

    def decode(self, code: str, today: date | None = None) -> DecodedAppealCode:
        if not isinstance(code, str) or len(code) != CODE_LENGTH:
            return DecodedAppealCode.failure(code, DecodeFailure.MALFORMED_LENGTH)

        complement_text, month_char, year_text, notice_text, check = (
            code[0:2],
            code[2],
            code[3],
            code[4],
            code[5],
        )
        if not all(_is_ascii_digits(part) for part in (complement_text, year_text, notice_text)):
            return DecodedAppealCode.failure(code, DecodeFailure.MALFORMED_FIELD)
        if not ("A" <= month_char <= "Z"):
            return DecodedAppealCode.failure(code, DecodeFailure.MALFORMED_FIELD)

        complement = int(complement_text)
        year_digit = int(year_text)
        notice_type = self._notice_types.get(int(notice_text))
        if notice_type is None:
            return DecodedAppealCode.failure(code, DecodeFailure.UNKNOWN_NOTICE_TYPE)

        if check != self.checksum(complement, month_char, year_digit, notice_type.digit):
            return DecodedAppealCode.failure(code, DecodeFailure.CHECKSUM_MISMATCH)

        # Checksum-consistent but never produced by encode: forged or corrupted.
        if month_char > LAST_MONTH_CHAR:
            return DecodedAppealCode.failure(code, DecodeFailure.MALFORMED_FIELD)

        year = self.resolve_year(year_digit, today or self._today())
        try:
            issued_on = date(year, alphabet_position(month_char), COMPLEMENT_BASE - complement)
        except ValueError:
            return DecodedAppealCode.failure(code, DecodeFailure.MALFORMED_FIELD)
        return DecodedAppealCode.success(code, issued_on, notice_type)

    @staticmethod
    def resolve_year(year_digit: int, today: date) -> int:
        candidate = (today.year // 10) * 10 + year_digit
        if candidate > today.year:
            candidate -= 10
        return candidate

    def generate_for_date_range(self, start: date, end: date) -> Iterator[AppealCodeRow]:
        if start > end:
            raise InvalidDateRangeError(start, end)
        return self._iter_rows(start, end)

    def _iter_rows(self, start: date, end: date) -> Iterator[AppealCodeRow]:
        current = start
        while current <= end:
            for notice_type in self._notice_types:
                yield AppealCodeRow(
                    issued_on=current,
                    notice_type=notice_type,
                    code=self.encode(current, notice_type),
                )
            current += timedelta(days=1)
