import string
from datetime import date

import pytest

from appeal_codes.domain.models import NoticeType, NoticeTypeTable
from appeal_codes.domain.results import DecodeFailure, InvalidDateRangeError
from appeal_codes.domain.services import AppealCodeCipher
from appeal_codes.infrastructure.storage.notice_type_store import DEFAULT_NOTICE_TYPES

TODAY = date(2026, 10, 19)


@pytest.fixture
def table() -> NoticeTypeTable:
    return NoticeTypeTable(DEFAULT_NOTICE_TYPES)


@pytest.fixture
def cipher(table: NoticeTypeTable) -> AppealCodeCipher:
    return AppealCodeCipher(table, today=lambda: TODAY)


def test_encode_worked_example(cipher, table):
    assert cipher.encode(date(2024, 7, 15), table[6]) == "85G467"


@pytest.mark.parametrize(
    "issued_on, digit, expected",
    [
        (date(2024, 1, 1), 1, "99A415"),
        (date(2025, 12, 31), 9, "69L593"),
        (date(2023, 3, 10), 5, "90C35A"),
        (date(2025, 7, 19), 1, "81G51A"),
        (date(2024, 7, 15), 0, "85G401"),
    ],
)
def test_encode_known_codes(cipher, table, issued_on, digit, expected):
    assert cipher.encode(issued_on, table[digit]) == expected


def test_encode_rejects_notice_type_missing_from_table():
    cipher = AppealCodeCipher(NoticeTypeTable({1: "Parking"}))
    with pytest.raises(ValueError):
        cipher.encode(date(2024, 7, 15), NoticeType(6, "Clean Air Zones"))


def test_notice_type_digit_must_be_single_digit():
    with pytest.raises(ValueError):
        NoticeType(10, "Too big")
    with pytest.raises(ValueError):
        NoticeType(-1, "Negative")


def test_decode_worked_example(cipher):
    result = cipher.decode("85G467")

    assert result.valid
    assert result.issued_on == date(2024, 7, 15)
    assert result.notice_type.digit == 6
    assert result.notice_type.label == "Clean Air Zones"
    assert result.reason is None
    assert result.describe() == "Valid code for 15/07/2024 - Clean Air Zones"
    assert result.describe("%Y-%m-%d") == "Valid code for 2024-07-15 - Clean Air Zones"


@pytest.mark.parametrize(
    "code, reason",
    [
        ("", DecodeFailure.MALFORMED_LENGTH),
        ("85G46", DecodeFailure.MALFORMED_LENGTH),
        ("85G4677", DecodeFailure.MALFORMED_LENGTH),
        ("8XG467", DecodeFailure.MALFORMED_FIELD),
        ("85g467", DecodeFailure.MALFORMED_FIELD),
        ("857467", DecodeFailure.MALFORMED_FIELD),
        ("85GX67", DecodeFailure.MALFORMED_FIELD),
        ("85G4X7", DecodeFailure.MALFORMED_FIELD),
        ("85G468", DecodeFailure.CHECKSUM_MISMATCH),
        ("85G46A", DecodeFailure.CHECKSUM_MISMATCH),
        # checksum holds but M is not a month
        ("85M466", DecodeFailure.MALFORMED_FIELD),
        # checksum holds but 30 February does not exist
        ("70B416", DecodeFailure.MALFORMED_FIELD),
    ],
)
def test_decode_rejects(cipher, code, reason):
    result = cipher.decode(code)

    assert not result.valid
    assert result.reason == reason
    assert result.issued_on is None
    assert result.notice_type is None


def test_decode_reports_unknown_notice_type_from_substituted_table():
    cipher = AppealCodeCipher(NoticeTypeTable({1: "Parking"}), today=lambda: TODAY)

    result = cipher.decode("85G467")

    assert result.reason == DecodeFailure.UNKNOWN_NOTICE_TYPE
    assert result.describe() == "Invalid notice type"


def test_decode_never_returns_unconfigured_notice_type():
    table = NoticeTypeTable({1: "Parking", 6: "Clean Air Zones"})
    full = AppealCodeCipher(NoticeTypeTable(DEFAULT_NOTICE_TYPES), today=lambda: TODAY)
    partial = AppealCodeCipher(table, today=lambda: TODAY)

    for row in full.generate_for_date_range(date(2024, 7, 1), date(2024, 7, 3)):
        result = partial.decode(row.code)
        if row.notice_type.digit in table:
            assert result.valid
            assert result.notice_type.digit in table
        else:
            assert result.reason == DecodeFailure.UNKNOWN_NOTICE_TYPE


@pytest.mark.parametrize(
    "year_digit, expected",
    [(0, 2020), (4, 2024), (6, 2026), (7, 2017), (9, 2019)],
)
def test_resolve_year_never_in_future(year_digit, expected):
    assert AppealCodeCipher.resolve_year(year_digit, TODAY) == expected


def test_decode_uses_explicit_reference_date(cipher):
    result = cipher.decode("85G467", today=date(2033, 1, 1))
    assert result.issued_on == date(2024, 7, 15)

    result = cipher.decode("85G467", today=date(2034, 1, 1))
    assert result.issued_on == date(2034, 7, 15)


def test_round_trip_across_decade_window(cipher):
    rows = list(cipher.generate_for_date_range(date(2017, 1, 1), date(2026, 12, 31)))

    for row in rows:
        assert len(row.code) == 6
        result = cipher.decode(row.code)
        assert result.valid, row
        assert result.issued_on == row.issued_on
        assert result.notice_type == row.notice_type


def test_single_character_changes_are_detected(cipher):
    alphabets = [
        string.digits,
        string.digits,
        string.ascii_uppercase,
        string.digits,
        string.digits,
        string.digits + "A",
    ]
    codes = [
        row.code
        for row in cipher.generate_for_date_range(date(2025, 1, 1), date(2025, 12, 31))
        if row.issued_on.day in (1, 15, 28)
    ]

    detected = total = 0
    for code in codes:
        for position, alphabet in enumerate(alphabets):
            for replacement in alphabet:
                if replacement == code[position]:
                    continue
                mutated = code[:position] + replacement + code[position + 1 :]
                total += 1
                result = cipher.decode(mutated)
                if not result.valid:
                    detected += 1
                elif position != 2:
                    pytest.fail(f"digit change {code} -> {mutated} went undetected")

    assert detected / total >= 0.9


def test_generate_for_date_range_yields_ten_rows_per_day(cipher):
    rows = list(cipher.generate_for_date_range(date(2024, 2, 27), date(2024, 3, 2)))

    assert len(rows) == 5 * 10
    assert [row.notice_type.digit for row in rows[:10]] == list(range(10))
    assert {row.issued_on for row in rows} == {
        date(2024, 2, 27),
        date(2024, 2, 28),
        date(2024, 2, 29),
        date(2024, 3, 1),
        date(2024, 3, 2),
    }


def test_generate_for_single_day(cipher):
    rows = list(cipher.generate_for_date_range(date(2024, 7, 15), date(2024, 7, 15)))

    assert len(rows) == 10
    assert rows[6].code == "85G467"


def test_generate_for_date_range_is_restartable(cipher):
    first = list(cipher.generate_for_date_range(date(2024, 7, 1), date(2024, 7, 5)))
    second = list(cipher.generate_for_date_range(date(2024, 7, 1), date(2024, 7, 5)))

    assert first == second


def test_generate_for_date_range_rejects_reversed_range_eagerly(cipher):
    with pytest.raises(InvalidDateRangeError) as excinfo:
        cipher.generate_for_date_range(date(2024, 7, 2), date(2024, 7, 1))

    assert excinfo.value.start == date(2024, 7, 2)
    assert excinfo.value.end == date(2024, 7, 1)
    assert "Start date must be on or before end date" in str(excinfo.value)
