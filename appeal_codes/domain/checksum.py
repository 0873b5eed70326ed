"""Check character arithmetic shared by encoding and validation.

The check character is a weighted sum of five single digits taken modulo 11:
the two digits of the day complement, the folded value of the month letter,
the year digit and the notice digit, weighted 5, 4, 3, 2, 1. A remainder of
10 is written as ``'A'``. This is an error-detecting checksum for manually
typed codes, not a cryptographic MAC.
"""
from __future__ import annotations

WEIGHTS = (5, 4, 3, 2, 1)
MODULUS = 11
TEN_CHARACTER = "A"


def alphabet_position(letter: str) -> int:
    """Return the 1-based position of an upper-case ASCII letter (A=1 ... Z=26)."""
    if len(letter) != 1 or not ("A" <= letter <= "Z"):
        raise ValueError(f"Expected a single letter A-Z, got {letter!r}")
    return ord(letter) - ord("A") + 1


def alpha_value(letter: str) -> int:
    """Fold a letter onto a single digit.

    A-J map to 1..9,0; K-T map to 1..9,0; U-Z map to 1..6.
    """
    position = alphabet_position(letter)
    if position <= 10:
        return position % 10
    if position <= 20:
        return (position - 10) % 10
    return position - 20


def check_character(complement: int, month_char: str, year_digit: int, notice_digit: int) -> str:
    digits = (
        complement // 10,
        complement % 10,
        alpha_value(month_char),
        year_digit,
        notice_digit,
    )
    total = sum(digit * weight for digit, weight in zip(digits, WEIGHTS))
    remainder = total % MODULUS
    return TEN_CHARACTER if remainder == 10 else str(remainder)
