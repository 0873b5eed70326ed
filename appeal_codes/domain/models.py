"""Domain models for notice appeal codes.

These dataclasses capture the values flowing through the cipher: the notice
type being appealed, the configured table of types, and the rows produced by
bulk generation.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Iterator, Mapping

NOTICE_DIGITS = range(10)


@dataclass(frozen=True)
class NoticeType:
    """A single notice category, identified by one decimal digit."""

    digit: int
    label: str

    def __post_init__(self) -> None:
        if isinstance(self.digit, bool) or not isinstance(self.digit, int):
            raise ValueError(f"Notice type digit must be an int, got {self.digit!r}")
        if self.digit not in NOTICE_DIGITS:
            raise ValueError(f"Notice type digit must be 0-9, got {self.digit}")


@dataclass(frozen=True)
class NoticeTypeTable:
    """Immutable digit -> label table injected into the cipher."""

    labels: Mapping[int, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        checked: dict[int, str] = {}
        for digit, label in self.labels.items():
            checked[NoticeType(digit, label).digit] = label
        object.__setattr__(self, "labels", MappingProxyType(dict(sorted(checked.items()))))

    def __contains__(self, digit: object) -> bool:
        return digit in self.labels

    def __len__(self) -> int:
        return len(self.labels)

    def __iter__(self) -> Iterator[NoticeType]:
        for digit, label in self.labels.items():
            yield NoticeType(digit, label)

    def __getitem__(self, digit: int) -> NoticeType:
        return NoticeType(digit, self.labels[digit])

    def get(self, digit: int) -> NoticeType | None:
        if digit not in self.labels:
            return None
        return self[digit]


@dataclass(frozen=True)
class AppealCodeRow:
    """One line of a bulk export: the code issued for a date and notice type."""

    issued_on: date
    notice_type: NoticeType
    code: str
