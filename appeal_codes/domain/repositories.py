"""Repository interfaces anchoring the domain layer."""
from __future__ import annotations

from typing import Mapping, Protocol


class NoticeTypeRepository(Protocol):
    """Provides the configured notice type labels keyed by digit."""

    def load_labels(self) -> Mapping[int, str]:
        ...

    def save_labels(self, labels: Mapping[int, str]) -> Mapping[int, str]:
        ...
