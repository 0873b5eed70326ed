"""Storage helpers for notice type labels."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from appeal_codes.domain.repositories import NoticeTypeRepository

LOGGER = logging.getLogger(__name__)

DEFAULT_PATH = Path(__file__).resolve().parents[3] / "notice_types_override.json"

DEFAULT_NOTICE_TYPES: dict[int, str] = {
    0: "Spare",
    1: "Parking",
    2: "Being in a bus lane",
    3: "RUCA (Road User Charging)",
    4: "Moving Traffic",
    5: "Spare",
    6: "Clean Air Zones",
    7: "Littering from Vehicles",
    8: "Clamp",
    9: "Remove",
}


def _normalize_labels(raw: Mapping[Any, Any] | None) -> dict[int, str]:
    normalized: dict[int, str] = {}
    if not isinstance(raw, Mapping):
        return normalized
    for key, value in raw.items():
        key_str = "" if key is None else str(key).strip()
        if len(key_str) != 1 or not key_str.isdigit():
            LOGGER.warning("Ignoring notice type key %r: expected a single digit", key)
            continue
        normalized[int(key_str)] = "" if value is None else str(value).strip()
    return normalized


def load_notice_types(path: Path | None = None) -> dict[int, str]:
    override_path = path or DEFAULT_PATH
    labels = dict(DEFAULT_NOTICE_TYPES)
    if not override_path.exists():
        return labels
    try:
        data = json.loads(override_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        LOGGER.warning("Could not read %s, using default notice types: %s", override_path, exc)
        return labels
    labels.update(_normalize_labels(data))
    return dict(sorted(labels.items()))


def save_notice_types(labels: Mapping[Any, Any], path: Path | None = None) -> dict[int, str]:
    override_path = path or DEFAULT_PATH
    normalized = _normalize_labels(labels)
    override_path.write_text(
        json.dumps({str(k): v for k, v in sorted(normalized.items())}, ensure_ascii=False, indent=2),
        encoding="utf-8",
    )
    LOGGER.info("Saved %d notice type labels to %s", len(normalized), override_path)
    merged = dict(DEFAULT_NOTICE_TYPES)
    merged.update(normalized)
    return dict(sorted(merged.items()))


class JsonNoticeTypeRepository(NoticeTypeRepository):
    def __init__(self, path: Path | None = None) -> None:
        self._path = path

    def load_labels(self) -> Mapping[int, str]:
        return load_notice_types(self._path)

    def save_labels(self, labels: Mapping[int, str]) -> Mapping[int, str]:
        return save_notice_types(labels, self._path)
