"""Central configuration for the appeal codes package."""
from __future__ import annotations

from dataclasses import dataclass

from appeal_codes.domain.models import NoticeTypeTable
from appeal_codes.infrastructure.storage.notice_type_store import JsonNoticeTypeRepository

DATE_FORMAT = "%d/%m/%Y"
EXPORT_COLUMNS = ("Date", "Notice Type", "Appeal Code")
EXPORT_FILENAME_TEMPLATE = "appeal-codes-{start}-to-{end}.{ext}"


@dataclass(slots=True, frozen=True)
class Settings:
    notice_types: NoticeTypeTable
    date_format: str
    export_columns: tuple[str, ...]
    export_filename_template: str


def load_settings() -> Settings:
    return Settings(
        notice_types=NoticeTypeTable(JsonNoticeTypeRepository().load_labels()),
        date_format=DATE_FORMAT,
        export_columns=EXPORT_COLUMNS,
        export_filename_template=EXPORT_FILENAME_TEMPLATE,
    )


SETTINGS = load_settings()
