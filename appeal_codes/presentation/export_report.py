"""Export renderers for bulk-generated appeal codes."""
from __future__ import annotations

import csv
from io import BytesIO
from typing import Iterable, Sequence

import pandas as pd

from appeal_codes.domain.models import AppealCodeRow

DEFAULT_COLUMNS = ("Date", "Notice Type", "Appeal Code")
DEFAULT_DATE_FORMAT = "%d/%m/%Y"
XLSX_SHEET_NAME = "Appeal Codes"


def rows_to_dataframe(
    rows: Iterable[AppealCodeRow],
    columns: Sequence[str] = DEFAULT_COLUMNS,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> pd.DataFrame:
    date_col, type_col, code_col = columns
    return pd.DataFrame(
        [
            {
                date_col: row.issued_on.strftime(date_format),
                type_col: row.notice_type.label,
                code_col: row.code,
            }
            for row in rows
        ],
        columns=list(columns),
    )


def render_csv(frame: pd.DataFrame) -> bytes:
    # Codes such as "85G467" must stay text; quote every field.
    return frame.to_csv(index=False, quoting=csv.QUOTE_ALL, lineterminator="\n").encode("utf-8")


def render_xlsx(frame: pd.DataFrame) -> bytes:
    buffer = BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        frame.to_excel(writer, sheet_name=XLSX_SHEET_NAME, index=False)
    return buffer.getvalue()


RENDERERS = {
    "csv": render_csv,
    "xlsx": render_xlsx,
}
