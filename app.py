"""Streamlit front-end for appeal code validation and export."""
from __future__ import annotations

from dataclasses import replace
from datetime import date

import pandas as pd
import streamlit as st

from appeal_codes import (
    ExportAppealCodesUseCase,
    InvalidDateRangeError,
    NoticeTypeTable,
    ValidateAppealCodeUseCase,
    build_context,
)
from appeal_codes.application.dto import ExportRequest, ValidationRequest
from appeal_codes.config import SETTINGS
from appeal_codes.infrastructure.storage.notice_type_store import JsonNoticeTypeRepository


st.set_page_config(page_title="Appeal Codes", layout="wide")
st.title("Appeal Code Management")
st.caption("Validate existing appeal codes or export codes for date ranges")

repository = JsonNoticeTypeRepository()


def load_settings():
    labels = repository.load_labels()
    return replace(SETTINGS, notice_types=NoticeTypeTable(labels))


def notice_types_dataframe(table: NoticeTypeTable) -> pd.DataFrame:
    return pd.DataFrame(
        [{"type": notice_type.digit, "label": notice_type.label} for notice_type in table],
        columns=["type", "label"],
    )


settings = load_settings()
context = build_context(settings)

validate_tab, export_tab, labels_tab = st.tabs(["Validate Code", "Export CSV", "Notice Types"])

with validate_tab:
    st.subheader("Code Validation")
    col1, col2 = st.columns([4, 1])
    with col1:
        code = st.text_input(
            "Appeal Code",
            max_chars=6,
            placeholder="Enter 6-character appeal code (e.g., 85G467)",
        )
    with col2:
        validate_btn = st.button("Validate", disabled=not code)

    if validate_btn and code:
        response = ValidateAppealCodeUseCase(context).execute(ValidationRequest(code=code))
        if response.valid:
            st.success(f"Valid Code: {response.message}")
            st.write(f"**Date:** {response.result.issued_on.strftime(settings.date_format)}")
            st.write(f"**Notice Type:** {response.result.notice_type.label}")
        else:
            st.error(f"Invalid Code: {response.message}")

with export_tab:
    st.subheader("Export Appeal Codes")
    col1, col2, col3 = st.columns(3)
    with col1:
        start_date = st.date_input("Start Date", value=date.today())
    with col2:
        end_date = st.date_input("End Date", value=date.today())
    with col3:
        export_format = st.selectbox("Format", ["csv", "xlsx"])

    st.info(
        "The export will include appeal codes for all notice types for each day in the selected range:\n\n"
        + "\n".join(f"- Type {notice_type.digit}: {notice_type.label}" for notice_type in settings.notice_types)
    )

    if st.button("Generate export"):
        try:
            with st.spinner("Generating..."):
                response = ExportAppealCodesUseCase(context).execute(
                    ExportRequest(start=start_date, end=end_date, export_format=export_format)
                )
        except InvalidDateRangeError as exc:
            st.error(str(exc))
        else:
            st.caption(f"{response.row_count} appeal codes generated")
            st.download_button(
                "Download appeal codes",
                data=response.content,
                file_name=response.filename,
                mime=response.mime_type,
            )

with labels_tab:
    st.subheader("Notice Type Labels")
    edited_df = st.data_editor(
        notice_types_dataframe(settings.notice_types),
        hide_index=True,
        disabled=["type"],
        key="notice_type_editor",
        use_container_width=True,
    )
    if st.button("Save labels"):
        labels = {int(row["type"]): str(row["label"]) for _, row in edited_df.iterrows()}
        repository.save_labels(labels)
        st.success("Notice type labels saved")
        st.rerun()
