#!/usr/bin/env python3
"""
Streamlit Web App for Workforce → Dynamics timeføring

Run with: streamlit run timesheet_dynamics_streamlit.py
"""

import logging
from datetime import date

import pandas as pd
import streamlit as st

# Import from the main app
from timesheet_dynamics_app import (
    DynamicsExporter,
    DynamicsTransformer,
    WeekHelper,
    WorkforceReader,
    WorkforceReadError,
    load_config,
    save_config,
    CONFIG_PATH,
    APP_VERSION,
    logger,
)

XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


UPLOAD_STATE_KEYS = ("upload_id", "read_error", "parsed", "week_start", "warning", "transformed")


def clear_upload_state(state):
    for key in UPLOAD_STATE_KEYS:
        state.pop(key, None)


def reset_upload():
    clear_upload_state(st.session_state)
    st.session_state.pop("upload", None)


def handle_upload(state, uploaded_file, config):
    """
    Read a newly uploaded file into session state.

    Anything from a previous upload is dropped first, so a file that cannot
    be read leaves only the error behind.
    """
    clear_upload_state(state)
    state["upload_id"] = uploaded_file.file_id
    try:
        result = WorkforceReader(config).read_file(uploaded_file.getvalue(), uploaded_file.name)
    except WorkforceReadError as e:
        logger.error(str(e))
        state["read_error"] = e
        return

    check = WeekHelper.check_current_week_in_file(result.rows)
    state["parsed"] = result
    state["warning"] = check.warning_message
    state["week_start"] = WeekHelper.pick_initial_week(result.rows)
    state["transformed"] = None


def render_settings_sidebar(config):
    with st.sidebar:
        st.header("⚙️ Innstillinger")

        st.subheader("Dynamics")
        st.markdown("Faste verdier i importfilen (lagres i config.yaml):")
        dyn = config.dynamics
        dyn.project_data_area_id = st.text_input("ProjectDataAreaId", value=dyn.project_data_area_id)
        dyn.project_id = st.text_input("ProjId", value=dyn.project_id)
        dyn.work_activity = st.text_input("Aktivitet (arbeid)", value=dyn.work_activity)
        dyn.lunch_activity = st.text_input("Aktivitet (lunsj)", value=dyn.lunch_activity)

        if st.button("Lagre"):
            save_config(config, CONFIG_PATH)
            st.success("Lagret")

        st.divider()

        # Debug mode
        return st.checkbox("Debug-modus (verbose logging)", value=False)


def render_preview(rows):
    mode = st.radio("Visning", ["Forenklet", "Rå"], horizontal=True, key="view_mode")
    if mode == "Forenklet":
        preview = DynamicsExporter.build_preview(rows)
        st.dataframe(preview, use_container_width=True)
    else:
        st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)


def main():
    st.set_page_config(
        page_title="Workforce → Dynamics",
        page_icon="🕒",
        layout="wide"
    )

    st.title("🕒 Workforce → Dynamics")
    st.caption(f"Versjon: {APP_VERSION}")
    st.markdown("""
    Konverterer en ukentlig timeliste fra Workforce til importformatet for Dynamics.
    Dato leses fra kolonne **I**, inntid fra **N** og ut-tid fra **T**, fra rad 13 og nedover.

    ---
    """)

    config = load_config()
    debug_mode = render_settings_sidebar(config)
    logger.setLevel(logging.DEBUG if debug_mode else logging.INFO)

    # 1) Upload
    st.subheader("📁 1) Last opp fil")
    uploaded = st.file_uploader(
        "Workforce-eksport (.xlsx, .xls eller .csv)",
        type=["xlsx", "xlsm", "xls", "csv"],
        key="upload",
    )

    if uploaded is None:
        clear_upload_state(st.session_state)
        return

    # file_id changes on every upload, even when the name is the same
    if st.session_state.get("upload_id") != uploaded.file_id:
        handle_upload(st.session_state, uploaded, config)

    error = st.session_state.get("read_error")
    if error is not None:
        st.error("Kunne ikke lese filen. Sjekk at det er en gyldig Excel- eller CSV-fil.")
        if debug_mode:
            st.exception(error)
        return

    parsed = st.session_state["parsed"]

    st.caption(f"{parsed.file_name} • {parsed.sheet_name} • {len(parsed.rows)} rader")

    # 2) Week
    st.divider()
    st.subheader("📅 2) Velg uke")
    if st.session_state.get("warning"):
        st.warning(st.session_state.warning)

    current = WeekHelper.to_date(st.session_state.get("week_start")) or date.today()
    picked = st.date_input("Uke som starter (man)", value=current, format="YYYY-MM-DD")
    week_start = WeekHelper.set_week_start_from_date(picked)
    if week_start != st.session_state.get("week_start"):
        st.session_state.week_start = week_start
        st.session_state.transformed = None

    info = WeekHelper.get_week_info(week_start)
    if info:
        st.caption(f"Uke {info.week_num}, {info.year} (ISO 8601) • {week_start}")

    # 3) Transform
    st.divider()
    if st.button("Konverter", type="primary", use_container_width=True, disabled=not parsed.rows):
        filtered = WeekHelper.filter_rows_to_week(parsed.rows, week_start)
        st.session_state.transformed = DynamicsTransformer(config.dynamics).transform_to_dynamics(
            filtered, week_start
        )

    rows = st.session_state.get("transformed")
    if not rows:
        return

    # 4) Preview and download
    st.subheader("📊 Forhåndsvisning")
    render_preview(rows)

    btn_col1, btn_col2, btn_col3 = st.columns(3)
    with btn_col1:
        st.download_button(
            label="💾 Last ned CSV",
            data=DynamicsExporter.export_csv(rows),
            file_name="dynamics_import.csv",
            mime="text/csv",
            use_container_width=True,
        )
    with btn_col2:
        st.download_button(
            label="💾 Last ned Excel",
            data=DynamicsExporter.export_xlsx(rows),
            file_name="dynamics_import.xlsx",
            mime=XLSX_MIME,
            use_container_width=True,
        )
    with btn_col3:
        if st.button("🗑️ Nullstill", use_container_width=True):
            reset_upload()
            st.rerun()


if __name__ == "__main__":
    main()
