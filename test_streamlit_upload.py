#!/usr/bin/env python3
"""
Tests for the upload state handling behind the Streamlit app
"""

from types import SimpleNamespace

from timesheet_dynamics_app import Config, WorkforceReadError
from timesheet_dynamics_streamlit import clear_upload_state, handle_upload


def fake_upload(name, data, file_id):
    return SimpleNamespace(name=name, file_id=file_id, getvalue=lambda: data)


def csv_bytes(*entries):
    """entries: (date, start, end) placed from Excel row 13 in columns I, N, T"""
    lines = [""] * 12
    for d, start, end in entries:
        cells = [""] * 20
        cells[8], cells[13], cells[19] = d, start, end
        lines.append(",".join(cells))
    return "\n".join(lines).encode("utf-8")


def test_successful_upload_fills_state():
    state = {}
    upload = fake_upload("uke44.csv", csv_bytes(("27.10.25", "09:00", "17:00")), "id-1")

    handle_upload(state, upload, Config())

    assert state["upload_id"] == "id-1"
    assert "read_error" not in state
    assert len(state["parsed"].rows) == 1
    assert state["week_start"] == "2025-10-27"
    assert state["transformed"] is None


def test_failed_upload_drops_previous_result():
    state = {}
    handle_upload(state, fake_upload("a.csv", csv_bytes(("27.10.25", "09:00", "17:00")), "id-1"), Config())
    state["transformed"] = [{"HOURS": 8}, {"HOURS": 0.5}]

    handle_upload(state, fake_upload("b.xlsx", b"corrupt", "id-2"), Config())

    assert isinstance(state["read_error"], WorkforceReadError)
    assert state["upload_id"] == "id-2"
    for key in ("parsed", "week_start", "warning", "transformed"):
        assert key not in state


def test_same_name_new_content_is_reread():
    state = {}
    handle_upload(state, fake_upload("uke.csv", csv_bytes(("27.10.25", "09:00", "17:00")), "id-1"), Config())

    handle_upload(
        state,
        fake_upload("uke.csv", csv_bytes(("03.11.25", "08:00", "12:00"), ("04.11.25", "08:00", "12:00")), "id-2"),
        Config(),
    )

    assert len(state["parsed"].rows) == 2
    assert state["week_start"] == "2025-11-03"


def test_clear_upload_state_keeps_other_keys():
    state = {"parsed": object(), "read_error": ValueError(), "upload_id": "x", "view_mode": "Rå"}

    clear_upload_state(state)

    assert state == {"view_mode": "Rå"}
