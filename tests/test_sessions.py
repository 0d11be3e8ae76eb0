from datetime import datetime

import pytest

from studygate.core.errors import RequestError
from studygate.sessions.analytics import format_session_type, summarize_sessions
from studygate.sessions.records import (
    build_session_record,
    smart_notes_content,
    snap_solve_content,
    writing_lab_content,
)


def test_build_session_record():
    record = build_session_record("user-1", "snap_solve", snap_solve_content("x = 2", "hw.jpg"))
    assert record == {
        "user_id": "user-1",
        "session_type": "snap_solve",
        "content": {"analysis": "x = 2", "image_name": "hw.jpg"},
    }


def test_build_session_record_rejects_unknown_type():
    with pytest.raises(RequestError):
        build_session_record("user-1", "flashcards", {})


def test_writing_lab_word_count_splits_on_spaces():
    content = writing_lab_content("one two  three", "Good.")
    assert content["word_count"] == 4


def test_smart_notes_content_defaults():
    assert smart_notes_content("guide") == {"study_guide": "guide", "source_url": "", "source_text": ""}


def test_format_session_type():
    assert format_session_type("snap_solve") == "Snap Solve"
    assert format_session_type("writing_lab") == "Writing Lab"


def test_summarize_sessions():
    sessions = [
        {"id": 1, "session_type": "snap_solve", "created_at": "2024-05-02T10:00:00Z"},
        {"id": 2, "session_type": "writing_lab", "created_at": "2024-05-02T08:00:00+00:00"},
        {"id": 3, "session_type": "snap_solve", "created_at": datetime(2024, 5, 1, 9, 30)},
        {"id": 4, "session_type": "smart_notes", "created_at": None},
    ]

    summary = summarize_sessions(sessions)

    assert summary["total"] == 4
    assert summary["by_type"] == [
        {"name": "Snap Solve", "value": 2},
        {"name": "Writing Lab", "value": 1},
        {"name": "Smart Notes", "value": 1},
    ]
    assert summary["daily_activity"] == [
        {"date": "2024-05-02", "sessions": 2},
        {"date": "2024-05-01", "sessions": 1},
    ]


def test_daily_activity_keeps_last_seven_groups():
    sessions = [
        {"session_type": "snap_solve", "created_at": f"2024-05-{day:02d}T12:00:00"}
        for day in range(1, 11)
    ]

    activity = summarize_sessions(sessions)["daily_activity"]

    assert len(activity) == 7
    assert activity[0]["date"] == "2024-05-04"
    assert activity[-1]["date"] == "2024-05-10"


def test_summarize_empty():
    assert summarize_sessions([]) == {"by_type": [], "daily_activity": [], "total": 0}


def test_trimmed_fractional_timestamps_are_counted():
    sessions = [
        {"session_type": "snap_solve", "created_at": "2024-05-02T10:00:00.12345+00:00"},
        {"session_type": "snap_solve", "created_at": "2024-05-02T11:00:00.1Z"},
        {"session_type": "writing_lab", "created_at": "2024-05-03T09:15:42.1234567+00:00"},
    ]

    assert summarize_sessions(sessions)["daily_activity"] == [
        {"date": "2024-05-02", "sessions": 2},
        {"date": "2024-05-03", "sessions": 1},
    ]
