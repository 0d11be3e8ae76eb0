"""Learning-session record construction.

Purpose of this abstraction:
    Study tools persist one row per completed run into the external
    `learning_sessions` table (`user_id`, `session_type`, opaque JSON `content`).
    The store assigns `id` and `created_at`; this module only shapes the row.

External dependencies:
    - Internal: `studygate.prompting.prompt_builder.STUDY_TOOLS` for the set of
      valid session types.
"""

from studygate.core.errors import RequestError
from studygate.prompting.prompt_builder import STUDY_TOOLS


def build_session_record(user_id, session_type, content):
    """Return the row inserted after a study tool run.

    Raises:
        RequestError: When `session_type` is not a known study tool.
    """
    if session_type not in STUDY_TOOLS:
        raise RequestError(f"Unknown session type: {session_type}")

    return {
        "user_id": user_id,
        "session_type": session_type,
        "content": dict(content or {}),
    }


def snap_solve_content(analysis, image_name):
    return {"analysis": analysis, "image_name": image_name}


def smart_notes_content(study_guide, source_url=None, source_text=None):
    return {
        "study_guide": study_guide,
        "source_url": source_url or "",
        "source_text": source_text or "",
    }


def writing_lab_content(essay, feedback):
    """Essay content block; `word_count` counts single-space separated tokens."""
    return {
        "essay": essay,
        "feedback": feedback,
        "word_count": len(essay.split(" ")),
    }
