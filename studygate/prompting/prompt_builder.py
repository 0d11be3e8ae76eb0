"""Prompt templates for the dashboard study tools.

This module only builds prompt strings. Provider invocation happens in
`studygate.core.engine`; persistence of results is the caller's concern.

Tools:
    - `snap_solve`: fixed instruction sent alongside an uploaded image.
    - `smart_notes`: study guide from a video URL or pasted text.
    - `writing_lab`: essay feedback.

Prompt safety model:
    User text is interpolated as a raw string. No escaping is applied.
"""

from studygate.core.errors import RequestError


# =========================================================
# SNAP & SOLVE
# =========================================================

SNAP_SOLVE_PROMPT = (
    "Analyze this image and provide a detailed explanation. "
    "If it's a math problem, solve it step by step. "
    "If it's a science diagram, explain what it shows. "
    "If it's text, summarize and explain the key concepts."
)


def build_snap_solve_prompt() -> str:
    """Return the fixed instruction paired with a Snap & Solve image."""
    return SNAP_SOLVE_PROMPT


# =========================================================
# SMART NOTES
# =========================================================
# A video URL takes precedence over pasted text when both are supplied.

def build_smart_notes_prompt(youtube_url: str = None, text_content: str = None) -> str:
    """Build a study-guide prompt from a video URL or pasted content.

    Raises:
        RequestError: When neither source is provided.
    """
    if youtube_url:
        return (
            f"Create a comprehensive study guide from this YouTube video: {youtube_url}. "
            "Include key concepts, main points, and study questions."
        )

    if text_content:
        return (
            f'Create a comprehensive study guide from this content: "{text_content}". '
            "Break it down into key concepts, main points, summary, "
            "and create study questions for better understanding."
        )

    raise RequestError("Please provide either a YouTube URL or text content.")


# =========================================================
# WRITING LAB
# =========================================================

def build_writing_lab_prompt(essay: str) -> str:
    """Build an essay-feedback prompt.

    Raises:
        RequestError: When the essay is empty or whitespace.
    """
    if not essay or not essay.strip():
        raise RequestError("Please enter your essay text.")

    return (
        "Please provide detailed feedback on this essay. Analyze grammar, structure, "
        "clarity, arguments, and provide specific suggestions for improvement:\n\n"
        + essay
    )


# Session types with a prompt template above.
STUDY_TOOLS = frozenset({"snap_solve", "smart_notes", "writing_lab"})
