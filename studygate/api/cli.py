"""
Terminal adapter for StudyGate.

Architectural role:
- Runs the gateway once from the command line, bypassing HTTP.
- Builds study-tool prompts and encodes local images the way the browser
  client does before calling the `gemini-ai` function.

Request lifecycle:
1. Parse arguments.
2. Resolve the prompt (`--prompt`, or a `--tool` template) and optional image.
3. Call `studygate.core.engine.process_request`.
4. Print the JSON envelope to stdout.

Error handling strategy:
- `GatewayError` prints `{"error": ...}` and exits with status 1.

Side effects:
- Loads environment variables at import time via `load_dotenv()`.
- Performs one outbound provider call.
"""

from dotenv import load_dotenv

load_dotenv()

import argparse
import json
import logging
import sys

from studygate.api.multimodal.file_input_manager import encode_image
from studygate.core.engine import process_request
from studygate.core.errors import GatewayError, RequestError
from studygate.core.gateway_types import GatewayRequest
from studygate.prompting.prompt_builder import (
    STUDY_TOOLS,
    build_smart_notes_prompt,
    build_snap_solve_prompt,
    build_writing_lab_prompt,
)


def build_parser():
    parser = argparse.ArgumentParser(description="Send one prompt/image to the StudyGate AI proxy")
    parser.add_argument("--prompt", default=None, help="Free-form prompt text")
    parser.add_argument("--image", default=None, help="Image path, file:// URL, or data: URL")
    parser.add_argument("--tool", choices=sorted(STUDY_TOOLS), default=None, help="Build the prompt from a study tool template")
    parser.add_argument("--url", default=None, help="smart_notes: video URL")
    parser.add_argument("--text", default=None, help="smart_notes: pasted content")
    parser.add_argument("--essay-file", default=None, help="writing_lab: path to essay text")
    parser.add_argument("--model", default=None, help="Override the configured model")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
    )
    return parser


def resolve_prompt(args):
    """Return the prompt for `args`; an explicit `--prompt` wins over `--tool`."""
    if args.prompt:
        return args.prompt

    if args.tool == "snap_solve":
        if not args.image:
            raise RequestError("snap_solve requires --image")
        return build_snap_solve_prompt()

    if args.tool == "smart_notes":
        return build_smart_notes_prompt(youtube_url=args.url, text_content=args.text)

    if args.tool == "writing_lab":
        if not args.essay_file:
            raise RequestError("writing_lab requires --essay-file")
        try:
            with open(args.essay_file, "r", encoding="utf-8") as f:
                essay = f.read()
        except (OSError, UnicodeDecodeError) as err:
            raise RequestError(f"Cannot read essay file: {err}") from err
        return build_writing_lab_prompt(essay)

    return None


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        request = GatewayRequest(
            prompt=resolve_prompt(args),
            image=encode_image(args.image) if args.image else None,
        )
        result = process_request(request, model=args.model)
    except GatewayError as err:
        print(json.dumps(err.to_dict(), ensure_ascii=False))
        return 1

    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
