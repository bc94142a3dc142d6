#!/usr/bin/env python3
"""Icon Prompt CLI

Command-line front end for the two-step icon workflow, for use without an
MCP client: print an expert prompt, hand it to any LLM, then save the LLM's
``FILENAME:``/``SVG:`` response as an icon file.
"""

import argparse
import json
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from icongen.errors import map_error_for_mcp  # noqa: E402
from icongen.exceptions import IconGenError  # noqa: E402
from icongen.generation import parse_llm_response  # noqa: E402
from icongen.logger import Logger, session_logger  # noqa: E402
from icongen.mcp_server.components import initialize_components  # noqa: E402


def _emit(payload: dict) -> None:
    print(json.dumps(payload, indent=2))


def create_prompt(args) -> int:
    """Print the create_icon_prompt result for a text prompt"""
    logger: Logger = session_logger
    components = initialize_components(
        styles_dir_override=args.styles_dir,
        multimodal_override=args.multimodal,
        logger=logger,
    )
    request = {"prompt": args.prompt, "reference_paths": args.reference or [], "style": args.style}
    result = components.facade.create_prompt(request)

    if args.raw and result.get("type") == "prompt_created":
        print(result["expert_prompt"])
    else:
        _emit(result)
    return 0 if result.get("type") == "prompt_created" else 1


def save_response(args) -> int:
    """Parse an LLM response and save the SVG it contains"""
    logger: Logger = session_logger

    try:
        if args.response and args.response != "-":
            text = Path(args.response).read_text(encoding="utf-8")
        else:
            text = sys.stdin.read()
    except OSError as e:
        logger.error("Failed to read LLM response", source=args.response, error=str(e))
        return 1

    try:
        parsed = parse_llm_response(text)
    except IconGenError as e:
        _emit(map_error_for_mcp(e))
        return 1

    components = initialize_components(output_dir_override=args.output_dir, logger=logger)
    result = components.facade.save_icon(
        {
            "svg": parsed.svg,
            "filename": parsed.filename,
            "output_name": args.name,
            "output_path": args.output_dir,
        }
    )
    _emit(result)
    return 0 if result.get("success") else 1


def list_styles(args) -> int:
    """List the few-shot styles available to create_icon_prompt"""
    components = initialize_components(styles_dir_override=args.styles_dir, logger=session_logger)
    items = components.style_registry.list_styles()
    _emit({"styles": [item.model_dump(mode="json") for item in items]})
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="icongen Icon Prompt - build expert prompts and save LLM-generated SVG icons",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Step 1: print the expert prompt
  python icon_prompt.py prompt "cat on pillow" --style black-white-flat --raw > prompt.txt

  # Step 2: feed prompt.txt to an LLM, then save its reply
  python icon_prompt.py save --response reply.txt --output-dir ./icons
  cat reply.txt | python icon_prompt.py save

  # Show available styles
  python icon_prompt.py styles

Environment Variables:
    ICONGEN_OUTPUT_DIR   Default directory for saved icons
    ICONGEN_STYLES_DIR   Override the bundled styles directory
    ICONGEN_MULTIMODAL   Force multimodal capability (true/false)
        """,
    )

    parser.add_argument(
        "--styles-dir",
        type=str,
        default=None,
        help="Styles directory path (default: bundled styles or ICONGEN_STYLES_DIR env var)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command")

    prompt_parser = subparsers.add_parser("prompt", help="Create an expert prompt for an icon")
    prompt_parser.add_argument("prompt", type=str, help="Text description of the icon")
    prompt_parser.add_argument(
        "--reference",
        action="append",
        default=None,
        help="Reference .svg or .png file (repeatable)",
    )
    prompt_parser.add_argument("--style", type=str, default=None, help="Few-shot style name")
    prompt_parser.add_argument(
        "--multimodal",
        dest="multimodal",
        action="store_true",
        default=None,
        help="Declare the target LLM accepts images (allows .png references)",
    )
    prompt_parser.add_argument(
        "--raw",
        action="store_true",
        help="Print only the expert prompt text instead of the JSON result",
    )
    prompt_parser.set_defaults(func=create_prompt)

    save_parser = subparsers.add_parser("save", help="Save an SVG icon from an LLM response")
    save_parser.add_argument(
        "--response",
        type=str,
        default="-",
        help="File holding the LLM response ('-' or omitted reads stdin)",
    )
    save_parser.add_argument("--name", type=str, default=None, help="Override the suggested filename")
    save_parser.add_argument("--output-dir", type=str, default=None, help="Directory to write the icon into")
    save_parser.set_defaults(func=save_response)

    styles_parser = subparsers.add_parser("styles", help="List available styles")
    styles_parser.set_defaults(func=list_styles)

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 1
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
