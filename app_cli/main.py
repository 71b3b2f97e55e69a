from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import List, Optional

from app_cli.env import load_dotenv
from udstrace.config import load_settings
from udstrace.converter import convert_trace
from udstrace.errors import TraceError
from udstrace.utils import APP_NAME, VERSION

HELP_TOKENS = {"-h", "--help", "?", "-?"}


def _prog_name() -> str:
    name = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else ""
    if not name or name == "__main__.py":
        return "udstrace"
    return name


def usage_text(prog: str) -> str:
    return (
        f"Usage: {prog} <input_file> [output_file]\n"
        f"       {prog} -h | ? | -?\n"
        "\n"
        "This program parses a CAN trace log and extracts received diagnostic\n"
        "frames (UDS / ISO-TP) into a CSV table.\n"
        "If only <input_file> is provided, the output file will be named "
        "<input_file_basename>.csv in the same directory.\n"
        "Example:\n"
        f"  {prog} input.asc\n"
        f"  {prog} input.asc output.csv\n"
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    prog = _prog_name()
    settings = load_settings()

    if settings.trace:
        print(f"[UDSTRACE_TRACE] pid={os.getpid()} argv={args}", file=sys.stderr)

    if not args or (len(args) == 1 and args[0] in HELP_TOKENS):
        print(usage_text(prog), end="")
        return 0

    if len(args) == 1 and args[0] == "--version":
        print(f"{APP_NAME} {VERSION}")
        return 0

    if len(args) > 2:
        print(usage_text(prog), end="")
        return 1

    # positional paths are taken verbatim, a leading dash included
    input_path = args[0]
    output_path = args[1] if len(args) == 2 else None

    try:
        summary = convert_trace(input_path, output_path, settings=settings)
    except TraceError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Log analysis completed. Output written to '{summary.output_path}'")
    return 0


def run() -> None:
    applied = load_dotenv()
    if applied and load_settings().trace:
        print(f"[UDSTRACE_TRACE] dotenv={applied}", file=sys.stderr)
    raise SystemExit(main())


if __name__ == "__main__":
    run()
