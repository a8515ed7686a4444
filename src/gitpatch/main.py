"""Main CLI entry point for gitpatch."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import ParseConfig
from .errors import GitPatchError
from .inputs import load_patch_text
from .logging_utils import configure_logging
from .parser import parse_git_patch
from .serialize import PatchSerializer


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="gitpatch",
        description="Parse git format-patch output into structured JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  gitpatch 0001-fix-typo.patch
  git format-patch --stdout HEAD~3 | gitpatch --json patches.json
  gitpatch --repo /path/to/repo --range v1.0..v1.1
        """,
    )

    parser.add_argument(
        "patch",
        nargs="?",
        help="Patch file to parse ('-' or omitted reads stdin)",
    )
    parser.add_argument(
        "--repo",
        help="Local repository to run git format-patch in",
    )
    parser.add_argument(
        "--range",
        dest="revision_range",
        help="Revision range passed to git format-patch (requires --repo)",
    )
    parser.add_argument(
        "--json",
        help="Output JSON to file instead of stdout",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Text encoding of the patch input (default: utf-8)",
    )
    parser.add_argument(
        "--max-bytes",
        type=int,
        help="Maximum accepted input size in bytes "
        "(default: GITPATCH_MAX_INPUT_BYTES or 8000000)",
    )
    parser.add_argument(
        "--git-timeout",
        type=int,
        default=120,
        help="Timeout for git invocations in seconds (default: 120)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: LOG_LEVEL or WARNING)",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command line arguments."""
    if args.repo and args.patch:
        raise ValueError("a patch file cannot be combined with --repo")
    if args.repo and not args.revision_range:
        raise ValueError("--repo requires --range")
    if args.revision_range and not args.repo:
        raise ValueError("--range requires --repo")
    if args.max_bytes is not None and args.max_bytes <= 0:
        raise ValueError("--max-bytes must be positive")
    if args.git_timeout <= 0:
        raise ValueError("--git-timeout must be positive")


def create_config(args: argparse.Namespace) -> ParseConfig:
    """Create configuration from command line arguments."""
    options = {
        "patch_path": args.patch,
        "repo_path": args.repo,
        "revision_range": args.revision_range,
        "json_output_path": args.json,
        "encoding": args.encoding,
        "git_timeout": args.git_timeout,
    }
    if args.max_bytes is not None:
        options["max_input_bytes"] = args.max_bytes
    return ParseConfig(**options)


def output_result(result: dict, output_path: Optional[str]) -> None:
    """Output result to stdout or file."""
    json_str = PatchSerializer().to_json_string(result)

    if output_path:
        Path(output_path).write_text(json_str, encoding="utf-8")
    else:
        print(json_str)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        validate_args(args)
        config = create_config(args)

        text = load_patch_text(config)
        result = parse_git_patch(text)

        serializer = PatchSerializer(config)
        payload = serializer.serialize_output(result)
        output_result(serializer.create_success_envelope(payload), config.json_output_path)
        return 0

    except GitPatchError as e:
        result = PatchSerializer().create_error_envelope(e.code, e.message, e.details)
        output_result(result, args.json)
        return 1

    except ValueError as e:
        result = PatchSerializer().create_error_envelope("INVALID_ARGUMENTS", str(e))
        output_result(result, args.json)
        return 1

    except Exception as e:
        result = PatchSerializer().create_error_envelope(
            "INTERNAL_ERROR",
            f"Internal error: {str(e)}",
            {"type": type(e).__name__},
        )
        output_result(result, args.json)
        return 1


if __name__ == "__main__":
    sys.exit(main())
