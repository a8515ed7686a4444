#!/usr/bin/env python3
"""Run the gitpatch API with uvicorn."""

import argparse
import sys

import uvicorn


def main():
    """Parse server options and start uvicorn."""
    parser = argparse.ArgumentParser(
        description="Start the gitpatch API server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/start_api.py                  # 127.0.0.1:8000
  python scripts/start_api.py --port 9000
  python scripts/start_api.py --reload         # development
        """,
    )
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind to")
    parser.add_argument("--workers", type=int, default=1, help="Worker processes")
    parser.add_argument("--reload", action="store_true", help="Reload on source changes")
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["critical", "error", "warning", "info", "debug"],
        help="uvicorn log level (default: info)",
    )
    args = parser.parse_args()

    if args.reload and args.workers > 1:
        print("--reload cannot be combined with --workers", file=sys.stderr)
        return 2

    print(f"Starting gitpatch API on http://{args.host}:{args.port} (docs at /docs)")
    uvicorn.run(
        "gitpatch.api.app:app",
        host=args.host,
        port=args.port,
        log_level=args.log_level,
        reload=args.reload,
        workers=None if args.reload else args.workers,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
