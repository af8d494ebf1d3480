#!/usr/bin/env python3
"""Startup script for pickdiff API server."""

import argparse
import os
import sys
from pathlib import Path

import uvicorn

# Add src to path so we can import pickdiff from a checkout
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


def main():
    """Main entry point for API server."""
    parser = argparse.ArgumentParser(
        description="Start pickdiff API server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/start_api.py                        # Serve the current directory
  python scripts/start_api.py --repo ~/src/project   # Serve another repository
  python scripts/start_api.py --host 0.0.0.0         # Listen on all interfaces
  python scripts/start_api.py --reload               # Auto-reload on changes
        """
    )

    parser.add_argument(
        "repo",
        nargs="?",
        default=os.getcwd(),
        help="Repository to serve (default: current directory)"
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("PORT", "3000")),
        help="Port to bind to (default: $PORT or 3000)"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Threads used to diff files in parallel (default: 1)"
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development"
    )
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["critical", "error", "warning", "info", "debug", "trace"],
        help="Log level (default: info)"
    )

    args = parser.parse_args()

    # The app factory reads these when the server imports it
    os.environ["PICKDIFF_REPO_PATH"] = str(Path(args.repo).resolve())
    os.environ["PICKDIFF_MAX_WORKERS"] = str(args.workers)

    print("Starting pickdiff API server...")
    print(f"   Repository: {os.environ['PICKDIFF_REPO_PATH']}")
    print(f"   URL: http://{args.host}:{args.port}")
    print(f"   API Docs: http://{args.host}:{args.port}/docs")
    print()

    config = {
        "app": "pickdiff.api.app:app",
        "host": args.host,
        "port": args.port,
        "log_level": args.log_level,
    }

    if args.reload:
        config["reload"] = True
        config["reload_dirs"] = ["src"]

    uvicorn.run(**config)


if __name__ == "__main__":
    main()
