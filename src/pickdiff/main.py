"""Main CLI entry point for pickdiff."""

import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .collector import DiffCollector
from .config import ComparisonRequest, RepoConfig
from .diffpack import DiffResult
from .errors import NotARepositoryError, PickDiffError
from .htmlview import render_html_document
from .logging_utils import configure_logging
from .markdown import MarkdownExport, generate_markdown
from .serialize import DiffSerializer
from .unified import format_stdout_diff
from .vcs import GitRepository

OUTPUT_FORMATS = ("stdout", "markdown", "html", "json")


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="pickdiff",
        description="Generate diffs between Git commits for specific files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
At least one of --files or --file-list is required. Both can be used
together to combine file lists.

Examples:
  pickdiff -s HEAD~5 -e HEAD -f src/index.ts,src/utils.ts
  pickdiff --start abc123 --end def456 --file-list files.txt --output markdown
  pickdiff -r /path/to/repo -s main -e feature-branch -f README.md
  pickdiff -s HEAD~5 -e HEAD -f src/index.ts -o markdown -w diff.md
        """,
    )

    parser.add_argument(
        "-s",
        "--start",
        default="",
        help="Start commit (base commit)",
    )
    parser.add_argument(
        "-e",
        "--end",
        default="",
        help="End commit (target commit)",
    )
    parser.add_argument(
        "-f",
        "--files",
        action="append",
        default=[],
        help="Comma-separated list of files to diff (repeatable)",
    )
    parser.add_argument(
        "-F",
        "--file-list",
        action="append",
        default=[],
        help="Path to file containing list of files (one per line)",
    )
    parser.add_argument(
        "-r",
        "--repo",
        default=os.getcwd(),
        help="Repository path (default: current directory)",
    )
    parser.add_argument(
        "-c",
        "--context",
        type=int,
        default=3,
        help="Number of context lines (default: 3)",
    )
    parser.add_argument(
        "-o",
        "--output",
        choices=OUTPUT_FORMATS,
        default="stdout",
        help="Output format (default: stdout)",
    )
    parser.add_argument(
        "-w",
        "--write",
        help="Write output to file instead of terminal",
    )
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        default=1,
        help="Number of files to diff in parallel (default: 1)",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"pickdiff v{__version__}",
    )

    return parser


def collect_files(args: argparse.Namespace) -> List[str]:
    """Combine --files and --file-list entries, dropping blanks."""
    files: List[str] = []

    for value in args.files:
        files.extend(name.strip() for name in value.split(",") if name.strip())

    for list_path in args.file_list:
        path = Path(list_path).resolve()
        if not path.is_file():
            raise ValueError(f"File not found: {path}")
        content = path.read_text(encoding="utf-8")
        files.extend(line.strip() for line in content.split("\n") if line.strip())

    return files


def validate_args(args: argparse.Namespace) -> None:
    """Validate command line arguments."""
    if not args.start:
        raise ValueError("Missing required argument: --start (-s)")
    if not args.end:
        raise ValueError("Missing required argument: --end (-e)")
    if not args.files and not args.file_list:
        raise ValueError("Missing required argument: --files (-f) or --file-list (-F)")
    if args.context < 0:
        raise ValueError(f"Invalid context lines value: {args.context}")
    if args.jobs < 1:
        raise ValueError("--jobs must be at least 1")


def create_request(args: argparse.Namespace) -> ComparisonRequest:
    """Create the comparison request from command line arguments."""
    files = collect_files(args)
    if not files:
        raise ValueError("Missing required argument: --files (-f) or --file-list (-F)")
    return ComparisonRequest(
        start_commit=args.start,
        end_commit=args.end,
        files=files,
        context_lines=args.context,
    )


def render_output(
    result: DiffResult, request: ComparisonRequest, repo_path: str, output: str
) -> str:
    """Render a result in the requested output format."""
    if output == "markdown":
        return generate_markdown(
            MarkdownExport(
                repo_path=repo_path,
                start_commit=request.start_commit,
                end_commit=request.end_commit,
                context_lines=request.context_lines,
                result=result,
            )
        )
    if output == "html":
        return render_html_document(
            result, title=f"Diff {request.start_commit}..{request.end_commit}"
        )
    if output == "json":
        serializer = DiffSerializer(request)
        envelope = serializer.create_success_envelope(serializer.serialize_result(result))
        return serializer.to_json_string(envelope)
    return format_stdout_diff(result)


def run(args: argparse.Namespace) -> str:
    """Collect and render diffs for parsed arguments."""
    validate_args(args)
    request = create_request(args)

    repo_path = str(Path(args.repo).resolve())
    repository = GitRepository(RepoConfig(repo_path=repo_path))
    if not repository.is_repository():
        raise NotARepositoryError(repo_path)

    result = DiffCollector(repository, max_workers=args.jobs).collect(request)
    return render_output(result, request, repo_path, args.output)


def output_result(output: str, output_path: Optional[str]) -> None:
    """Output result to stdout or file."""
    if output_path:
        path = Path(output_path).resolve()
        path.write_text(output, encoding="utf-8")
        print(f"Output written to: {path}")
    else:
        print(output)


def report_error(exc: Exception, output: str) -> None:
    """Report a failure: JSON envelope for json output, stderr otherwise."""
    if output == "json":
        serializer = DiffSerializer()
        if isinstance(exc, PickDiffError):
            envelope = serializer.create_error_envelope(exc.code, exc.message, exc.details)
        else:
            envelope = serializer.create_error_envelope(
                "INTERNAL_ERROR", str(exc), {"type": type(exc).__name__}
            )
        print(serializer.to_json_string(envelope))
        return

    message = str(exc) or "Unknown error"
    print(f"Error: {message}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    if argv is None:
        argv = sys.argv[1:]

    parser = create_parser()
    if not argv:
        parser.print_help()
        return 0

    args = parser.parse_args(argv)
    configure_logging()

    try:
        output = run(args)
        output_result(output, args.write)
        return 0

    except Exception as e:
        report_error(e, args.output)
        return 1


if __name__ == "__main__":
    sys.exit(main())
