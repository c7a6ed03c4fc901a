"""Command-line interface for inodeinspect."""

import argparse
import sys
import time

from inodeinspect.constants import VERSION
from inodeinspect.models import OutputFormat, RenderOptions
from inodeinspect.output_generators import inspect_directory, inspect_file


def log_operation(log_file: str, operation: str) -> None:
    """Append ``[<ctime>] <operation>`` to the log file.

    Exits with status 1 if the log file cannot be opened.
    """
    try:
        with open(log_file, "a", encoding="utf-8") as log_fp:
            log_fp.write(f"[{time.ctime()}] {operation}\n")
    except OSError as e:
        print(f"Error opening log file {log_file}: {e.strerror or e}", file=sys.stderr)
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    Help is on -? and --help; -h selects human-readable output.
    """
    parser = argparse.ArgumentParser(
        prog="inode-inspect",
        description="Display inode information for a file or for every entry in a directory.",
        add_help=False,
    )
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument(
        "-i",
        "--inode",
        metavar="FILE_PATH",
        help="Display detailed inode information for the specified file.",
    )
    target.add_argument(
        "-a",
        "--all",
        metavar="DIRECTORY_PATH",
        help="Display inode information for all files within the specified directory.",
    )
    parser.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        help="Recursive listing (with --all).",
    )
    parser.add_argument(
        "-h",
        "--human",
        action="store_true",
        help="Output sizes and dates in a human-readable form.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=[fmt.value for fmt in OutputFormat],
        default=OutputFormat.TEXT.value,
        help="Specify the output format.",
    )
    parser.add_argument(
        "-l",
        "--log",
        metavar="LOG_FILE",
        help="Log operations to a specified file.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print a traversal summary to stderr.",
    )
    parser.add_argument(
        "-?",
        "--help",
        action="help",
        help="Display this help and exit.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def main(argv: list[str] | None = None):
    """Main entry point for the inode-inspect CLI."""
    args = build_parser().parse_args(argv)

    options = RenderOptions(
        output_format=OutputFormat(args.format),
        human_readable=args.human,
        recursive=args.recursive,
    )

    if args.inode is not None:
        inspect_file(args.inode, options)
        operation = f"Inspected file {args.inode}"
    else:
        stats = inspect_directory(args.all, options)
        mode = " (recursive)" if options.recursive else ""
        operation = (
            f"Inspected directory {args.all}{mode}: "
            f"{stats.rendered} entries, {stats.skipped} skipped"
        )
        if args.verbose:
            print(
                f"✓ {stats.rendered} entries rendered, {stats.skipped} skipped",
                file=sys.stderr,
            )

    if args.log:
        log_operation(args.log, operation)


if __name__ == "__main__":
    main()
