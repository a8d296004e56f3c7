"""Module: cli.py

Author: Michael Economou
Date: 2026-02-08

Command line front end for ftmi.

Directory commands read one directory per line from stdin when no DIR
is given.

Subcommands:
    detect         list every common prefix per directory
    longest        show the winning prefix group(s) per directory
    remove         preview (default) or execute prefix removal with undo records
    history        list recent rename operations
    undo           reverse an operation (the most recent one by default)
    cleanup        drop ledger records older than N days
    recover        settle pending records left by an interrupted rename
    extract-paths  print the paths found in text read from stdin
"""

import argparse
import logging
import sys

from ftmi.config import (
    APP_DESCRIPTION,
    APP_NAME,
    APP_VERSION,
    DEFAULT_DELIMITERS,
    DEFAULT_HISTORY_LIMIT,
    DEFAULT_MIN_OCCURRENCES,
    DEFAULT_RETENTION_DAYS,
)
from ftmi.core.errors import FtmiError, LedgerError, OperationNotFoundError, PrefixScanError
from ftmi.core.prefix import (
    DelimiterOnly,
    DetectAll,
    PrefixOptions,
    SpecificPrefixes,
    find_common_prefix,
    select_longest_prefix,
)
from ftmi.core.rename import RenameLedger, plan_prefix_removal, remove_prefix_from_files
from ftmi.utils.logging.logger_factory import get_cached_logger
from ftmi.utils.logging.logger_setup import ConfigureLogger
from ftmi.utils.path_extraction import extract_paths_from_text

logger = get_cached_logger(__name__)

EPILOG = """
Examples:
  ftmi detect ./music --min 3
  ftmi longest ./music ./photos --no-filter
  find . -type d -name "*album*" | ftmi detect
  ftmi remove ./music --regex '\\(.*\\)'            # preview only
  ftmi remove ./music --execute                    # rename, recorded for undo
  ftmi history
  ftmi undo                                        # most recent operation
  grep -r error build.log | ftmi extract-paths
"""


def delimiter_pair(value: str) -> tuple[str, str]:
    """Parse ``OC`` (two characters) or ``OPEN,CLOSE`` into a delimiter pair."""
    if "," in value:
        open_marker, _, close_marker = value.partition(",")
    elif len(value) == 2:
        open_marker, close_marker = value[0], value[1]
    else:
        raise argparse.ArgumentTypeError(
            f"expected two characters like '[]' or OPEN,CLOSE, got {value!r}"
        )
    if not open_marker or not close_marker:
        raise argparse.ArgumentTypeError(f"empty delimiter marker in {value!r}")
    return open_marker, close_marker


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=APP_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    parser.add_argument("--db", type=str, default=None, help="Path to the rename ledger database")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show info messages on stderr")

    subparsers = parser.add_subparsers(dest="command", required=True)

    detect = subparsers.add_parser("detect", help="List every common prefix per directory")
    detect.add_argument(
        "directories",
        nargs="*",
        metavar="DIR",
        help="Directories to scan (default: one per line on stdin)",
    )
    detect.add_argument(
        "--min", type=non_negative_int, default=DEFAULT_MIN_OCCURRENCES, dest="min_occurrences"
    )
    detect.add_argument(
        "--delimiter",
        type=delimiter_pair,
        action="append",
        dest="delimiters",
        metavar="OC",
        help="Delimiter pair such as '[]' or '<<,>>' (repeatable)",
    )
    detect.add_argument(
        "--prefix",
        action="append",
        dest="prefixes",
        metavar="P",
        help="Only count these literal prefixes (repeatable)",
    )
    detect.add_argument(
        "--delimiters-only", action="store_true", help="Skip free-form prefix detection"
    )
    detect.set_defaults(func=cmd_detect)

    for name, func, help_text in (
        ("longest", cmd_longest, "Show the winning prefix group(s) per directory"),
        ("remove", cmd_remove, "Preview or execute prefix removal"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "directories",
            nargs="*",
            metavar="DIR",
            help="Directories to scan (default: one per line on stdin)",
        )
        filter_group = sub.add_mutually_exclusive_group()
        filter_group.add_argument("--regex", "-r", help="Filter pattern for the decorated prefix")
        filter_group.add_argument(
            "--no-filter", action="store_true", help="Accept every prefix"
        )
        sub.add_argument(
            "--min", type=non_negative_int, default=DEFAULT_MIN_OCCURRENCES, dest="min_occurrences"
        )
        if name == "remove":
            sub.add_argument(
                "--execute", action="store_true", help="Rename files (default: preview only)"
            )
        sub.set_defaults(func=func)

    history = subparsers.add_parser("history", help="List recent rename operations")
    history.add_argument("--limit", type=non_negative_int, default=DEFAULT_HISTORY_LIMIT)
    history.set_defaults(func=cmd_history)

    undo = subparsers.add_parser("undo", help="Reverse a rename operation")
    undo.add_argument("operation_id", nargs="?", help="Operation id (default: most recent)")
    undo.set_defaults(func=cmd_undo)

    cleanup = subparsers.add_parser("cleanup", help="Delete old ledger records")
    cleanup.add_argument("--days", type=non_negative_int, default=DEFAULT_RETENTION_DAYS)
    cleanup.set_defaults(func=cmd_cleanup)

    recover = subparsers.add_parser("recover", help="Settle pending ledger records")
    recover.set_defaults(func=cmd_recover)

    extract = subparsers.add_parser("extract-paths", help="Print paths found in stdin text")
    extract.set_defaults(func=cmd_extract_paths)

    return parser


def _options_from_args(args: argparse.Namespace) -> PrefixOptions:
    options = PrefixOptions.default().evolve(min_occurrences=args.min_occurrences)

    if getattr(args, "prefixes", None):
        return options.evolve(mode=SpecificPrefixes(tuple(args.prefixes)))

    if hasattr(args, "delimiters"):
        delimiters = tuple(args.delimiters or DEFAULT_DELIMITERS)
        if args.delimiters_only:
            return options.evolve(mode=DelimiterOnly(delimiters))
        return options.evolve(mode=DetectAll(delimiters))

    if args.no_filter:
        return options.evolve(filter_regex=None)
    if args.regex is not None:
        return options.evolve(filter_regex=args.regex)
    return options


def read_directories(stream) -> list[str]:
    """One directory per line; surrounding whitespace trimmed, blank lines skipped."""
    return [line.strip() for line in stream if line.strip()]


def _warn(message: str) -> None:
    print(f"Warning: {message}", file=sys.stderr)


def cmd_detect(args: argparse.Namespace) -> int:
    options = _options_from_args(args)
    status = 0

    for directory in args.directories:
        try:
            groups = find_common_prefix(directory, options)
        except PrefixScanError as e:
            _warn(str(e))
            status = 1
            continue

        print(f"Directory: {directory}")
        if not groups:
            print("  No common prefixes found")
        for group in groups:
            print(f"  {group.decorated}  ({group.occurrences} files)")
            for filename in group.files:
                print(f"    {filename}")
        print()

    return status


def _select(directory: str, options: PrefixOptions):
    selection = select_longest_prefix(directory, options)
    if selection.filter_invalid:
        _warn(f"invalid filter pattern {options.filter_regex!r}, showing all prefixes")
    elif selection.filter_bypassed:
        print(f"  (filter {options.filter_regex!r} matched nothing, showing all prefixes)")
    return selection


def cmd_longest(args: argparse.Namespace) -> int:
    options = _options_from_args(args)
    status = 0

    for directory in args.directories:
        print(f"Directory: {directory}")
        try:
            selection = _select(directory, options)
        except PrefixScanError as e:
            _warn(str(e))
            status = 1
            continue

        if not selection.prefixed_paths:
            print("  No common prefixes found")
        for index, prefixed_path in enumerate(selection.prefixed_paths, 1):
            print(f"  Prefix {index}: {prefixed_path.decorated}  ({len(prefixed_path.paths)} files)")
            for path in prefixed_path.paths:
                print(f"    {path}")
        print()

    return status


def cmd_remove(args: argparse.Namespace, ledger: RenameLedger | None = None) -> int:
    options = _options_from_args(args)
    status = 0

    for directory in args.directories:
        print(f"Directory: {directory}")
        try:
            selection = _select(directory, options)
        except PrefixScanError as e:
            _warn(str(e))
            status = 1
            continue

        if not selection.prefixed_paths:
            print("  No common prefixes found for removal")

        for prefixed_path in selection.prefixed_paths:
            print(f"  Prefix to remove: {prefixed_path.decorated}")

            if not args.execute:
                for item in plan_prefix_removal(prefixed_path):
                    suffix = f"  (skipped: {item.skip_reason})" if item.is_skipped else ""
                    print(f"    {item.old_path.name} -> {item.new_path.name}{suffix}")
                continue

            result = remove_prefix_from_files(ledger, prefixed_path)
            for item in result.items:
                if item.success:
                    print(f"    ok   {item.old_path.name} -> {item.new_path.name}")
                elif item.skipped:
                    print(f"    skip {item.old_path.name} ({item.skip_reason})")
                else:
                    print(f"    FAIL {item.old_path.name}: {item.error_message}")
            print(
                f"  Operation {result.operation_id}: {result.success_count} renamed, "
                f"{result.failure_count} failed, {result.skipped_count} skipped"
            )
            if result.failure_count:
                status = 1
        print()

    if not args.execute:
        print("This was a preview. Use --execute to rename files.")
    return status


def cmd_history(args: argparse.Namespace, ledger: RenameLedger) -> int:
    summaries = ledger.get_operation_summaries(args.limit)
    if not summaries:
        print("No rename operations recorded")
        return 0

    for summary in summaries:
        directories = ", ".join(str(d) for d in summary.directories)
        print(f"{summary.operation_id}  {summary.display_text}  {directories}")
    return 0


def cmd_undo(args: argparse.Namespace, ledger: RenameLedger) -> int:
    operation_id = args.operation_id
    if operation_id is None:
        recent = ledger.get_recent_operations(1)
        if not recent:
            print("No rename operations to undo")
            return 0
        operation_id = recent[0]

    try:
        success_count, failure_count = ledger.undo_operation(operation_id)
    except OperationNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Undo {operation_id}: {success_count} restored, {failure_count} failed")
    return 1 if failure_count else 0


def cmd_cleanup(args: argparse.Namespace, ledger: RenameLedger) -> int:
    deleted = ledger.cleanup_old_records(args.days)
    print(f"Deleted {deleted} records older than {args.days} days")
    return 0


def cmd_recover(args: argparse.Namespace, ledger: RenameLedger) -> int:
    committed, discarded = ledger.resolve_pending_renames()
    print(f"Pending records: {committed} committed, {discarded} discarded")
    return 0


def cmd_extract_paths(args: argparse.Namespace) -> int:
    for path in extract_paths_from_text(sys.stdin.read()):
        print(path)
    return 0


LEDGER_COMMANDS = {cmd_history, cmd_undo, cmd_cleanup, cmd_recover}


def _configure_logging(verbose: bool) -> None:
    from ftmi.utils.paths import AppPaths

    try:
        log_dir = str(AppPaths.get_logs_dir())
    except LedgerError:
        log_dir = None
    ConfigureLogger(log_name=APP_NAME, log_dir=log_dir, console_level=logging.INFO if verbose else None)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if getattr(args, "directories", None) == []:
        if sys.stdin.isatty():
            parser.error(f"{args.command}: give DIR arguments or pipe directories on stdin")
        args.directories = read_directories(sys.stdin)

    _configure_logging(args.verbose)

    try:
        if args.func in LEDGER_COMMANDS:
            with RenameLedger(args.db) as ledger:
                return args.func(args, ledger)
        if args.func is cmd_remove and args.execute:
            with RenameLedger(args.db) as ledger:
                return cmd_remove(args, ledger)
        return args.func(args)
    except FtmiError as e:
        logger.info("[cli] %s failed: %s", args.command, e)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
