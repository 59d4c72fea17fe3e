import argparse
import sys
from typing import List, Optional

from . import __version__
from .categories import Category, Sink
from .dispatcher import LogDispatcher

_EMITTABLE = [c.value for c in Category if c is not Category.ALL]


def build_dispatcher(args: argparse.Namespace) -> LogDispatcher:
    # No --categories at all means the default wildcard; a bare flag means none
    categories = getattr(args, "categories", None)
    return LogDispatcher(sink=args.sink, categories=categories)


def cmd_emit(args: argparse.Namespace) -> int:
    dispatcher = build_dispatcher(args)
    category = Category.parse(args.category)
    if category is Category.INFO:
        dispatcher.info(*args.values)
    elif category is Category.DEBUG:
        dispatcher.debug(args.function, *args.values)
    elif category is Category.ERROR:
        dispatcher.error(args.file, args.function, args.line, *args.values)
    else:
        if args.values:
            print("[catlog] success records take no values; ignoring them", file=sys.stderr)
        dispatcher.success(args.function)
    # Logging is fail-silent: a dropped record is still a successful run
    return 0


def cmd_pipe(args: argparse.Namespace) -> int:
    """Emit every stdin line as one record of the chosen category."""
    dispatcher = build_dispatcher(args)
    category = Category.parse(args.category)
    count = 0
    for raw in sys.stdin:
        line = raw.rstrip("\r\n")
        if not line and args.skip_blank:
            continue
        words = line.split() if args.split else [line]
        if category is Category.INFO:
            dispatcher.info(*words)
        elif category is Category.DEBUG:
            dispatcher.debug(args.function, *words)
        else:
            dispatcher.error(args.file, args.function, args.line, *words)
        count += 1
    if args.verbose:
        print(f"[catlog] piped {count} lines", file=sys.stderr)
    return 0


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--sink",
        choices=[s.value for s in Sink],
        default=Sink.CONSOLE.value,
        help="Destination for records (default: console)",
    )
    p.add_argument(
        "--categories",
        nargs="*",
        choices=[c.value for c in Category],
        help="Enabled categories; omit for all, pass the flag alone to disable everything",
    )
    p.add_argument("--function", default="main", help="Function name reported in debug/error/success records")
    p.add_argument("--file", default="catlog", help="Source file name reported in console error records")
    p.add_argument("--line", type=int, default=0, help="Source line reported in error records")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="catlog", description="Category-filtered console/file logger")
    parser.add_argument("--version", action="version", version=f"catlog {__version__}")
    sub = parser.add_subparsers(dest="cmd")

    emit_parser = sub.add_parser("emit", help="Emit a single record")
    emit_parser.add_argument("category", choices=_EMITTABLE)
    emit_parser.add_argument("values", nargs="*", help="Message values, space-joined in order")
    _add_common(emit_parser)
    emit_parser.set_defaults(func=cmd_emit)

    pipe_parser = sub.add_parser("pipe", help="Emit each stdin line as a record")
    pipe_parser.add_argument("category", choices=[c for c in _EMITTABLE if c != Category.SUCCESS.value])
    pipe_parser.add_argument("--split", action="store_true", help="Split each line on whitespace into separate values")
    pipe_parser.add_argument("--skip-blank", action="store_true", help="Do not emit records for blank lines")
    pipe_parser.add_argument("--verbose", action="store_true", help="Report the number of piped lines on stderr")
    _add_common(pipe_parser)
    pipe_parser.set_defaults(func=cmd_pipe)

    version_parser = sub.add_parser("version", help="Show version and exit")
    version_parser.set_defaults(func=lambda _: (print(f"catlog {__version__}"), 0)[1])

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not getattr(args, "cmd", None):  # No subcommand provided
        parser.print_help()
        return 0
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
