import argparse
import json
import sys
import uuid
from datetime import datetime
from typing import Any, List, Optional

from . import __version__
from .config import LoggerOptions, TimestampFormat
from .errors import LogSignal
from .levels import LogLevel, LogLevelOperator
from .logger import Logger
from .policy import LoggingPolicy
from .style import set_color_enabled

_LEVEL_CHOICES = ["debug", "info", "warn", "error", "fatal"]
_OPERATOR_CHOICES = ["==", ">=", "<=", "EQUAL", "GREATER_OR_EQUAL", "LESS_OR_EQUAL"]


def _options_from_args(args: argparse.Namespace) -> LoggerOptions:
    overrides: dict = {}
    if getattr(args, "timestamp_format", None) is not None:
        overrides["timestamp_format"] = args.timestamp_format
    if getattr(args, "no_delimiter", False):
        overrides["message_delimiter"] = None
    elif getattr(args, "delimiter", None) is not None:
        overrides["message_delimiter"] = args.delimiter
    if getattr(args, "compact", False):
        overrides["compact_context"] = True
    if getattr(args, "throw", False):
        overrides["throw_errors"] = True
    if getattr(args, "throw_suppressed", False):
        overrides["throw_suppressed_errors"] = True
    return LoggerOptions().merged(**overrides)


def _policy_from_args(args: argparse.Namespace) -> LoggingPolicy:
    policy = LoggingPolicy.from_env()
    if getattr(args, "threshold", None):
        policy.level = LogLevel.parse(args.threshold)
    if getattr(args, "operator", None):
        policy.operator = LogLevelOperator.parse(args.operator)
    if getattr(args, "align", None):
        policy.alignment_categories = list(args.align)
    return policy


def _apply_color(args: argparse.Namespace) -> None:
    if getattr(args, "no_color", False):
        set_color_enabled(False)
    elif getattr(args, "force_color", False):
        set_color_enabled(True)


def cmd_emit(args: argparse.Namespace) -> int:
    _apply_color(args)
    ctx: Any = None
    if args.ctx is not None:
        try:
            ctx = json.loads(args.ctx)
        except json.JSONDecodeError as exc:
            print(f"[consolog] invalid --ctx JSON: {exc}", file=sys.stderr)
            return 2
    try:
        policy = _policy_from_args(args)
    except ValueError as exc:
        print(f"[consolog] {exc}", file=sys.stderr)
        return 2

    logger = Logger(args.category, _options_from_args(args), policy=policy)
    level = LogLevel.parse(args.level)
    try:
        logged = logger.log(args.message, level, ctx=ctx)
    except LogSignal as exc:
        print(f"[consolog] {type(exc).__name__}: {exc.message}", file=sys.stderr)
        return 1
    if logged is None and args.verbose:
        print(f"[consolog] {level.name} message filtered out", file=sys.stderr)
    return 0


def cmd_demo(args: argparse.Namespace) -> int:
    """Exercise every entry point once, ending with a caught fatal."""
    _apply_color(args)
    options = LoggerOptions().merged(compact_context=bool(args.compact))
    if args.timestamp_format is not None:
        options = options.merged(timestamp_format=args.timestamp_format)
    logger = Logger("Demo", options)

    deferred = logger.message("Hello, deferred message!", LogLevel.DEBUG)

    logger.debug("Hello, debug!")
    logger.info("Hello, info!")
    logger.warn("Hello, warning!")
    logger.error("Hello, error!")
    logger.info(
        "Hello, message with context!",
        {"id": str(uuid.uuid4()), "timestamp": datetime.now().astimezone(), "message": "Suh Dude"},
    )
    logger.log_message(deferred)

    try:
        logger.fatal("Hello, fatal!")
    except LogSignal as exc:
        logger.newline()
        print(f">> Caught fatal - {exc.message}")
    return 0


def _add_format_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--timestamp-format",
        help=f"Preset ({', '.join(TimestampFormat.__members__)}) or a custom date pattern",
    )
    p.add_argument("--compact", action="store_true", help="Render context data on a single line")
    p.add_argument("--no-color", action="store_true", help="Disable colorized output")
    p.add_argument("--force-color", action="store_true", help="Colorize even if NO_COLOR is set")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="consolog", description="Colorized, level-filtered console logging.")
    parser.add_argument(
        "--version",
        action="version",
        version=f"consolog {__version__}",
        help="Show version and exit",
    )
    sub = parser.add_subparsers(dest="cmd")

    emit_parser = sub.add_parser("emit", help="Format and print a single log message")
    emit_parser.add_argument("message")
    emit_parser.add_argument("--level", choices=_LEVEL_CHOICES, default="info")
    emit_parser.add_argument("--category", help="Category label shown as [category]")
    emit_parser.add_argument("--ctx", help="Context data as JSON (object, array or scalar)")
    emit_parser.add_argument("--delimiter", help="Message delimiter (default '::')")
    emit_parser.add_argument("--no-delimiter", action="store_true", help="Omit the message delimiter")
    emit_parser.add_argument("--threshold", help="Threshold level (overrides CONSOLOG_LEVEL)")
    emit_parser.add_argument("--operator", choices=_OPERATOR_CHOICES, help="Threshold comparison operator")
    emit_parser.add_argument("--align", action="append", help="Alignment category (repeatable)")
    emit_parser.add_argument("--throw", action="store_true", help="Exit 1 after logging an error")
    emit_parser.add_argument(
        "--throw-suppressed",
        action="store_true",
        help="Also exit 1 when an error is filtered out (requires --throw)",
    )
    emit_parser.add_argument("--verbose", action="store_true", help="Report filtered messages on stderr")
    _add_format_args(emit_parser)
    emit_parser.set_defaults(func=cmd_emit)

    demo_parser = sub.add_parser("demo", help="Print one message of every kind")
    _add_format_args(demo_parser)
    demo_parser.set_defaults(func=cmd_demo)

    version_parser = sub.add_parser("version", help="Show version and exit")
    version_parser.set_defaults(func=lambda _: (print(f"consolog {__version__}"), 0)[1])

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
