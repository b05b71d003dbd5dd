"""
strkit Command-Line Interface.

Provides commands to evaluate string operations from the shell.

Usage:
    strkit eval "hello world" 'slice(-5)' 'count("o")'
    strkit repl                     # Interactive mode
    strkit repl --subject "hello"   # Start on a given string
    strkit ops                      # List operations
    strkit info                     # Show library info
"""

import argparse
import logging
import sys
from typing import Optional

from strkit import __version__
from strkit.repl import Colors, StringSession
from strkit.runtime.ops import OPERATION_NAMES, camel_case

logger = logging.getLogger("strkit")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Configure root logging for command-line use."""
    logging.basicConfig(level=getattr(logging, level.upper()), format=LOG_FORMAT)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="strkit",
        description="strkit - safely-bounded, extensible string operations",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default="warning",
        help="Logging level (default: warning)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Eval command
    eval_parser = subparsers.add_parser(
        "eval",
        aliases=["e"],
        help="Evaluate operation expressions against a string",
    )
    eval_parser.add_argument(
        "subject",
        help="The string to operate on",
    )
    eval_parser.add_argument(
        "expressions",
        nargs="+",
        metavar="EXPR",
        help='Operation expressions, e.g. \'indexOf("o")\' or \'slice(-5)\'',
    )

    # REPL command
    repl_parser = subparsers.add_parser(
        "repl",
        aliases=["i"],
        help="Start interactive mode",
    )
    repl_parser.add_argument(
        "-s",
        "--subject",
        default="",
        help="Initial working string",
    )

    # Ops command
    subparsers.add_parser(
        "ops",
        help="List available operations",
    )

    # Info command
    subparsers.add_parser(
        "info",
        help="Show library information",
    )

    return parser


def cmd_eval(args: argparse.Namespace) -> int:
    """Handle the eval command - evaluate expressions and print results."""
    session = StringSession(args.subject)
    failures = 0

    for expression in args.expressions:
        evaluation = session.evaluate(expression)
        print(evaluation.format())
        if not evaluation.ok:
            failures += 1

    logger.info("evaluated %d expression(s), %d failed", len(args.expressions), failures)
    return 1 if failures else 0


def cmd_repl(args: argparse.Namespace) -> int:
    """Handle the repl command - start interactive mode."""
    session = StringSession(args.subject)
    session.run()
    return 0


def cmd_ops(args: argparse.Namespace) -> int:
    """Handle the ops command - list operations in both spellings."""
    for name in OPERATION_NAMES:
        alias = camel_case(name)
        if alias != name:
            print(f"{Colors.GREEN}{alias}{Colors.RESET} {Colors.DIM}({name}){Colors.RESET}")
        else:
            print(f"{Colors.GREEN}{name}{Colors.RESET}")
    return 0


def cmd_info(args: argparse.Namespace) -> int:
    """Handle the info command - show library information."""
    print(f"""
{Colors.BOLD}strkit{Colors.RESET}
======

{Colors.CYAN}Version:{Colors.RESET} {__version__}

{Colors.CYAN}Features:{Colors.RESET}
  - Negative offsets and lengths, validated against the string bounds
  - Single-pass, longest-match-first, bounded multi-pattern replace
  - anyOf / noneOf queries accepted wherever a needle string is
  - Case-insensitive view for search, count, replace and split
  - NotFound result instead of magic indexes

{Colors.CYAN}Errors:{Colors.RESET}
  - RangeError      offset or length outside the string
  - ArgumentError   invalid scalar argument (limit, chunk length, ...)
""")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    if args.command is None:
        parser.print_help()
        return 0

    command_handlers = {
        "eval": cmd_eval,
        "e": cmd_eval,
        "repl": cmd_repl,
        "i": cmd_repl,
        "ops": cmd_ops,
        "info": cmd_info,
    }

    handler = command_handlers.get(args.command)
    if handler:
        return handler(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
