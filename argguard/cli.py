"""Command-line entry point for argguard.

Usage:
    argguard check push mypackage --api-key=abc     # exit 1, prints "sensitive"
    argguard check -u admin                          # leading flags need no "--"
    argguard check --stdin < args.txt
    argguard show install mypackage -version 1.0.0

Exit codes:
    0  not sensitive (``check``) / printed (``show``)
    1  sensitive (``check``), or a fatal config error
    2  usage error (argparse)
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from argguard import __version__
from argguard.config import load_config
from argguard.detector import contains_sensitive_arguments
from argguard.redaction import loggable_command_line
from argguard.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)

EXIT_CLEAN: int = 0
EXIT_SENSITIVE: int = 1

COMMANDS: tuple[str, ...] = ("check", "show")

# Options check/show accept before the argument tokens start.
_SUBCOMMAND_OPTIONS: frozenset[str] = frozenset({"--stdin", "--quiet", "-q", "-h", "--help"})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="argguard",
        description="Detect sensitive values in a command-line argument string.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config file (default: .argguard/config.yaml, then ~/.argguard/config.yaml)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("check", "Exit 1 if the arguments look sensitive, 0 otherwise"),
        ("show", "Print the form of the arguments that is safe to log"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "arguments",
            nargs=argparse.REMAINDER,
            help="Argument tokens; joined with single spaces",
        )
        sub.add_argument(
            "--stdin",
            action="store_true",
            help="Read the raw argument string from stdin instead",
        )
        if name == "check":
            sub.add_argument("--quiet", "-q", action="store_true", help="Print nothing")

    return parser


def _separate_command_arguments(argv: Sequence[str]) -> list[str]:
    """Insert "--" where the argument tokens begin.

    Tokens such as "-u admin" are part of the inspected command line, not
    options of argguard, so argparse must not see them as options.
    """
    argv = list(argv)
    i = 0
    while i < len(argv) and argv[i] not in COMMANDS:
        i += 2 if argv[i] == "--config" else 1
    i += 1
    while i < len(argv) and argv[i] in _SUBCOMMAND_OPTIONS:
        i += 1
    if i < len(argv) and argv[i] != "--":
        argv.insert(i, "--")
    return argv


def _read_arguments(args: argparse.Namespace) -> str:
    if args.stdin:
        return sys.stdin.read().rstrip("\r\n")
    tokens = list(args.arguments)
    if tokens and tokens[0] == "--":
        tokens = tokens[1:]
    return " ".join(tokens)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI and return the process exit code."""
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(_separate_command_arguments(argv))
    if args.stdin and [t for t in args.arguments if t != "--"]:
        parser.error("--stdin cannot be combined with argument tokens")

    config = load_config(args.config)
    configure_logging(
        config.logging.level,
        json_output=config.logging.json,
        redaction_message=config.redaction.message,
    )

    command_arguments = _read_arguments(args)

    if args.command == "check":
        sensitive = contains_sensitive_arguments(command_arguments)
        logger.debug("Checked arguments", command_line=command_arguments, sensitive=sensitive)
        if not args.quiet:
            print("sensitive" if sensitive else "clean")
        return EXIT_SENSITIVE if sensitive else EXIT_CLEAN

    print(loggable_command_line(command_arguments, message=config.redaction.message))
    return EXIT_CLEAN


if __name__ == "__main__":
    sys.exit(main())
