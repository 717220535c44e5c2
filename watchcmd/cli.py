"""Command line entry point: run a command periodically."""

import argparse
import os
import subprocess
import sys
import time
from decimal import Decimal

from watchcmd.interval import parse_interval

__all__ = ["WatchError", "build_parser", "shell_command", "run_watch", "main"]

_VERSION = "0.0.1"
_DEFAULT_INTERVAL = "2"
_INTERVAL_ENV = "WATCH_INTERVAL"


class WatchError(Exception):
    """Raised when the arguments of a watch run cannot be used."""


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``watch`` command."""
    parser = _Parser(
        prog="watch",
        description="Execute a program periodically, showing output fullscreen",
        usage="%(prog)s [options] command",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_VERSION}")
    parser.add_argument("command", help="Command to be executed")
    parser.add_argument(
        "-n",
        "--interval",
        metavar="SECONDS",
        default=os.environ.get(_INTERVAL_ENV, _DEFAULT_INTERVAL),
        help="Seconds to wait between updates",
    )
    options = [
        ("-b", "--beep", None, "Beep if command has a non-zero exit"),
        ("-c", "--color", None, "Interpret ANSI color and style sequences"),
        ("-C", "--no-color", None, "Do not interpret ANSI color and style sequences"),
        ("-d", "--differences", "permanent", "Highlight changes between updates"),
        ("-e", "--errexit", None, "Exit if command has a non-zero exit"),
        ("-g", "--chgexit", None, "Exit when output from command changes"),
        ("-q", "--equexit", "CYCLES", "Exit when output from command does not change"),
        ("-p", "--precise", None, "Attempt to run command in precise intervals"),
        ("-r", "--no-rerun", None, "Do not rerun program on window resize"),
        ("-t", "--no-title", None, "Turn off header"),
        ("-w", "--no-wrap", None, "Turn off line wrapping"),
        ("-x", "--exec", None, "Pass command to exec instead of 'sh -c'"),
    ]
    for short, long, metavar, help_text in options:
        parser.add_argument(short, long, metavar=metavar, help=help_text)
    return parser


def shell_command(command: str) -> list[str]:
    """Return the argument list that runs ``command`` through the system shell."""
    if sys.platform.startswith("win"):
        return [os.environ.get("COMSPEC", "cmd.exe"), "/c", command]
    return ["sh", "-c", command]


def _describe_status(returncode: int) -> str:
    if returncode < 0:
        return f"signal: {-returncode}"
    return f"exit status: {returncode}"


def run_watch(command: str, interval) -> int:
    """Run ``command`` repeatedly, sleeping ``interval`` seconds between runs.

    Stops at the first run that does not succeed and returns its exit code.
    """
    seconds = float(interval)
    while True:
        result = subprocess.run(shell_command(command), check=False)
        if result.returncode != 0:
            print(
                f"watch: command failed: {_describe_status(result.returncode)}",
                file=sys.stderr,
            )
            return result.returncode
        time.sleep(seconds)


def _interval_from(text: str) -> Decimal:
    try:
        return parse_interval(text)
    except ValueError:
        raise WatchError(
            f"watch: failed to parse argument: '{text}': Invalid argument"
        ) from None


def main(argv=None) -> int:
    """Parse arguments and watch the command; return the exit status."""
    args = build_parser().parse_args(argv)
    try:
        interval = _interval_from(args.interval)
        run_watch(args.command, interval)
    except WatchError as error:
        print(error, file=sys.stderr)
        return 1
    except OSError as error:
        print(f"watch: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())