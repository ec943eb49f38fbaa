# -*- coding: utf-8 -*-
"""``cavenet`` command line entry point.

Sub-commands are registered under the ``cavenet.actions`` entry-point
group and receive the remaining arguments as a list.
"""

from __future__ import annotations

import argparse
import sys
from importlib.metadata import entry_points

import cavenet


def main(argv: list[str] | None = None) -> int:
    registered_commands = entry_points(group="cavenet.actions")

    parser = argparse.ArgumentParser(
        prog="cavenet",
        description="Cave survey network tools",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s version: {cavenet.__version__}",
    )
    parser.add_argument(
        "command",
        choices=sorted(registered_commands.names),
        help="Command to run",
    )
    parser.add_argument(
        "args",
        help=argparse.SUPPRESS,
        nargs=argparse.REMAINDER,
    )

    parsed_args = parser.parse_args(argv)

    command_fn = registered_commands[parsed_args.command].load()
    return command_fn(parsed_args.args)


if __name__ == "__main__":
    sys.exit(main())
