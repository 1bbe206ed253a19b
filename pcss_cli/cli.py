"""PCSS command-line interface.

Commands::

    pcss new <project-name>      create a starter project
    pcss version|about|info|help print the banner

Argument handling is split in two: :func:`dispatch` is a pure function that
maps an :class:`Invocation` to a :class:`CommandKind`, and :func:`run`
performs the side effects for that state and returns the exit code.  Only the
``SCAFFOLD`` state touches the filesystem or the network.
"""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Sequence
from enum import Enum

import httpx
from pydantic import BaseModel, ConfigDict

from pcss_cli.banner import print_banner
from pcss_cli.config import Config
from pcss_cli.exceptions import ScaffoldError
from pcss_cli.formatter import Color, TextStyle, printc
from pcss_cli.scaffolder import ProjectScaffolder
from pcss_cli.utils import print_error, print_success

INFO_COMMANDS = frozenset({"version", "about", "info", "help"})
NEW_COMMAND = "new"
NEW_USAGE = "Usage: pcss new { project name }"

EXIT_OK = 0
EXIT_FAILURE = 1


class CommandKind(str, Enum):
    """States the dispatcher can resolve an invocation to."""

    INFO = "info"
    USAGE_ERROR = "usage_error"
    UNKNOWN_COMMAND = "unknown_command"
    SCAFFOLD = "scaffold"


class Invocation(BaseModel):
    """The two positional arguments of one CLI run."""

    model_config = ConfigDict(frozen=True)

    command: str = ""
    project_name: str | None = None

    @classmethod
    def from_argv(cls, argv: Sequence[str]) -> "Invocation":
        """Build an invocation from arguments (program name excluded).

        Arguments beyond the second are ignored.
        """
        command = argv[0] if len(argv) > 0 else ""
        project_name = argv[1] if len(argv) > 1 else None
        return cls(command=command, project_name=project_name)


def dispatch(invocation: Invocation) -> CommandKind:
    """Resolve *invocation* to the state that handles it."""
    if invocation.command in INFO_COMMANDS:
        return CommandKind.INFO
    if invocation.command == NEW_COMMAND:
        if not invocation.project_name:
            return CommandKind.USAGE_ERROR
        return CommandKind.SCAFFOLD
    return CommandKind.UNKNOWN_COMMAND


def unknown_command_message(command: str) -> str:
    """Return the error line printed for an unrecognised *command*."""
    return f'Unknown command/usage: {command}, for help type "pcss help"'


async def run(
    invocation: Invocation,
    config: Config | None = None,
    *,
    client: httpx.AsyncClient | None = None,
) -> int:
    """Execute *invocation* and return the process exit code."""
    kind = dispatch(invocation)

    if kind is CommandKind.INFO:
        await print_banner()
        return EXIT_OK

    if kind is CommandKind.USAGE_ERROR:
        printc(TextStyle.BOLD, Color.RED, NEW_USAGE)
        return EXIT_FAILURE

    if kind is CommandKind.UNKNOWN_COMMAND:
        printc(TextStyle.BOLD, Color.RED, unknown_command_message(invocation.command))
        return EXIT_FAILURE

    assert invocation.project_name  # guaranteed by dispatch()
    scaffolder = ProjectScaffolder(config if config is not None else Config(), client=client)
    try:
        await scaffolder.scaffold(invocation.project_name)
    except ScaffoldError as exc:
        print_error(f"Error ({exc.kind}): {exc}")
        return EXIT_FAILURE

    print_success(
        f"Files downloaded and index.html created successfully in {invocation.project_name}."
    )
    return EXIT_OK


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for ``pcss`` and ``python -m pcss_cli``."""
    if argv is None:
        argv = sys.argv[1:]

    invocation = Invocation.from_argv(argv)
    try:
        config = Config.from_env()
    except ValueError as exc:
        print_error(f"Error: invalid PCSS_* environment setting: {exc}")
        sys.exit(EXIT_FAILURE)

    sys.exit(asyncio.run(run(invocation, config)))


if __name__ == "__main__":
    main()
