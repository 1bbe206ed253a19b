"""Read-only queries about the running environment.

Used by the banner to report the interpreter version, the package manager
version, the CPU architecture and the platform name.
"""

from __future__ import annotations

import platform
import sys

from pydantic import BaseModel

from pcss_cli.utils import print_warning, run_command

UNKNOWN = "unknown"


class EnvironmentInfo(BaseModel):
    """Snapshot of the environment shown in the banner."""

    runtime_version: str
    package_manager_version: str
    architecture: str
    platform_name: str


def runtime_version() -> str:
    return platform.python_version()


def architecture() -> str:
    return platform.machine() or UNKNOWN


def platform_name() -> str:
    return sys.platform


def _parse_pip_version(output: str) -> str:
    """Extract ``24.0`` from ``pip 24.0 from /path/to/pip (python 3.12)``."""
    parts = output.split()
    if len(parts) >= 2 and parts[0] == "pip":
        return parts[1]
    return output


async def package_manager_version() -> str:
    """Return the installed pip version as ``"<version> pip"``.

    Falls back to ``"unknown"`` (after printing a warning) when pip cannot
    be run or exits with an error.
    """
    try:
        returncode, stdout, stderr = await run_command(
            [sys.executable, "-m", "pip", "--version"]
        )
    except OSError as exc:
        print_warning(f"Error fetching pip version: {exc}")
        return UNKNOWN

    if returncode != 0 or not stdout:
        print_warning(f"Error fetching pip version: {stderr or f'exit code {returncode}'}")
        return UNKNOWN

    return f"{_parse_pip_version(stdout)} pip"


async def inspect_environment() -> EnvironmentInfo:
    """Gather every environment query into one ``EnvironmentInfo``."""
    return EnvironmentInfo(
        runtime_version=runtime_version(),
        package_manager_version=await package_manager_version(),
        architecture=architecture(),
        platform_name=platform_name(),
    )
