"""Banner shown by the ``version``, ``about``, ``info`` and ``help`` commands."""

from __future__ import annotations

from pcss_cli import __version__
from pcss_cli.environment import EnvironmentInfo, inspect_environment
from pcss_cli.formatter import Color, TextStyle, printc

LOGO = "\n".join(
    [
        "",
        r".______     ______     _______.     _______.     ______  __       __  ",
        r"|   _  \   /      |   /       |    /       |    /      ||  |     |  | ",
        r"|  |_)  | |  ,----'  |   (----`   |   (----`   |  ,----'|  |     |  | ",
        r"|   ___/  |  |        \   \        \   \       |  |     |  |     |  | ",
        r"|  |      |  `----.----)   |   .----)   |      |  `----.|  `----.|  | ",
        r"| _|       \______|_______/    |_______/        \______||_______||__| ",
        "",
    ]
)


def info_lines(env: EnvironmentInfo) -> list[str]:
    """Return the ordered informational lines printed under the logo."""
    return [
        "\n",
        f"PCSS CLI: v{__version__}",
        f"Python: {env.runtime_version}",
        f"Package manager: {env.package_manager_version}",
        f"Arch: {env.architecture}",
        f"Platform: {env.platform_name}",
        "Help: ",
        'Type "pcss new { project name }" to create a new project',
        'Type "pcss version" to show this message',
    ]


async def print_banner(env: EnvironmentInfo | None = None) -> None:
    """Print the logo in magenta followed by each info line in blue."""
    if env is None:
        env = await inspect_environment()

    printc(TextStyle.NORMAL, Color.MAGENTA, LOGO)
    for line in info_lines(env):
        printc(TextStyle.NORMAL, Color.BLUE, line)
