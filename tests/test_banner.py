"""Unit tests for the informational banner (pcss_cli.banner)."""

from __future__ import annotations

import pytest

from pcss_cli import __version__
from pcss_cli.banner import LOGO, info_lines, print_banner
from pcss_cli.environment import EnvironmentInfo

pytestmark = pytest.mark.unit


@pytest.fixture
def env() -> EnvironmentInfo:
    return EnvironmentInfo(
        runtime_version="3.12.1",
        package_manager_version="24.0 pip",
        architecture="x86_64",
        platform_name="linux",
    )


class TestInfoLines:
    def test_order_and_content(self, env: EnvironmentInfo):
        assert info_lines(env) == [
            "\n",
            f"PCSS CLI: v{__version__}",
            "Python: 3.12.1",
            "Package manager: 24.0 pip",
            "Arch: x86_64",
            "Platform: linux",
            "Help: ",
            'Type "pcss new { project name }" to create a new project',
            'Type "pcss version" to show this message',
        ]

    def test_version_is_1_0_0(self):
        assert __version__ == "1.0.0"


class TestPrintBanner:
    @pytest.mark.asyncio
    async def test_prints_logo_and_lines(self, env: EnvironmentInfo, capsys):
        await print_banner(env)
        out = capsys.readouterr().out

        assert "|   _  \\   /      |" in out
        for line in info_lines(env)[1:]:
            assert line in out
        assert out.index("| _|") < out.index("PCSS CLI: v")

    @pytest.mark.asyncio
    async def test_queries_environment_when_not_given(self, fake_pip, capsys):
        await print_banner()

        fake_pip.assert_awaited_once()
        assert "Package manager: 24.0 pip" in capsys.readouterr().out

    def test_logo_rows_keep_trailing_spaces(self):
        rows = LOGO.split("\n")

        assert rows[0] == "" and rows[-1] == ""
        assert rows[1].endswith("__  ")
        assert all(row.endswith("| ") for row in rows[2:-1])

    def test_logo_has_six_art_rows(self):
        rows = [row for row in LOGO.splitlines() if row.strip()]
        assert len(rows) == 6
