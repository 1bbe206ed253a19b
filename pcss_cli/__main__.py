"""Run the PCSS CLI with ``python -m pcss_cli``."""

from pcss_cli.cli import main

if __name__ == "__main__":
    main()
