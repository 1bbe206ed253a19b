"""Command-line scaffolder for PCSS starter projects."""

__version__ = "1.0.0"
