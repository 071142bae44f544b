"""hub-cli: GitHub commands for git, and their help pages."""

__version__ = "0.1.0"
