"""CLI command implementations for the decks application.

This package contains subcommands for the decks CLI:
- validate: Validate a configuration file
"""

from decks.cli.commands.validate import validate_command

__all__ = ["validate_command"]
