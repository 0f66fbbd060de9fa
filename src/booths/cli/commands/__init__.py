"""CLI command implementations for the booths application.

This package contains subcommands for the booths CLI, including:
- validate: Validate a booth configuration file
- catalog: List catalog tables
"""

from booths.cli.commands.catalog import catalog_command
from booths.cli.commands.validate import (
    display_load_error,
    display_warnings,
    validate_command,
)

__all__ = ["catalog_command", "display_load_error", "display_warnings", "validate_command"]
