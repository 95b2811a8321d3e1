"""CLI command implementations for the ledwall application.

This package contains subcommands and helpers for the ledwall CLI, including:
- validate: Validate a configuration file
- output_handlers: Multi-format export of a computed layout
"""

from ledwall.cli.commands.output_handlers import (
    handle_multi_format_export,
    parse_output_formats,
)
from ledwall.cli.commands.validate import display_load_error, validate_command

__all__ = [
    "display_load_error",
    "handle_multi_format_export",
    "parse_output_formats",
    "validate_command",
]
