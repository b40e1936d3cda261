"""Centralized exit codes for all CLI commands.

Exit code ranges:
    0: Success
    1-9: General errors
    10-19: Validation errors (config)
    20-29: Input errors (unreadable or undecodable input)
    50-59: Render errors
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for stringkit CLI commands."""

    # Success (0)
    SUCCESS = 0

    # General errors (1-9)
    GENERAL_ERROR = 1

    # Validation errors (10-19)
    CONFIG_ERROR = 11

    # Input errors (20-29)
    INPUT_ERROR = 20

    # Render errors (50-59)
    FORMAT_ERROR = 51
    ALLOCATION_ERROR = 52
