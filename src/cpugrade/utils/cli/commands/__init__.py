# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
CLI command implementations package.

Contains individual command implementations for the CLI,
organized by functionality to maintain clean separation of concerns.
"""

# Commands are imported dynamically; use get_command_function() to get them


def get_command_function(command_name: str):
    """
    Dynamically import and return a command function.

    Args:
        command_name: Name of the command to import

    Returns:
        The command function
    """
    if command_name == "run_grade":
        from .grade import run_grade

        return run_grade
    elif command_name == "run_parse":
        from .parse import run_parse

        return run_parse
    elif command_name == "run_cpu_info":
        from .info import run_cpu_info

        return run_cpu_info
    else:
        raise ValueError(f"Unknown command: {command_name}")


__all__ = ["get_command_function"]
