# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Logging configuration utilities.

This module provides centralized logging configuration, including console
and file handler management, log level configuration and command-specific
logging setup.
"""

import logging
import os
import sys
from typing import Optional, TextIO

# Default logging format
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"
# Simple message-only format for regular console output
MESSAGE_ONLY_FORMAT = "%(message)s"
# Name of the console handler installed on the root logger
CONSOLE_HANDLER_NAME = "cpugrade-console"


def configure_logging(verbose: bool = False, debug: bool = False, stream: Optional[TextIO] = None) -> None:
    """
    Configure logging level based on verbose and debug flags.

    Args:
        verbose: Whether to display INFO level logs
        debug: Whether to display DEBUG level logs
        stream: Console stream, stdout when omitted. Commands that print
            machine-readable output on stdout pass sys.stderr.

    Note:
        By default only warnings and errors reach the console, so command
        output stays clean.
    """
    # Remove existing file handlers to avoid duplicates
    remove_log_handlers()

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if stream is None:
        stream = sys.stdout

    # Replace the console handler so it always targets the current stream
    for handler in list(root_logger.handlers):
        if handler.get_name() == CONSOLE_HANDLER_NAME:
            root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream)
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    root_logger.addHandler(console_handler)

    console_handler.setFormatter(logging.Formatter(MESSAGE_ONLY_FORMAT))
    if debug:
        console_handler.setLevel(logging.DEBUG)
    elif verbose:
        console_handler.setLevel(logging.INFO)
    else:
        console_handler.setLevel(logging.WARNING)


def remove_log_handlers() -> None:
    """
    Remove all file handlers from the root logger to avoid duplicates when reconfiguring.
    """
    root_logger = logging.getLogger()
    handlers_to_remove = [handler for handler in root_logger.handlers if isinstance(handler, logging.FileHandler)]

    for handler in handlers_to_remove:
        root_logger.removeHandler(handler)
        handler.close()


def get_log_file_path(command: str, data_dir: Optional[str] = None) -> str:
    """
    Get the path to a command's log file.

    Args:
        command: Command name
        data_dir: Optional data directory path

    Returns:
        Path to the log file
    """
    from cpugrade.utils.config import get_project_name, setup_data_dir

    if data_dir is None:
        data_dir = setup_data_dir()

    return os.path.join(data_dir, "logs", f"{get_project_name()}_{command}.log")


def add_file_log_handler(command: str, data_dir: Optional[str] = None) -> None:
    """
    Add a file handler for logging to a command-specific log file.

    Args:
        command: The command name for the log file
        data_dir: Optional data directory path
    """
    log_file = get_log_file_path(command, data_dir)
    os.makedirs(os.path.dirname(log_file), exist_ok=True)

    file_handler = logging.FileHandler(log_file, mode="w")  # Overwrite on each run
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))

    logging.getLogger().addHandler(file_handler)


def setup_command_logging(
    command: str,
    verbose: bool = False,
    debug: bool = False,
    data_dir: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Set up logging for a specific command with both console and file output.

    Args:
        command: Command name
        verbose: Whether to enable verbose console output
        debug: Whether to enable debug console output
        data_dir: Optional data directory path
        stream: Console stream, stdout when omitted
    """
    configure_logging(verbose=verbose, debug=debug, stream=stream)
    add_file_log_handler(command, data_dir)


def cleanup_logging() -> None:
    """
    Clean up logging handlers on application exit.
    """
    remove_log_handlers()
