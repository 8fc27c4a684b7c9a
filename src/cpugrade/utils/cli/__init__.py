# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
CLI utilities package.

This package contains modular CLI command implementations and the argument
parser to keep the main CLI file lightweight.
"""

from .parsers import create_argument_parser

# Commands will be imported dynamically as needed

__all__ = ["create_argument_parser"]
