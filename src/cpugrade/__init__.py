# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("cpugrade")
except PackageNotFoundError:
    __version__ = "unknown"
