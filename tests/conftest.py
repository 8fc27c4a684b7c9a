# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures for the cpugrade test suite."""

import pytest

from cpugrade.utils.config import ENV_CONFIG_PATH, ENV_DATA_DIR


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep log files in a temporary data directory and ignore user configuration."""
    data_dir = tmp_path / "cpugrade_data"
    monkeypatch.setenv(ENV_DATA_DIR, str(data_dir))
    monkeypatch.delenv(ENV_CONFIG_PATH, raising=False)
    return data_dir
