# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""Tests for host CPU information collection with cpuinfo and psutil mocked."""

from types import SimpleNamespace

import pytest

from cpugrade.utils.system import RawSpec, collect_cpu_info, collect_raw_spec
from cpugrade.utils.system import hardware

CPU_INFO = {
    "brand_raw": "Intel(R) Core(TM) i7-10700 CPU @ 2.90GHz",
    "vendor_id_raw": "GenuineIntel",
    "arch": "X86_64",
    "hz_advertised": (2900000000, 0),
}


@pytest.fixture
def mock_host(monkeypatch):
    """Replace cpuinfo and psutil queries with a fixed 8 core / 16 thread host."""

    def _mock(cpu_info=CPU_INFO, cpu_freq=SimpleNamespace(current=2900.0, min=800.0, max=4800.0), counts=(8, 16)):
        monkeypatch.setattr(hardware.cpuinfo, "get_cpu_info", lambda: dict(cpu_info))
        monkeypatch.setattr(hardware.psutil, "cpu_freq", lambda: cpu_freq)
        monkeypatch.setattr(
            hardware.psutil, "cpu_count", lambda logical=True: counts[1] if logical else counts[0]
        )

    return _mock


class TestCollectCpuInfo:
    def test_collects_all_values(self, mock_host):
        mock_host()
        info = collect_cpu_info()
        assert info["brand"] == CPU_INFO["brand_raw"]
        assert info["vendor_id"] == "GenuineIntel"
        assert info["architecture"] == "X86_64"
        assert info["count"] == 8
        assert info["logical_count"] == 16
        assert info["max_frequency_mhz"] == 4800

    def test_frequency_falls_back_to_advertised(self, mock_host):
        mock_host(cpu_freq=None)
        assert collect_cpu_info()["max_frequency_mhz"] == 2900

    def test_zero_scaling_maximum_falls_back_to_advertised(self, mock_host):
        mock_host(cpu_freq=SimpleNamespace(current=0.0, min=0.0, max=0.0))
        assert collect_cpu_info()["max_frequency_mhz"] == 2900

    def test_frequency_error_falls_back_to_advertised(self, mock_host, monkeypatch):
        mock_host()

        def broken_cpu_freq():
            raise OSError("cpufreq not available")

        monkeypatch.setattr(hardware.psutil, "cpu_freq", broken_cpu_freq)
        assert collect_cpu_info()["max_frequency_mhz"] == 2900

    def test_unknown_frequency(self, mock_host):
        cpu_info = {key: value for key, value in CPU_INFO.items() if key != "hz_advertised"}
        mock_host(cpu_info=cpu_info, cpu_freq=None)
        assert collect_cpu_info()["max_frequency_mhz"] == 0

    def test_cpuinfo_failure_is_logged(self, mock_host, monkeypatch, caplog):
        mock_host(cpu_freq=None)

        def broken_get_cpu_info():
            raise RuntimeError("cpuid unavailable")

        monkeypatch.setattr(hardware.cpuinfo, "get_cpu_info", broken_get_cpu_info)
        info = collect_cpu_info()
        assert info["brand"] == ""
        assert info["max_frequency_mhz"] == 0
        assert info["count"] == 8
        assert "Failed to collect CPU info" in caplog.text

    def test_unknown_core_counts(self, mock_host):
        mock_host(counts=(None, None))
        info = collect_cpu_info()
        assert info["count"] == 0
        assert info["logical_count"] == 0


class TestCollectRawSpec:
    def test_raw_spec(self, mock_host):
        mock_host()
        assert collect_raw_spec() == RawSpec("Intel(R) Core(TM) i7-10700 CPU @ 2.90GHz", 8, 16, 4800)

    def test_raw_spec_with_nothing_known(self, mock_host):
        mock_host(cpu_info={}, cpu_freq=None, counts=(None, None))
        assert collect_raw_spec() == RawSpec()
