# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Tests for the cpugrade command line interface.

Host detection is replaced with a fixed RawSpec so results do not depend on
the machine running the tests.
"""

import json
import logging
import os
import sys
from types import SimpleNamespace

import allure
import pytest

from cpugrade.cli import main
from cpugrade.utils.cli import create_argument_parser
from cpugrade.utils.cli.commands import get_command_function
from cpugrade.utils.logging import CONSOLE_HANDLER_NAME, cleanup_logging
from cpugrade.utils.system import RawSpec

DETECTED = RawSpec("AMD Ryzen 7 5800X 8-Core Processor", 8, 16, 4850)


@pytest.fixture
def detected_host(monkeypatch):
    monkeypatch.setattr("cpugrade.utils.cli.commands.grade.collect_raw_spec", lambda: DETECTED)
    monkeypatch.setattr("cpugrade.utils.cli.commands.info.collect_raw_spec", lambda: DETECTED)
    monkeypatch.setattr(
        "cpugrade.utils.cli.commands.info.collect_cpu_info",
        lambda: {
            "brand": DETECTED.name,
            "vendor_id": "AuthenticAMD",
            "architecture": "X86_64",
            "count": 8,
            "logical_count": 16,
            "max_frequency_mhz": 4850,
        },
    )
    return DETECTED


class TestGradeCommand:
    """Test the grade command"""

    @allure.title("Grade a CPU given by name only")
    def test_grade_by_name(self, capsys):
        with allure.step("Run grade without host detection"):
            exit_code = main(["grade", "--no-detect", "--name", "Intel(R) Core(TM) i7-10700 CPU @ 2.90GHz"])

        with allure.step("Verify the report"):
            output = capsys.readouterr().out
            assert exit_code == 0
            assert "Performance Grade: HIGH" in output
            assert "Cores: Unknown" in output

    def test_grade_json(self, capsys):
        exit_code = main(["grade", "--no-detect", "--name", "Intel(R) Core(TM) i5-1135G7 @ 2.40GHz", "--json"])
        result = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert result["grade"] == "HIGH"
        assert result["rule"] == "model-era"
        assert result["model"]["platform"] == "mobile"
        assert result["adjusted_year"] == 2020
        assert result["cpu"]["core_count"] == 0

    @allure.title("JSON output stays parseable with debug logging")
    @pytest.mark.parametrize("flag", ["-d", "-v"])
    def test_json_with_console_logging(self, capsys, flag):
        exit_code = main([flag, "grade", "--no-detect", "--name", "Intel Core i7-10700", "--json"])
        captured = capsys.readouterr()
        assert exit_code == 0
        assert json.loads(captured.out)["grade"] == "HIGH"
        if flag == "-d":
            assert "Graded 'Intel Core i7-10700' as HIGH by model-era" in captured.err

    def test_grade_fast_path_json(self, capsys):
        main(["grade", "--no-detect", "-n", "Intel Core i7", "-c", "8", "-t", "16", "-f", "3200", "--json"])
        result = json.loads(capsys.readouterr().out)
        assert result["rule"] == "high-fast-path"
        assert result["model"] is None
        assert result["adjusted_year"] is None

    def test_grade_detected_host(self, capsys, detected_host):
        assert main(["grade", "--json"]) == 0
        result = json.loads(capsys.readouterr().out)
        assert result["cpu"]["name"] == detected_host.name
        assert result["effective_frequency_mhz"] == 4550
        assert result["grade"] == "HIGH"

    def test_command_line_overrides_detected_values(self, capsys, detected_host):
        # 2300 MHz corrects to 2000 MHz on AMD parts
        assert main(["grade", "--frequency", "2300", "--json"]) == 0
        result = json.loads(capsys.readouterr().out)
        assert result["cpu"]["core_count"] == 8
        assert result["cpu"]["max_frequency_mhz"] == 2300
        assert result["grade"] == "LOW"

    def test_verbose_report(self, capsys):
        main(["grade", "--no-detect", "--name", "Intel Core i5-735G7", "--verbose"])
        output = capsys.readouterr().out
        assert "Performance Grade: MID" in output
        assert "Decided By: model-era" in output
        assert "Era-Adjusted Year: 2015" in output

    def test_custom_config(self, capsys, tmp_path):
        config_file = tmp_path / "strict.yml"
        config_file.write_text("thresholds:\n  high_era_year: 2022\n")
        main(["grade", "--no-detect", "--name", "Intel Core i7-10700", "--config", str(config_file), "--json"])
        assert json.loads(capsys.readouterr().out)["grade"] == "MID"

    def test_invalid_config_fails(self, capsys, tmp_path):
        config_file = tmp_path / "broken.yml"
        config_file.write_text("thresholds:\n  turbo_mhz: 5000\n")
        assert main(["grade", "--no-detect", "--name", "Intel Core i7", "--config", str(config_file)]) == 1
        assert "Performance Grade" not in capsys.readouterr().out

    def test_writes_command_log(self, isolated_environment):
        main(["-d", "grade", "--no-detect", "--name", "Intel Core i7-10700"])
        log_file = os.path.join(str(isolated_environment), "logs", "cpugrade_grade.log")
        assert os.path.isfile(log_file)


class TestParseCommand:
    """Test the parse command"""

    def test_parse_text(self, capsys):
        assert main(["parse", "AMD Ryzen 7 4800H with Radeon Graphics", "Unknown Silicon XYZ"]) == 0
        output = capsys.readouterr().out
        assert "Family: AMD Ryzen" in output
        assert "Platform: Mobile" in output
        assert "Introduction Year: 2020" in output
        assert "Model: Not recognized" in output

    def test_parse_json(self, capsys):
        main(["parse", "Intel(R) Xeon(R) Gold 6148 CPU @ 2.40GHz", "Apple M1", "--json"])
        results = json.loads(capsys.readouterr().out)
        assert [result["recognized"] for result in results] == [True, False]
        assert results[0]["family"] == "intel_xeon"
        assert results[0]["introduction_year"] == 2017

    def test_parse_json_with_debug_logging(self, capsys):
        main(["parse", "AMD EPYC 7763 64-Core Processor", "--json", "--debug"])
        assert json.loads(capsys.readouterr().out)[0]["family"] == "amd_epyc"

    def test_parse_uses_configured_fallback_years(self, capsys, tmp_path):
        config_file = tmp_path / "years.yml"
        config_file.write_text("fallback_years:\n  amd_ryzen: 2025\n")
        main(["parse", "AMD Ryzen 9 9950X 16-Core Processor", "--config", str(config_file), "--json"])
        assert json.loads(capsys.readouterr().out)[0]["introduction_year"] == 2025


class TestInfoCommand:
    """Test the info command"""

    def test_info_text(self, capsys, detected_host):
        assert main(["info"]) == 0
        output = capsys.readouterr().out
        assert detected_host.name in output
        assert "Cores: 8" in output
        assert "Threads: 16" in output
        assert "Max Frequency: 4.85 GHz" in output

    def test_info_json(self, capsys, detected_host):
        assert main(["info", "--json"]) == 0
        assert json.loads(capsys.readouterr().out)["vendor_id"] == "AuthenticAMD"

    def test_info_json_with_debug_logging(self, capsys, detected_host):
        assert main(["-d", "info", "--json"]) == 0
        captured = capsys.readouterr()
        assert json.loads(captured.out)["count"] == 8
        assert "Collecting CPU information" in captured.err


class TestParser:
    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage: cpugrade" in capsys.readouterr().out

    def test_parse_requires_a_name(self):
        with pytest.raises(SystemExit):
            create_argument_parser().parse_args(["parse"])

    def test_grade_rejects_non_integer_cores(self):
        with pytest.raises(SystemExit):
            create_argument_parser().parse_args(["grade", "--cores", "eight"])

    def test_unknown_command_function(self):
        with pytest.raises(ValueError):
            get_command_function("run_benchmark")


class TestLoggingLifecycle:
    """Test logging setup across repeated in-process runs"""

    def test_cleanup_hook_registered_once(self, monkeypatch):
        registered = []
        monkeypatch.setattr("cpugrade.cli._cleanup_registered", False)
        monkeypatch.setattr("cpugrade.cli.atexit", SimpleNamespace(register=registered.append))

        for _ in range(3):
            main(["parse", "Intel Core i7-10700"])

        assert registered == [cleanup_logging]

    def test_single_console_handler(self):
        for args in (["parse", "Intel Core i7-10700"], ["parse", "Intel Core i7-10700", "--json"]):
            main(args)

        console_handlers = [h for h in logging.getLogger().handlers if h.get_name() == CONSOLE_HANDLER_NAME]
        assert len(console_handlers) == 1
        assert console_handlers[0].stream is sys.stderr
