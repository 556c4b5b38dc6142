"""Tests for configuration utilities."""

import tempfile
from pathlib import Path

from hashbrown.common.config_utils import (
    auto_detect_io_workers,
    expand_path_variables,
    get_cpu_count,
)


class TestExpandPathVariables:
    """Tests for expand_path_variables."""

    def test_expands_home_and_temp(self):
        expanded = expand_path_variables("${USER_HOME}/a/${TEMP}")

        assert expanded == f"{Path.home()}/a/{tempfile.gettempdir()}"

    def test_expands_user_logs(self):
        expanded = expand_path_variables("${USER_LOGS}/hashbrown.log")

        assert "${USER_LOGS}" not in expanded
        assert expanded.endswith("hashbrown.log")

    def test_plain_path_unchanged(self):
        assert expand_path_variables("/var/log/app.log") == "/var/log/app.log"

    def test_non_string_returned_as_is(self):
        path = Path("/tmp/x")
        assert expand_path_variables(path) is path


class TestWorkerDetection:
    """Tests for worker count helpers."""

    def test_cpu_count_positive(self):
        assert get_cpu_count() > 0

    def test_respects_minimum(self, monkeypatch):
        monkeypatch.setattr("os.cpu_count", lambda: 1)

        assert auto_detect_io_workers() == 2
        assert auto_detect_io_workers(min_workers=5) == 5

    def test_scales_with_cpu_count(self, monkeypatch):
        monkeypatch.setattr("os.cpu_count", lambda: 8)

        assert auto_detect_io_workers() == 8
        assert auto_detect_io_workers(multiplier=2.0) == 16

    def test_falls_back_when_cpu_count_unknown(self, monkeypatch):
        monkeypatch.setattr("os.cpu_count", lambda: None)

        assert get_cpu_count() == 4
