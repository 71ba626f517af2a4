"""
Tests for running Rome through a resolved step. The subprocess is patched,
Rome itself is never launched.
"""

from __future__ import annotations

import subprocess
from unittest.mock import patch

import pytest

from rome_step.errors import RomeExecutableNotFoundError, RomeFormatError
from rome_step.formatter import RomeFormatter, downloaded_executable_name
from rome_step.step import RomeStep


def _completed(returncode=0, stdout="", stderr=""):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


class TestRomeFormatter:
    def test_format_uses_stdin(self):
        formatter = RomeFormatter(RomeStep.with_exe_path("/opt/rome").create())
        with patch("rome_step.formatter.subprocess.run", return_value=_completed(stdout="let a = 1;\n")) as run:
            assert formatter.format("let   a=1", "app.ts") == "let a = 1;\n"

        args, kwargs = run.call_args
        assert args[0] == ["/opt/rome", "format", "--stdin-file-path", "app.ts"]
        assert kwargs["input"] == "let   a=1"

    def test_non_zero_exit_raises(self):
        formatter = RomeFormatter(RomeStep.with_exe_path("rome").create())
        with patch("rome_step.formatter.subprocess.run", return_value=_completed(1, stderr="parse error")):
            with pytest.raises(RomeFormatError) as excinfo:
                formatter.format("let", "app.js")
        assert excinfo.value.exit_code == 1
        assert excinfo.value.stderr == "parse error"

    def test_missing_command(self):
        formatter = RomeFormatter(RomeStep.with_exe_path("rome").create())
        with patch("rome_step.formatter.subprocess.run", side_effect=FileNotFoundError("rome")):
            with pytest.raises(RomeExecutableNotFoundError):
                formatter.format("", "app.js")
            assert not formatter.is_available()

    def test_executable_without_permission(self):
        formatter = RomeFormatter(RomeStep.with_exe_path("./rome").create())
        error = PermissionError(13, "Permission denied")
        with patch("rome_step.formatter.subprocess.run", side_effect=error):
            with pytest.raises(RomeFormatError, match="could not be launched") as excinfo:
                formatter.format("", "app.js")
        assert excinfo.value.__cause__ is error

    def test_timeout(self):
        formatter = RomeFormatter(RomeStep.with_exe_path("rome").create(), timeout=1)
        with patch("rome_step.formatter.subprocess.run", side_effect=subprocess.TimeoutExpired("rome", 1)):
            with pytest.raises(RomeFormatError, match="timed out"):
                formatter.format("", "app.js")

    def test_is_available_cached(self):
        formatter = RomeFormatter(RomeStep.with_exe_path("rome").create())
        with patch("rome_step.formatter.subprocess.run", return_value=_completed(stdout="Rome CLI 12.0.0")) as run:
            assert formatter.is_available()
            assert formatter.is_available()
        assert run.call_count == 1

    def test_download_mode_requires_cached_executable(self, tmp_path):
        formatter = RomeFormatter(RomeStep.with_exe_download(None, str(tmp_path)).create())
        with pytest.raises(RomeExecutableNotFoundError):
            formatter.executable()
        assert not formatter.is_available()

    def test_download_mode_finds_cached_executable(self, tmp_path):
        exe = tmp_path / downloaded_executable_name("11.0.0")
        exe.write_text("")
        formatter = RomeFormatter(RomeStep.with_exe_download("11.0.0", str(tmp_path)).create())
        assert formatter.executable() == str(exe)
