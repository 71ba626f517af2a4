"""
Runs a resolved Rome step against source code.
"""

from __future__ import annotations

import logging
import os
import platform
import subprocess

from .errors import RomeExecutableNotFoundError, RomeFormatError
from .step import FormatterStep

logger = logging.getLogger(__name__)

_OS_NAMES = {"darwin": "macos", "linux": "linux", "windows": "win32"}
_ARCH_NAMES = {"x86_64": "x64", "amd64": "x64", "arm64": "arm64", "aarch64": "arm64"}


def platform_tag() -> str:
    """Platform part of a downloaded executable name, e.g. ``linux-x64``."""
    system = platform.system().lower()
    machine = platform.machine().lower()
    return f"{_OS_NAMES.get(system, system)}-{_ARCH_NAMES.get(machine, machine)}"


def downloaded_executable_name(version: str) -> str:
    name = f"rome-{version}-{platform_tag()}"
    if platform.system().lower() == "windows":
        name += ".exe"
    return name


class RomeFormatter:
    """Formatter delegating to the Rome executable of a step."""

    def __init__(self, step: FormatterStep, timeout: float = 30):
        self.step = step
        self.timeout = timeout
        self._available = None

    def executable(self) -> str:
        """
        Command used to launch Rome.

        In download mode the executable must already be in the download
        directory; it is never fetched here.

        Raises:
            RomeExecutableNotFoundError: The cached executable does not exist
        """
        if not self.step.uses_download:
            return self.step.exe_path
        exe = os.path.join(self.step.download_dir, downloaded_executable_name(self.step.effective_version))
        if not os.path.isfile(exe):
            raise RomeExecutableNotFoundError(exe)
        return exe

    def is_available(self) -> bool:
        """Check if the Rome executable can be run."""
        if self._available is None:
            try:
                result = subprocess.run(
                    [self.executable(), "--version"],
                    capture_output=True,
                    text=True,
                    timeout=5,
                )
                self._available = result.returncode == 0
            except (RomeExecutableNotFoundError, subprocess.SubprocessError, OSError):
                self._available = False
        return self._available

    def format(self, code: str, file_name: str) -> str:
        """
        Format code with Rome.

        Args:
            code: Source code to format
            file_name: Name used by Rome to pick the language (e.g. ``app.ts``)

        Returns:
            Formatted code

        Raises:
            RomeExecutableNotFoundError: The Rome executable does not exist
            RomeFormatError: Rome failed or could not be started
        """
        exe = self.executable()
        cmd = [exe, "format", "--stdin-file-path", file_name]
        logger.debug("Running %s", " ".join(cmd))

        try:
            result = subprocess.run(
                cmd,
                input=code,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise RomeExecutableNotFoundError(exe) from e
        except subprocess.TimeoutExpired as e:
            raise RomeFormatError(f"Rome timed out after {self.timeout}s formatting {file_name}") from e
        except OSError as e:
            raise RomeFormatError(f"Rome could not be launched from {exe}: {e}") from e

        if result.returncode != 0:
            raise RomeFormatError(
                f"Rome failed formatting {file_name} (exit code {result.returncode})",
                exit_code=result.returncode,
                stderr=result.stderr,
            )
        return result.stdout
