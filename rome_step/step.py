"""
Rome formatter step descriptors.
"""

from __future__ import annotations

from dataclasses import dataclass

# Name under which the step is registered with the host
STEP_NAME = "rome"

# Version downloaded when no version is configured
DEFAULT_VERSION = "12.0.0"


@dataclass(frozen=True)
class FormatterStep:
    """Resolved Rome step, either bound to an executable or to a download.

    Exactly one of ``exe_path`` and ``download_dir`` is set.
    """

    name: str
    exe_path: str | None = None
    version: str | None = None
    download_dir: str | None = None

    @property
    def uses_download(self) -> bool:
        return self.exe_path is None

    @property
    def effective_version(self) -> str:
        """Version to fetch, falling back to the built-in default."""
        return self.version or DEFAULT_VERSION

    def to_dict(self) -> dict:
        if self.uses_download:
            return {
                "name": self.name,
                "mode": "download",
                "version": self.effective_version,
                "downloadDir": self.download_dir,
            }
        return {
            "name": self.name,
            "mode": "exe",
            "pathToExe": self.exe_path,
        }


class RomeStep:
    """Builder for a Rome :class:`FormatterStep`."""

    def __init__(self, exe_path: str | None = None, version: str | None = None, download_dir: str | None = None):
        self._exe_path = exe_path
        self._version = version
        self._download_dir = download_dir

    @staticmethod
    def with_exe_path(exe_path: str) -> RomeStep:
        """Use a fixed executable; no version is downloaded."""
        return RomeStep(exe_path=exe_path)

    @staticmethod
    def with_exe_download(version: str | None, download_dir: str) -> RomeStep:
        """Use the executable for ``version`` cached under ``download_dir``."""
        return RomeStep(version=version, download_dir=download_dir)

    def create(self) -> FormatterStep:
        return FormatterStep(
            name=STEP_NAME,
            exe_path=self._exe_path,
            version=self._version,
            download_dir=self._download_dir,
        )
