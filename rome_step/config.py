"""
Configuration for the Rome formatter step.

Holds the three optional options of the step and the project context
they are resolved against.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

# Shared cache root used when the host does not provide one
DEFAULT_DATA_DIR = Path("~/.cache/spotless-data").expanduser()

# Option names as they appear in build-tool configuration
_OPTION_ALIASES = {
    "pathToExe": "path_to_exe",
    "path_to_exe": "path_to_exe",
    "downloadDir": "download_dir",
    "download_dir": "download_dir",
    "version": "version",
}


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value


class ProjectContext(Protocol):
    """Directories of the project currently being processed."""

    @property
    def base_dir(self) -> Path: ...

    @property
    def data_dir(self) -> Path: ...


@dataclass(frozen=True)
class FileLocator:
    """Project context backed by two fixed directories.

    Attributes:
        base_dir: Absolute root directory of the current project
        data_dir: Absolute directory shared across projects for cached tools
    """

    base_dir: Path
    data_dir: Path

    @staticmethod
    def for_project(base_dir: str | Path, data_dir: str | Path | None = None) -> FileLocator:
        """Create a locator with absolute directories."""
        if data_dir is None:
            data_dir = DEFAULT_DATA_DIR
        return FileLocator(
            base_dir=Path(base_dir).absolute(),
            data_dir=Path(data_dir).expanduser().absolute(),
        )


@dataclass(frozen=True)
class RomeConfig:
    """Options of the Rome formatter step.

    Blank option values mean "not set". The rule is applied on construction,
    so ``download_dir`` and ``version`` are either ``None`` or non-blank and
    ``path_to_exe`` is never empty.
    """

    # Explicit executable path or bare command name; disables download
    path_to_exe: str | None = None

    # Cache directory for the downloaded executable (download mode only)
    download_dir: str | None = None

    # Version to download (download mode only); None means default version
    version: str | None = None

    def __post_init__(self):
        # A whitespace path is left for the OS to reject at launch time
        if self.path_to_exe == "":
            object.__setattr__(self, "path_to_exe", None)
        object.__setattr__(self, "download_dir", _blank_to_none(self.download_dir))
        object.__setattr__(self, "version", _blank_to_none(self.version))

    @staticmethod
    def from_dict(d: dict) -> RomeConfig:
        """Create a config from a dictionary of build-tool options."""
        values: dict[str, str | None] = {}
        for k, v in d.items():
            name = _OPTION_ALIASES.get(k)
            if name is not None:
                values[name] = None if v is None else str(v)
        return RomeConfig(**values)

    def merged(self, **overrides: str | None) -> RomeConfig:
        """Return a copy where every non-None override replaces the current value."""
        d = self.to_dict()
        for k, v in overrides.items():
            if v is not None:
                d[k] = v
        return RomeConfig.from_dict(d)

    def to_dict(self) -> dict:
        """Convert config to a dictionary using the build-tool option names."""
        return {
            "pathToExe": self.path_to_exe,
            "downloadDir": self.download_dir,
            "version": self.version,
        }
