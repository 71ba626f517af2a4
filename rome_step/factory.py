"""
Factory for the Rome formatter step.

Formats JavaScript and TypeScript code with Rome
(https://github.com/rome/tools) by delegating to the Rome executable.

The factory picks one of two modes:

1. Explicit path: ``path_to_exe`` is set. The executable is used as given and
   ``version`` is ignored.
2. Download: ``path_to_exe`` is not set. The executable for ``version`` (or the
   default version) is expected under the download directory.

Relative paths are resolved against the project's base directory. Nothing is
checked on disk here; missing executables are reported when the step runs.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass

from .config import ProjectContext, RomeConfig
from .step import FormatterStep, RomeStep

logger = logging.getLogger(__name__)

# Sub folder of the shared data directory holding downloaded executables
DOWNLOAD_SUBDIR = "rome"

_SEPARATORS = ("/", "\\")


@dataclass(frozen=True)
class ExplicitPath:
    """Use the executable at ``path``."""

    path: str


@dataclass(frozen=True)
class DownloadVersion:
    """Use the executable for ``version`` cached in ``download_dir``."""

    version: str | None
    download_dir: str


StepMode = ExplicitPath | DownloadVersion


def _name_components(path_to_exe: str) -> list[str]:
    return [part for part in re.split(r"[/\\]", path_to_exe) if part]


def is_bare_command(path_to_exe: str) -> bool:
    """True when the path is a single relative name, e.g. ``rome`` or ``rome/``."""
    return len(_name_components(path_to_exe)) == 1 and not path_to_exe.startswith(_SEPARATORS)


def resolve_exe_path(path_to_exe: str, context: ProjectContext) -> str:
    """
    Resolve the path to the Rome executable.

    A bare file name is not resolved: it is the name of a command that must be
    on the user's ``PATH``. Use ``./rome`` for an executable in the project's
    base directory. Any other path is resolved against the base directory;
    absolute paths stay as they are.

    Args:
        path_to_exe: Configured executable path or command name
        context: Directories of the current project

    Returns:
        The command name without trailing separators, or an absolute
        normalized path
    """
    if is_bare_command(path_to_exe):
        return _name_components(path_to_exe)[0]
    return os.path.abspath(os.path.join(context.base_dir, path_to_exe))


def resolve_download_dir(download_dir: str | None, context: ProjectContext) -> str:
    """
    Resolve the directory storing the downloaded Rome executable.

    Args:
        download_dir: Configured directory; None or blank selects the default
        context: Directories of the current project

    Returns:
        The configured directory resolved against the base directory, or the
        ``rome`` sub folder of the shared data directory
    """
    if download_dir is not None and download_dir.strip():
        return os.path.abspath(os.path.join(context.base_dir, download_dir))
    return os.path.join(context.data_dir, DOWNLOAD_SUBDIR)


class RomeStepFactory:
    """Creates the Rome :class:`FormatterStep` from a :class:`RomeConfig`."""

    def __init__(self, config: RomeConfig | None = None):
        self.config = config or RomeConfig()

    def resolve_mode(self, context: ProjectContext) -> StepMode:
        config = self.config
        if config.path_to_exe is not None:
            if config.version is not None:
                logger.debug("Ignoring Rome version %s, pathToExe is set", config.version)
            return ExplicitPath(resolve_exe_path(config.path_to_exe, context))
        return DownloadVersion(config.version, resolve_download_dir(config.download_dir, context))

    def new_formatter_step(self, context: ProjectContext) -> FormatterStep:
        mode = self.resolve_mode(context)
        if isinstance(mode, ExplicitPath):
            logger.debug("Rome step uses executable %s", mode.path)
            rome = RomeStep.with_exe_path(mode.path)
        else:
            logger.debug("Rome step downloads version %s into %s", mode.version or "<default>", mode.download_dir)
            rome = RomeStep.with_exe_download(mode.version, mode.download_dir)
        return rome.create()


def build(config: RomeConfig, context: ProjectContext) -> FormatterStep:
    """Convenience function creating the step for ``config`` in ``context``."""
    return RomeStepFactory(config).new_formatter_step(context)
