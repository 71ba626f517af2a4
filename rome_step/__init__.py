"""Rome formatter step

Resolves where the Rome executable lives (an explicit path, or a version to
download into a cache directory) and creates the formatter step for it.
"""

__version__ = "0.1.0"

from .config import FileLocator, ProjectContext, RomeConfig
from .errors import RomeExecutableNotFoundError, RomeFormatError, RomeStepError
from .factory import (
    DownloadVersion,
    ExplicitPath,
    RomeStepFactory,
    build,
    resolve_download_dir,
    resolve_exe_path,
)
from .formatter import RomeFormatter
from .step import DEFAULT_VERSION, FormatterStep, RomeStep

__all__ = [
    "RomeStepFactory",
    "build",
    "resolve_exe_path",
    "resolve_download_dir",
    "ExplicitPath",
    "DownloadVersion",
    "RomeConfig",
    "FileLocator",
    "ProjectContext",
    "RomeStep",
    "FormatterStep",
    "DEFAULT_VERSION",
    "RomeFormatter",
    "RomeStepError",
    "RomeExecutableNotFoundError",
    "RomeFormatError",
]
