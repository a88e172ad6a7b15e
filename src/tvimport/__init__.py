"""tvimport - Import decisions for downloaded TV episode files."""

from tvimport.exceptions import (
    AugmentingFailedError,
    ConfigurationError,
    DiskError,
    ExternalToolError,
    FileMissingError,
    ImportPipelineError,
    MediaInfoError,
    TvImportError,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AugmentingFailedError",
    "ConfigurationError",
    "DiskError",
    "ExternalToolError",
    "FileMissingError",
    "ImportPipelineError",
    "MediaInfoError",
    "TvImportError",
]
