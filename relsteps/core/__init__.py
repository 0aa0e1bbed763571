"""Core types shared by steps, adapters and the CLI."""

from .config import ConfigError, ReleaseFile, load_release_file
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # config
    "ConfigError",
    "ReleaseFile",
    "load_release_file",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
