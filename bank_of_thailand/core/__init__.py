"""
Core module - Engineering foundation

Contains configuration, logging, errors, the HTTP dispatcher and date helpers.
"""

from bank_of_thailand.core.config import Settings, load_settings, load_yaml_config
from bank_of_thailand.core.errors import BOTError, ErrorKind
from bank_of_thailand.core.http import (
    Failure,
    HttpClient,
    Outcome,
    RequestSpec,
    Success,
    unwrap,
)
from bank_of_thailand.core.logging import setup_logging, get_logger

__all__ = [
    "Settings",
    "load_settings",
    "load_yaml_config",
    "BOTError",
    "ErrorKind",
    "Failure",
    "HttpClient",
    "Outcome",
    "RequestSpec",
    "Success",
    "unwrap",
    "setup_logging",
    "get_logger",
]
