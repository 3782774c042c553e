"""
Core Module - Configuration, Errors and Logging
"""
from .config import DEFAULT_CHRONOS_URL, Settings, default_settings
from .exceptions import (
    ChronosError,
    ConnectivityError,
    DecodingError,
    InvalidInputError,
    SerializationError,
    ServiceError,
    TransportError,
)
from .logging_config import setup_logging

__all__ = [
    "DEFAULT_CHRONOS_URL",
    "Settings",
    "default_settings",
    "ChronosError",
    "ConnectivityError",
    "DecodingError",
    "InvalidInputError",
    "SerializationError",
    "ServiceError",
    "TransportError",
    "setup_logging",
]
