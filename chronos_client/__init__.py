"""
Client for the Chronos job scheduler HTTP API.
"""
from chronos_client.core import (
    ChronosError,
    ConnectivityError,
    DecodingError,
    InvalidInputError,
    SerializationError,
    ServiceError,
    Settings,
    TransportError,
    default_settings,
)
from chronos_client.schemas import Container, Job, Jobs
from chronos_client.services import (
    ChronosAPI,
    ChronosClient,
    format_schedule,
    format_time_string,
    run_once_now_schedule,
)

__all__ = [
    "ChronosAPI",
    "ChronosClient",
    "ChronosError",
    "ConnectivityError",
    "Container",
    "DecodingError",
    "InvalidInputError",
    "Job",
    "Jobs",
    "SerializationError",
    "ServiceError",
    "Settings",
    "TransportError",
    "default_settings",
    "format_schedule",
    "format_time_string",
    "run_once_now_schedule",
]
