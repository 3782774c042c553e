from .chronos_client import ChronosClient
from .interface import ChronosAPI
from .schedule import format_schedule, format_time_string, run_once_now_schedule

__all__ = [
    "ChronosAPI",
    "ChronosClient",
    "format_schedule",
    "format_time_string",
    "run_once_now_schedule",
]
