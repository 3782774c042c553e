from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from chronos_client.schemas.job import Job, Jobs


@runtime_checkable
class ChronosAPI(Protocol):
    """Operations offered by the Chronos HTTP API."""

    def jobs(self) -> Jobs: ...

    def search_jobs(self, name: str) -> Jobs: ...

    def delete_job(self, name: str) -> None: ...

    def delete_job_tasks(self, name: str) -> None: ...

    def start_job(self, name: str, args: Mapping[str, str] | None = None) -> None: ...

    def add_scheduled_job(self, job: Job) -> None: ...

    def add_dependent_job(self, job: Job) -> None: ...

    def run_once_now_job(self, job: Job) -> None: ...

    def unschedule_job(self, job: Job) -> None: ...
