import logging
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from chronos_client.core.config import Settings, default_settings
from chronos_client.core.exceptions import (
    ChronosError,
    ConnectivityError,
    DecodingError,
    InvalidInputError,
    ServiceError,
    TransportError,
)
from chronos_client.core.logging_config import setup_logging
from chronos_client.schemas.job import Job, Jobs
from chronos_client.services.request_builder import build_request, join_path
from chronos_client.services.schedule import (
    RUN_ONCE_EPSILON,
    UNSCHEDULE_SCHEDULE,
    run_once_now_schedule,
)

logger = logging.getLogger(__name__)

HTTP_GET = "GET"
HTTP_PUT = "PUT"
HTTP_DELETE = "DELETE"
HTTP_POST = "POST"

API_JOB = "scheduler/job"
API_JOBS = "scheduler/jobs"
API_JOBS_SEARCH = "scheduler/jobs/search"
API_KILL_JOB_TASK = "scheduler/task/kill"
API_ADD_SCHEDULED_JOB = "scheduler/iso8601"
API_ADD_DEPENDENT_JOB = "scheduler/dependency"

_JOBS_ADAPTER = TypeAdapter(Jobs)


class ChronosClient:
    def __init__(self, settings: Settings | None = None, http_client: httpx.Client | None = None):
        self.settings = settings or default_settings()
        if self.settings.debug:
            setup_logging(logging.DEBUG)
        self._http = http_client or httpx.Client(
            timeout=self.settings.request_timeout,
            follow_redirects=False,
        )

    @classmethod
    def connect(
        cls,
        settings: Settings | None = None,
        http_client: httpx.Client | None = None,
    ) -> "ChronosClient":
        """Create a client and check that the cluster answers a job listing."""
        client = cls(settings, http_client)
        try:
            client.jobs()
        except ChronosError as e:
            client.close()
            raise ConnectivityError(str(e)) from e
        logger.info(f"Connected to chronos at {client.settings.url}")
        return client

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "ChronosClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def execute(
        self,
        method: str,
        path: str,
        params: Mapping[str, str] | None = None,
        body: Any = None,
        result_type: TypeAdapter | None = None,
        default: Any = None,
    ) -> tuple[int, Any]:
        """
        Perform one request against the Chronos API.

        Args:
            method: HTTP verb
            path: Resource path relative to the API prefix
            params: Query parameters, sent in the given order
            body: Value serialized to JSON as the request body
            result_type: Adapter the JSON response is validated against
            default: Result returned when the response has no body

        Returns:
            Tuple of (status_code, result)

        Raises:
            SerializationError: The body could not be serialized
            TransportError: No response was received
            DecodingError: The response body was not the expected JSON
            ServiceError: The status code was outside 200-299
        """
        request = build_request(self.settings, method, path, params, body)
        logger.debug(f"{method} {request.url}")

        try:
            response = self._http.send(request, auth=self.settings.basic_auth)
        except httpx.TransportError as e:
            raise TransportError(f"{method} {request.url} failed: {e}") from e

        status = response.status_code
        logger.debug(f"{method} {request.url} -> {status}")

        result = default
        if response.content:
            result = self._decode(response, result_type)

        if status < 200 or status > 299:
            raise ServiceError(status, f"{status} {response.reason_phrase}", result)

        return status, result

    @staticmethod
    def _decode(response: httpx.Response, result_type: TypeAdapter | None) -> Any:
        try:
            data = response.json()
            if result_type is None:
                return data
            return result_type.validate_python(data)
        except (ValueError, PydanticValidationError) as e:
            raise DecodingError(
                f"Could not decode response ({response.status_code}): {e}",
                response.status_code,
            ) from e

    def jobs(self) -> Jobs:
        """Get all jobs that chronos knows about"""
        _, jobs = self.execute(HTTP_GET, API_JOBS, result_type=_JOBS_ADAPTER, default=[])
        return jobs

    def search_jobs(self, name: str) -> Jobs:
        """Get the jobs whose name matches `name`"""
        if not name.strip():
            raise InvalidInputError("search_jobs requires a non-blank name")

        _, jobs = self.execute(
            HTTP_GET,
            API_JOBS_SEARCH,
            params={"name": name},
            result_type=_JOBS_ADAPTER,
            default=[],
        )
        return jobs

    def delete_job(self, name: str) -> None:
        self.execute(HTTP_DELETE, join_path(API_JOB, name))

    def delete_job_tasks(self, name: str) -> None:
        """Kill all running tasks of a job"""
        self.execute(HTTP_DELETE, join_path(API_KILL_JOB_TASK, name))

    def start_job(self, name: str, args: Mapping[str, str] | None = None) -> None:
        """Manually start a job; `args` are appended to the job's command."""
        self.execute(HTTP_PUT, join_path(API_JOB, name), params=args)

    def add_scheduled_job(self, job: Job) -> None:
        self.execute(HTTP_POST, API_ADD_SCHEDULED_JOB, body=job)

    def add_dependent_job(self, job: Job) -> None:
        self.execute(HTTP_POST, API_ADD_DEPENDENT_JOB, body=job)

    def run_once_now_job(self, job: Job) -> None:
        """Schedule `job` to run once, right away."""
        job.schedule = run_once_now_schedule()
        job.epsilon = RUN_ONCE_EPSILON
        self.add_scheduled_job(job)

    def unschedule_job(self, job: Job) -> None:
        """Reschedule `job` to zero repetitions so it never runs again."""
        job.schedule = UNSCHEDULE_SCHEDULE
        self.add_scheduled_job(job)
