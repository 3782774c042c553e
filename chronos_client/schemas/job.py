from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ChronosModel(BaseModel):
    # snake_case in Python, camelCase on the wire
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Container(ChronosModel):
    type: str | None = None
    image: str | None = None
    network: str | None = None
    volumes: list[dict[str, str]] | None = None
    parameters: list[dict[str, str]] | None = None


class Job(ChronosModel):
    """Chronos job configuration.

    A job is driven either by `schedule` (added via scheduler/iso8601) or by
    `parents` (added via scheduler/dependency). Unset fields are left out of
    the request body so the server keeps its defaults.
    """

    name: str
    command: str = ""
    shell: bool | None = None
    epsilon: str | None = None
    executor: str | None = None
    executor_flags: str | None = None
    retries: int | None = None
    owner: str | None = None
    owner_name: str | None = None
    description: str | None = None
    async_: bool | None = Field(default=None, alias="async")
    cpus: float | None = None
    disk: float | None = None
    mem: float | None = None
    disabled: bool | None = None
    soft_error: bool | None = None
    data_processing_job_type: bool | None = None
    uris: list[str] | None = None
    environment_variables: list[dict[str, str]] | None = None
    arguments: list[str] | None = None
    high_priority: bool | None = None
    run_as_user: str | None = None
    container: Container | None = None
    constraints: list[list[str]] | None = None

    schedule: str | None = None
    schedule_time_zone: str | None = None
    parents: list[str] | None = None

    # reported by the server
    success_count: int | None = None
    error_count: int | None = None
    last_success: str | None = None
    last_error: str | None = None
    errors_since_last_success: int | None = None


Jobs = list[Job]
