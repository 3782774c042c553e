import httpx
from pydantic import SecretStr
from pydantic_settings import BaseSettings

DEFAULT_CHRONOS_URL = "http://127.0.0.1:4400"


class Settings(BaseSettings):
    url: str = DEFAULT_CHRONOS_URL
    api_prefix: str = ""
    request_timeout: float = 5
    debug: bool = False

    # Sent as basic auth on every request, even when both are empty
    username: str = ""
    password: SecretStr = SecretStr("")

    class Config:
        env_prefix = "CHRONOS_"
        env_file = ".env"
        frozen = True

    @property
    def basic_auth(self) -> httpx.BasicAuth:
        return httpx.BasicAuth(self.username, self.password.get_secret_value())


def default_settings() -> Settings:
    """Settings for an unauthenticated Chronos on localhost with no API prefix.

    Every field is pinned, so CHRONOS_* variables and .env files are ignored.
    """
    return Settings(
        _env_file=None,
        url=DEFAULT_CHRONOS_URL,
        api_prefix="",
        request_timeout=5,
        debug=False,
        username="",
        password="",
    )
