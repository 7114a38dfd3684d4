import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

DEFAULT_SERVER_URL = "https://packagist.org"


class Settings(BaseModel):
    server_url: str = DEFAULT_SERVER_URL
    timeout: float = Field(default=30, gt=0, description="HTTP timeout in seconds")
    log_level: str = "WARNING"

    @field_validator("server_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.upper()


def get_settings() -> Settings:
    """
    Build the settings from the environment, honoring a local `.env` file.

    PACKAGIST_SERVER_URL: base URL of the Packagist instance
    PACKAGIST_TIMEOUT: request timeout in seconds
    PACKAGIST_LOG_LEVEL: log level used by the command line
    """
    load_dotenv(find_dotenv(usecwd=True))

    values: dict[str, str] = {}
    for field, env_name in (
        ("server_url", "PACKAGIST_SERVER_URL"),
        ("timeout", "PACKAGIST_TIMEOUT"),
        ("log_level", "PACKAGIST_LOG_LEVEL"),
    ):
        env_value = os.getenv(env_name)
        if env_value:
            values[field] = env_value

    return Settings.model_validate(values)
