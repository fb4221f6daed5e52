from os import environ as env
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

from ._utils.constants import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_READ_TIMEOUT,
    DEFAULT_USER_AGENT,
    ENV_CONNECT_TIMEOUT,
    ENV_DEBUG,
    ENV_FOLLOW_REDIRECTS,
    ENV_READ_TIMEOUT,
    ENV_USER_AGENT,
)

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """Defaults applied to every request an executor sends.

    Timeouts are in milliseconds. Values set on a ``RequestSpec`` take
    precedence.
    """

    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT
    read_timeout: int = DEFAULT_READ_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    follow_redirects: bool = True
    debug: bool = False

    @field_validator("connect_timeout", "read_timeout")
    @classmethod
    def validate_timeout(cls, value: int) -> int:
        assert value > 0, "Timeout must be a positive number of milliseconds"
        return value

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "Config":
        """Build a Config from ``RESTIFY_*`` environment variables.

        A ``.env`` file is loaded first; variables already set in the
        environment win over it.
        """
        load_dotenv(dotenv_path)

        values: dict[str, object] = {}
        if connect_timeout := env.get(ENV_CONNECT_TIMEOUT):
            values["connect_timeout"] = connect_timeout
        if read_timeout := env.get(ENV_READ_TIMEOUT):
            values["read_timeout"] = read_timeout
        if user_agent := env.get(ENV_USER_AGENT):
            values["user_agent"] = user_agent
        if follow_redirects := env.get(ENV_FOLLOW_REDIRECTS):
            values["follow_redirects"] = follow_redirects.lower() in _TRUTHY
        if debug := env.get(ENV_DEBUG):
            values["debug"] = debug.lower() in _TRUTHY

        return cls.model_validate(values)
