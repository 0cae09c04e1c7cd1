"""Client configuration: environment settings and the resolved client bundle.

Two layers are involved:

- :class:`Settings` reads the process environment (and an optional ``.env``
  file) through pydantic-settings.  It is the only place the environment is
  consulted.
- :class:`ClientConfig` is the immutable, validated bundle the client works
  with: API key, controller host, timeout and extra headers.

:func:`resolve_config` merges explicit arguments over a :class:`Settings`
instance and is the single entry point used by
:class:`~pinecone_rest.client.Pinecone`.  Passing ``settings`` explicitly
keeps callers (and tests) independent of the real process environment.

Environment variables (case-insensitive):

``PINECONE_API_KEY``          API key used when none is passed explicitly.
``PINECONE_CONTROLLER_HOST``  Control-plane origin (default
                              ``https://api.pinecone.io``).
``PINECONE_TIMEOUT``          Request timeout in seconds (default ``30``).
``LOG_LEVEL``                 Logging level for the CLI entry points.
"""

from functools import lru_cache
from typing import Any, Mapping, Optional, Union
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError
from pydantic_settings import BaseSettings, SettingsConfigDict

from pinecone_rest import __version__
from pinecone_rest.errors import PineconeValidationError

DEFAULT_CONTROLLER_HOST = "https://api.pinecone.io"
DEFAULT_TIMEOUT = 30
API_VERSION = "2025-10"
USER_AGENT = f"pinecone-rest-python/{__version__}"


class Settings(BaseSettings):
    """Environment-backed defaults for the client.

    Attributes:
        pinecone_api_key:         API key (empty when unset).
        pinecone_controller_host: Control-plane origin.
        pinecone_timeout:         Request timeout in seconds, kept as given
                                  and checked by :class:`ClientConfig`.
        log_level:                Python logging level name (e.g. ``"INFO"``).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    pinecone_api_key: str = ""
    pinecone_controller_host: str = DEFAULT_CONTROLLER_HOST
    pinecone_timeout: Union[int, str] = DEFAULT_TIMEOUT

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return the cached :class:`Settings` singleton.

    The ``.env`` file (if present) is read on the first call; subsequent calls
    return the cached instance without re-reading the file.
    """
    return Settings()


class ClientConfig(BaseModel):
    """Validated, immutable configuration shared by every facade.

    Construction fails (with a pydantic ``ValidationError``) on an empty API
    key, a non-positive timeout or a host without an http/https scheme.  Use
    :func:`resolve_config` to get a :class:`PineconeValidationError` instead.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str
    controller_host: str = DEFAULT_CONTROLLER_HOST
    timeout: int = DEFAULT_TIMEOUT
    additional_headers: dict[str, str] = Field(default_factory=dict)

    @field_validator("api_key")
    @classmethod
    def require_api_key(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError(
                "api_key_missing",
                "API key is required. Set PINECONE_API_KEY environment "
                "variable or pass it in configuration.",
            )
        return value

    @field_validator("controller_host")
    @classmethod
    def normalize_host(cls, value: str) -> str:
        host = value.rstrip("/")
        if urlsplit(host).scheme not in ("http", "https"):
            raise PydanticCustomError(
                "controller_host_scheme",
                "Controller host must be a valid URL with http or https scheme.",
            )
        return host

    @field_validator("timeout", mode="before")
    @classmethod
    def coerce_timeout(cls, value: Any) -> int:
        try:
            timeout = int(value)
        except (TypeError, ValueError):
            timeout = 0
        if timeout <= 0:
            raise PydanticCustomError(
                "timeout_not_positive", "Timeout must be a positive integer."
            )
        return timeout

    @property
    def default_headers(self) -> dict[str, str]:
        """Headers sent with every request.

        ``additional_headers`` are applied last and replace any default with
        the same name, compared case-insensitively.
        """
        overridden = {name.lower() for name in self.additional_headers}
        headers = {
            name: value
            for name, value in {
                "Api-Key": self.api_key,
                "User-Agent": USER_AGENT,
                "Content-Type": "application/json",
                "X-Pinecone-Api-Version": API_VERSION,
            }.items()
            if name.lower() not in overridden
        }
        headers.update(self.additional_headers)
        return headers


def resolve_config(
    api_key: Optional[str] = None,
    *,
    controller_host: Optional[str] = None,
    timeout: Optional[Any] = None,
    additional_headers: Optional[Mapping[str, str]] = None,
    settings: Optional[Settings] = None,
) -> ClientConfig:
    """Build a :class:`ClientConfig` from explicit values and the environment.

    Explicit arguments win over ``settings``; ``settings`` defaults to
    :func:`get_settings`.

    Raises:
        PineconeValidationError: With the first human-readable reason when
            any value is invalid.
    """
    try:
        settings = settings if settings is not None else get_settings()
        return ClientConfig(
            api_key=api_key if api_key is not None else settings.pinecone_api_key,
            controller_host=(
                controller_host
                if controller_host is not None
                else settings.pinecone_controller_host
            ),
            timeout=timeout if timeout is not None else settings.pinecone_timeout,
            additional_headers=dict(additional_headers or {}),
        )
    except ValidationError as exc:
        raise PineconeValidationError(exc.errors()[0]["msg"]) from exc
