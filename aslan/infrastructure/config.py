"""Configuration management for the aslan client."""

from dataclasses import dataclass, field, replace
from typing import Optional, Dict, Any
import os

import dotenv


@dataclass
class ClientConfig:
    """
    Configuration for the aslan environment client and its HTTP surface.

    Values can be provided directly or loaded from environment variables.

    Attributes:
        host: Base URL of the aslan deployment, e.g. ``http://zadig.local``
        token: Bearer token sent with every request
        api_prefix: Path prefix prepended to every endpoint
        timeout: Per-request timeout in seconds
        log_level: Logging level
        log_format: ``console`` or ``json``
        port: Port the validation/readiness server binds to

    Example:
        config = ClientConfig(host="http://zadig.local", token="t0k3n")

        # Load from environment
        config = ClientConfig.from_env()
    """

    host: Optional[str] = None
    token: Optional[str] = None
    api_prefix: str = "/api/aslan"
    timeout: float = 30.0

    log_level: str = "INFO"
    log_format: str = "console"

    port: int = 8000

    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_env(cls, prefix: str = "ASLAN_", env_file: Optional[str] = None) -> "ClientConfig":
        """
        Load configuration from environment variables.

        A ``.env`` file is read first (without overriding variables that are
        already set). Malformed numeric values fall back to the defaults.

        Args:
            prefix: Prefix for environment variables
            env_file: Optional explicit path to a dotenv file

        Returns:
            ClientConfig instance with values from environment

        Example:
            export ASLAN_HOST=http://zadig.local
            export ASLAN_TIMEOUT=10

            config = ClientConfig.from_env()
        """
        dotenv.load_dotenv(env_file or dotenv.find_dotenv(usecwd=True), override=False)

        def get_env(key: str, default: Any = None) -> Optional[str]:
            return os.environ.get(f"{prefix}{key}", default)

        def get_int(key: str, default: int) -> int:
            value = get_env(key)
            if value is None:
                return default
            try:
                return int(value)
            except ValueError:
                return default

        def get_float(key: str, default: float) -> float:
            value = get_env(key)
            if value is None:
                return default
            try:
                return float(value)
            except ValueError:
                return default

        return cls(
            host=get_env("HOST"),
            token=get_env("TOKEN"),
            api_prefix=get_env("API_PREFIX", cls.api_prefix),
            timeout=get_float("TIMEOUT", cls.timeout),
            log_level=get_env("LOG_LEVEL", cls.log_level),
            log_format=get_env("LOG_FORMAT", cls.log_format),
            port=get_int("PORT", cls.port),
        )

    def with_overrides(self, **kwargs: Any) -> "ClientConfig":
        """
        Create a new config with overrides.

        ``extra`` is merged rather than replaced.
        """
        extra = {**self.extra, **kwargs.pop("extra", {})}
        return replace(self, extra=extra, **kwargs)

    def __repr__(self) -> str:
        """Safe repr that doesn't expose the token."""
        return (
            f"ClientConfig(host={self.host!r}, api_prefix={self.api_prefix!r}, "
            f"timeout={self.timeout!r}, has_token={self.token is not None})"
        )
