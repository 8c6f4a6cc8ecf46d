"""Settings for the Gong MCP server, loaded from the environment."""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError

from .errors import ConfigurationError

DEFAULT_BASE_URL = "https://api.gong.io/v2"
DEFAULT_TIMEOUT = 30.0


class Credentials(BaseModel):
    """Gong access key and secret, fixed for the life of the process."""

    model_config = ConfigDict(frozen=True)

    access_key: str = Field(..., min_length=1)
    access_secret: SecretStr

    def secret(self) -> str:
        return self.access_secret.get_secret_value()


class Settings(BaseModel):
    """Everything the client needs to talk to Gong."""

    model_config = ConfigDict(frozen=True)

    credentials: Credentials
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    log_level: str = "WARNING"


def load_settings(env: Optional[dict[str, str]] = None) -> Settings:
    """Build Settings from GONG_* environment variables.

    Reads a local .env file first when ``env`` is not given. Raises
    ConfigurationError if GONG_ACCESS_KEY or GONG_ACCESS_SECRET is missing
    or empty, or if GONG_TIMEOUT is not a positive number.
    """
    if env is None:
        load_dotenv()
        env = dict(os.environ)

    access_key = env.get("GONG_ACCESS_KEY", "")
    access_secret = env.get("GONG_ACCESS_SECRET", "")

    missing = [
        name
        for name, value in (
            ("GONG_ACCESS_KEY", access_key),
            ("GONG_ACCESS_SECRET", access_secret),
        )
        if not value
    ]
    if missing:
        raise ConfigurationError(
            f"{' and '.join(missing)} environment variable{'s are' if len(missing) > 1 else ' is'} required",
            {"missing": missing},
        )

    try:
        return Settings(
            credentials=Credentials(access_key=access_key, access_secret=access_secret),
            base_url=env.get("GONG_BASE_URL") or DEFAULT_BASE_URL,
            timeout=env.get("GONG_TIMEOUT") or DEFAULT_TIMEOUT,
            log_level=(env.get("GONG_LOG_LEVEL") or "WARNING").upper(),
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid Gong configuration: {e}") from e
