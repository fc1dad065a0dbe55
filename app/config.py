"""Runtime configuration for the product API.

Values come from the environment; an optional ``.env`` file in the working
directory is loaded first.
"""

import logging
import os
import sys
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

DEFAULT_PORT = 3000
DEFAULT_TOKEN = "mysecrettoken"


class ConfigurationError(Exception):
    """Raised when configuration is present but invalid."""
    pass


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    api_token: str = DEFAULT_TOKEN
    log_level: str = "INFO"

    @property
    def expected_authorization(self) -> str:
        return f"Bearer {self.api_token}"


def get_settings() -> Settings:
    load_dotenv(find_dotenv(usecwd=True))

    raw_port = os.environ.get("PORT", str(DEFAULT_PORT))
    try:
        port = int(raw_port)
    except ValueError:
        raise ConfigurationError(f"PORT must be an integer, got {raw_port!r}")

    return Settings(
        host=os.environ.get("HOST", "0.0.0.0"),
        port=port,
        api_token=os.environ.get("API_TOKEN", DEFAULT_TOKEN),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    # basicConfig is a no-op once the root logger has handlers (e.g. under uvicorn)
    logging.getLogger("app").setLevel(level)
