"""Environment-driven settings for the inventory API."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DEFAULT_PORT = 8010
DEFAULT_API_KEY = "dev-only-key"
DEFAULT_STATIC_DIR = Path(__file__).parent / "static"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env(name: str, default: str) -> str:
    """Fetch an env var, treating empty as missing."""
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _env_bool(name: str, default: bool = False) -> bool:
    return _env(name, "true" if default else "false").strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class Settings:
    """Runtime configuration.

    Attributes:
        host: Bind address for the HTTP server.
        port: Listening port.
        api_key: Key expected by the API-key gate.
        require_api_key: When False (the default) the gate lets every request
            through whatever key it carries.
        cors_origins: Origins allowed by CORS.
        csv_escape_quotes: Double embedded quotes in CSV export.
        static_dir: Directory served at the web root.
        log_level: Console log level name.
    """

    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    api_key: str = DEFAULT_API_KEY
    require_api_key: bool = False
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    csv_escape_quotes: bool = False
    static_dir: Path = DEFAULT_STATIC_DIR
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Build Settings from the environment, reading the nearest .env first.

    The .env search starts at the working directory. Variables already set
    in the environment win over the file.

    Raises:
        ValueError: If PORT is not an integer.
    """
    load_dotenv(find_dotenv(usecwd=True))
    origins = [o.strip() for o in _env("CORS_ORIGINS", "*").split(",") if o.strip()]
    return Settings(
        host=_env("HOST", "0.0.0.0"),
        port=int(_env("PORT", str(DEFAULT_PORT))),
        api_key=_env("API_KEY", DEFAULT_API_KEY),
        require_api_key=_env_bool("REQUIRE_API_KEY"),
        cors_origins=origins or ["*"],
        csv_escape_quotes=_env_bool("CSV_ESCAPE_QUOTES"),
        static_dir=Path(_env("STATIC_DIR", str(DEFAULT_STATIC_DIR))),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
    )
