import os
from dataclasses import dataclass, field
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


def _env_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Invalid setting {name}={raw!r}: expected a whole number") from None


@dataclass
class Settings:
    # Application settings
    app_name: str = field(default_factory=lambda: os.getenv("APP_NAME", "library"))
    debug: bool = field(default_factory=lambda: _env_flag("DEBUG", "False"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())

    # Console settings
    # Allowed values: 'plain' (default), 'json', 'rich'
    output_mode: str = field(default_factory=lambda: os.getenv("LIB_CLI_OUTPUT", "plain").lower())
    clear_screen: bool = field(default_factory=lambda: _env_flag("LIBRARY_CLEAR_SCREEN", "True"))

    # Input validation settings; 0 keeps re-prompting forever
    max_input_retries: int = field(default_factory=lambda: _env_int("LIBRARY_MAX_INPUT_RETRIES", "0"))

    @property
    def retry_limit(self) -> int | None:
        return self.max_input_retries if self.max_input_retries > 0 else None


settings = Settings()
