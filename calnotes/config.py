"""Configuration for calendar notes."""

import os
from pathlib import Path

from pydantic import BaseModel, Field

try:
    from dotenv import load_dotenv
except ImportError:
    load_dotenv = None

from calnotes.constants import DEFAULT_NOTES_TABLE


class NotesConfig(BaseModel):
    """Notes configuration with Pydantic validation."""

    # Remote store
    supabase_url: str | None = None
    supabase_key: str | None = None
    notes_table: str = Field(default=DEFAULT_NOTES_TABLE)
    request_timeout: float = Field(default=10.0, gt=0)

    # Logging
    log_dir: Path = Field(default=Path("logs"))
    log_filename: str = Field(default="calnotes.log")

    # Web server
    secret_key: str = Field(default="calnotes-dev")
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=5000, ge=1, le=65535)

    @property
    def store_configured(self) -> bool:
        """True if both the store URL and key are set."""
        return bool(self.supabase_url and self.supabase_key)

    @classmethod
    def from_env(cls) -> "NotesConfig":
        """Load configuration from environment variables and .env file."""
        # Load .env file if python-dotenv is available
        if load_dotenv is not None:
            load_dotenv()

        config_dict = {}

        # Remote store (VITE_ names kept for existing frontend .env files)
        url = os.environ.get("SUPABASE_URL") or os.environ.get("VITE_SUPABASE_URL")
        if url:
            config_dict["supabase_url"] = url
        key = os.environ.get("SUPABASE_ANON_KEY") or os.environ.get(
            "VITE_SUPABASE_ANON_KEY"
        )
        if key:
            config_dict["supabase_key"] = key
        if "NOTES_TABLE" in os.environ:
            config_dict["notes_table"] = os.environ["NOTES_TABLE"]
        if "REQUEST_TIMEOUT" in os.environ:
            try:
                timeout = float(os.environ["REQUEST_TIMEOUT"])
                if timeout > 0:
                    config_dict["request_timeout"] = timeout
            except ValueError:
                pass  # Keep default if invalid

        # Logging
        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])
        if "LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["LOG_FILENAME"]

        # Web server
        if "SECRET_KEY" in os.environ:
            config_dict["secret_key"] = os.environ["SECRET_KEY"]
        if "HOST" in os.environ:
            config_dict["host"] = os.environ["HOST"]
        if "PORT" in os.environ:
            try:
                port = int(os.environ["PORT"])
                if 1 <= port <= 65535:
                    config_dict["port"] = port
            except ValueError:
                pass  # Keep default if invalid

        return cls(**config_dict)
