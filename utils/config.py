"""Runtime settings read from environment variables (and a local .env)."""

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from database.repositories import DEFAULT_STORAGE_KEY

DEFAULT_QUOTA_BYTES = 5 * 1024 * 1024  # browser localStorage budget


class Settings(BaseModel):
    """Where rounds are stored and how the app logs."""
    model_config = ConfigDict(frozen=True)

    store_dir: Path = Path("data")
    storage_key: str = DEFAULT_STORAGE_KEY
    quota_bytes: Optional[int] = Field(DEFAULT_QUOTA_BYTES, ge=0)
    log_level: str = "INFO"
    log_file: Optional[Path] = None
    cors_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173"])

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        """Build settings from HANDICAP_* variables; unset ones keep defaults."""
        if load_env_file:
            load_dotenv()

        values = {}
        if os.environ.get("HANDICAP_STORE_DIR"):
            values["store_dir"] = Path(os.environ["HANDICAP_STORE_DIR"])
        if os.environ.get("HANDICAP_STORAGE_KEY"):
            values["storage_key"] = os.environ["HANDICAP_STORAGE_KEY"]
        quota = os.environ.get("HANDICAP_STORE_QUOTA_BYTES", "").strip()
        if quota:
            # 0 disables the quota
            values["quota_bytes"] = int(quota) or None
        if os.environ.get("HANDICAP_LOG_LEVEL"):
            values["log_level"] = os.environ["HANDICAP_LOG_LEVEL"].upper()
        if os.environ.get("HANDICAP_LOG_FILE"):
            values["log_file"] = Path(os.environ["HANDICAP_LOG_FILE"])
        origins = os.environ.get("HANDICAP_CORS_ORIGINS", "").strip()
        if origins:
            values["cors_origins"] = [o.strip() for o in origins.split(",") if o.strip()]
        return cls(**values)
