from pathlib import Path
from typing import Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Endpoint
    source_directory: str

    # Process strategy
    noop: bool = False  # Leave files in place after processing
    delete: bool = False  # Delete files after successful processing
    move_directory: str = ""  # Done directory, empty means ".done" under source
    move_failed_directory: str = ""  # Rollback target, empty leaves file in place

    # Idempotent consumption
    idempotent: Optional[bool] = None  # None -> enabled when noop is enabled
    idempotent_store_path: str = ""  # Empty keeps keys in memory only
    idempotent_cache_size: int = 1000
    idempotent_max_file_store_size_kb: int = 1024

    # Logging
    log_level: str = "INFO"
    log_file_path: str = "logs/file_completion.log"
    log_retention_days: int = 30

    model_config = SettingsConfigDict(env_file="settings.env")

    @model_validator(mode="after")
    def check_strategy_options(self) -> "Settings":
        if self.delete and self.noop:
            raise ValueError("You cannot set both delete=true and noop=true")
        if self.delete and self.move_directory:
            raise ValueError("You cannot set both delete=true and move_directory")
        return self

    @property
    def idempotent_enabled(self) -> bool:
        """Effective idempotent flag; noop consumers track keys by default."""
        if self.idempotent is None:
            return self.noop
        return self.idempotent

    @property
    def log_directory(self) -> Path:
        """Directory holding the log file."""
        return Path(self.log_file_path).parent
