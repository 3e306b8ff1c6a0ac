"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Values are validated at load time.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.domain.enums import RecordSelectionPolicy


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings have defaults. database_url is only required when a
    request actually reaches the SQL data source (checked lazily in
    app.infrastructure.persistence.database).
    """

    # App
    app_name: str = "doc-compliance"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str | None = None

    # Database (read-only access to the externally owned document tables)
    database_url: str = ""
    database_echo: bool = False
    # Optional pool/driver overrides (None = use defaults in database.py)
    db_pool_size: int | None = None
    db_max_overflow: int | None = None
    db_command_timeout: int | None = None

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Compliance rules
    compliance_warning_horizon_days: int = 30
    compliance_record_selection: RecordSelectionPolicy = (
        RecordSelectionPolicy.LATEST_CREATED
    )
    checklist_page_size: int = 20

    # Batched fetch from the data store: one timeout for the whole batch,
    # retried with exponential wait before reporting data unavailable.
    data_fetch_timeout_seconds: float = 30.0
    data_fetch_max_attempts: int = 3
    data_fetch_retry_wait_seconds: float = 0.5

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_ranges(self) -> "Settings":
        """Reject values that would make classification or fetching meaningless."""
        if self.compliance_warning_horizon_days < 0:
            raise ValueError(
                "COMPLIANCE_WARNING_HORIZON_DAYS must be >= 0, "
                f"got: {self.compliance_warning_horizon_days}"
            )
        if self.checklist_page_size < 1:
            raise ValueError(
                f"CHECKLIST_PAGE_SIZE must be >= 1, got: {self.checklist_page_size}"
            )
        if self.data_fetch_timeout_seconds <= 0:
            raise ValueError(
                "DATA_FETCH_TIMEOUT_SECONDS must be > 0, "
                f"got: {self.data_fetch_timeout_seconds}"
            )
        if self.data_fetch_max_attempts < 1:
            raise ValueError(
                "DATA_FETCH_MAX_ATTEMPTS must be >= 1, "
                f"got: {self.data_fetch_max_attempts}"
            )
        if self.data_fetch_retry_wait_seconds < 0:
            raise ValueError(
                "DATA_FETCH_RETRY_WAIT_SECONDS must be >= 0, "
                f"got: {self.data_fetch_retry_wait_seconds}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
