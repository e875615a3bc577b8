"""Runtime settings loaded from environment variables."""

from functools import lru_cache
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

NonEmptyStr = Annotated[str, Field(min_length=1)]
NonNegativeInt = Annotated[int, Field(ge=0)]
PositiveInt = Annotated[int, Field(gt=0)]


class Settings(BaseSettings):
    """Environment-driven application settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    credential_store_url: NonEmptyStr = Field(
        default="sqlite+pysqlite:///./credentials.db",
        validation_alias="CREDENTIAL_STORE_URL",
    )
    credential_store_echo_sql: bool = Field(
        default=False,
        validation_alias="CREDENTIAL_STORE_ECHO_SQL",
    )
    browser_session_id: NonEmptyStr = Field(validation_alias="BROWSER_SESSION_ID")
    password_min_length: PositiveInt = Field(default=12, validation_alias="PASSWORD_MIN_LENGTH")
    password_require_lower: bool = Field(default=True, validation_alias="PASSWORD_REQUIRE_LOWER")
    password_require_upper: bool = Field(default=True, validation_alias="PASSWORD_REQUIRE_UPPER")
    password_require_digit: bool = Field(default=True, validation_alias="PASSWORD_REQUIRE_DIGIT")
    password_require_symbol: bool = Field(
        default=True,
        validation_alias="PASSWORD_REQUIRE_SYMBOL",
    )
    password_banned_substrings: list[str] = Field(
        default_factory=list,
        validation_alias="PASSWORD_BANNED_SUBSTRINGS",
    )
    password_max_repeat: NonNegativeInt = Field(default=3, validation_alias="PASSWORD_MAX_REPEAT")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache application settings."""

    return Settings()  # type: ignore[call-arg]
