"""Runtime configuration for sublevel-query."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="SUBLEVEL_QUERY_", env_file=".env", extra="ignore")

    app_name: str = "sublevel-query"
    log_level: str = "WARNING"
    layouts_dir: str = Field(
        default="layouts",
        description="Directory holding JSON layout snapshots for the search command.",
    )
    layout_glob: str = "*.json"
    search_limit: int | None = Field(default=None, ge=1)


settings = Settings()
