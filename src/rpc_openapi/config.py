"""Environment-driven defaults for the rpc-openapi CLI."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RPC_OPENAPI_", case_sensitive=False)

    path_prefix: str = Field(default="/")
    title: str = Field(default="HTTP-RPC")
    version: str = Field(default="")

    # Module exposing object() and, optionally, to_json_schema()
    schema_library: str | None = Field(default=None)
    # module:attribute of the legacy descriptor -> JSON Schema converter
    legacy_converter: str | None = Field(default=None)

    log_level: str = Field(default="WARNING")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
