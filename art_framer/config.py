from __future__ import annotations

from pydantic import AnyHttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    TEXTURE_ASSET_BASE_URL: AnyHttpUrl = "https://assets.art-framer.local"
    TEXTURE_URL_SCHEME_PREFIXES: str = "http://,https://"

    @field_validator("TEXTURE_URL_SCHEME_PREFIXES")
    @classmethod
    def validate_scheme_prefixes(cls, value: str) -> str:
        prefixes = [prefix.strip().lower() for prefix in value.split(",") if prefix.strip()]
        if not prefixes:
            raise ValueError("TEXTURE_URL_SCHEME_PREFIXES must include at least one prefix")
        return ",".join(prefixes)

    @property
    def texture_asset_base_url(self) -> str:
        return str(self.TEXTURE_ASSET_BASE_URL).rstrip("/")

    @property
    def texture_url_scheme_prefixes(self) -> tuple[str, ...]:
        return tuple(self.TEXTURE_URL_SCHEME_PREFIXES.split(","))

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
