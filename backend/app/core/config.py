from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    r2_access_key_id: str = Field(default="", alias="R2_ACCESS_KEY_ID")
    r2_secret_access_key: SecretStr = Field(default=SecretStr(""), alias="R2_SECRET_ACCESS_KEY")
    r2_account_id: str = Field(default="", alias="R2_ACCOUNT_ID")
    r2_bucket_name: str = Field(default="", alias="R2_BUCKET_NAME")
    r2_storage_domain: str = Field(default="r2.cloudflarestorage.com", alias="R2_STORAGE_DOMAIN")
    r2_region: str = Field(default="auto", alias="R2_REGION")

    upload_content_type: str = Field(default="video/mp4", alias="UPLOAD_CONTENT_TYPE")
    upload_url_ttl: int = Field(default=60, gt=0, alias="UPLOAD_URL_TTL")


@lru_cache
def get_settings() -> Settings:
    return Settings()
