from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FARMHUB_", env_file=".env", extra="ignore")

    DATABASE_URL: str = "sqlite:///./farmhub.db"

    SECRET_KEY: str = "change-me"
    ACCESS_TOKEN_MIN: int = 60

    # uploaded files live here and are served read-only under UPLOAD_URL_PREFIX
    UPLOAD_DIR: str = "public/uploads"
    UPLOAD_URL_PREFIX: str = "/uploads"
    MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024

    SMTP_HOST: str = "smtp.gmail.com"
    SMTP_PORT: int = 587
    SMTP_TIMEOUT: float = 30.0
    EMAIL_USER: str | None = None
    EMAIL_PASS: str | None = None
    ADMIN_EMAIL: str | None = None

    CORS_ORIGINS: list[str] = ["*"]
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
