from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    APP_NAME: str = "FolderSync"
    APP_ENV: Literal["dev", "prod"] = "dev"
    APP_DEBUG: bool = False

    model_config = SettingsConfigDict(env_file=".env", env_prefix="APP_")


class CORSSettings(BaseSettings):
    # The browser extension calls in from a chrome-extension:// origin
    CORS_ORIGINS: list[str] = ["*"]
    CORS_CREDENTIALS: bool = False
    CORS_METHODS: list[str] = ["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"]
    CORS_HEADERS: list[str] = ["*"]
    CORS_EXPOSE_HEADERS: list[str] = []

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CORS_")


class MongoSettings(BaseSettings):
    MONGO_HOST: str = ""
    MONGO_PORT: int = 27017
    MONGO_DB: str = "foldersync"
    MONGO_USER: str = ""
    MONGO_PWD: str = ""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="MONGO_")

    @property
    def MONGO_URL(self) -> str:
        host = self.MONGO_HOST or "localhost"
        port = self.MONGO_PORT or 27017
        if self.MONGO_USER and self.MONGO_PWD:
            return f"mongodb://{self.MONGO_USER}:{self.MONGO_PWD}@{host}:{port}"
        return f"mongodb://{host}:{port}"


class SentrySettings(BaseSettings):
    SENTRY_DSN: str | None = None
    SENTRY_TRACES_SAMPLE_RATE: float = 0.2
    SENTRY_PROFILES_SAMPLE_RATE: float = 0.0
    SENTRY_SEND_DEFAULT_PII: bool = False

    model_config = SettingsConfigDict(env_file=".env", env_prefix="SENTRY_")


class FolderSettings(BaseSettings):
    # 0 disables the depth limit
    FOLDER_MAX_DEPTH: int = 64

    model_config = SettingsConfigDict(env_file=".env", env_prefix="FOLDER_")


class Settings(AppSettings, CORSSettings, MongoSettings, SentrySettings, FolderSettings):
    RELEASE: str | None = None
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    model_config = SettingsConfigDict(env_file=".env", env_prefix="")


settings = Settings()
