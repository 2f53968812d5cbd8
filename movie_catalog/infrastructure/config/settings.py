from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    DATABASE_CONNECTION_STRING: str
    DATABASE_ECHO: bool = False
    LOG_LEVEL: str = "INFO"
