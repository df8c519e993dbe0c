from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    ENV: str = Field(default="dev")  # dev|prod|test

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_JSON: bool = Field(default=False)  # forced on in prod

    # DB
    DATABASE_URL: str = Field(default="sqlite:///./dev.db")

    # HTTP
    API_PREFIX: str = Field(default="/api")
    CORS_ORIGINS: str = Field(default="http://localhost:3000,http://localhost")

    # Client facade
    API_BASE_URL: str = Field(default="http://localhost:3001")
    CLIENT_TIMEOUT: float = Field(default=10.0)

    # Seed (dev)
    SEED_DEMO: bool = Field(default=True)


settings = Settings()
