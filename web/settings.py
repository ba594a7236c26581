from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    API_TITLE: str = "Production Quote Builder API"
    API_VERSION: str = "1.0.0"

    CORS_ORIGINS: list[str] = ["*"]

    HOST: str = "127.0.0.1"
    PORT: int = 8000
    RELOAD: bool = False

    LOG_LEVEL: str = "INFO"


settings = Settings()
