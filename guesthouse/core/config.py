from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    BUSINESS_NAME: str = "Pukoret Home Suites"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    BOOKING_ENDPOINT_URL: str | None = None
    BOOKING_TIMEOUT_SECONDS: float = 10.0
    BOOKING_MAX_SESSIONS: int = 1000


settings = Settings()
