from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    debug: bool = True
    cors_origins: list[str] = ["*"]

    ENVIRONMENT: str = "Production"

    # Principal sponsor sheet (Apps Script web app)
    principal_sponsor_script_url: str = (
        "https://script.google.com/macros/s/"
        "AKfycby41LMYX5wKRLOvm0ZqcKQW9W7Phi3UkhIera210iCxRSX2ujpZUVQTEIolj4Awi27Y4g/exec"
    )
    principal_sponsor_timeout_seconds: float = 10.0

    SENTRY_DSN: str = ""
    SENTRY_TRACES_SAMPLE_RATE: float = 0.0
    SENTRY_PROFILES_SAMPLE_RATE: float = 0.0

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
