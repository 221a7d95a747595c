# app/config.py
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # Recommendation backend
    api_base_url: str = "http://localhost:8080/api"

    # Auth
    login_path: str = "/login"

    # In-memory page sessions kept at once
    max_sessions: int = 1000

    # Where students can submit their university/field structure
    contribution_url: str = (
        "https://github.com/faycal-gh/Progres/blob/main/docs/CONTRIBUTING_SPECIALTIES.md"
    )

    # App Settings
    app_env: str = "development"
    debug: bool = True
    log_level: str = "INFO"

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # CORS
    allowed_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000"
    ]

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
