from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App settings
    PROJECT_NAME: str = "FinanceDashboard"
    DASHBOARD_TITLE: str = "Personal Finance Dashboard"
    API_PREFIX: str = "/api"
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")

    # Dashboard defaults
    DEFAULT_RESERVE_GOAL: float = 5000.0
    CURRENCY_SYMBOL: str = "R$"

    # Front-end origins allowed to talk to the session API
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://localhost:8000",
    ]

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)


settings = Settings()
