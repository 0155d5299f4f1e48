# backend/app/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional

class Settings(BaseSettings):

    PROJECT_NAME: str = "Genius Factor API"
    DEBUG: bool = False
    CORS_ORIGINS: List[str] = ["*"]

    # ── Database ─────────────────────────────────────────────
    DATABASE_URL: str

    # ── JWT (émis par le fournisseur d'auth externe) ─────────
    SECRET_KEY: str
    ALGORITHM: str = "HS256"

    # ── Service d'analyse externe (scoring + rapports) ───────
    ANALYSIS_API_URL: str = "http://localhost:8001"
    ANALYSIS_API_TOKEN: Optional[str] = None
    SCORING_PATH: str = "/analyze/assessment"
    REPORT_PATH: str = "/employee_dashboard/generate-employee-career-recommendation"
    ANALYSIS_TIMEOUT_SECONDS: float = 60.0

    # ── Endpoints internes (push du service d'analyse) ───────
    INTERNAL_API_KEY: str = ""

    # ── Résultats ────────────────────────────────────────────
    RESULTS_PAGE_SIZE: int = 3
    RESULTS_URL: str = "/employee-dashboard/results"
    POST_SUBMIT_REDIRECT_DELAY_SECONDS: int = 3

    # ── Temps réel / HR ──────────────────────────────────────
    REALTIME_QUEUE_SIZE: int = 100
    SEARCH_SUGGESTION_LIMIT: int = 5
    HR_EMPLOYEES_PAGE_SIZE: int = 10


    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding='utf-8',
        extra='ignore'
        )

settings = Settings()
