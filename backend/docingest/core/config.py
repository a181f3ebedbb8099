# docingest/core/config.py
import os
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).parent.parent.parent.parent

class Settings(BaseSettings):
    app_name: str = "DocIngest"
    env: str = "local"

    # =========================
    # LLM (text completion collaborator)
    # =========================
    LLM_PROVIDER: str = "gemini"   # future: openai, anthropic, etc.
    GEMINI_API_KEY: str | None = None

    # Default model (cleanup/reconstruction does not need the large model)
    GEMINI_MODEL: str = "gemini-1.5-flash"

    # Runtime controls
    LLM_TIMEOUT_SECONDS: int = 30
    LLM_MAX_RETRIES: int = 2

    # Observability
    LLM_LOG_PROMPTS: bool = False  # logs prompt sizes only, never content

    # =========================
    # Extraction API
    # =========================
    EXTRACTION_MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024
    CORS_ALLOW_ORIGINS: str | None = None

    model_config = SettingsConfigDict(
        env_file=os.path.join(PROJECT_ROOT, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

settings = Settings()
