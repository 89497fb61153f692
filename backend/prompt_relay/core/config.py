# prompt_relay/core/config.py
import os
from pathlib import Path
from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).parent.parent.parent.parent

class Settings(BaseSettings):
    app_name: str = "PromptRelay"
    env: str = "local"

    # =========================
    # Upstream (Gemini REST)
    # =========================
    GEMINI_API_KEY: SecretStr | None = None
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    GEMINI_MODEL: str = "gemini-2.0-flash"

    # Runtime controls
    LLM_TIMEOUT_SECONDS: float = 60.0

    # Input limits (per field)
    MAX_TEXT_CHARS: int = 100_000
    MAX_SCHEMA_BYTES: int = 65_536

    # HTTP
    CORS_ALLOW_ORIGINS: str | None = None  # comma separated

    model_config = SettingsConfigDict(
        env_file=os.path.join(PROJECT_ROOT, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def generate_content_url(self) -> str:
        return f"{self.GEMINI_BASE_URL.rstrip('/')}/models/{self.GEMINI_MODEL}:generateContent"

settings = Settings()
