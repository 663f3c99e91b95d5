from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3001

    uploads_dir: Path = Path("uploads")
    public_base_url: str = ""
    max_upload_bytes: int = 10 * 1024 * 1024
    cors_allow_origins: list[str] = ["*"]

    ocr_engine: str = "auto"
    ocr_timeout_seconds: int = 20
    tesseract_lang: str = "ita+eng"

    extraction_provider: str = "openai"
    extraction_api_key: str = ""
    extraction_model_name: str = "gpt-4o-mini"
    extraction_base_url: str = ""
    extraction_timeout_seconds: int = 30
    extraction_max_text_chars: int = 4000
    extraction_default_confidence: float = 0.7
