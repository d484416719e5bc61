"""Application configuration loaded from environment variables."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global application settings."""

    openai_api_key: Optional[str] = Field(
        default=None, description="Secret key for OpenAI APIs."
    )
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model_chat: str = "gpt-4.1-mini"
    openai_model_vision: str = "gpt-4.1-mini"

    fda_label_url: str = "https://api.fda.gov/drug/label.json"
    fda_timeout_seconds: float = 10.0

    native_language: str = "en"
    max_upload_bytes: int = 10 * 1024 * 1024
    max_summary_field_tokens: int = 1500

    log_level: str = "INFO"
    medical_disclaimer: str = (
        "This tool is for informational purposes only and is not a substitute "
        "for professional medical advice, diagnosis, or treatment. Always consult "
        "a healthcare professional for any medical questions"
    )
    allow_tiktoken_fallback: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
