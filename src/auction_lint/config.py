from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "AuctionLint"
    debug: bool = False
    log_level: str = "INFO"

    oracle_api_key: Optional[str] = None
    oracle_api_base: str = "https://api.anthropic.com/v1"
    oracle_model: str = "claude-haiku-4-5"
    oracle_client: str = "openai"
    oracle_temperature: float = 0.1
    oracle_max_tokens: int = 400
    oracle_timeout: float = 30.0

    enable_artist_verification: bool = True

    # AI acceptance requires confidence strictly above these
    ai_artist_threshold: float = 0.6
    ai_artist_informal_threshold: float = 0.6
    ai_spellcheck_min_confidence: float = 0.8
    ai_brand_min_confidence: float = 0.85

    brand_similarity_threshold: float = 0.85
    brand_correct_similarity: float = 0.9

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_reload: bool = False


settings = Settings()
