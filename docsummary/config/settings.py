from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    storage_backend: str = "s3"
    storage_bucket: str = "pca-files"
    storage_region: str = "ap-south-1"
    local_files_root: str = "/app/files"

    ocr_provider: str = "textract"
    ocr_region: str = "ap-south-1"

    summarization_provider: str = "bedrock"
    summarization_model_name: str = ""
    summarization_api_key: str = ""
    summarization_base_url: str = ""
    summarization_region: str = "us-east-1"
    summarization_timeout_seconds: float = 1.8
    summarization_max_tokens: int = 500
    summarization_temperature: float = 0.3

    max_content_chars: int = 6000
    ocr_score_threshold: float = 0.25
    ocr_min_chars: int = 200
    unreadable_score_threshold: float = 0.10
    unreadable_min_tokens: int = 10
    min_summary_score: float = 0.10
    fallback_min_sentence_chars: int = 10
    fallback_max_sentences: int = 5
