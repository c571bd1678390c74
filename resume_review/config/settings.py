from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = ["*"]

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "resume_review"
    db_username: str = "resume_review"
    db_password: str = "secret"

    pdf_engine: str = "pdfplumber"

    staging_dir: str = "./staging"
    accepted_media_type: str = "application/pdf"
    max_upload_bytes: int = 10 * 1024 * 1024
    upload_field_name: str = "resume"

    analysis_provider: str = "gemini"
    analysis_api_key: str = ""
    analysis_model_name: str = "gemini-1.5-flash"
    analysis_base_url: str | None = None
    analysis_timeout_seconds: int = 30
    analysis_temperature: float = 0.7
