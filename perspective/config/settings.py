from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    perspective_provider: str = "perspective"
    perspective_api_key: str = ""
    perspective_endpoint: str = (
        "https://commentanalyzer.googleapis.com/v1alpha1/comments:analyze"
    )
    perspective_timeout_seconds: int = 30
    perspective_languages: list[str] = ["en"]

    perspective_models: list[str] = ["TOXICITY"]
    perspective_thresholds: dict[str, float] = {}
    perspective_redact_body: bool = True
