from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "expenses"
    db_username: str = "expenses"
    db_password: str = "secret"
    db_pool_min_size: int = 1
    db_pool_max_size: int = 4

    extraction_provider: str = "openai"
    extraction_model_name: str = "gpt-4o-mini"
    transcription_model_name: str = "whisper-1"
    extraction_temperature: float = 1.0
    extraction_max_tokens: int = 256

    openai_api_key: str = ""
    openai_timeout_seconds: int = 30

    openai_compatible_api_key: str = ""
    openai_compatible_base_url: str = ""

    openrouter_api_key: str = ""
    groq_api_key: str = ""
    together_api_key: str = ""
    ollama_api_key: str = "ollama"

    ai_retry_attempts: int = 3
    ai_retry_base_delay_seconds: float = 0.5

    temp_dir: str = "tmp"
    ffmpeg_binary: str = "ffmpeg"
    ffprobe_binary: str = "ffprobe"
    audio_process_timeout_seconds: int = 120
