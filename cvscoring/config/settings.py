from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    storage_root: str = "/app/files"
    storage_bucket: str = "cvs"

    pdf_engine: str = "pdfplumber"
    pdf_fallback_engine: str = "pymupdf"

    ai_provider_order: str = "openai,groq,ollama"
    ai_system_prompt: str = (
        "You are a helpful assistant. Always reply with strict JSON only."
    )
    ai_temperature: float = 0.2
    ai_max_prompt_chars: int = 16000

    ai_openai_api_key: str = ""
    ai_openai_model_name: str = "gpt-4o-mini"
    ai_openai_timeout_seconds: int = 30

    ai_openai_compatible_api_key: str = ""
    ai_openai_compatible_model_name: str = ""
    ai_openai_compatible_base_url: str = ""
    ai_openai_compatible_timeout_seconds: int = 30

    ai_openrouter_api_key: str = ""
    ai_openrouter_model_name: str = ""
    ai_openrouter_timeout_seconds: int = 30

    ai_groq_api_key: str = ""
    ai_groq_model_name: str = "llama-3.1-8b-instant"
    ai_groq_timeout_seconds: int = 30

    ai_together_api_key: str = ""
    ai_together_model_name: str = ""
    ai_together_timeout_seconds: int = 30

    ai_deepseek_api_key: str = ""
    ai_deepseek_model_name: str = "deepseek-chat"
    ai_deepseek_timeout_seconds: int = 30

    ai_ollama_host: str = ""
    ai_ollama_model_name: str = "llama3.1"
    ai_ollama_timeout_seconds: int = 30

    golden_profile_sources: str = "storage"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "recruitment"
    db_username: str = "recruitment"
    db_password: str = "secret"
    db_pool_max_size: int = 5
    db_connect_timeout_seconds: int = 5

    analysis_queue_max_attempts: int = 1
    analysis_queue_failed_history: int = 100
