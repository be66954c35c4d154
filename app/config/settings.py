from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3000

    completion_provider: str = "openai"
    openai_api_key: str = ""
    openai_model_name: str = "gpt-5-mini"
    openai_timeout_seconds: int = 120
    openai_compatible_base_url: str = ""
    system_prompt: str = (
        "You are a scenario-script prompt engineer who strictly follows the "
        "required format and prohibitions. Output only what the user asks for."
    )

    pdf_engine: str = "pdfplumber"

    template_path: Path = Path("template.txt")
    static_dir: Path = Path("public")

    max_chunk_chars: int = 80_000
    max_file_size_bytes: int = 15 * 1024 * 1024
    max_files_per_field: int = 10
    max_total_files: int = 20
