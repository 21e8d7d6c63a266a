# /settings.py
# This file defines the configuration settings for the PR Changelog Summarizer.
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8") # Create .env file in project root with GITHUB and OPENAI tokens.

    app_name: str = "PR Changelog Summarizer"
    host: str = Field(default="127.0.0.1", alias="HOST")
    port: int = Field(default=8000, alias="PORT")

    # GitHub
    github_token: str | None = Field(default=None, alias="GITHUB_TOKEN") # From .env, for higher rate limits.
    github_api_base: str = "https://api.github.com"
    http_timeout_s: float | None = None # None keeps the transport default.

    # OpenAI (or any OpenAI-compatible endpoint)
    openai_api_key: str | None = Field(default=None, alias="OPENAI_API_KEY") # Fallback when the caller sends no key.
    openai_base_url: str = "https://api.openai.com/v1"
    model_fast: str = "gpt-3.5-turbo"
    model_advanced: str = "gpt-4"

    # The one piece of persisted state: the API key entered in the UI.
    credential_store_path: str = Field(default=".credentials.json", alias="CREDENTIAL_STORE_PATH")

    # Optional Django UI (basic)
    enable_django_ui: bool = Field(default=False, alias="ENABLE_DJANGO_UI")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")


settings = Settings()
