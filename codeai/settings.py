# codeai/settings.py
from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from codeai import __version__


class Dialect(str, Enum):
    """Request/response shape spoken by the active backend."""
    CHAT = "chat"
    COMPLETION = "completion"


PROVIDER_BASE_URLS = {
    "openai": "https://api.openai.com/v1",
    "mistral": "https://api.mistral.ai/v1",
}


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="AI Server")
    APP_VERSION: str = Field(default=__version__)
    ENV: str = Field(default="dev", validation_alias=AliasChoices("APP_ENV", "ENV"))
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")

    # provider
    AI_PROVIDER: str = Field(default="openai")
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_BASE_URL: Optional[str] = None
    MISTRAL_API_KEY: Optional[str] = None
    OLLAMA_API_KEY: Optional[str] = None
    OLLAMA_BASE_URL: str = Field(default="http://localhost:11434")

    # server
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8080)
    PUBLIC_DIR: str = Field(default="public")

    # model defaults
    DEFAULT_MODEL: str = Field(default="gpt-4o-mini")
    DEFAULT_SWIFT_MODEL: str = Field(default="gpt-4o-mini")
    DEFAULT_MAX_TOKENS: int = Field(default=4096)
    DEFAULT_SWIFT_MAX_TOKENS: int = Field(default=4096)
    DEFAULT_TEMPERATURE: float = Field(default=0.0)

    # requests
    REQUEST_TIMEOUT: int = Field(default=60)
    GENERATOR_CONFIG: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env.dev",
        extra="ignore",
        frozen=True,
    )

    @property
    def provider(self) -> str:
        return self.AI_PROVIDER.strip().lower()

    @property
    def dialect(self) -> Dialect:
        if self.provider == "ollama":
            return Dialect.COMPLETION
        return Dialect.CHAT

    @property
    def api_base_url(self) -> str:
        """Base URL of the active backend (unknown providers resolve to OpenAI)."""
        if self.provider == "ollama":
            return self.OLLAMA_BASE_URL.rstrip("/")
        if self.provider == "mistral":
            return PROVIDER_BASE_URLS["mistral"]
        return (self.OPENAI_BASE_URL or PROVIDER_BASE_URLS["openai"]).rstrip("/")

    @property
    def api_key(self) -> Optional[str]:
        if self.provider == "ollama":
            return self.OLLAMA_API_KEY
        if self.provider == "mistral":
            return self.MISTRAL_API_KEY
        return self.OPENAI_API_KEY

    @property
    def is_configured(self) -> bool:
        if self.provider == "openai":
            return bool(self.OPENAI_API_KEY)
        if self.provider == "mistral":
            return bool(self.MISTRAL_API_KEY)
        if self.provider == "ollama":
            # reachability is only known once a request is made
            return True
        return False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
