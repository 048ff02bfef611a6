"""Contract configuration using Pydantic Settings.

Placeholder model ids and request defaults live here so every constructor
and builder resolves them from one place. Values can be overridden from
environment variables.
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DUMMY_EMBEDDING_MODEL = "dummy-embedding-model"
DUMMY_CHAT_MODEL = "dummy-chat-model"


class Environment(str, Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class PlaceholderSettings(BaseSettings):
    """Model ids substituted when a request does not name one."""

    model_config = SettingsConfigDict(env_prefix="RAG_PLACEHOLDER_")

    embedding_model: str = Field(
        default=DUMMY_EMBEDDING_MODEL,
        description="Embedding model id used when none is given",
    )
    chat_model: str = Field(
        default=DUMMY_CHAT_MODEL,
        description="Chat model id used when none is given",
    )


class RequestDefaults(BaseSettings):
    """Initial values of a RAG chat request under construction."""

    model_config = SettingsConfigDict(env_prefix="RAG_DEFAULT_")

    encoding_format: str = Field(
        default="float",
        description="Embedding encoding format",
    )
    temperature: float = Field(default=1.0, description="Sampling temperature")
    top_p: float = Field(default=1.0, description="Nucleus sampling mass")
    n_choice: int = Field(default=1, ge=1, description="Choices per request")
    stream: bool = Field(default=False, description="Stream the completion")
    max_tokens: int = Field(default=1024, ge=1, description="Completion token cap")
    presence_penalty: float = Field(default=0.0, description="Presence penalty")
    frequency_penalty: float = Field(default=0.0, description="Frequency penalty")
    context_window: int = Field(
        default=1,
        ge=0,
        description="Trailing user messages used for the retrieval query",
    )


class Settings(BaseSettings):
    """Main settings.

    Aggregates all configuration sections.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    placeholders: PlaceholderSettings = Field(default_factory=PlaceholderSettings)
    defaults: RequestDefaults = Field(default_factory=RequestDefaults)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings.

    Returns:
        Settings instance loaded from environment.
    """
    return Settings()
