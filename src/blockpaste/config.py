"""Application configuration using Pydantic Settings.

Environment variables are automatically mapped to Settings fields.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Every field has a default, so the package works without any
    environment configured.
    """

    # --- Diagnostics ---
    blockpaste_debug: bool = False
    log_processed_html: bool = True

    # --- Markdown bridge ---
    markdown_extensions: str = "tables,nl2br,fenced_code"

    # --- Block serialization ---
    block_comment_namespace: str = "wp"
    unknown_block_name: str = "core/freeform"

    # --- Sanitization ---
    allow_embedded_frames: bool = False

    @model_validator(mode="after")
    def validate_block_names(self) -> "Settings":
        """Validate block serialization settings.

        Raises:
            ValueError: If the namespace is empty or the fallback block name
                has no namespace.

        """
        if not self.block_comment_namespace.strip():
            msg = "BLOCK_COMMENT_NAMESPACE must not be empty"
            raise ValueError(msg)
        if "/" not in self.unknown_block_name:
            msg = "UNKNOWN_BLOCK_NAME must be namespaced, e.g. 'core/freeform'"
            raise ValueError(msg)
        return self

    def markdown_extension_list(self) -> list[str]:
        """Return the configured Markdown extensions as a list."""
        return [ext.strip() for ext in self.markdown_extensions.split(",") if ext.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance.

    Uses lru_cache to ensure the .env file is only parsed once
    and all modules share the same settings instance.

    Returns:
        Settings instance with application configuration.

    Raises:
        ValidationError: If environment variables hold invalid values.

    """
    return Settings()


settings = get_settings()
