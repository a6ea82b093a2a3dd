"""Application configuration loaded from environment variables."""

from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global application settings."""

    qdrant_url: str = "http://localhost:6333"
    qdrant_api_key: Optional[str] = None
    index_name: str = "documents"
    index_timeout: int = Field(
        default=60 * 60 * 24,
        description="Seconds to wait on index writes; large documents can take hours.",
    )
    index_username: str = "admin"
    index_folder: str = ""

    tika_server_endpoint: Optional[str] = Field(
        default=None, description="Tika server URL; the client starts a local server when unset."
    )
    extraction_timeout: int = 60 * 60

    soffice_binary: str = "soffice"
    conversion_timeout: int = 10 * 60
    office_extensions: List[str] = Field(
        default_factory=lambda: [
            ".ppt",
            ".pptx",
            ".pps",
            ".ppsx",
            ".doc",
            ".docx",
            ".xls",
            ".xlsx",
            ".odt",
            ".odp",
            ".ods",
            ".rtf",
        ]
    )

    reset_table_counter_on_augment: bool = False

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
