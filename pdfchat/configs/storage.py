"""
Upload storage configuration settings.

Controls where uploaded documents live, what is accepted, and how long files are kept.

Dependencies: pydantic, pydantic_settings
System role: Upload validation and retention configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Local upload storage configuration."""

    model_config = SettingsConfigDict(
        env_prefix="STORAGE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    upload_dir: str = Field(default="uploads", description="Directory for uploaded files")
    max_upload_bytes: int = Field(
        default=10 * 1024 * 1024,
        description="Maximum accepted upload size (10 MiB)",
    )
    allowed_content_types: list[str] = Field(
        default=["application/pdf"],
        description="Accepted upload MIME types",
    )
    retention_seconds: int = Field(
        default=60 * 60,
        description="Age after which uploaded files are deleted",
    )
    sweep_interval_seconds: int = Field(
        default=60 * 60,
        description="How often the retention sweep runs",
    )
