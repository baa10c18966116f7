"""
Chat service configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Query-time retry policy
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ChatSettings(BaseSettings):
    """Caller-side retry policy for live queries."""

    model_config = SettingsConfigDict(
        env_prefix="CHAT_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    query_retry_attempts: int = Field(
        default=2,
        ge=1,
        description="Total attempts for a query that fails on a transient provider error",
    )
    query_retry_max_wait: float = Field(
        default=2.0,
        description="Maximum backoff between query attempts in seconds",
    )
