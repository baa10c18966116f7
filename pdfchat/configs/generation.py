"""
Generation provider configuration settings.

Decoding defaults favor factual extraction over elaboration.

Dependencies: pydantic, pydantic_settings
System role: Chat model selection and decoding parameters
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GenerationSettings(BaseSettings):
    """Chat model configuration."""

    model_config = SettingsConfigDict(
        env_prefix="GENERATION_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    provider: Literal["google"] = Field(
        default="google",
        description="Chat model backend",
    )
    model: str = Field(
        default="gemini-2.5-flash",
        description="Chat model identifier",
    )
    temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    max_tokens: int = Field(default=2048, gt=0)
    top_p: float = Field(default=0.9, gt=0.0, le=1.0)
