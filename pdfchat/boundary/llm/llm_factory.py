"""
Generation provider factory.

Dependencies: langchain_google_genai, pdfchat.configs
System role: Chat model backend selection
"""

import logging

from langchain_google_genai import ChatGoogleGenerativeAI

from pdfchat.boundary.llm.base import GenerationOptions
from pdfchat.boundary.llm.chat_model_provider import ChatModelGenerationProvider
from pdfchat.configs.generation import GenerationSettings

logger = logging.getLogger(__name__)


def build_generation_provider(settings: GenerationSettings) -> ChatModelGenerationProvider:
    """
    Create the generation provider selected by settings.

    Args:
        settings: Generation settings

    Returns:
        ChatModelGenerationProvider: Provider building Gemini chat models per options

    Raises:
        ValueError: If the provider name is unknown
    """
    if settings.provider != "google":
        raise ValueError(f"Invalid GENERATION_PROVIDER: {settings.provider}. Must be 'google'.")

    def build_model(options: GenerationOptions) -> ChatGoogleGenerativeAI:
        return ChatGoogleGenerativeAI(
            model=settings.model,
            temperature=options.temperature,
            max_output_tokens=options.max_tokens,
            top_p=options.top_p,
        )

    logger.info(f"{__name__}:build_generation_provider - Using {settings.model}")
    return ChatModelGenerationProvider(build_model, model_name=settings.model)


def default_generation_options(settings: GenerationSettings) -> GenerationOptions:
    """Decoding options configured for the deployment."""
    return GenerationOptions(
        temperature=settings.temperature,
        max_tokens=settings.max_tokens,
        top_p=settings.top_p,
    )
