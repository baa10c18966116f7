"""
LLM boundary layer.

Provides the GenerationProvider capability and its LangChain chat model adapter.
"""

from pdfchat.boundary.llm.base import GenerationOptions, GenerationProvider
from pdfchat.boundary.llm.chat_model_provider import ChatModelGenerationProvider

__all__ = ["GenerationOptions", "GenerationProvider", "ChatModelGenerationProvider"]
