"""
LangChain chat model adapter.

Implements GenerationProvider over a LangChain BaseChatModel using
ainvoke for batch answers and astream for incremental output.

Dependencies: langchain_core
System role: Generation adapter for the query engine
"""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import aclosing
from typing import Any

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

from pdfchat.boundary.llm.base import GenerationOptions, GenerationProvider
from pdfchat.core.exceptions import GenerationError

logger = logging.getLogger(__name__)

ChatModelBuilder = Callable[[GenerationOptions], BaseChatModel]


def content_to_text(content: Any) -> str:
    """
    Flatten message content into plain text.

    Chat models return either a string or a list of content parts.

    Args:
        content: AIMessage or AIMessageChunk content

    Returns:
        str: Concatenated text parts
    """
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type", "text") == "text":
                parts.append(str(part.get("text", "")))
        return "".join(parts)
    return ""


class ChatModelGenerationProvider(GenerationProvider):
    """GenerationProvider backed by a LangChain chat model.

    A model instance is built once per distinct GenerationOptions value.
    """

    def __init__(self, build_model: ChatModelBuilder, model_name: str | None = None) -> None:
        """
        Initialize adapter.

        Args:
            build_model: Factory returning a chat model configured for given options
            model_name: Model identifier for logs and error context
        """
        self._build_model = build_model
        self._models: dict[GenerationOptions, BaseChatModel] = {}
        self.model_name = model_name

    def _model_for(self, options: GenerationOptions) -> BaseChatModel:
        model = self._models.get(options)
        if model is None:
            model = self._build_model(options)
            self._models[options] = model
        return model

    @staticmethod
    def _messages(system_instruction: str, user_message: str) -> list[BaseMessage]:
        return [
            SystemMessage(content=system_instruction),
            HumanMessage(content=user_message),
        ]

    async def complete(
        self,
        system_instruction: str,
        user_message: str,
        options: GenerationOptions,
    ) -> str:
        """
        Generate a full answer.

        Args:
            system_instruction: Instruction and grounding context
            user_message: Raw user query
            options: Decoding parameters

        Returns:
            str: Generated text

        Raises:
            GenerationError: When the model call fails
        """
        model = self._model_for(options)
        try:
            response = await model.ainvoke(self._messages(system_instruction, user_message))
        except Exception as e:
            logger.error(f"{__name__}:complete - {type(e).__name__}: {e}")
            raise GenerationError(f"Failed to generate answer: {e}", model=self.model_name) from e

        return content_to_text(response.content)

    async def stream(
        self,
        system_instruction: str,
        user_message: str,
        options: GenerationOptions,
    ) -> AsyncIterator[str]:
        """
        Stream answer fragments.

        Args:
            system_instruction: Instruction and grounding context
            user_message: Raw user query
            options: Decoding parameters

        Yields:
            str: Non-empty text fragments in arrival order

        Raises:
            GenerationError: When the model stream fails
        """
        model = self._model_for(options)
        try:
            async with aclosing(
                model.astream(self._messages(system_instruction, user_message))
            ) as chunks:
                async for chunk in chunks:
                    text = content_to_text(chunk.content)
                    if text:
                        yield text
        except Exception as e:
            logger.error(f"{__name__}:stream - {type(e).__name__}: {e}")
            raise GenerationError(f"Failed to stream answer: {e}", model=self.model_name) from e
