"""
Chat service for grounded Q&A.

Wraps the query engine with the caller-side retry policy: transient
provider failures are retried with exponential backoff before the caller
sees an error.

Dependencies: tenacity, pdfchat.core.rag_query
System role: Chat service orchestration layer
"""

import logging
from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import aclosing
from typing import TypeVar

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from pdfchat.core.exceptions import TRANSIENT_ERRORS
from pdfchat.core.rag_query.query_engine import RAGQueryEngine
from pdfchat.core.rag_query.schemas import ChatAnswer

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _log_retry(retry_state: RetryCallState) -> None:
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        f"{__name__}:retry - Attempt {retry_state.attempt_number} failed: "
        f"{type(exc).__name__}: {exc}"
    )


class ChatService:
    """
    Chat service for single-turn grounded Q&A.

    Batch requests retry the whole query on transient errors. Streaming
    requests retry only retrieval, since fragments already sent cannot be
    taken back.
    """

    def __init__(
        self,
        query_engine: RAGQueryEngine,
        retry_attempts: int = 2,
        retry_max_wait: float = 2.0,
    ) -> None:
        """
        Initialize chat service.

        Args:
            query_engine: RAG query engine
            retry_attempts: Total attempts on transient errors (1 disables retry)
            retry_max_wait: Upper bound for backoff between attempts in seconds
        """
        self.query_engine = query_engine
        self.retry_attempts = retry_attempts
        self.retry_max_wait = retry_max_wait

    def _retrying(self) -> AsyncRetrying:
        return AsyncRetrying(
            retry=retry_if_exception_type(TRANSIENT_ERRORS),
            stop=stop_after_attempt(self.retry_attempts),
            wait=wait_exponential_jitter(initial=0.1, max=self.retry_max_wait, jitter=0.1),
            before_sleep=_log_retry,
            reraise=True,
        )

    async def _with_retry(self, func: Callable[[], Awaitable[T]]) -> T:
        async for attempt in self._retrying():
            with attempt:
                result = await func()
        return result

    async def process_chat(self, query: str) -> ChatAnswer:
        """
        Answer a question in one response.

        Args:
            query: User question

        Returns:
            ChatAnswer: Answer with sources

        Raises:
            ValidationError: Empty query (never retried)
            EmbeddingError, VectorIndexError, GenerationError: After retries are exhausted
        """
        self.query_engine.validate_query(query)
        logger.info(f"{__name__}:process_chat - START query_length={len(query)}")
        answer = await self._with_retry(lambda: self.query_engine.ainvoke(query))
        logger.info(f"{__name__}:process_chat - COMPLETE sources={len(answer.sources)}")
        return answer

    async def stream_chat(self, query: str) -> AsyncGenerator[str, None]:
        """
        Answer a question as a stream of text fragments.

        Validation runs before the first fragment so callers can reject bad
        input before committing to a streaming response.

        Args:
            query: User question

        Yields:
            str: Answer fragments; exhaustion marks completion

        Raises:
            ValidationError: Empty query
            EmbeddingError, VectorIndexError: Retrieval failed after retries
            GenerationError: Generation failed mid-stream
        """
        self.query_engine.validate_query(query)
        logger.info(f"{__name__}:stream_chat - START query_length={len(query)}")
        results = await self._with_retry(lambda: self.query_engine.retrieve(query))
        async with aclosing(self.query_engine.stream_answer(query, results)) as fragments:
            async for fragment in fragments:
                yield fragment
