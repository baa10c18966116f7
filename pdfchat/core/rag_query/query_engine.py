"""
Retrieval-augmented query engine.

Embeds a question, searches the vector index, builds a grounded prompt and
asks the generation provider for an answer, either in one piece or as a
stream of fragments.

Dependencies: pdfchat.boundary capabilities, pdfchat.core.rag_query.prompt
System role: RAG Q&A orchestration
"""

import logging
from collections.abc import AsyncGenerator, Sequence
from contextlib import aclosing

from pdfchat.boundary.embeddings.base import EmbeddingProvider
from pdfchat.boundary.llm.base import GenerationOptions, GenerationProvider
from pdfchat.boundary.vdb.base import VectorIndex
from pdfchat.boundary.vdb.vector_schemas import SearchResult
from pdfchat.core.exceptions import ValidationError
from pdfchat.core.rag_query.prompt import build_system_instruction
from pdfchat.core.rag_query.schemas import AnswerSource, ChatAnswer, preview

logger = logging.getLogger(__name__)

NO_CONTEXT_ANSWER = (
    "I cannot find this information in the uploaded document. "
    "Please make sure you've uploaded a PDF document first."
)


class RAGQueryEngine:
    """
    Grounded question answering over the shared collection.

    Holds no per-request state, so one instance serves concurrent requests.
    """

    def __init__(
        self,
        embedding_provider: EmbeddingProvider,
        vector_index: VectorIndex,
        generation_provider: GenerationProvider,
        collection_name: str,
        top_k: int = 5,
        options: GenerationOptions | None = None,
    ) -> None:
        """
        Initialize engine with its capabilities.

        Args:
            embedding_provider: Embedding capability for queries
            vector_index: Vector index to search
            generation_provider: Chat model capability
            collection_name: Collection holding indexed chunks
            top_k: Number of chunks retrieved per query
            options: Decoding parameters (defaults: temperature 0.3, 2048 tokens, top_p 0.9)
        """
        self._embedding_provider = embedding_provider
        self._vector_index = vector_index
        self._generation_provider = generation_provider
        self.collection_name = collection_name
        self.top_k = top_k
        self.options = options or GenerationOptions()

    @staticmethod
    def validate_query(query: str | None) -> str:
        """
        Reject empty or whitespace-only queries.

        Args:
            query: Raw user query

        Returns:
            str: The query, unchanged

        Raises:
            ValidationError: When the query has no content
        """
        if not query or not query.strip():
            raise ValidationError("Query is required", field="query")
        return query

    async def retrieve(self, query: str) -> list[SearchResult]:
        """
        Embed the query and fetch the nearest chunks.

        Args:
            query: Validated user query

        Returns:
            list[SearchResult]: Up to top_k hits, descending by score

        Raises:
            EmbeddingError: Query embedding failed
            VectorIndexError: Search failed
        """
        vector = await self._embedding_provider.embed_query(query)
        results = await self._vector_index.search(
            self.collection_name,
            vector,
            top_k=self.top_k,
            with_payload=True,
        )
        logger.info(
            f"{__name__}:retrieve - Retrieved {len(results)} chunks",
            extra={"collection": self.collection_name, "top_k": self.top_k},
        )
        return results

    @staticmethod
    def build_sources(results: Sequence[SearchResult]) -> list[AnswerSource]:
        """Map search hits to ranked citations."""
        return [
            AnswerSource(
                rank=rank,
                text_preview=preview(result.text),
                score=result.score,
                source=result.source,
            )
            for rank, result in enumerate(results, start=1)
        ]

    async def answer(self, query: str, results: Sequence[SearchResult]) -> ChatAnswer:
        """
        Generate a batch answer from retrieved chunks.

        Args:
            query: Validated user query
            results: Retrieved chunks in descending score order

        Returns:
            ChatAnswer: Answer and sources, or the canned answer when nothing was retrieved

        Raises:
            GenerationError: Generation failed
        """
        if not results:
            logger.info(f"{__name__}:answer - No context found, returning canned answer")
            return ChatAnswer(answer=NO_CONTEXT_ANSWER, sources=[])

        system_instruction = build_system_instruction(results)
        text = await self._generation_provider.complete(system_instruction, query, self.options)
        logger.info(f"{__name__}:answer - Generated {len(text)} characters")
        return ChatAnswer(answer=text, sources=self.build_sources(results))

    async def stream_answer(
        self,
        query: str,
        results: Sequence[SearchResult],
    ) -> AsyncGenerator[str, None]:
        """
        Stream an answer from retrieved chunks.

        Fragments are forwarded as the provider produces them. Normal
        exhaustion marks completion. Closing this generator closes the
        provider stream.

        Args:
            query: Validated user query
            results: Retrieved chunks in descending score order

        Yields:
            str: Answer fragments in arrival order

        Raises:
            GenerationError: Generation failed mid-stream
        """
        if not results:
            logger.info(f"{__name__}:stream_answer - No context found, streaming canned answer")
            yield NO_CONTEXT_ANSWER
            return

        system_instruction = build_system_instruction(results)
        fragment_count = 0
        async with aclosing(
            self._generation_provider.stream(system_instruction, query, self.options)
        ) as fragments:
            async for fragment in fragments:
                fragment_count += 1
                yield fragment

        logger.info(f"{__name__}:stream_answer - Streamed {fragment_count} fragments")

    async def ainvoke(self, query: str) -> ChatAnswer:
        """
        Answer a question in one response.

        Args:
            query: Raw user query

        Returns:
            ChatAnswer: Grounded answer with sources

        Raises:
            ValidationError: Empty query
            EmbeddingError: Query embedding failed
            VectorIndexError: Search failed
            GenerationError: Generation failed
        """
        self.validate_query(query)
        results = await self.retrieve(query)
        return await self.answer(query, results)

    async def astream(self, query: str) -> AsyncGenerator[str, None]:
        """
        Answer a question as a stream of text fragments.

        Args:
            query: Raw user query

        Yields:
            str: Answer fragments in arrival order
        """
        self.validate_query(query)
        results = await self.retrieve(query)
        async with aclosing(self.stream_answer(query, results)) as fragments:
            async for fragment in fragments:
                yield fragment
