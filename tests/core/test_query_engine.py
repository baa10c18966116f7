"""
Test suite for the RAG query engine.

Indexes documents through the ingestion worker into an in-memory Qdrant
collection, then answers with FakeListChatModel-backed generation.

System role: Verification of grounded Q&A orchestration
"""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from conftest import (
    COLLECTION_NAME,
    EMBEDDING_DIMENSION,
    LOADER_PATH,
    fake_loader,
    make_text,
    message_for,
)
from pdfchat.boundary.embeddings.base import EmbeddingProvider
from pdfchat.boundary.embeddings.langchain_provider import LangChainEmbeddingProvider
from pdfchat.boundary.llm.base import GenerationOptions, GenerationProvider
from pdfchat.boundary.llm.chat_model_provider import ChatModelGenerationProvider
from pdfchat.boundary.vdb.base import VectorIndex
from pdfchat.boundary.vdb.qdrant_index import QdrantVectorIndex
from pdfchat.boundary.vdb.vector_schemas import SearchResult
from pdfchat.core.document_processing import IngestionWorker
from pdfchat.core.exceptions import GenerationError, ValidationError
from pdfchat.core.rag_query import NO_CONTEXT_ANSWER, RAGQueryEngine

DOCUMENT_TEXT = (
    "The Treaty of Westphalia was signed in 1648 and ended the Thirty Years' War. "
    "It established the principle of state sovereignty in Europe."
)


async def ingest(
    embedding_provider: LangChainEmbeddingProvider,
    vector_index: QdrantVectorIndex,
    path: Path,
    text: str,
) -> None:
    worker = IngestionWorker(
        embedding_provider=embedding_provider,
        vector_index=vector_index,
        collection_name=COLLECTION_NAME,
        dimension=EMBEDDING_DIMENSION,
    )
    with patch(LOADER_PATH, fake_loader({str(path): [text]})):
        await worker.process(message_for(path))


def make_engine(embedding_provider, vector_index, generation_provider, top_k: int = 5) -> RAGQueryEngine:
    return RAGQueryEngine(
        embedding_provider=embedding_provider,
        vector_index=vector_index,
        generation_provider=generation_provider,
        collection_name=COLLECTION_NAME,
        top_k=top_k,
    )


async def collect(stream) -> list[str]:
    return [fragment async for fragment in stream]


class TestValidateQuery:
    """Test suite for RAGQueryEngine.validate_query."""

    @pytest.mark.parametrize("query", ["", "   ", "\n\t", None])
    def test_blank_query_should_raise(self, query) -> None:
        """Test empty and whitespace-only queries are rejected."""
        # Act & Assert
        with pytest.raises(ValidationError, match="Query is required"):
            RAGQueryEngine.validate_query(query)

    def test_query_should_pass_through_unchanged(self) -> None:
        """Test valid queries are not modified."""
        # Act & Assert
        assert RAGQueryEngine.validate_query("  When?  ") == "  When?  "

    @pytest.mark.asyncio
    async def test_blank_query_should_not_call_providers(self) -> None:
        """Test validation happens before embedding."""
        # Arrange
        embedding = AsyncMock(spec=EmbeddingProvider)
        engine = make_engine(embedding, AsyncMock(spec=VectorIndex), AsyncMock(spec=GenerationProvider))

        # Act & Assert
        with pytest.raises(ValidationError):
            await engine.ainvoke("   ")

        embedding.embed.assert_not_awaited()


class TestAnswer:
    """Test suite for batch answers."""

    @pytest.mark.asyncio
    async def test_indexed_document_should_ground_answer(
        self,
        embedding_provider: LangChainEmbeddingProvider,
        vector_index: QdrantVectorIndex,
        generation_provider_factory,
        stored_pdf_path: Path,
    ) -> None:
        """Test an uploaded document is retrieved and cited."""
        # Arrange
        await ingest(embedding_provider, vector_index, stored_pdf_path, DOCUMENT_TEXT)
        engine = make_engine(
            embedding_provider,
            vector_index,
            generation_provider_factory(["It was signed in 1648."]),
        )

        # Act
        answer = await engine.ainvoke(DOCUMENT_TEXT)

        # Assert
        assert answer.answer == "It was signed in 1648."
        assert len(answer.sources) == 1
        source = answer.sources[0]
        assert source.rank == 1
        assert source.text_preview == DOCUMENT_TEXT[:200] + "..."
        assert source.source == str(stored_pdf_path)
        assert source.score == pytest.approx(1.0, abs=1e-4)

    @pytest.mark.asyncio
    async def test_middle_chunk_text_should_rank_its_chunk_first(
        self,
        embedding_provider: LangChainEmbeddingProvider,
        vector_index: QdrantVectorIndex,
        generation_provider_factory,
        stored_pdf_path: Path,
    ) -> None:
        """Test querying with one chunk's exact text ranks that chunk above its neighbours."""
        # Arrange
        text = make_text(3000)
        await ingest(embedding_provider, vector_index, stored_pdf_path, text)
        middle_chunk = text[900:1900]
        engine = make_engine(
            embedding_provider,
            vector_index,
            generation_provider_factory(["answer"]),
        )

        # Act
        answer = await engine.ainvoke(middle_chunk)

        # Assert
        assert len(answer.sources) == 4
        top = answer.sources[0]
        assert top.rank == 1
        assert top.text_preview == middle_chunk[:200] + "..."
        assert top.score == pytest.approx(1.0, abs=1e-4)
        scores = [source.score for source in answer.sources]
        assert scores == sorted(scores, reverse=True)
        assert all(score < top.score for score in scores[1:])

    @pytest.mark.asyncio
    async def test_empty_collection_should_return_canned_answer_without_generation(
        self,
        embedding_provider: LangChainEmbeddingProvider,
        vector_index: QdrantVectorIndex,
    ) -> None:
        """Test nothing indexed yields the upload hint and no model call."""
        # Arrange
        build_model = MagicMock()
        engine = make_engine(
            embedding_provider,
            vector_index,
            ChatModelGenerationProvider(build_model),
        )

        # Act
        answer = await engine.ainvoke("What is the capital of France?")

        # Assert
        assert answer.answer == NO_CONTEXT_ANSWER
        assert "upload" in answer.answer.lower()
        assert answer.sources == []
        build_model.assert_not_called()

    @pytest.mark.asyncio
    async def test_top_k_should_limit_sources(
        self,
        embedding_provider: LangChainEmbeddingProvider,
        vector_index: QdrantVectorIndex,
        generation_provider_factory,
        stored_pdf_path: Path,
    ) -> None:
        """Test sources are ranked, limited and ordered by score."""
        # Arrange
        text = make_text(3000)
        await ingest(embedding_provider, vector_index, stored_pdf_path, text)
        engine = make_engine(
            embedding_provider,
            vector_index,
            generation_provider_factory(["answer"]),
            top_k=2,
        )

        # Act
        answer = await engine.ainvoke(text[1800:2800])

        # Assert
        assert [s.rank for s in answer.sources] == [1, 2]
        assert answer.sources[0].score >= answer.sources[1].score
        assert answer.sources[0].text_preview == text[1800:2000] + "..."

    @pytest.mark.asyncio
    async def test_prompt_should_label_chunks_by_rank(self) -> None:
        """Test the system instruction embeds retrieved chunks and the query stays separate."""
        # Arrange
        generation = AsyncMock(spec=GenerationProvider)
        generation.complete.return_value = "answer"
        engine = make_engine(
            AsyncMock(spec=EmbeddingProvider),
            AsyncMock(spec=VectorIndex),
            generation,
        )
        results = [
            SearchResult(id="1", score=0.9, payload={"text": "first chunk", "source": "a.pdf"}),
            SearchResult(id="2", score=0.8, payload={"text": "second chunk", "source": "a.pdf"}),
        ]

        # Act
        await engine.answer("my question", results)

        # Assert
        system_instruction, user_message, options = generation.complete.await_args.args
        assert "[Chunk 1] first chunk\n\n[Chunk 2] second chunk" in system_instruction
        assert "I cannot find this information in the provided document" in system_instruction
        assert user_message == "my question"
        assert options == GenerationOptions(temperature=0.3, max_tokens=2048, top_p=0.9)

    @pytest.mark.asyncio
    async def test_generation_failure_should_propagate(self) -> None:
        """Test generation errors reach the caller."""
        # Arrange
        generation = AsyncMock(spec=GenerationProvider)
        generation.complete.side_effect = GenerationError("model unavailable")
        engine = make_engine(AsyncMock(spec=EmbeddingProvider), AsyncMock(spec=VectorIndex), generation)
        results = [SearchResult(id="1", score=0.5, payload={"text": "t"})]

        # Act & Assert
        with pytest.raises(GenerationError):
            await engine.answer("q", results)


class TestStreamAnswer:
    """Test suite for streamed answers."""

    @pytest.mark.asyncio
    async def test_stream_should_match_batch_answer(
        self,
        embedding_provider: LangChainEmbeddingProvider,
        vector_index: QdrantVectorIndex,
        generation_provider_factory,
        stored_pdf_path: Path,
    ) -> None:
        """Test concatenated fragments equal the batch answer."""
        # Arrange
        await ingest(embedding_provider, vector_index, stored_pdf_path, DOCUMENT_TEXT)
        response = "The treaty was signed in 1648."
        engine = make_engine(embedding_provider, vector_index, generation_provider_factory([response]))

        # Act
        batch = await engine.ainvoke(DOCUMENT_TEXT)
        fragments = await collect(engine.astream(DOCUMENT_TEXT))

        # Assert
        assert len(fragments) > 1
        assert "".join(fragments) == batch.answer

    @pytest.mark.asyncio
    async def test_empty_collection_should_stream_canned_answer(
        self,
        embedding_provider: LangChainEmbeddingProvider,
        vector_index: QdrantVectorIndex,
    ) -> None:
        """Test the canned answer is streamed as one fragment."""
        # Arrange
        build_model = MagicMock()
        engine = make_engine(embedding_provider, vector_index, ChatModelGenerationProvider(build_model))

        # Act
        fragments = await collect(engine.astream("anything"))

        # Assert
        assert fragments == [NO_CONTEXT_ANSWER]
        build_model.assert_not_called()

    @pytest.mark.asyncio
    async def test_mid_stream_failure_should_raise_after_partial_output(
        self,
        generation_provider_factory,
    ) -> None:
        """Test a failing provider stream raises after the fragments already produced."""
        # Arrange
        engine = make_engine(
            AsyncMock(spec=EmbeddingProvider),
            AsyncMock(spec=VectorIndex),
            generation_provider_factory(["Hello world"], error_on_chunk_number=5),
        )
        results = [SearchResult(id="1", score=0.5, payload={"text": "context"})]
        fragments: list[str] = []

        # Act & Assert
        with pytest.raises(GenerationError):
            async for fragment in engine.stream_answer("q", results):
                fragments.append(fragment)

        assert "".join(fragments) == "Hello"
