"""
Shared test fixtures and configuration for entire test suite.

Provides: fake embeddings, in-memory Qdrant index, fake chat models,
temporary upload storage and sample PDF files
Dependencies: pytest, pytest-asyncio, langchain_core, qdrant_client, pypdf
System role: Test infrastructure and fixture management
"""

from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from langchain_core.documents import Document as LangChainDocument
from langchain_core.embeddings import DeterministicFakeEmbedding
from langchain_core.language_models import FakeListChatModel
from pypdf import PdfWriter
from qdrant_client import AsyncQdrantClient

from pdfchat.boundary.embeddings.langchain_provider import LangChainEmbeddingProvider
from pdfchat.boundary.llm.chat_model_provider import ChatModelGenerationProvider
from pdfchat.boundary.storage.local_store import LocalDocumentStore
from pdfchat.boundary.vdb.qdrant_index import QdrantVectorIndex
from pdfchat.core.document_processing.configs import DocumentPipelineSettings
from pdfchat.core.document_processing.models import IngestionMessage

EMBEDDING_DIMENSION = 32
COLLECTION_NAME = "pdf-with-chat-test"
LOADER_PATH = "pdfchat.core.document_processing.tasks.extraction_task.PyPDFLoader"


def make_text(length: int) -> str:
    """Build deterministic text where every window is distinct."""
    words = []
    total = 0
    i = 0
    while total < length:
        word = f"word{i} "
        words.append(word)
        total += len(word)
        i += 1
    return "".join(words)[:length]


def fake_loader(pages_by_path: dict[str, list[str]]) -> MagicMock:
    """
    Build a stand-in for PyPDFLoader returning fixed pages per file path.

    Args:
        pages_by_path: Page texts keyed by file path

    Returns:
        MagicMock: Callable replacing the loader class
    """

    def build(path: str) -> MagicMock:
        loader = MagicMock()
        loader.load.return_value = [
            LangChainDocument(page_content=text, metadata={"source": path, "page": page})
            for page, text in enumerate(pages_by_path[path])
        ]
        return loader

    return MagicMock(side_effect=build)


def message_for(path: Path) -> IngestionMessage:
    """Queue message for a stored file."""
    return IngestionMessage(
        filename=path.name,
        destination=f"{path.parent}/",
        path=str(path),
    )


@pytest.fixture
def fake_embeddings() -> DeterministicFakeEmbedding:
    """Provide deterministic LangChain embeddings."""
    return DeterministicFakeEmbedding(size=EMBEDDING_DIMENSION)


@pytest.fixture
def embedding_provider(fake_embeddings: DeterministicFakeEmbedding) -> LangChainEmbeddingProvider:
    """Provide embedding provider over deterministic fake embeddings."""
    return LangChainEmbeddingProvider(fake_embeddings, model_name="deterministic-fake")


@pytest_asyncio.fixture
async def qdrant_client():
    """
    Provide an in-memory Qdrant client.

    Yields:
        AsyncQdrantClient: Local-mode client, closed after the test
    """
    client = AsyncQdrantClient(location=":memory:")
    yield client
    await client.close()


@pytest.fixture
def vector_index(qdrant_client: AsyncQdrantClient) -> QdrantVectorIndex:
    """Provide vector index over the in-memory client."""
    return QdrantVectorIndex(qdrant_client)


@pytest.fixture
def generation_provider_factory() -> Callable[..., ChatModelGenerationProvider]:
    """
    Provide a factory for generation providers over FakeListChatModel.

    Returns:
        Callable: factory(responses, **model_kwargs) -> ChatModelGenerationProvider
    """

    def factory(responses: list[str], **model_kwargs) -> ChatModelGenerationProvider:
        return ChatModelGenerationProvider(
            lambda options: FakeListChatModel(responses=responses, **model_kwargs),
            model_name="fake-list",
        )

    return factory


@pytest.fixture
def pipeline_settings() -> DocumentPipelineSettings:
    """Provide default chunking settings (1000 / 100)."""
    return DocumentPipelineSettings(chunk_size=1000, chunk_overlap=100)


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    """Provide an empty upload directory."""
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def document_store(upload_dir: Path) -> LocalDocumentStore:
    """Provide local upload storage in a temp directory."""
    return LocalDocumentStore(upload_dir)


@pytest.fixture
def blank_pdf_path(upload_dir: Path) -> Path:
    """
    Write a one-page PDF without any text.

    Returns:
        Path: Path of the stored PDF
    """
    writer = PdfWriter()
    writer.add_blank_page(width=612, height=792)
    path = upload_dir / "pdf-1718000000000-111111111.pdf"
    with path.open("wb") as f:
        writer.write(f)
    return path


@pytest.fixture
def stored_pdf_path(upload_dir: Path) -> Path:
    """Path of a stored upload whose content is supplied by a patched loader."""
    path = upload_dir / "pdf-1718000000000-222222222.pdf"
    path.write_bytes(b"%PDF-1.4 placeholder")
    return path
