"""
RAG system prompt.

Defines the grounding instruction given to the generation provider and the
context block built from retrieved chunks.

Dependencies: langchain_core.prompts
System role: Prompt template for grounded answers
"""

from collections.abc import Sequence

from langchain_core.prompts import PromptTemplate

from pdfchat.boundary.vdb.vector_schemas import SearchResult

NOT_FOUND_STATEMENT = "I cannot find this information in the provided document"

SYSTEM_PROMPT = """You are a helpful AI assistant that answers questions based STRICTLY on the provided PDF document context.

CRITICAL RULES:
1. ONLY use information from the context below to answer questions
2. If the answer is not in the context, say "{not_found}"
3. DO NOT use your general knowledge or make up information
4. Quote relevant parts from the context when answering
5. If the context is insufficient, ask for clarification or state what information is missing
6. Be concise and accurate

CONTEXT FROM PDF DOCUMENT:
{context}

Remember: Your answer must be based ONLY on the context above. If you cannot answer from the context, clearly state that."""

RAG_SYSTEM_PROMPT = PromptTemplate.from_template(SYSTEM_PROMPT).partial(
    not_found=NOT_FOUND_STATEMENT,
)


def format_context(results: Sequence[SearchResult]) -> str:
    """
    Label retrieved chunks by rank and join them.

    Args:
        results: Search results in descending score order

    Returns:
        str: "[Chunk 1] ..." blocks separated by blank lines
    """
    return "\n\n".join(
        f"[Chunk {rank}] {result.text}" for rank, result in enumerate(results, start=1)
    )


def build_system_instruction(results: Sequence[SearchResult]) -> str:
    """
    Render the system instruction for a set of retrieved chunks.

    Args:
        results: Search results in descending score order

    Returns:
        str: Preamble with the context block embedded
    """
    return RAG_SYSTEM_PROMPT.format(context=format_context(results))
