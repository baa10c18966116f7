"""
Retrieval-augmented query pipeline.

Exports: RAGQueryEngine, ChatAnswer, AnswerSource, NO_CONTEXT_ANSWER
"""

from pdfchat.core.rag_query.query_engine import NO_CONTEXT_ANSWER, RAGQueryEngine
from pdfchat.core.rag_query.schemas import AnswerSource, ChatAnswer

__all__ = ["RAGQueryEngine", "ChatAnswer", "AnswerSource", "NO_CONTEXT_ANSWER"]
