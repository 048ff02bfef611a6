"""Retrieval response module."""

from rag_contracts.retrieval.models import RagScoredPoint, RetrieveObject
from rag_contracts.retrieval.query import build_retrieval_query
from rag_contracts.retrieval.store import VectorStore

__all__ = [
    "RagScoredPoint",
    "RetrieveObject",
    "VectorStore",
    "build_retrieval_query",
]
