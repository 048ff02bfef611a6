"""Contract exception hierarchy.

All custom exceptions inherit from RAGContractError.
Each exception has an error code for structured error handling.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error handling."""

    # General errors (1xxx)
    INTERNAL_ERROR = "RAG-1000"
    CONFIGURATION_ERROR = "RAG-1001"
    VALIDATION_ERROR = "RAG-1002"
    DESERIALIZATION_ERROR = "RAG-1003"

    # Chunking errors (2xxx)
    CHUNK_ERROR = "RAG-2002"

    # Embedding errors (3xxx)
    EMBEDDING_SERVICE_ERROR = "RAG-3000"
    EMBEDDING_COUNT_MISMATCH = "RAG-3001"

    # Retrieval errors (6xxx)
    RETRIEVAL_ERROR = "RAG-6000"


class RAGContractError(Exception):
    """Base exception for all contract errors.

    Attributes:
        message: Human-readable error message.
        code: Structured error code.
        details: Additional error context.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for error payloads."""
        return {
            "error": {
                "code": self.code.value,
                "message": self.message,
                "details": self.details,
            }
        }


class ConfigurationError(RAGContractError):
    """Configuration or environment error."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR, details)


class ValidationError(RAGContractError):
    """Semantic input error raised by helpers, never by the schemas."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.VALIDATION_ERROR, details)


class DeserializationError(RAGContractError):
    """Wire payload does not match a schema.

    ``details["errors"]`` holds one entry per offending field.
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.DESERIALIZATION_ERROR, details)

    @property
    def fields(self) -> list[str]:
        """Dotted paths of the offending fields."""
        return [e["field"] for e in self.details.get("errors", [])]


class DocumentError(RAGContractError):
    """Chunking collaborator error."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CHUNK_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class EmbeddingError(RAGContractError):
    """Embedding collaborator error."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.EMBEDDING_SERVICE_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class RetrievalError(RAGContractError):
    """Vector-store collaborator error."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.RETRIEVAL_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)
