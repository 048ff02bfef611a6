"""Shared base for JSON wire models.

Every contract type serializes with its wire key names and leaves absent
optional values out of the payload instead of emitting ``null``. A model
lists in ``nullable_keys`` the keys that are always emitted.
"""

from typing import Annotated, Any, ClassVar, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    StrictInt,
    model_serializer,
)
from pydantic import ValidationError as PydanticValidationError

from rag_contracts.exceptions import DeserializationError
from rag_contracts.logging_config import get_logger

logger = get_logger(__name__)

# Unsigned counter: negative numbers and non-integers fail to decode.
Count = Annotated[StrictInt, Field(ge=0)]


class WireModel(BaseModel):
    """Immutable model with a fixed JSON wire form."""

    # Attribute names are accepted when constructing in Python; decoding
    # only accepts wire keys.
    model_config = ConfigDict(
        frozen=True,
        validate_by_name=True,
        validate_by_alias=True,
    )

    nullable_keys: ClassVar[frozenset[str]] = frozenset()

    @model_serializer(mode="wrap")
    def serialize_wire(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        """Drop absent optional keys from the serialized form."""
        data = handler(self)
        return {
            key: value
            for key, value in data.items()
            if value is not None or key in self.nullable_keys
        }

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict keyed by wire names."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        """Serialize to a compact JSON string keyed by wire names."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, data: str | bytes) -> Self:
        """Decode a JSON payload.

        Raises:
            DeserializationError: If a field is missing or has the wrong type.
        """
        try:
            return cls.model_validate_json(data, by_alias=True, by_name=False)
        except PydanticValidationError as e:
            raise _deserialization_error(cls.__name__, e) from e

    @classmethod
    def from_dict(cls, data: Any) -> Self:
        """Decode an already-parsed JSON object.

        Raises:
            DeserializationError: If a field is missing or has the wrong type.
        """
        try:
            return cls.model_validate(data, by_alias=True, by_name=False)
        except PydanticValidationError as e:
            raise _deserialization_error(cls.__name__, e) from e


def field_errors(error: PydanticValidationError) -> list[dict[str, str]]:
    """Flatten a pydantic failure into ``{field, type, message}`` entries."""
    return [
        {
            "field": ".".join(str(part) for part in err["loc"]) or "__root__",
            "type": err["type"],
            "message": err["msg"],
        }
        for err in error.errors()
    ]


def _deserialization_error(
    model_name: str,
    error: PydanticValidationError,
) -> DeserializationError:
    """Translate a pydantic failure into a field-level contract error."""
    errors = field_errors(error)
    fields = ", ".join(e["field"] for e in errors)

    logger.warning(
        f"Failed to decode {model_name}",
        extra={"model": model_name, "fields": fields},
    )

    return DeserializationError(
        f"Invalid {model_name} payload: {fields}",
        details={"model": model_name, "errors": errors},
    )
