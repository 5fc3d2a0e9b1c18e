# Opaque vendor payload kept alongside canonical records for audit/debugging
import base64
import binascii
from enum import Enum
from typing import Annotated, Any, Optional

from pydantic import (
    BeforeValidator,
    JsonValue,
    SerializationInfo,
    TypeAdapter,
    ValidationError,
    field_serializer,
    model_validator,
)

from .base import CanonicalBaseModel


_JSON_VALUE = TypeAdapter(JsonValue)


class RawDataKind(str, Enum):
    STRUCTURED = "structured"  # any JSON-compatible value
    BYTES = "bytes"            # unmodified wire bytes, base64 on the wire


class RawData(CanonicalBaseModel):
    """Tagged holder for unmodeled vendor data.

    The canonical model never looks inside ``value``; consumers switch on
    ``kind`` to recover it.
    """
    kind: RawDataKind
    value: Any = None

    @model_validator(mode="before")
    @classmethod
    def _decode_bytes(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("kind") == RawDataKind.BYTES.value:
            value = data.get("value")
            if isinstance(value, str):
                try:
                    decoded = base64.b64decode(value, validate=True)
                except binascii.Error as e:
                    raise ValueError(f"bytes payload is not valid base64: {e}") from e
                data = {**data, "value": decoded}
            elif isinstance(value, (bytearray, memoryview)):
                data = {**data, "value": bytes(value)}
        return data

    @model_validator(mode="after")
    def _check_structured(self) -> "RawData":
        # Bytes nested in a structured value have no JSON form; wrap them on their own
        if self.kind is RawDataKind.STRUCTURED:
            try:
                _JSON_VALUE.validate_python(self.value)
            except ValidationError as e:
                raise ValueError(f"structured payload is not JSON-compatible: {e}") from e
        return self

    @field_serializer("value")
    def _encode_value(self, value: Any, info: SerializationInfo) -> Any:
        if self.kind is RawDataKind.BYTES and info.mode_is_json() and isinstance(value, bytes):
            return base64.b64encode(value).decode("ascii")
        return value

    @classmethod
    def wrap(cls, payload: Any) -> "RawData":
        """Pick the variant for an arbitrary vendor payload."""
        if isinstance(payload, RawData):
            return payload
        if isinstance(payload, (bytes, bytearray, memoryview)):
            return cls(kind=RawDataKind.BYTES, value=bytes(payload))
        return cls(kind=RawDataKind.STRUCTURED, value=payload)

    @property
    def is_structured(self) -> bool:
        return self.kind is RawDataKind.STRUCTURED

    @property
    def is_bytes(self) -> bool:
        return self.kind is RawDataKind.BYTES


def _is_tagged(value: Any) -> bool:
    return (
        isinstance(value, dict)
        and set(value) == {"kind", "value"}
        and isinstance(value["kind"], str)
        and value["kind"] in {kind.value for kind in RawDataKind}
    )


def coerce_raw_data(value: Any) -> Any:
    """Wrap bare payloads; tagged mappings and RawData pass through."""
    if value is None or isinstance(value, RawData) or _is_tagged(value):
        return value
    return RawData.wrap(value)


RawPayload = Annotated[Optional[RawData], BeforeValidator(coerce_raw_data)]
