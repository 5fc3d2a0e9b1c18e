# Shared base model: wire naming, omit-empty encoding and UTC timestamps
from datetime import datetime, timezone
from typing import Any, Dict

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    field_validator,
    model_serializer,
)
from pydantic.fields import FieldInfo
from pydantic_core import PydanticUndefined

OMIT_EMPTY_MARKER = "omit_empty"


def omit_empty_field(default: Any = PydanticUndefined, **kwargs: Any) -> Any:
    """Declare a field that is left out of encoded output when zero-valued."""
    return Field(default, json_schema_extra={OMIT_EMPTY_MARKER: True}, **kwargs)


def is_omit_empty(field: FieldInfo) -> bool:
    extra = field.json_schema_extra
    return isinstance(extra, dict) and bool(extra.get(OMIT_EMPTY_MARKER))


def is_empty_value(value: Any) -> bool:
    """Zero value check used for omit-empty encoding."""
    if value is None:
        return True
    if isinstance(value, bool):
        return value is False
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (str, bytes, list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


class CanonicalBaseModel(BaseModel):
    """Base model for all interchange entities (Pydantic v2).

    Fields carry their snake_case wire name as alias; Python names are
    accepted at construction as well. Unknown vendor keys are ignored.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("*", mode="after")
    @classmethod
    def _normalize_datetimes(cls, value: Any) -> Any:
        # Naive timestamps are taken as UTC
        if isinstance(value, datetime):
            if value.tzinfo is None:
                return value.replace(tzinfo=timezone.utc)
            return value.astimezone(timezone.utc)
        return value

    @model_serializer(mode="wrap")
    def _serialize(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo) -> Any:
        data = handler(self)
        if not isinstance(data, dict):
            return data
        for name, field in type(self).model_fields.items():
            if not is_omit_empty(field):
                continue
            key = field.alias if (info.by_alias and field.alias) else name
            if key in data and is_empty_value(data[key]):
                del data[key]
        return self._post_serialize(data, info)

    def _post_serialize(self, data: Dict[str, Any], info: SerializationInfo) -> Dict[str, Any]:
        return data

    def to_wire(self) -> Dict[str, Any]:
        """JSON-compatible mapping using wire field names."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_wire(cls, data: Dict[str, Any]):
        return cls.model_validate(data)

    @classmethod
    def from_json(cls, text: str):
        return cls.model_validate_json(text)
