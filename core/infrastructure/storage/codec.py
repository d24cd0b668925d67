"""
Record codec.

Converts domain entities to and from the JSON text held by a
collection store. Decoding is strict: the stored object must carry
exactly the entity's fields with values of the declared types, otherwise
CorruptRecordError is raised. A record is never partially decoded.
"""
import json
from dataclasses import fields
from enum import Enum
from typing import Any, Dict, Generic, Optional, Type, TypeVar, Union, get_args, get_origin, get_type_hints

from core.domain.exceptions import CorruptRecordError

R = TypeVar("R")


class RecordCodec(Generic[R]):
    """
    Strict JSON codec for a frozen dataclass entity type.

    Nested sequences of entities (e.g. chat messages) are declared
    through `nested`, mapping a field name to the codec of its items.
    """

    def __init__(self, record_type: Type[R], nested: Optional[Dict[str, "RecordCodec"]] = None):
        self.record_type = record_type
        self.nested = nested or {}
        self._field_names = [f.name for f in fields(record_type)]
        self._hints = get_type_hints(record_type)

    @property
    def name(self) -> str:
        return self.record_type.__name__

    def to_native(self, record: R) -> Dict[str, Any]:
        """Convert a record to a JSON-compatible dict."""
        if not isinstance(record, self.record_type):
            raise TypeError(f"Expected {self.name}, got {type(record).__name__}")
        data = {}
        for name in self._field_names:
            value = getattr(record, name)
            codec = self.nested.get(name)
            if codec is not None:
                value = [codec.to_native(item) for item in value]
            elif isinstance(value, Enum):
                value = value.value
            data[name] = value
        return data

    def encode(self, record: R) -> str:
        """Encode a record to its stored JSON text."""
        return json.dumps(self.to_native(record), sort_keys=True, separators=(",", ":"))

    def decode(self, payload: str, record_id: Optional[str] = None) -> R:
        """
        Decode stored JSON text into a record.

        Args:
            payload: Stored representation
            record_id: Id the payload is stored under (for error reporting)

        Returns:
            Decoded record

        Raises:
            CorruptRecordError: If the payload does not match the record shape
        """
        try:
            data = json.loads(payload)
        except (TypeError, ValueError) as e:
            raise CorruptRecordError(f"{self.name} payload is not valid JSON: {e}", record_id) from e
        return self.from_native(data, record_id)

    def from_native(self, data: Any, record_id: Optional[str] = None) -> R:
        """Build a record from a decoded JSON object."""
        if not isinstance(data, dict):
            raise CorruptRecordError(f"{self.name} payload is not an object", record_id)

        expected = set(self._field_names)
        missing = expected - data.keys()
        unknown = data.keys() - expected
        if missing or unknown:
            raise CorruptRecordError(
                f"{self.name} payload fields mismatch "
                f"(missing={sorted(missing)}, unknown={sorted(unknown)})",
                record_id,
            )

        values = {}
        for name in self._field_names:
            value = data[name]
            codec = self.nested.get(name)
            if codec is not None:
                if not isinstance(value, list):
                    raise CorruptRecordError(f"{self.name}.{name} must be a list", record_id)
                values[name] = tuple(codec.from_native(item, record_id) for item in value)
            else:
                values[name] = self._check_type(name, value, self._hints[name], record_id)

        try:
            return self.record_type(**values)
        except (TypeError, ValueError) as e:
            raise CorruptRecordError(f"{self.name} payload rejected: {e}", record_id) from e

    def _check_type(self, name: str, value: Any, hint: Any, record_id: Optional[str]) -> Any:
        origin = get_origin(hint)
        if origin is Union:
            args = get_args(hint)
            if value is None and type(None) in args:
                return None
            non_null = [arg for arg in args if arg is not type(None)]
            if len(non_null) == 1:
                return self._check_type(name, value, non_null[0], record_id)
            return value
        if isinstance(hint, type) and issubclass(hint, Enum):
            try:
                return hint(value)
            except ValueError as e:
                raise CorruptRecordError(f"{self.name}.{name} has unknown value {value!r}", record_id) from e
        if hint is int:
            if isinstance(value, bool) or not isinstance(value, int):
                raise CorruptRecordError(f"{self.name}.{name} must be an integer", record_id)
            return value
        if hint is str:
            if not isinstance(value, str):
                raise CorruptRecordError(f"{self.name}.{name} must be a string", record_id)
            return value
        if hint is dict or origin is dict:
            if not isinstance(value, dict):
                raise CorruptRecordError(f"{self.name}.{name} must be an object", record_id)
            return value
        return value
