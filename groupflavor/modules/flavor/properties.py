"""
Opaque flavor properties.

The orchestrator hands a plugin an untyped JSON payload. The payload is kept
as raw bytes and decoded into a fixed schema only when a call needs it.
"""
import json
from typing import Any, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from .errors import ConfigDecodeError

M = TypeVar("M", bound=BaseModel)


class RawProperties:
    """Raw JSON payload decoded on demand."""

    __slots__ = ("_raw",)

    def __init__(self, raw: bytes = b""):
        self._raw = raw

    @classmethod
    def of(cls, value: Any) -> "RawProperties":
        """Wrap an already-parsed JSON value (dict, list, scalar or None)."""
        if value is None:
            return cls()
        try:
            return cls(json.dumps(value).encode("utf-8"))
        except (TypeError, ValueError) as e:
            raise ConfigDecodeError(f"properties are not JSON serializable: {e}") from e

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "RawProperties":
        """Wrap a JSON document as received on the wire."""
        if isinstance(text, str):
            text = text.encode("utf-8")
        return cls(text)

    def raw(self) -> bytes:
        return self._raw

    def is_empty(self) -> bool:
        """True when there is nothing to decode (absent payload or JSON null)."""
        return self._raw.strip() in (b"", b"null")

    def decode(self, schema: Type[M]) -> M:
        """
        Decode the payload into ``schema``.

        An empty payload decodes into the schema's defaults. Unknown fields
        follow the schema's own ``extra`` policy.

        Raises:
            ConfigDecodeError: If the payload is not JSON or does not fit the schema
        """
        if self.is_empty():
            return schema()
        try:
            return schema.model_validate_json(self._raw)
        except ValidationError as e:
            problems = [
                f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
                for err in e.errors()
            ]
            raise ConfigDecodeError(
                f"cannot decode properties into {schema.__name__}: {'; '.join(problems)}",
                errors=e.errors(include_url=False),
            ) from e

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RawProperties):
            return NotImplemented
        return self._raw == other._raw

    def __repr__(self) -> str:
        return f"RawProperties({self._raw!r})"


def as_properties(value: Any) -> RawProperties:
    """
    Normalize whatever the caller passed as properties.

    ``RawProperties`` pass through, ``str`` and ``bytes`` are treated as a JSON
    document, anything else is treated as an already-parsed JSON value.
    """
    if isinstance(value, RawProperties):
        return value
    if isinstance(value, str):
        return RawProperties.from_json(value)
    if isinstance(value, (bytes, bytearray)):
        return RawProperties.from_json(bytes(value))
    return RawProperties.of(value)
