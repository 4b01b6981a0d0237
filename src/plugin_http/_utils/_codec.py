import json
from functools import lru_cache
from typing import Any, Optional, Protocol, Type, TypeVar, Union, runtime_checkable

from pydantic import TypeAdapter, ValidationError

from ..models.errors import DeserializationError

T = TypeVar("T")


@runtime_checkable
class Codec(Protocol):
    """Translates between JSON wire text and typed values."""

    def encode(self, value: Any) -> str:
        """Serialize a value to JSON text."""
        ...

    def decode(self, content: Union[str, bytes], result_type: Optional[Type[T]]) -> T:
        """Parse JSON text into an instance of `result_type`.

        Raises:
            DeserializationError: If the content is not valid JSON or does not
                validate against `result_type`.
        """
        ...


@lru_cache(maxsize=256)
def _adapter(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(result_type)


class JsonCodec:
    """JSON codec backed by pydantic type adapters.

    Serialization omits null fields and writes date/time values as ISO-8601
    text. Parsing tolerates unescaped control characters inside strings.
    Instances hold no per-call state and can be shared across threads.
    """

    def __init__(self, *, exclude_none: bool = True, by_alias: bool = True):
        self._exclude_none = exclude_none
        self._by_alias = by_alias

    def encode(self, value: Any) -> str:
        adapter = _adapter(type(value))
        return adapter.dump_json(
            value, exclude_none=self._exclude_none, by_alias=self._by_alias
        ).decode("utf-8")

    def decode(self, content: Union[str, bytes], result_type: Optional[Type[T]]) -> T:
        target = Any if result_type is None else result_type
        if isinstance(content, bytes):
            try:
                content = content.decode("utf-8")
            except UnicodeDecodeError as e:
                raise DeserializationError(target, str(e)) from e
        try:
            # strict=False lets raw control characters through inside strings
            data = json.loads(content, strict=False)
        except json.JSONDecodeError as e:
            raise DeserializationError(target, str(e)) from e
        try:
            return _adapter(target).validate_python(data)
        except ValidationError as e:
            raise DeserializationError(target, str(e)) from e
