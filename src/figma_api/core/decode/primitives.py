"""JSON primitive decoders and field access helpers.

Every decoder in this package is a plain function taking one JSON value
(as produced by ``json.loads``) and returning a typed value, raising a
``DecodeError`` subclass when the value does not fit. The helpers below
read object fields and prefix any failure with the field name, so nested
errors carry their full path.
"""

from collections.abc import Callable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, TypeVar

from figma_api.errors import DecodeError, MissingFieldError, UnrecognizedEnumError, WrongTypeError

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

Decoder = Callable[[Any], T]


def expect_object(value: Any) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise WrongTypeError("an object", value)
    return value


def expect_array(value: Any) -> list[Any]:
    if not isinstance(value, list):
        raise WrongTypeError("an array", value)
    return value


def string(value: Any) -> str:
    if not isinstance(value, str):
        raise WrongTypeError("a string", value)
    return value


def number(value: Any) -> float:
    # bool is a subclass of int; JSON true/false is never a number.
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise WrongTypeError("a number", value)
    return float(value)


def integer(value: Any) -> int:
    if isinstance(value, bool):
        raise WrongTypeError("an integer", value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if not isinstance(value, int):
        raise WrongTypeError("an integer", value)
    return value


def boolean(value: Any) -> bool:
    if not isinstance(value, bool):
        raise WrongTypeError("a boolean", value)
    return value


def list_of(decoder: Decoder[T]) -> Decoder[tuple[T, ...]]:
    """Lift an element decoder to a JSON array decoder producing a tuple."""

    def decode(value: Any) -> tuple[T, ...]:
        items = expect_array(value)
        result: list[T] = []
        for index, item in enumerate(items):
            try:
                result.append(decoder(item))
            except DecodeError as e:
                raise e.within(index) from None
        return tuple(result)

    return decode


def enum_of(enum_cls: type[E]) -> Decoder[E]:
    """Decoder for a closed set of server string literals.

    The enum's member values are the literals the server sends.
    """

    def decode(value: Any) -> E:
        literal = string(value)
        try:
            return enum_cls(literal)
        except ValueError:
            raise UnrecognizedEnumError(enum_cls.__name__, literal) from None

    return decode


def required(obj: dict[str, Any], key: str, decoder: Decoder[T]) -> T:
    """Decode a field that must be present (and not null)."""
    if key not in obj or obj[key] is None:
        raise MissingFieldError(key)
    try:
        return decoder(obj[key])
    except DecodeError as e:
        raise e.within(key) from None


def optional(obj: dict[str, Any], key: str, decoder: Decoder[T], default: T) -> T:
    """Decode a field, falling back to ``default`` when absent or null."""
    if obj.get(key) is None:
        return default
    try:
        return decoder(obj[key])
    except DecodeError as e:
        raise e.within(key) from None


def nullable(obj: dict[str, Any], key: str, decoder: Decoder[T]) -> T | None:
    return optional(obj, key, decoder, None)


def dict_of(decoder: Decoder[T]) -> Decoder[Mapping[str, T]]:
    """Lift a value decoder to a decoder of a JSON object with arbitrary keys.

    The result is a read-only mapping.
    """

    def decode(value: Any) -> Mapping[str, T]:
        result: dict[str, T] = {}
        for key, item in expect_object(value).items():
            try:
                result[key] = decoder(item)
            except DecodeError as e:
                raise e.within(key) from None
        return MappingProxyType(result)

    return decode
