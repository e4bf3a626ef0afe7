"""Exceptions raised by the decoders and the HTTP transport."""

from typing import Any


class DecodeError(ValueError):
    """A JSON value could not be decoded into the expected typed value.

    ``path`` lists the object keys and array indices leading from the value
    handed to the top-level decoder down to the failure site. Decoders that
    descend into a field prepend that field with ``within``, so the message
    of an error raised deep in a document names the exact location.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.path: list[str | int] = []

    def within(self, *segments: str | int) -> "DecodeError":
        """Prepend path segments (outermost first) and return self for re-raising."""
        self.path[:0] = segments
        return self

    @property
    def location(self) -> str:
        out = ""
        for segment in self.path:
            if isinstance(segment, int):
                out += f"[{segment}]"
            elif out:
                out += f".{segment}"
            else:
                out = segment
        return out

    def __str__(self) -> str:
        if not self.path:
            return self.message
        return f"{self.message} at {self.location}"


class MissingFieldError(DecodeError):
    """A required object field is absent."""

    def __init__(self, field: str) -> None:
        super().__init__(f"missing required field {field!r}")
        self.field = field


class WrongTypeError(DecodeError):
    """A field holds a JSON value of the wrong primitive type."""

    def __init__(self, expected: str, value: Any) -> None:
        shown = repr(value)
        if len(shown) > 60:
            shown = shown[:57] + "..."
        super().__init__(f"expected {expected}, got {type(value).__name__} {shown}")
        self.expected = expected
        self.value = value


class UnrecognizedEnumError(DecodeError):
    """A string literal is outside the closed set an enumeration accepts."""

    def __init__(self, enum_name: str, literal: str) -> None:
        super().__init__(f"unrecognized {enum_name} value: {literal!r}")
        self.enum_name = enum_name
        self.literal = literal


class UnsupportedNodeTypeError(UnrecognizedEnumError):
    """A node object carries a ``type`` the tree decoder has no variant for."""

    def __init__(self, literal: str) -> None:
        super().__init__("NodeType", literal)
        self.message = f"unsupported node type: {literal}"


class UnsupportedPaintError(UnrecognizedEnumError):
    """A paint type the server emits but this binding does not model (EMOJI)."""

    def __init__(self, literal: str) -> None:
        super().__init__("PaintType", literal)
        self.message = f"unsupported paint type: {literal}"


class ApiError(RuntimeError):
    """The Figma API answered with an error payload."""

    def __init__(self, path: str, status: int | None, detail: str) -> None:
        super().__init__(f"API call failed: {path!r} -> ({status!r}, {detail!r})")
        self.path = path
        self.status = status
        self.detail = detail
