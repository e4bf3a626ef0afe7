"""Protocols for dependency injection."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ApiProtocol(Protocol):
    """Protocol for Figma API transports."""

    def call(self, path: str, args: dict[str, Any], *, method: str = "GET") -> dict[str, Any]:
        """Invoke an API endpoint and return the JSON response."""
        ...
