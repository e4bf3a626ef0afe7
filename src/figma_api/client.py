"""High-level client: build an endpoint, send it, decode the response."""

from collections.abc import Sequence
from typing import TypeVar

from loguru import logger

from figma_api import endpoints
from figma_api.endpoints import Endpoint
from figma_api.models.enums import ExportFormat
from figma_api.models.geometry import Vector2D
from figma_api.models.responses import (
    Comment,
    ExportResponse,
    FileNodesResponse,
    FileResponse,
    Project,
    ProjectFile,
    Version,
)
from figma_api.protocols import ApiProtocol

R = TypeVar("R")


class FigmaClient:
    """Typed access to the Figma REST API over any ``ApiProtocol`` transport."""

    def __init__(self, api: ApiProtocol) -> None:
        self._api = api

    def send(self, endpoint: Endpoint[R]) -> R:
        """Execute an endpoint and decode its body.

        Raises:
            DecodeError: When the response does not match the expected schema.
        """
        body = self._api.call(endpoint.path, endpoint.args, method=endpoint.method)
        result = endpoint.decoder(body)
        logger.debug("Decoded {} {!r}", endpoint.method, endpoint.path)
        return result

    def get_file(
        self, file_key: str, *, version: str | None = None, depth: int | None = None
    ) -> FileResponse:
        return self.send(endpoints.get_file(file_key, version=version, depth=depth))

    def get_file_nodes(self, file_key: str, ids: Sequence[str]) -> FileNodesResponse:
        return self.send(endpoints.get_file_nodes(file_key, ids))

    def get_file_versions(self, file_key: str) -> tuple[Version, ...]:
        return self.send(endpoints.get_file_versions(file_key))

    def get_comments(self, file_key: str) -> tuple[Comment, ...]:
        return self.send(endpoints.get_comments(file_key))

    def post_comment(
        self,
        file_key: str,
        message: str,
        *,
        position: Vector2D | None = None,
        node_id: str | None = None,
    ) -> Comment:
        return self.send(
            endpoints.post_comment(file_key, message, position=position, node_id=node_id)
        )

    def export_nodes(
        self,
        file_key: str,
        ids: Sequence[str],
        *,
        format: ExportFormat = ExportFormat.PNG,
        scale: float | None = None,
    ) -> ExportResponse:
        return self.send(endpoints.export_nodes(file_key, ids, format=format, scale=scale))

    def get_team_projects(self, team_id: str) -> tuple[Project, ...]:
        return self.send(endpoints.get_team_projects(team_id))

    def get_project_files(self, project_id: str) -> tuple[ProjectFile, ...]:
        return self.send(endpoints.get_project_files(project_id))
