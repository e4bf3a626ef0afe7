"""Typed request builders for the Figma REST API.

Each builder returns an ``Endpoint``: the HTTP method, the path relative to
the API base URL, the arguments (query parameters for GET, JSON body
otherwise) and the decoder for the response body. Builders perform no I/O;
``FigmaClient.send`` executes them.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar
from urllib.parse import quote

from figma_api.core.decode.responses import (
    decode_comment,
    decode_comments_response,
    decode_export_response,
    decode_file_nodes_response,
    decode_file_response,
    decode_project_files_response,
    decode_team_projects_response,
    decode_versions_response,
)
from figma_api.core.decode.values import encode_vector
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

R = TypeVar("R")


@dataclass(frozen=True)
class Endpoint(Generic[R]):
    method: str
    path: str
    decoder: Callable[[Any], R]
    args: dict[str, Any] = field(default_factory=dict)


def _segment(value: str) -> str:
    return quote(value, safe="")


def get_file(
    file_key: str,
    *,
    version: str | None = None,
    depth: int | None = None,
    geometry: str | None = None,
) -> Endpoint[FileResponse]:
    """GET /files/:key: the whole document tree.

    ``depth`` limits how deep the server walks; containers below the limit
    come back without children.
    """
    args: dict[str, Any] = {}
    if version is not None:
        args["version"] = version
    if depth is not None:
        args["depth"] = depth
    if geometry is not None:
        args["geometry"] = geometry
    return Endpoint("GET", f"files/{_segment(file_key)}", decode_file_response, args)


def get_file_nodes(file_key: str, ids: Sequence[str]) -> Endpoint[FileNodesResponse]:
    """GET /files/:key/nodes: subtrees for the given node ids."""
    if not ids:
        msg = "get_file_nodes needs at least one node id"
        raise ValueError(msg)
    return Endpoint(
        "GET",
        f"files/{_segment(file_key)}/nodes",
        decode_file_nodes_response,
        {"ids": ",".join(ids)},
    )


def get_file_versions(file_key: str) -> Endpoint[tuple[Version, ...]]:
    return Endpoint("GET", f"files/{_segment(file_key)}/versions", decode_versions_response)


def get_comments(file_key: str) -> Endpoint[tuple[Comment, ...]]:
    return Endpoint("GET", f"files/{_segment(file_key)}/comments", decode_comments_response)


def post_comment(
    file_key: str,
    message: str,
    *,
    position: Vector2D | None = None,
    node_id: str | None = None,
) -> Endpoint[Comment]:
    """POST /files/:key/comments.

    Without ``node_id`` the position is an absolute canvas point; with it,
    the position is an offset from that node.
    """
    if node_id is not None and position is None:
        msg = "post_comment needs a position when node_id is given"
        raise ValueError(msg)
    body: dict[str, Any] = {"message": message}
    if position is not None:
        if node_id is None:
            body["client_meta"] = encode_vector(position)
        else:
            body["client_meta"] = {"node_id": node_id, "node_offset": encode_vector(position)}
    return Endpoint("POST", f"files/{_segment(file_key)}/comments", decode_comment, body)


def export_nodes(
    file_key: str,
    ids: Sequence[str],
    *,
    format: ExportFormat = ExportFormat.PNG,
    scale: float | None = None,
) -> Endpoint[ExportResponse]:
    """GET /images/:key: render nodes and return temporary image URLs.

    ``scale`` must be within 0.01..4 and only applies to raster formats.
    """
    if not ids:
        msg = "export_nodes needs at least one node id"
        raise ValueError(msg)
    args: dict[str, Any] = {"ids": ",".join(ids), "format": format.value.lower()}
    if scale is not None:
        if not 0.01 <= scale <= 4:
            msg = f"Export scale must be within 0.01..4, got {scale!r}"
            raise ValueError(msg)
        args["scale"] = scale
    return Endpoint("GET", f"images/{_segment(file_key)}", decode_export_response, args)


def get_team_projects(team_id: str) -> Endpoint[tuple[Project, ...]]:
    return Endpoint("GET", f"teams/{_segment(team_id)}/projects", decode_team_projects_response)


def get_project_files(project_id: str) -> Endpoint[tuple[ProjectFile, ...]]:
    return Endpoint(
        "GET", f"projects/{_segment(project_id)}/files", decode_project_files_response
    )
