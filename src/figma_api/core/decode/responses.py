"""Decoders for whole API response bodies."""

from datetime import datetime
from types import MappingProxyType
from typing import Any

from figma_api.core.decode.primitives import (
    dict_of,
    expect_object,
    integer,
    list_of,
    nullable,
    optional,
    required,
    string,
)
from figma_api.core.decode.tree import decode_tree
from figma_api.core.decode.values import decode_vector
from figma_api.errors import WrongTypeError
from figma_api.models.node import Node
from figma_api.models.responses import (
    Comment,
    CommentPosition,
    ComponentMeta,
    ExportResponse,
    FileNodesResponse,
    FileResponse,
    Project,
    ProjectFile,
    User,
    Version,
)
from figma_api.models.tree import Tree


def decode_datetime(value: Any) -> datetime:
    """Decode an ISO 8601 timestamp such as ``2024-03-01T10:20:30.123Z``."""
    text = string(value)
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise WrongTypeError("an ISO 8601 timestamp", text) from None


def _id(value: Any) -> str:
    # Project and team ids arrive as numbers from some endpoints.
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return string(value)


def decode_component_meta(value: Any) -> ComponentMeta:
    obj = expect_object(value)
    return ComponentMeta(
        key=optional(obj, "key", string, ""),
        name=required(obj, "name", string),
        description=optional(obj, "description", string, ""),
    )


def decode_file_response(value: Any) -> FileResponse:
    obj = expect_object(value)
    return FileResponse(
        name=required(obj, "name", string),
        last_modified=required(obj, "lastModified", decode_datetime),
        thumbnail_url=optional(obj, "thumbnailUrl", string, ""),
        version=required(obj, "version", string),
        document=required(obj, "document", decode_tree),
        components=optional(
            obj, "components", dict_of(decode_component_meta), MappingProxyType({})
        ),
        schema_version=optional(obj, "schemaVersion", integer, 0),
    )


def _node_entry(value: Any) -> Tree[Node] | None:
    if value is None:
        return None
    return required(expect_object(value), "document", decode_tree)


def decode_file_nodes_response(value: Any) -> FileNodesResponse:
    obj = expect_object(value)
    return FileNodesResponse(
        name=required(obj, "name", string),
        last_modified=required(obj, "lastModified", decode_datetime),
        version=required(obj, "version", string),
        nodes=required(obj, "nodes", dict_of(_node_entry)),
    )


def decode_user(value: Any) -> User:
    obj = expect_object(value)
    return User(
        handle=required(obj, "handle", string),
        img_url=optional(obj, "img_url", string, ""),
        id=nullable(obj, "id", _id),
    )


def decode_comment_position(value: Any) -> CommentPosition | None:
    """Decode ``client_meta``; only point-shaped positions are modelled."""
    obj = expect_object(value)
    if "x" in obj and "y" in obj:
        return CommentPosition(offset=decode_vector(obj))
    if "node_offset" in obj:
        return CommentPosition(
            offset=required(obj, "node_offset", decode_vector),
            node_id=nullable(obj, "node_id", string),
        )
    return None


def decode_comment(value: Any) -> Comment:
    obj = expect_object(value)
    order_id = obj.get("order_id")
    return Comment(
        id=required(obj, "id", _id),
        message=required(obj, "message", string),
        file_key=required(obj, "file_key", string),
        user=required(obj, "user", decode_user),
        created_at=required(obj, "created_at", decode_datetime),
        order_id=None if order_id is None else str(order_id),
        parent_id=nullable(obj, "parent_id", _id) or None,
        resolved_at=nullable(obj, "resolved_at", decode_datetime),
        client_meta=nullable(obj, "client_meta", decode_comment_position),
    )


def decode_comments_response(value: Any) -> tuple[Comment, ...]:
    return required(expect_object(value), "comments", list_of(decode_comment))


def decode_version(value: Any) -> Version:
    obj = expect_object(value)
    return Version(
        id=required(obj, "id", _id),
        created_at=required(obj, "created_at", decode_datetime),
        user=required(obj, "user", decode_user),
        label=nullable(obj, "label", string),
        description=nullable(obj, "description", string),
    )


def decode_versions_response(value: Any) -> tuple[Version, ...]:
    return required(expect_object(value), "versions", list_of(decode_version))


def decode_project(value: Any) -> Project:
    obj = expect_object(value)
    return Project(id=required(obj, "id", _id), name=required(obj, "name", string))


def decode_team_projects_response(value: Any) -> tuple[Project, ...]:
    return required(expect_object(value), "projects", list_of(decode_project))


def decode_project_file(value: Any) -> ProjectFile:
    obj = expect_object(value)
    return ProjectFile(
        key=required(obj, "key", string),
        name=required(obj, "name", string),
        last_modified=required(obj, "last_modified", decode_datetime),
        thumbnail_url=nullable(obj, "thumbnail_url", string),
    )


def decode_project_files_response(value: Any) -> tuple[ProjectFile, ...]:
    return required(expect_object(value), "files", list_of(decode_project_file))


def decode_export_response(value: Any) -> ExportResponse:
    images = required(expect_object(value), "images", expect_object)
    result: dict[str, str | None] = {}
    for node_id, url in images.items():
        if url is not None and not isinstance(url, str):
            raise WrongTypeError("a URL or null", url).within("images", node_id)
        result[node_id] = url
    return ExportResponse(images=MappingProxyType(result))
