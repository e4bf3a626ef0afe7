"""Records decoded from whole API responses."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType

from figma_api.models.geometry import Vector2D
from figma_api.models.node import Node
from figma_api.models.tree import Tree


@dataclass(frozen=True)
class ComponentMeta:
    """Side-table entry describing a component, keyed by its node id."""

    key: str
    name: str
    description: str


@dataclass(frozen=True)
class FileResponse:
    name: str
    last_modified: datetime
    thumbnail_url: str
    version: str
    document: Tree[Node]
    components: Mapping[str, ComponentMeta] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )
    schema_version: int = 0


@dataclass(frozen=True)
class FileNodesResponse:
    """Subtrees requested by id; a ``None`` entry is an id the server did not find."""

    name: str
    last_modified: datetime
    version: str
    nodes: Mapping[str, Tree[Node] | None] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )


@dataclass(frozen=True)
class User:
    handle: str
    img_url: str
    id: str | None = None


@dataclass(frozen=True)
class CommentPosition:
    """Where a comment is pinned: an absolute canvas point, optionally relative to a node."""

    offset: Vector2D
    node_id: str | None = None


@dataclass(frozen=True)
class Comment:
    id: str
    message: str
    file_key: str
    user: User
    created_at: datetime
    order_id: str | None = None
    parent_id: str | None = None
    resolved_at: datetime | None = None
    client_meta: CommentPosition | None = None


@dataclass(frozen=True)
class Version:
    id: str
    created_at: datetime
    user: User
    label: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class Project:
    id: str
    name: str


@dataclass(frozen=True)
class ProjectFile:
    key: str
    name: str
    last_modified: datetime
    thumbnail_url: str | None = None


@dataclass(frozen=True)
class ExportResponse:
    """Rendered image URLs keyed by node id; ``None`` marks a node that failed to render."""

    images: Mapping[str, str | None] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )
