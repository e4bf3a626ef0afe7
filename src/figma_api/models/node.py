"""Node variants of the Figma document tree.

Each variant is a frozen record. Shared field sets are expressed by the
``NodeBase``/``FrameBase``/``ShapeBase`` hierarchy; the variant itself is
identified by its class (``isinstance`` or ``match``) or by its ``type``
class attribute. Children are not stored on nodes: the decoder wraps every
node in a ``Tree`` (see ``figma_api.models.tree``).
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import ClassVar

from figma_api.models.appearance import Effect, Paint, TypeStyle, TypeStyleOverride
from figma_api.models.enums import BlendMode, BooleanOperationType, NodeType, StrokeAlign
from figma_api.models.geometry import Color, Rect
from figma_api.models.layout import ExportSetting, LayoutConstraint, LayoutGrid


@dataclass(frozen=True, kw_only=True)
class NodeBase:
    type: ClassVar[NodeType]

    id: str
    name: str
    is_visible: bool = True


@dataclass(frozen=True, kw_only=True)
class Document(NodeBase):
    type: ClassVar[NodeType] = NodeType.DOCUMENT


@dataclass(frozen=True, kw_only=True)
class Canvas(NodeBase):
    """A page."""

    type: ClassVar[NodeType] = NodeType.CANVAS

    background_color: Color
    export_settings: tuple[ExportSetting, ...] = ()
    prototype_start_node_id: str | None = None


@dataclass(frozen=True, kw_only=True)
class FrameBase(NodeBase):
    """Fields shared by frames, groups, components and instances."""

    background_color: Color
    blend_mode: BlendMode
    constraints: LayoutConstraint
    absolute_bounding_box: Rect
    clips_content: bool
    export_settings: tuple[ExportSetting, ...] = ()
    preserve_ratio: bool = False
    transition_node_id: str | None = None
    opacity: float = 1.0
    layout_grids: tuple[LayoutGrid, ...] = ()
    effects: tuple[Effect, ...] = ()
    is_mask: bool = False


@dataclass(frozen=True, kw_only=True)
class Frame(FrameBase):
    type: ClassVar[NodeType] = NodeType.FRAME


@dataclass(frozen=True, kw_only=True)
class Group(FrameBase):
    type: ClassVar[NodeType] = NodeType.GROUP


@dataclass(frozen=True, kw_only=True)
class Component(FrameBase):
    """A master definition that instances are created from."""

    type: ClassVar[NodeType] = NodeType.COMPONENT


@dataclass(frozen=True, kw_only=True)
class Instance(FrameBase):
    """A placed copy of a component; ``component_id`` is the master's node id."""

    type: ClassVar[NodeType] = NodeType.INSTANCE

    component_id: str


@dataclass(frozen=True, kw_only=True)
class ShapeBase(NodeBase):
    """Fields shared by vector-like nodes."""

    blend_mode: BlendMode
    constraints: LayoutConstraint
    absolute_bounding_box: Rect
    strokes: tuple[Paint, ...]
    stroke_weight: float
    stroke_align: StrokeAlign
    export_settings: tuple[ExportSetting, ...] = ()
    preserve_ratio: bool = False
    transition_node_id: str | None = None
    opacity: float = 1.0
    effects: tuple[Effect, ...] = ()
    is_mask: bool = False
    fills: tuple[Paint, ...] = ()


@dataclass(frozen=True, kw_only=True)
class Vector(ShapeBase):
    type: ClassVar[NodeType] = NodeType.VECTOR


@dataclass(frozen=True, kw_only=True)
class Star(ShapeBase):
    type: ClassVar[NodeType] = NodeType.STAR


@dataclass(frozen=True, kw_only=True)
class Line(ShapeBase):
    type: ClassVar[NodeType] = NodeType.LINE


@dataclass(frozen=True, kw_only=True)
class Ellipse(ShapeBase):
    type: ClassVar[NodeType] = NodeType.ELLIPSE


@dataclass(frozen=True, kw_only=True)
class RegularPolygon(ShapeBase):
    type: ClassVar[NodeType] = NodeType.REGULAR_POLYGON


@dataclass(frozen=True, kw_only=True)
class BooleanOperation(ShapeBase):
    type: ClassVar[NodeType] = NodeType.BOOLEAN_OPERATION

    boolean_operation: BooleanOperationType


@dataclass(frozen=True, kw_only=True)
class Rectangle(ShapeBase):
    type: ClassVar[NodeType] = NodeType.RECTANGLE

    corner_radius: float = 0.0


@dataclass(frozen=True, kw_only=True)
class Text(ShapeBase):
    """A text layer.

    ``character_style_overrides`` has one entry per character of
    ``characters`` (trailing zeros may be omitted by the server); each entry is
    a key into ``style_override_table``, where 0 means the node's own style.
    """

    type: ClassVar[NodeType] = NodeType.TEXT

    characters: str
    style: TypeStyle
    character_style_overrides: tuple[int, ...] = ()
    # Read-only view; left out of the hash since mappings are unhashable.
    style_override_table: Mapping[int, TypeStyleOverride] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )

    def style_at(self, index: int) -> TypeStyle:
        """Resolve the effective style of the character at ``index``."""
        if index < len(self.character_style_overrides):
            override = self.style_override_table.get(self.character_style_overrides[index])
            if override is not None:
                return override.apply_to(self.style)
        return self.style


@dataclass(frozen=True, kw_only=True)
class Slice(NodeBase):
    type: ClassVar[NodeType] = NodeType.SLICE

    absolute_bounding_box: Rect
    export_settings: tuple[ExportSetting, ...] = ()


Node = (
    Document
    | Canvas
    | Frame
    | Group
    | Component
    | Instance
    | Vector
    | Star
    | Line
    | Ellipse
    | RegularPolygon
    | BooleanOperation
    | Rectangle
    | Text
    | Slice
)

# Variants that may own child nodes. Every other variant decodes with no children.
CONTAINER_TYPES: frozenset[NodeType] = frozenset(
    {
        NodeType.DOCUMENT,
        NodeType.CANVAS,
        NodeType.FRAME,
        NodeType.GROUP,
        NodeType.COMPONENT,
        NodeType.BOOLEAN_OPERATION,
    }
)
