"""Per-variant node field decoders.

Each decoder reads one node object's own fields and ignores ``children``;
the tree decoder handles recursion. Field sets shared by several variants
are read by ``_frame_fields`` and ``_shape_fields`` and splatted into the
variant constructors.
"""

from collections.abc import Callable
from types import MappingProxyType
from typing import Any

from figma_api.core.decode.appearance import (
    decode_effects,
    decode_paints,
    decode_style_override_table,
    decode_type_style,
)
from figma_api.core.decode.primitives import (
    boolean,
    expect_object,
    integer,
    list_of,
    nullable,
    number,
    optional,
    required,
    string,
)
from figma_api.core.decode.values import (
    decode_blend_mode,
    decode_boolean_operation_type,
    decode_color,
    decode_export_setting,
    decode_layout_constraint,
    decode_layout_grid,
    decode_rect,
    decode_stroke_align,
)
from figma_api.models.enums import NodeType
from figma_api.models.node import (
    BooleanOperation,
    Canvas,
    Component,
    Document,
    Ellipse,
    Frame,
    Group,
    Instance,
    Line,
    Node,
    Rectangle,
    RegularPolygon,
    Slice,
    Star,
    Text,
    Vector,
)

_export_settings = list_of(decode_export_setting)


def _shared_fields(obj: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": required(obj, "id", string),
        "name": required(obj, "name", string),
        "is_visible": optional(obj, "visible", boolean, True),
    }


def _frame_fields(obj: dict[str, Any]) -> dict[str, Any]:
    return {
        **_shared_fields(obj),
        "background_color": required(obj, "backgroundColor", decode_color),
        "export_settings": optional(obj, "exportSettings", _export_settings, ()),
        "blend_mode": required(obj, "blendMode", decode_blend_mode),
        "preserve_ratio": optional(obj, "preserveRatio", boolean, False),
        "constraints": required(obj, "constraints", decode_layout_constraint),
        "transition_node_id": nullable(obj, "transitionNodeID", string),
        "opacity": optional(obj, "opacity", number, 1.0),
        "absolute_bounding_box": required(obj, "absoluteBoundingBox", decode_rect),
        "clips_content": required(obj, "clipsContent", boolean),
        "layout_grids": optional(obj, "layoutGrids", list_of(decode_layout_grid), ()),
        "effects": optional(obj, "effects", decode_effects, ()),
        "is_mask": optional(obj, "isMask", boolean, False),
    }


def _shape_fields(obj: dict[str, Any]) -> dict[str, Any]:
    return {
        **_shared_fields(obj),
        "export_settings": optional(obj, "exportSettings", _export_settings, ()),
        "blend_mode": required(obj, "blendMode", decode_blend_mode),
        "preserve_ratio": optional(obj, "preserveRatio", boolean, False),
        "constraints": required(obj, "constraints", decode_layout_constraint),
        "transition_node_id": nullable(obj, "transitionNodeID", string),
        "opacity": optional(obj, "opacity", number, 1.0),
        "absolute_bounding_box": required(obj, "absoluteBoundingBox", decode_rect),
        "effects": optional(obj, "effects", decode_effects, ()),
        "is_mask": optional(obj, "isMask", boolean, False),
        "fills": optional(obj, "fills", decode_paints, ()),
        "strokes": required(obj, "strokes", decode_paints),
        "stroke_weight": required(obj, "strokeWeight", number),
        "stroke_align": required(obj, "strokeAlign", decode_stroke_align),
    }


def decode_document(obj: dict[str, Any]) -> Document:
    return Document(**_shared_fields(obj))


def decode_canvas(obj: dict[str, Any]) -> Canvas:
    return Canvas(
        **_shared_fields(obj),
        background_color=required(obj, "backgroundColor", decode_color),
        export_settings=optional(obj, "exportSettings", _export_settings, ()),
        prototype_start_node_id=nullable(obj, "prototypeStartNodeID", string),
    )


def decode_frame(obj: dict[str, Any]) -> Frame:
    return Frame(**_frame_fields(obj))


def decode_group(obj: dict[str, Any]) -> Group:
    return Group(**_frame_fields(obj))


def decode_component(obj: dict[str, Any]) -> Component:
    return Component(**_frame_fields(obj))


def decode_instance(obj: dict[str, Any]) -> Instance:
    return Instance(**_frame_fields(obj), component_id=required(obj, "componentId", string))


def decode_vector_node(obj: dict[str, Any]) -> Vector:
    return Vector(**_shape_fields(obj))


def decode_star(obj: dict[str, Any]) -> Star:
    return Star(**_shape_fields(obj))


def decode_line(obj: dict[str, Any]) -> Line:
    return Line(**_shape_fields(obj))


def decode_ellipse(obj: dict[str, Any]) -> Ellipse:
    return Ellipse(**_shape_fields(obj))


def decode_regular_polygon(obj: dict[str, Any]) -> RegularPolygon:
    return RegularPolygon(**_shape_fields(obj))


def decode_boolean_operation(obj: dict[str, Any]) -> BooleanOperation:
    return BooleanOperation(
        **_shape_fields(obj),
        boolean_operation=required(obj, "booleanOperation", decode_boolean_operation_type),
    )


def decode_rectangle(obj: dict[str, Any]) -> Rectangle:
    return Rectangle(
        **_shape_fields(obj),
        corner_radius=optional(obj, "cornerRadius", number, 0.0),
    )


def decode_text(obj: dict[str, Any]) -> Text:
    return Text(
        **_shape_fields(obj),
        characters=required(obj, "characters", string),
        style=required(obj, "style", decode_type_style),
        character_style_overrides=optional(
            obj, "characterStyleOverrides", list_of(integer), ()
        ),
        style_override_table=optional(
            obj, "styleOverrideTable", decode_style_override_table, MappingProxyType({})
        ),
    )


def decode_slice(obj: dict[str, Any]) -> Slice:
    return Slice(
        **_shared_fields(obj),
        export_settings=optional(obj, "exportSettings", _export_settings, ()),
        absolute_bounding_box=required(obj, "absoluteBoundingBox", decode_rect),
    )


NODE_DECODERS: dict[NodeType, Callable[[dict[str, Any]], Node]] = {
    NodeType.DOCUMENT: decode_document,
    NodeType.CANVAS: decode_canvas,
    NodeType.FRAME: decode_frame,
    NodeType.GROUP: decode_group,
    NodeType.COMPONENT: decode_component,
    NodeType.INSTANCE: decode_instance,
    NodeType.VECTOR: decode_vector_node,
    NodeType.STAR: decode_star,
    NodeType.LINE: decode_line,
    NodeType.ELLIPSE: decode_ellipse,
    NodeType.REGULAR_POLYGON: decode_regular_polygon,
    NodeType.BOOLEAN_OPERATION: decode_boolean_operation,
    NodeType.RECTANGLE: decode_rectangle,
    NodeType.TEXT: decode_text,
    NodeType.SLICE: decode_slice,
}


def decode_node_fields(node_type: NodeType, value: Any) -> Node:
    """Decode the fields of a node whose ``type`` has already been read."""
    return NODE_DECODERS[node_type](expect_object(value))
