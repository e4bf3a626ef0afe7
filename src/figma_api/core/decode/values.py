"""Decoders for primitive domain values: colours, geometry, enums, layout."""

from typing import Any

from figma_api.core.decode.primitives import (
    boolean,
    enum_of,
    expect_object,
    integer,
    number,
    optional,
    required,
    string,
)
from figma_api.models.enums import (
    BlendMode,
    BooleanOperationType,
    ExportConstraintType,
    ExportFormat,
    LayoutConstraintHorizontal,
    LayoutConstraintVertical,
    LayoutGridAlignment,
    LayoutGridPattern,
    ScaleMode,
    StrokeAlign,
    TextAlignHorizontal,
    TextAlignVertical,
)
from figma_api.models.geometry import Color, Rect, Vector2D
from figma_api.models.layout import (
    ColumnsLayoutGrid,
    ExportConstraint,
    ExportSetting,
    LayoutConstraint,
    LayoutGrid,
    RowsLayoutGrid,
    SquareLayoutGrid,
)

decode_blend_mode = enum_of(BlendMode)
decode_stroke_align = enum_of(StrokeAlign)
decode_scale_mode = enum_of(ScaleMode)
decode_constraint_horizontal = enum_of(LayoutConstraintHorizontal)
decode_constraint_vertical = enum_of(LayoutConstraintVertical)
decode_text_align_horizontal = enum_of(TextAlignHorizontal)
decode_text_align_vertical = enum_of(TextAlignVertical)
decode_export_format = enum_of(ExportFormat)
decode_export_constraint_type = enum_of(ExportConstraintType)
decode_grid_alignment = enum_of(LayoutGridAlignment)
decode_grid_pattern = enum_of(LayoutGridPattern)
decode_boolean_operation_type = enum_of(BooleanOperationType)


def channel_to_byte(channel: float) -> int:
    """Scale a 0..1 channel to 0..255, rounding halves away from zero."""
    scaled = channel * 255
    if scaled < 0:
        return -int(-scaled + 0.5)
    return int(scaled + 0.5)


def decode_color(value: Any) -> Color:
    """Decode ``{"r", "g", "b", "a"}`` floats.

    Channels outside 0..1 are not clamped.
    """
    obj = expect_object(value)
    return Color(
        red=channel_to_byte(required(obj, "r", number)),
        green=channel_to_byte(required(obj, "g", number)),
        blue=channel_to_byte(required(obj, "b", number)),
        alpha=required(obj, "a", number),
    )


def encode_color(color: Color) -> dict[str, float]:
    return {
        "r": color.red / 255,
        "g": color.green / 255,
        "b": color.blue / 255,
        "a": color.alpha,
    }


def decode_vector(value: Any) -> Vector2D:
    obj = expect_object(value)
    return Vector2D(x=required(obj, "x", number), y=required(obj, "y", number))


def encode_vector(vector: Vector2D) -> dict[str, float]:
    return {"x": vector.x, "y": vector.y}


def decode_rect(value: Any) -> Rect:
    obj = expect_object(value)
    return Rect(
        x=required(obj, "x", number),
        y=required(obj, "y", number),
        width=required(obj, "width", number),
        height=required(obj, "height", number),
    )


def decode_layout_constraint(value: Any) -> LayoutConstraint:
    obj = expect_object(value)
    return LayoutConstraint(
        horizontal=required(obj, "horizontal", decode_constraint_horizontal),
        vertical=required(obj, "vertical", decode_constraint_vertical),
    )


def decode_export_constraint(value: Any) -> ExportConstraint:
    obj = expect_object(value)
    return ExportConstraint(
        type=required(obj, "type", decode_export_constraint_type),
        value=required(obj, "value", number),
    )


def decode_export_setting(value: Any) -> ExportSetting:
    obj = expect_object(value)
    return ExportSetting(
        suffix=required(obj, "suffix", string),
        format=required(obj, "format", decode_export_format),
        constraint=required(obj, "constraint", decode_export_constraint),
    )


def decode_layout_grid(value: Any) -> LayoutGrid:
    """Decode a layout grid, dispatching on its ``pattern`` field."""
    obj = expect_object(value)
    pattern = required(obj, "pattern", decode_grid_pattern)
    section_size = required(obj, "sectionSize", number)
    color = required(obj, "color", decode_color)
    is_visible = optional(obj, "visible", boolean, True)

    if pattern == LayoutGridPattern.GRID:
        return SquareLayoutGrid(section_size=section_size, color=color, is_visible=is_visible)

    grid_cls = ColumnsLayoutGrid if pattern == LayoutGridPattern.COLUMNS else RowsLayoutGrid
    return grid_cls(
        section_size=section_size,
        color=color,
        alignment=required(obj, "alignment", decode_grid_alignment),
        gutter_size=required(obj, "gutterSize", number),
        offset=required(obj, "offset", number),
        count=required(obj, "count", integer),
        is_visible=is_visible,
    )
