"""Tests for value decoders: colours, geometry, enums, constraints, grids."""

from collections.abc import Callable
from enum import Enum
from typing import Any

import pytest

from figma_api.core.decode.values import (
    channel_to_byte,
    decode_blend_mode,
    decode_boolean_operation_type,
    decode_color,
    decode_constraint_horizontal,
    decode_constraint_vertical,
    decode_export_format,
    decode_export_setting,
    decode_grid_alignment,
    decode_grid_pattern,
    decode_layout_constraint,
    decode_layout_grid,
    decode_rect,
    decode_scale_mode,
    decode_stroke_align,
    decode_text_align_horizontal,
    decode_text_align_vertical,
    decode_vector,
    encode_color,
)
from figma_api.errors import DecodeError, MissingFieldError, UnrecognizedEnumError, WrongTypeError
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
from figma_api.models.layout import ColumnsLayoutGrid, RowsLayoutGrid, SquareLayoutGrid


def test_color_channels_scale_to_bytes() -> None:
    color = decode_color({"r": 1.0, "g": 0.0, "b": 0.2, "a": 0.5})
    assert color == Color(red=255, green=0, blue=51, alpha=0.5)


def test_color_rounds_halves_away_from_zero() -> None:
    # 0.5 * 255 == 127.5 exactly
    assert decode_color({"r": 0.5, "g": 0.5, "b": 0.5, "a": 1}).red == 128
    assert channel_to_byte(0.5) == 128
    assert channel_to_byte(-0.5) == -128
    assert channel_to_byte(0.0) == 0
    assert channel_to_byte(1.0) == 255


def test_color_does_not_clamp_out_of_range_channels() -> None:
    color = decode_color({"r": 1.2, "g": 0, "b": 0, "a": 1.5})
    assert color.red == 306
    assert color.alpha == 1.5


@pytest.mark.parametrize("channel", [0.0, 0.1, 0.25, 1 / 3, 0.5, 0.77, 0.999, 1.0])
def test_color_round_trip_within_one_step(channel: float) -> None:
    raw = {"r": channel, "g": 1 - channel, "b": channel / 2, "a": channel}
    encoded = encode_color(decode_color(raw))
    for key in ("r", "g", "b"):
        assert abs(encoded[key] - raw[key]) <= 1 / 255
    assert encoded["a"] == raw["a"]


def test_color_requires_alpha() -> None:
    with pytest.raises(MissingFieldError) as excinfo:
        decode_color({"r": 1, "g": 1, "b": 1})
    assert excinfo.value.field == "a"


def test_color_rejects_string_channel() -> None:
    with pytest.raises(WrongTypeError, match="expected a number"):
        decode_color({"r": "1", "g": 1, "b": 1, "a": 1})


def test_color_rejects_boolean_channel() -> None:
    with pytest.raises(WrongTypeError):
        decode_color({"r": True, "g": 1, "b": 1, "a": 1})


def test_color_to_hex() -> None:
    assert Color(255, 0, 51).to_hex() == "#ff0033"
    assert Color(255, 0, 51, 0.5).to_hex(with_alpha=True) == "#ff003380"


def test_vector_and_rect_decode() -> None:
    assert decode_vector({"x": 1, "y": -2.5}) == Vector2D(1.0, -2.5)
    assert decode_rect({"x": 0, "y": 1, "width": 2, "height": 3}) == Rect(0, 1, 2, 3)


def test_rect_has_no_defaults() -> None:
    with pytest.raises(MissingFieldError) as excinfo:
        decode_rect({"x": 0, "y": 1, "width": 2})
    assert excinfo.value.field == "height"


ENUM_DECODERS: list[tuple[type[Enum], Callable[[Any], Any]]] = [
    (BlendMode, decode_blend_mode),
    (StrokeAlign, decode_stroke_align),
    (ScaleMode, decode_scale_mode),
    (LayoutConstraintHorizontal, decode_constraint_horizontal),
    (LayoutConstraintVertical, decode_constraint_vertical),
    (TextAlignHorizontal, decode_text_align_horizontal),
    (TextAlignVertical, decode_text_align_vertical),
    (ExportFormat, decode_export_format),
    (LayoutGridAlignment, decode_grid_alignment),
    (LayoutGridPattern, decode_grid_pattern),
    (BooleanOperationType, decode_boolean_operation_type),
]


@pytest.mark.parametrize(
    ("enum_cls", "member", "decoder"),
    [(cls, member, decoder) for cls, decoder in ENUM_DECODERS for member in cls],
)
def test_enum_decoders_accept_every_literal(
    enum_cls: type[Enum], member: Enum, decoder: Callable[[Any], Any]
) -> None:
    assert decoder(member.value) is member


@pytest.mark.parametrize(("enum_cls", "decoder"), ENUM_DECODERS)
def test_enum_decoders_name_rejected_literal(
    enum_cls: type[Enum], decoder: Callable[[Any], Any]
) -> None:
    with pytest.raises(UnrecognizedEnumError) as excinfo:
        decoder("NOT_A_VALUE")
    assert excinfo.value.literal == "NOT_A_VALUE"
    assert excinfo.value.enum_name == enum_cls.__name__
    assert "NOT_A_VALUE" in str(excinfo.value)


def test_enum_literals_are_case_sensitive() -> None:
    with pytest.raises(UnrecognizedEnumError):
        decode_blend_mode("multiply")


def test_layout_constraint_reads_nested_fields() -> None:
    constraint = decode_layout_constraint({"horizontal": "LEFT_RIGHT", "vertical": "SCALE"})
    assert constraint.horizontal is LayoutConstraintHorizontal.LEFT_RIGHT
    assert constraint.vertical is LayoutConstraintVertical.SCALE


def test_layout_constraint_missing_vertical_fails() -> None:
    with pytest.raises(MissingFieldError) as excinfo:
        decode_layout_constraint({"horizontal": "LEFT"})
    assert excinfo.value.field == "vertical"


@pytest.mark.parametrize("constraint_type", list(ExportConstraintType))
def test_export_setting_constraint_variants(constraint_type: ExportConstraintType) -> None:
    setting = decode_export_setting(
        {
            "suffix": "@2x",
            "format": "PNG",
            "constraint": {"type": constraint_type.value, "value": 2},
        }
    )
    assert setting.suffix == "@2x"
    assert setting.format is ExportFormat.PNG
    assert setting.constraint.type is constraint_type
    assert setting.constraint.value == 2.0


def test_export_setting_unknown_constraint_type_reports_path() -> None:
    with pytest.raises(UnrecognizedEnumError) as excinfo:
        decode_export_setting(
            {"suffix": "", "format": "SVG", "constraint": {"type": "DEPTH", "value": 1}}
        )
    assert excinfo.value.path == ["constraint", "type"]


GRID_COLOR = {"r": 1, "g": 0, "b": 0, "a": 0.1}


def test_columns_grid() -> None:
    grid = decode_layout_grid(
        {
            "pattern": "COLUMNS",
            "sectionSize": 64,
            "visible": False,
            "color": GRID_COLOR,
            "alignment": "STRETCH",
            "gutterSize": 20,
            "offset": 0,
            "count": 12,
        }
    )
    assert isinstance(grid, ColumnsLayoutGrid)
    assert grid.count == 12
    assert grid.alignment is LayoutGridAlignment.STRETCH
    assert grid.is_visible is False


def test_rows_grid_defaults_to_visible() -> None:
    grid = decode_layout_grid(
        {
            "pattern": "ROWS",
            "sectionSize": 8,
            "color": GRID_COLOR,
            "alignment": "MIN",
            "gutterSize": 4,
            "offset": 2,
            "count": 5,
        }
    )
    assert isinstance(grid, RowsLayoutGrid)
    assert grid.is_visible is True


def test_square_grid_needs_no_alignment() -> None:
    grid = decode_layout_grid({"pattern": "GRID", "sectionSize": 10, "color": GRID_COLOR})
    assert grid == SquareLayoutGrid(section_size=10, color=decode_color(GRID_COLOR))


def test_columns_grid_requires_count() -> None:
    with pytest.raises(MissingFieldError, match="count"):
        decode_layout_grid(
            {
                "pattern": "COLUMNS",
                "sectionSize": 64,
                "color": GRID_COLOR,
                "alignment": "CENTER",
                "gutterSize": 20,
                "offset": 0,
            }
        )


def test_unknown_grid_pattern_fails() -> None:
    with pytest.raises(UnrecognizedEnumError) as excinfo:
        decode_layout_grid({"pattern": "HEX", "sectionSize": 10, "color": GRID_COLOR})
    assert excinfo.value.literal == "HEX"
    assert excinfo.value.path == ["pattern"]


def test_value_decoders_reject_non_objects() -> None:
    with pytest.raises(DecodeError, match="expected an object"):
        decode_rect([0, 0, 1, 1])
