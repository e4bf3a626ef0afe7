"""Decoders for paints, effects and text styles."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

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
    decode_color,
    decode_scale_mode,
    decode_text_align_horizontal,
    decode_text_align_vertical,
    decode_vector,
)
from figma_api.errors import DecodeError, UnrecognizedEnumError, UnsupportedPaintError, WrongTypeError
from figma_api.models.appearance import (
    Blur,
    ColorStop,
    Effect,
    GradientPaint,
    ImagePaint,
    Paint,
    Shadow,
    SolidPaint,
    TypeStyle,
    TypeStyleOverride,
)
from figma_api.models.enums import EffectType, PaintType

_GRADIENT_TYPES = frozenset(
    {
        PaintType.GRADIENT_LINEAR,
        PaintType.GRADIENT_RADIAL,
        PaintType.GRADIENT_ANGULAR,
        PaintType.GRADIENT_DIAMOND,
    }
)

# Paint types the server emits that this binding does not model.
_UNSUPPORTED_PAINT_TYPES = frozenset({"EMOJI"})


def decode_color_stop(value: Any) -> ColorStop:
    obj = expect_object(value)
    return ColorStop(
        position=required(obj, "position", number),
        color=required(obj, "color", decode_color),
    )


def _paint_type(obj: dict[str, Any]) -> PaintType:
    literal = required(obj, "type", string)
    if literal in _UNSUPPORTED_PAINT_TYPES:
        raise UnsupportedPaintError(literal).within("type")
    try:
        return PaintType(literal)
    except ValueError:
        raise UnrecognizedEnumError(PaintType.__name__, literal).within("type") from None


def decode_paint(value: Any) -> Paint:
    """Decode a fill or stroke, dispatching on its ``type`` field."""
    obj = expect_object(value)
    paint_type = _paint_type(obj)
    is_visible = optional(obj, "visible", boolean, True)
    opacity = optional(obj, "opacity", number, 1.0)

    if paint_type == PaintType.SOLID:
        return SolidPaint(
            color=required(obj, "color", decode_color),
            is_visible=is_visible,
            opacity=opacity,
        )

    if paint_type in _GRADIENT_TYPES:
        return GradientPaint(
            type=paint_type,
            handle_positions=required(obj, "gradientHandlePositions", list_of(decode_vector)),
            stops=required(obj, "gradientStops", list_of(decode_color_stop)),
            is_visible=is_visible,
            opacity=opacity,
        )

    return ImagePaint(
        scale_mode=required(obj, "scaleMode", decode_scale_mode),
        blend_mode=required(obj, "blendMode", decode_blend_mode),
        is_visible=is_visible,
        opacity=opacity,
        image_ref=nullable(obj, "imageRef", string),
    )


decode_paints = list_of(decode_paint)


def decode_effect(value: Any) -> Effect:
    """Decode a shadow or blur effect, dispatching on its ``type`` field."""
    obj = expect_object(value)
    literal = required(obj, "type", string)
    try:
        effect_type = EffectType(literal)
    except ValueError:
        raise UnrecognizedEnumError(EffectType.__name__, literal).within("type") from None

    is_visible = optional(obj, "visible", boolean, True)
    radius = required(obj, "radius", number)

    if effect_type in (EffectType.INNER_SHADOW, EffectType.DROP_SHADOW):
        return Shadow(
            type=effect_type,
            radius=radius,
            color=required(obj, "color", decode_color),
            blend_mode=required(obj, "blendMode", decode_blend_mode),
            offset=required(obj, "offset", decode_vector),
            is_visible=is_visible,
        )
    return Blur(type=effect_type, radius=radius, is_visible=is_visible)


decode_effects = list_of(decode_effect)


def decode_type_style(value: Any) -> TypeStyle:
    obj = expect_object(value)
    return TypeStyle(
        font_family=required(obj, "fontFamily", string),
        font_post_script_name=required(obj, "fontPostScriptName", string),
        font_weight=required(obj, "fontWeight", integer),
        font_size=required(obj, "fontSize", number),
        text_align_horizontal=required(obj, "textAlignHorizontal", decode_text_align_horizontal),
        text_align_vertical=required(obj, "textAlignVertical", decode_text_align_vertical),
        letter_spacing=required(obj, "letterSpacing", number),
        line_height_px=required(obj, "lineHeightPx", number),
        line_height_percent=required(obj, "lineHeightPercent", number),
        is_italic=optional(obj, "italic", boolean, False),
        fills=optional(obj, "fills", decode_paints, ()),
    )


def decode_type_style_override(value: Any) -> TypeStyleOverride:
    """Like ``decode_type_style`` but every field may be absent."""
    obj = expect_object(value)
    return TypeStyleOverride(
        font_family=nullable(obj, "fontFamily", string),
        font_post_script_name=nullable(obj, "fontPostScriptName", string),
        font_weight=nullable(obj, "fontWeight", integer),
        font_size=nullable(obj, "fontSize", number),
        text_align_horizontal=nullable(obj, "textAlignHorizontal", decode_text_align_horizontal),
        text_align_vertical=nullable(obj, "textAlignVertical", decode_text_align_vertical),
        letter_spacing=nullable(obj, "letterSpacing", number),
        line_height_px=nullable(obj, "lineHeightPx", number),
        line_height_percent=nullable(obj, "lineHeightPercent", number),
        is_italic=nullable(obj, "italic", boolean),
        fills=nullable(obj, "fills", decode_paints),
    )


def decode_style_override_table(value: Any) -> Mapping[int, TypeStyleOverride]:
    """Decode an object keyed by numeric-string override ids.

    Keys must be plain ASCII decimal digits, and two keys naming the same
    index (``"5"`` and ``"05"``) fail the decode.
    """
    obj = expect_object(value)
    table: dict[int, TypeStyleOverride] = {}
    for key, raw in obj.items():
        if not (key.isascii() and key.isdigit()):
            raise WrongTypeError("a numeric override key", key).within(key)
        index = int(key)
        if index in table:
            raise DecodeError(f"duplicate override key for index {index}").within(key)
        try:
            table[index] = decode_type_style_override(raw)
        except DecodeError as e:
            raise e.within(key) from None
    return MappingProxyType(table)
