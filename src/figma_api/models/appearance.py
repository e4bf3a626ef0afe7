"""Paints, effects and text styles."""

from dataclasses import dataclass

from figma_api.models.enums import (
    BlendMode,
    EffectType,
    PaintType,
    ScaleMode,
    TextAlignHorizontal,
    TextAlignVertical,
)
from figma_api.models.geometry import Color, Vector2D


@dataclass(frozen=True)
class SolidPaint:
    color: Color
    is_visible: bool = True
    opacity: float = 1.0

    @property
    def type(self) -> PaintType:
        return PaintType.SOLID


@dataclass(frozen=True)
class ColorStop:
    """A colour at a 0..1 position along a gradient."""

    position: float
    color: Color


@dataclass(frozen=True)
class GradientPaint:
    """A linear, radial, angular or diamond gradient.

    ``handle_positions`` holds the gradient handles in server order. The
    first three are start, end and width handle; payloads carrying a
    different count decode unchanged.
    """

    type: PaintType
    handle_positions: tuple[Vector2D, ...]
    stops: tuple[ColorStop, ...]
    is_visible: bool = True
    opacity: float = 1.0


@dataclass(frozen=True)
class ImagePaint:
    scale_mode: ScaleMode
    blend_mode: BlendMode
    is_visible: bool = True
    opacity: float = 1.0
    image_ref: str | None = None

    @property
    def type(self) -> PaintType:
        return PaintType.IMAGE


Paint = SolidPaint | GradientPaint | ImagePaint


@dataclass(frozen=True)
class Shadow:
    """An inner or drop shadow."""

    type: EffectType
    radius: float
    color: Color
    blend_mode: BlendMode
    offset: Vector2D
    is_visible: bool = True


@dataclass(frozen=True)
class Blur:
    """A layer or background blur."""

    type: EffectType
    radius: float
    is_visible: bool = True


Effect = Shadow | Blur


@dataclass(frozen=True)
class TypeStyle:
    """Character formatting of a text node."""

    font_family: str
    font_post_script_name: str
    font_weight: int
    font_size: float
    text_align_horizontal: TextAlignHorizontal
    text_align_vertical: TextAlignVertical
    letter_spacing: float
    line_height_px: float
    line_height_percent: float
    is_italic: bool = False
    fills: tuple[Paint, ...] = ()


@dataclass(frozen=True)
class TypeStyleOverride:
    """Sparse per-range formatting; ``None`` means inherited from the node style."""

    font_family: str | None = None
    font_post_script_name: str | None = None
    font_weight: int | None = None
    font_size: float | None = None
    text_align_horizontal: TextAlignHorizontal | None = None
    text_align_vertical: TextAlignVertical | None = None
    letter_spacing: float | None = None
    line_height_px: float | None = None
    line_height_percent: float | None = None
    is_italic: bool | None = None
    fills: tuple[Paint, ...] | None = None

    def apply_to(self, style: TypeStyle) -> TypeStyle:
        """Return ``style`` with every overridden field replaced."""
        changes = {
            name: value for name, value in vars(self).items() if value is not None
        }
        return TypeStyle(**{**vars(style), **changes})
