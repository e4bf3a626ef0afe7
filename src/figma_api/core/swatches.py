"""Extract the colour palette used by a document."""

from dataclasses import dataclass

from figma_api.models.appearance import GradientPaint, Paint, SolidPaint
from figma_api.models.geometry import Color
from figma_api.models.node import Canvas, FrameBase, Node, ShapeBase, Text
from figma_api.models.tree import Tree, foldl


@dataclass(frozen=True)
class Swatch:
    """A colour and the id of the first node it was found on."""

    color: Color
    node_id: str

    @property
    def hex(self) -> str:
        return self.color.to_hex(with_alpha=self.color.alpha < 1.0)


def _paint_colors(paints: tuple[Paint, ...], *, include_gradients: bool) -> list[Color]:
    colors: list[Color] = []
    for paint in paints:
        if not paint.is_visible:
            continue
        if isinstance(paint, SolidPaint):
            colors.append(paint.color)
        elif include_gradients and isinstance(paint, GradientPaint):
            colors.extend(stop.color for stop in paint.stops)
    return colors


def node_colors(value: Node, *, include_gradients: bool = False) -> list[Color]:
    """Colours a single node paints with, in stacking order."""
    match value:
        case Canvas() | FrameBase():
            return [value.background_color]
        case Text():
            return [
                *_paint_colors(value.fills, include_gradients=include_gradients),
                *_paint_colors(value.style.fills, include_gradients=include_gradients),
                *_paint_colors(value.strokes, include_gradients=include_gradients),
            ]
        case ShapeBase():
            return [
                *_paint_colors(value.fills, include_gradients=include_gradients),
                *_paint_colors(value.strokes, include_gradients=include_gradients),
            ]
    return []


def extract_swatches(
    t: Tree[Node],
    *,
    include_gradients: bool = False,
    include_transparent: bool = False,
) -> list[Swatch]:
    """Collect unique colours in document order.

    Fully transparent colours (alpha 0, e.g. an unfilled frame background)
    are skipped unless ``include_transparent`` is set.
    """

    def collect(value: Node, acc: dict[Color, Swatch]) -> dict[Color, Swatch]:
        for color in node_colors(value, include_gradients=include_gradients):
            if color.alpha == 0 and not include_transparent:
                continue
            acc.setdefault(color, Swatch(color=color, node_id=value.id))
        return acc

    return list(foldl(collect, {}, t).values())
