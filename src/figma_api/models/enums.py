"""Closed string enumerations of the Figma file format.

Member values are the literals the server sends, so ``BlendMode("MULTIPLY")``
is the decoding step.
"""

from enum import StrEnum


class NodeType(StrEnum):
    DOCUMENT = "DOCUMENT"
    CANVAS = "CANVAS"
    FRAME = "FRAME"
    GROUP = "GROUP"
    VECTOR = "VECTOR"
    BOOLEAN_OPERATION = "BOOLEAN_OPERATION"
    STAR = "STAR"
    LINE = "LINE"
    ELLIPSE = "ELLIPSE"
    REGULAR_POLYGON = "REGULAR_POLYGON"
    RECTANGLE = "RECTANGLE"
    TEXT = "TEXT"
    SLICE = "SLICE"
    COMPONENT = "COMPONENT"
    INSTANCE = "INSTANCE"


class BlendMode(StrEnum):
    PASS_THROUGH = "PASS_THROUGH"
    NORMAL = "NORMAL"
    DARKEN = "DARKEN"
    MULTIPLY = "MULTIPLY"
    LINEAR_BURN = "LINEAR_BURN"
    COLOR_BURN = "COLOR_BURN"
    LIGHTEN = "LIGHTEN"
    SCREEN = "SCREEN"
    LINEAR_DODGE = "LINEAR_DODGE"
    COLOR_DODGE = "COLOR_DODGE"
    OVERLAY = "OVERLAY"
    SOFT_LIGHT = "SOFT_LIGHT"
    HARD_LIGHT = "HARD_LIGHT"
    DIFFERENCE = "DIFFERENCE"
    EXCLUSION = "EXCLUSION"
    HUE = "HUE"
    SATURATION = "SATURATION"
    COLOR = "COLOR"
    LUMINOSITY = "LUMINOSITY"


class StrokeAlign(StrEnum):
    INSIDE = "INSIDE"
    OUTSIDE = "OUTSIDE"
    CENTER = "CENTER"


class ScaleMode(StrEnum):
    FILL = "FILL"
    FIT = "FIT"
    TILE = "TILE"
    STRETCH = "STRETCH"


class LayoutConstraintHorizontal(StrEnum):
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    CENTER = "CENTER"
    LEFT_RIGHT = "LEFT_RIGHT"
    SCALE = "SCALE"


class LayoutConstraintVertical(StrEnum):
    TOP = "TOP"
    BOTTOM = "BOTTOM"
    CENTER = "CENTER"
    TOP_BOTTOM = "TOP_BOTTOM"
    SCALE = "SCALE"


class TextAlignHorizontal(StrEnum):
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    CENTER = "CENTER"
    JUSTIFIED = "JUSTIFIED"


class TextAlignVertical(StrEnum):
    TOP = "TOP"
    CENTER = "CENTER"
    BOTTOM = "BOTTOM"


class ExportFormat(StrEnum):
    JPG = "JPG"
    PNG = "PNG"
    SVG = "SVG"
    PDF = "PDF"


class ExportConstraintType(StrEnum):
    SCALE = "SCALE"
    WIDTH = "WIDTH"
    HEIGHT = "HEIGHT"


class LayoutGridPattern(StrEnum):
    COLUMNS = "COLUMNS"
    ROWS = "ROWS"
    GRID = "GRID"


class LayoutGridAlignment(StrEnum):
    MIN = "MIN"
    MAX = "MAX"
    CENTER = "CENTER"
    STRETCH = "STRETCH"


class PaintType(StrEnum):
    SOLID = "SOLID"
    GRADIENT_LINEAR = "GRADIENT_LINEAR"
    GRADIENT_RADIAL = "GRADIENT_RADIAL"
    GRADIENT_ANGULAR = "GRADIENT_ANGULAR"
    GRADIENT_DIAMOND = "GRADIENT_DIAMOND"
    IMAGE = "IMAGE"


class EffectType(StrEnum):
    INNER_SHADOW = "INNER_SHADOW"
    DROP_SHADOW = "DROP_SHADOW"
    LAYER_BLUR = "LAYER_BLUR"
    BACKGROUND_BLUR = "BACKGROUND_BLUR"


class BooleanOperationType(StrEnum):
    UNION = "UNION"
    INTERSECT = "INTERSECT"
    SUBTRACT = "SUBTRACT"
    EXCLUDE = "EXCLUDE"
