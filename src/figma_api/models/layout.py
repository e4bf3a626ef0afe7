"""Layout constraints, layout grids and export settings."""

from dataclasses import dataclass

from figma_api.models.enums import (
    ExportConstraintType,
    ExportFormat,
    LayoutConstraintHorizontal,
    LayoutConstraintVertical,
    LayoutGridAlignment,
)
from figma_api.models.geometry import Color


@dataclass(frozen=True)
class LayoutConstraint:
    """How a node is positioned relative to its containing frame."""

    horizontal: LayoutConstraintHorizontal
    vertical: LayoutConstraintVertical


@dataclass(frozen=True)
class ExportConstraint:
    type: ExportConstraintType
    value: float


@dataclass(frozen=True)
class ExportSetting:
    """One export preset attached to a node."""

    suffix: str
    format: ExportFormat
    constraint: ExportConstraint


@dataclass(frozen=True)
class ColumnsLayoutGrid:
    section_size: float
    color: Color
    alignment: LayoutGridAlignment
    gutter_size: float
    offset: float
    count: int
    is_visible: bool = True


@dataclass(frozen=True)
class RowsLayoutGrid:
    section_size: float
    color: Color
    alignment: LayoutGridAlignment
    gutter_size: float
    offset: float
    count: int
    is_visible: bool = True


@dataclass(frozen=True)
class SquareLayoutGrid:
    section_size: float
    color: Color
    is_visible: bool = True


LayoutGrid = ColumnsLayoutGrid | RowsLayoutGrid | SquareLayoutGrid
