"""Colour and geometry value types."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit colour channels and a 0..1 alpha."""

    red: int
    green: int
    blue: int
    alpha: float = 1.0

    def to_hex(self, *, with_alpha: bool = False) -> str:
        out = f"#{self.red:02x}{self.green:02x}{self.blue:02x}"
        if with_alpha:
            out += f"{round(self.alpha * 255):02x}"
        return out


@dataclass(frozen=True)
class Vector2D:
    """A 2D point or offset."""

    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    """An axis-aligned bounding box in absolute canvas coordinates."""

    x: float
    y: float
    width: float
    height: float
