"""Linear lengths expressed in typographic points."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering


PT_PER_INCH = 72.0
PT_PER_MM = PT_PER_INCH / 25.4
PT_PER_CM = PT_PER_MM * 10.0


@total_ordering
@dataclass(frozen=True, slots=True)
class Size:
    """A length stored in points.

    Arithmetic is plain float arithmetic; nothing is rounded or snapped to a
    device grid.
    """

    points: float = 0.0

    @classmethod
    def zero(cls) -> Size:
        return cls(0.0)

    @classmethod
    def pt(cls, value: float) -> Size:
        return cls(float(value))

    @classmethod
    def mm(cls, value: float) -> Size:
        return cls(float(value) * PT_PER_MM)

    @classmethod
    def cm(cls, value: float) -> Size:
        return cls(float(value) * PT_PER_CM)

    @classmethod
    def inches(cls, value: float) -> Size:
        return cls(float(value) * PT_PER_INCH)

    def to_pt(self) -> float:
        return self.points

    def to_mm(self) -> float:
        return self.points / PT_PER_MM

    def to_cm(self) -> float:
        return self.points / PT_PER_CM

    def to_inches(self) -> float:
        return self.points / PT_PER_INCH

    def __add__(self, other: object) -> Size:
        if not isinstance(other, Size):
            return NotImplemented
        return Size(self.points + other.points)

    def __sub__(self, other: object) -> Size:
        if not isinstance(other, Size):
            return NotImplemented
        return Size(self.points - other.points)

    def __neg__(self) -> Size:
        return Size(-self.points)

    def __mul__(self, factor: object) -> Size:
        if isinstance(factor, bool) or not isinstance(factor, (int, float)):
            return NotImplemented
        return Size(self.points * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: object) -> Size:
        if isinstance(divisor, bool) or not isinstance(divisor, (int, float)):
            return NotImplemented
        return Size(self.points / divisor)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Size):
            return NotImplemented
        return self.points < other.points

    def __str__(self) -> str:
        return f"{self.points:g}pt"


@dataclass(frozen=True, slots=True)
class Size2D:
    """A pair of lengths, typically a width and a height."""

    x: Size = Size.zero()
    y: Size = Size.zero()

    @classmethod
    def zero(cls) -> Size2D:
        return cls(Size.zero(), Size.zero())

    def __add__(self, other: object) -> Size2D:
        if not isinstance(other, Size2D):
            return NotImplemented
        return Size2D(self.x + other.x, self.y + other.y)

    def __str__(self) -> str:
        return f"[{self.x}, {self.y}]"


__all__ = ["PT_PER_CM", "PT_PER_INCH", "PT_PER_MM", "Size", "Size2D"]
