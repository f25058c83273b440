# core/color.py
from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """
    An RGB color. Channels are not clamped while shading, light can add up
    above 1.0 and is only clamped when the image is exported.
    """
    r: float
    g: float
    b: float

    def __add__(self, other: "Color") -> "Color":
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Color(self.r * other, self.g * other, self.b * other)
        # Component-wise, e.g. material color times light color.
        return Color(self.r * other.r, self.g * other.g, self.b * other.b)

    def __rmul__(self, other: float) -> "Color":
        return self.__mul__(other)

    def clamp(self, lo: float = 0.0, hi: float = 1.0) -> "Color":
        return Color(
            min(hi, max(lo, self.r)),
            min(hi, max(lo, self.g)),
            min(hi, max(lo, self.b))
        )

    def as_tuple(self) -> tuple:
        return (self.r, self.g, self.b)

    @staticmethod
    def black() -> "Color":
        return Color(0.0, 0.0, 0.0)

    @staticmethod
    def white() -> "Color":
        return Color(1.0, 1.0, 1.0)

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"
