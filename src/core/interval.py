# core/interval.py
import math

INFINITY = math.inf


class Interval:
    """
    A numeric range [min, max]. With no arguments the interval is empty:
    min is +inf and max is -inf, so no real value lies inside it.
    """
    __slots__ = ("min", "max")

    def __init__(self, minimum: float = INFINITY, maximum: float = -INFINITY):
        self.min = minimum
        self.max = maximum

    def size(self) -> float:
        return self.max - self.min

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max

    def surrounds(self, value: float) -> bool:
        """
        True when value lies strictly between min and max.
        """
        return self.min < value < self.max

    def __eq__(self, other) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.min == other.min and self.max == other.max

    def __repr__(self) -> str:
        return f"Interval({self.min}, {self.max})"


EMPTY = Interval(INFINITY, -INFINITY)
UNIVERSE = Interval(-INFINITY, INFINITY)
