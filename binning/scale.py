from dataclasses import asdict, dataclass, field
from datetime import datetime
from decimal import Decimal
from fractions import Fraction
import math
import numbers
from typing import Any

import numpy as np

from binning.errors import InvalidHistogram


def to_float64(value):
    """Widen a real-convertible value to numpy float64"""
    return np.float64(float(value))


@dataclass
class Scale:
    """
    A half-open range [low, high) of real values.

    Positions inside the range are computed in float64 no matter what type
    the bounds and samples have (int, float, Decimal, Fraction, numpy
    scalars). Results near the upper bound can carry rounding error on the
    order of float64 epsilon, so a position can come out as exactly 1.0 for
    a value just below `high`.
    """

    low: Any
    high: Any
    width: Any = field(init=False)

    def __post_init__(self):
        self.check_bounds()
        try:
            low, high = to_float64(self.low), to_float64(self.high)
        except (TypeError, ValueError, ArithmeticError) as err:
            raise InvalidHistogram(
                f"range bounds {self.low!r} and {self.high!r} are not real numbers"
            ) from err
        with np.errstate(over="ignore"):
            if not np.isfinite(high - low):
                raise InvalidHistogram(
                    f"width of the range [{self.low!r}, {self.high!r}) is not finite"
                )

    def check_bounds(self):
        try:
            ordered = self.low < self.high
            self.width = self.high - self.low
        except (TypeError, ArithmeticError) as err:
            raise InvalidHistogram(
                f"range bounds {self.low!r} and {self.high!r} are not comparable"
            ) from err
        if not ordered:
            raise InvalidHistogram(
                f"range start {self.low!r} must be below range end {self.high!r}"
            )

    def __hash__(self):
        return hash(self.__key())

    def __eq__(self, other):
        if isinstance(other, Scale):
            return self.__key() == other.__key()
        return NotImplemented

    def __key(self):
        cls, params = self.destructure()
        return (cls, params)

    def contains(self, value):
        """
        True when low <= value < high. NaN, bools, arrays and values that
        can't be ordered against the bounds are not contained.
        """
        if isinstance(value, (bool, np.bool_)) or np.ndim(value) != 0:
            return False
        try:
            return bool(self.low <= value < self.high)
        except (TypeError, ValueError, ArithmeticError):
            return False

    def normalize_point(self, point):
        low, high = to_float64(self.low), to_float64(self.high)
        return (to_float64(point) - low) / (high - low)

    def bucket(self, point, num_bins):
        return np.floor(self.normalize_point(point) * num_bins)

    def bin_edges(self, num_bins):
        return np.linspace(float(self.low), float(self.high), num_bins + 1).tolist()

    def destructure(self):
        return ((Scale,), (self.low, self.high))

    def export(self):
        export_dict = asdict(self)
        export_dict["class"] = type(self).__name__
        return export_dict


def to_fraction(value):
    if isinstance(value, (numbers.Rational, Decimal)):
        return Fraction(value)
    return Fraction(float(value))


@dataclass
class IntegerScale(Scale):
    """
    A range with integer bounds. Buckets are computed with exact rational
    arithmetic, so there is no rounding at the edges.
    """

    def __post_init__(self):
        for bound in (self.low, self.high):
            if isinstance(bound, bool) or not isinstance(bound, numbers.Integral):
                raise InvalidHistogram(f"range bound {bound!r} is not an integer")
        self.low, self.high = int(self.low), int(self.high)
        self.check_bounds()

    def __hash__(self):
        return super().__hash__()

    def contains(self, value):
        if not isinstance(value, (numbers.Real, Decimal)):
            return False
        return super().contains(value)

    def normalize_point(self, point):
        return float((to_fraction(point) - self.low) / self.width)

    def bucket(self, point, num_bins):
        return math.floor((to_fraction(point) - self.low) * num_bins / self.width)

    def destructure(self):
        return ((IntegerScale,), (self.low, self.high))


@dataclass
class TimeScale(Scale):
    """A range of datetimes. Bounds and samples must agree on tz-awareness."""

    def __post_init__(self):
        for bound in (self.low, self.high):
            if not isinstance(bound, datetime):
                raise InvalidHistogram(f"range bound {bound!r} is not a datetime")
        self.check_bounds()

    def __repr__(self):
        return (
            f"TimeScale(low={self.low.isoformat()}, "
            f"high={self.high.isoformat()}, "
            f"width={self.width})"
        )

    def __hash__(self):
        return super().__hash__()

    def normalize_point(self, point):
        return np.float64((point - self.low) / self.width)

    def bin_edges(self, num_bins):
        return [self.low + self.width * i / num_bins for i in range(num_bins + 1)]

    def destructure(self):
        return ((TimeScale,), (self.low, self.high))


def scale_factory(low, high):
    """
    Pick the scale for a (low, high) pair from the type of its bounds
    """
    if isinstance(low, datetime) and isinstance(high, datetime):
        return TimeScale(low, high)
    if all(
        isinstance(bound, numbers.Integral) and not isinstance(bound, bool)
        for bound in (low, high)
    ):
        return IntegerScale(low, high)
    return Scale(low, high)
