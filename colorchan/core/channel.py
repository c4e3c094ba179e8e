"""Colour channels: one stored scalar plus the range it is meant to live in.

Three kinds, differing only in their canonical range (storage units):

    kind              float       unsigned int   signed int
    BoundedChannel    [0, 1]      [0, max]       [min, max]
    PosNormalChannel  [0, 1]      [0, max]       [0, max]
    BipolarChannel    [-1, 1]     [0, max]       [-max, max]

Every operation is total. Values outside the canonical range are kept
as-is until normalize() or clamp() is asked for; values outside the
storage dtype's representable range saturate on construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from colorchan.core.scalar import ScalarFormat

Number = int | float


@dataclass(frozen=True)
class Channel:
    """Base class for the channel kinds. Use a concrete subclass."""

    value: Any
    fmt: ScalarFormat

    def __init__(self, value: Any, dtype: Any = np.float64):
        fmt = ScalarFormat.of(dtype)
        object.__setattr__(self, 'fmt', fmt)
        object.__setattr__(self, 'value', fmt.cast(value))

    @classmethod
    def bounds(cls, fmt: ScalarFormat) -> tuple[Number, Number]:
        raise NotImplementedError

    @property
    def min_bound(self) -> Number:
        return self.bounds(self.fmt)[0]

    @property
    def max_bound(self) -> Number:
        return self.bounds(self.fmt)[1]

    def _replace(self, value: Any) -> Channel:
        return type(self)(value, self.fmt)

    def clamp(self, low: Any, high: Any) -> Channel:
        v = self.fmt.widen(self.value)
        return self._replace(min(max(v, self.fmt.widen(low)), self.fmt.widen(high)))

    def invert(self) -> Channel:
        """Reflect the value through the middle of the canonical range.

        Integer values whose reflection the dtype cannot hold are returned
        unchanged, so invert() is an involution over every stored value.
        """
        lo, hi = self.bounds(self.fmt)
        reflected = lo + hi - self.fmt.widen(self.value)
        if self.fmt.is_integer and not self.fmt.min_value <= reflected <= self.fmt.max_value:
            return self
        return self._replace(reflected)

    def normalize(self) -> Channel:
        lo, hi = self.bounds(self.fmt)
        return self.clamp(lo, hi)

    def is_normalized(self) -> bool:
        lo, hi = self.bounds(self.fmt)
        return lo <= self.fmt.widen(self.value) <= hi

    def lerp(self, other: Channel, pos: float) -> Channel:
        self._check_compatible(other)
        v1 = self.fmt.to_float(self.value)
        v2 = other.fmt.to_float(other.value)
        return self._replace(v1 + (v2 - v1) * float(pos))

    def cast_to(self, dtype: Any) -> Channel:
        """Rescale linearly from this kind's range in one format to its range in another."""
        target = ScalarFormat.of(dtype)
        src_lo, src_hi = self.bounds(self.fmt)
        dst_lo, dst_hi = self.bounds(target)
        scale = (float(dst_hi) - float(dst_lo)) / (float(src_hi) - float(src_lo))
        value = dst_lo + (self.fmt.to_float(self.value) - src_lo) * scale
        return type(self)(value, target)

    def abs_diff_eq(self, other: Channel, epsilon: float | None = None) -> bool:
        self._check_compatible(other)
        return self.fmt.abs_diff_eq(self.value, other.value, epsilon)

    def relative_eq(self, other: Channel, epsilon: float | None = None, max_relative: float | None = None) -> bool:
        self._check_compatible(other)
        return self.fmt.relative_eq(self.value, other.value, epsilon, max_relative)

    def ulps_eq(self, other: Channel, epsilon: float | None = None, max_ulps: int | None = None) -> bool:
        self._check_compatible(other)
        return self.fmt.ulps_eq(self.value, other.value, epsilon, max_ulps)

    def _check_compatible(self, other: Channel) -> None:
        if type(other) is not type(self):
            raise TypeError(f'Cannot combine {type(self).__name__} with {type(other).__name__}')
        if other.fmt != self.fmt:
            raise TypeError(f'Channel formats differ: {self.fmt.name} vs {other.fmt.name}')

    def __str__(self) -> str:
        return self.fmt.format(self.value)


class BoundedChannel(Channel):
    """Channel spanning the whole storage range (floats: [0, 1])."""

    @classmethod
    def bounds(cls, fmt: ScalarFormat) -> tuple[Number, Number]:
        if fmt.is_integer:
            return fmt.min_value, fmt.max_value
        return 0.0, 1.0


class PosNormalChannel(Channel):
    """Luma-like channel: canonical [0, 1] mapped onto [0, max] for integers."""

    @classmethod
    def bounds(cls, fmt: ScalarFormat) -> tuple[Number, Number]:
        if fmt.is_integer:
            return 0, fmt.max_value
        return 0.0, 1.0


class BipolarChannel(Channel):
    """Chroma-like channel: canonical [-1, 1].

    Unsigned storage has no negative half, so the whole [0, max] range is
    used with the zero point at mid-range. Signed integers use the
    symmetric range [-max, max]; the most negative value is out of range
    and inverts to itself.
    """

    @classmethod
    def bounds(cls, fmt: ScalarFormat) -> tuple[Number, Number]:
        if not fmt.is_integer:
            return -1.0, 1.0
        if fmt.is_signed:
            return -fmt.max_value, fmt.max_value
        return 0, fmt.max_value
