"""Numeric storage formats for colour channels.

A ScalarFormat wraps one numpy dtype and answers everything the channel
and colour layers need to know about it: representable bounds, a
saturating cast into the dtype, widening to a common computation type,
and tolerance comparisons (absolute, relative and ULP based).

Integer casts round to nearest with ties toward zero, so 127.5 -> 127 and
-2.5 -> -2. Nothing here raises for in-domain input: out-of-range values
saturate at the dtype's limits.
"""

from __future__ import annotations

import functools
import math
from dataclasses import dataclass
from typing import Any

import numpy as np

DEFAULT_MAX_ULPS = 4

# Same-width signed integer views used to measure ULP distance.
_ULP_VIEWS = {2: np.int16, 4: np.int32, 8: np.int64}


@dataclass(frozen=True)
class ScalarFormat:
    """Storage format of a channel value, backed by a numpy dtype."""

    dtype: np.dtype

    @staticmethod
    def of(dtype_like: Any) -> ScalarFormat:
        """Return the (cached) format for anything numpy.dtype() accepts."""
        if isinstance(dtype_like, ScalarFormat):
            return dtype_like
        return _format_for(np.dtype(dtype_like))

    @property
    def name(self) -> str:
        return self.dtype.name

    @property
    def is_integer(self) -> bool:
        return self.dtype.kind in 'iu'

    @property
    def is_signed(self) -> bool:
        return self.dtype.kind in 'if'

    @property
    def min_value(self) -> int | float:
        if self.is_integer:
            return int(np.iinfo(self.dtype).min)
        return float(np.finfo(self.dtype).min)

    @property
    def max_value(self) -> int | float:
        if self.is_integer:
            return int(np.iinfo(self.dtype).max)
        return float(np.finfo(self.dtype).max)

    @property
    def zero(self) -> Any:
        return self.dtype.type(0)

    def widen(self, value: Any) -> int | float:
        """Widen a stored value to a Python int (integer formats) or float."""
        if self.is_integer:
            return int(value)
        return float(value)

    def to_float(self, value: Any) -> float:
        return float(value)

    def cast(self, value: Any) -> Any:
        """Saturating cast of value into this format's numpy scalar type."""
        if self.is_integer:
            return self.dtype.type(self._round_saturate(value))
        x = float(value)
        if math.isnan(x):
            return self.dtype.type(x)
        limit = self.max_value
        return self.dtype.type(min(max(x, -limit), limit))

    def _round_saturate(self, value: Any) -> int:
        lo, hi = self.min_value, self.max_value
        if isinstance(value, (int, np.integer)):
            return min(max(int(value), lo), hi)
        x = float(value)
        if math.isnan(x):
            return 0
        x = min(max(x, float(lo)), float(hi))
        rounded = int(math.copysign(math.ceil(abs(x) - 0.5), x))
        # float(hi) can round up past the integer maximum for 64-bit types
        return min(max(rounded, lo), hi)

    def format(self, value: Any) -> str:
        if self.is_integer:
            return str(int(value))
        return np.format_float_positional(self.dtype.type(value), trim='0')

    # -- tolerance comparisons ------------------------------------------

    @property
    def default_epsilon(self) -> int | float:
        if self.is_integer:
            return 0
        return float(np.finfo(self.dtype).eps)

    @property
    def default_max_relative(self) -> int | float:
        return self.default_epsilon

    @property
    def default_max_ulps(self) -> int:
        return DEFAULT_MAX_ULPS

    def abs_diff_eq(self, a: Any, b: Any, epsilon: float | None = None) -> bool:
        if epsilon is None:
            epsilon = self.default_epsilon
        return abs(self.widen(a) - self.widen(b)) <= epsilon

    def relative_eq(
        self,
        a: Any,
        b: Any,
        epsilon: float | None = None,
        max_relative: float | None = None,
    ) -> bool:
        if epsilon is None:
            epsilon = self.default_epsilon
        if max_relative is None:
            max_relative = self.default_max_relative
        x, y = self.widen(a), self.widen(b)
        if x == y:
            return True
        if self.is_integer:
            return abs(x - y) <= epsilon
        if math.isinf(x) or math.isinf(y):
            return False
        diff = abs(x - y)
        if diff <= epsilon:
            return True
        return diff <= max(abs(x), abs(y)) * max_relative

    def ulps_eq(
        self,
        a: Any,
        b: Any,
        epsilon: float | None = None,
        max_ulps: int | None = None,
    ) -> bool:
        if max_ulps is None:
            max_ulps = self.default_max_ulps
        if self.abs_diff_eq(a, b, epsilon):
            return True
        if self.is_integer:
            return False
        x, y = float(a), float(b)
        if math.isnan(x) or math.isnan(y):
            return False
        if math.copysign(1.0, x) != math.copysign(1.0, y):
            return False
        view = _ULP_VIEWS[self.dtype.itemsize]
        bits = np.array([a, b], dtype=self.dtype).view(view)
        return abs(int(bits[0]) - int(bits[1])) <= max_ulps


@functools.lru_cache(maxsize=None)
def _format_for(dtype: np.dtype) -> ScalarFormat:
    if dtype.kind in 'iu':
        return ScalarFormat(dtype)
    if dtype.kind == 'f' and dtype.itemsize in _ULP_VIEWS:
        return ScalarFormat(dtype)
    raise TypeError(f'Unsupported channel dtype: {dtype.name}. Use an integer or float16/32/64 dtype.')
