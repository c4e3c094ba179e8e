"""Conversion engine shared by the colour models.

Two pieces:
  - the linear transform used by the YCbCr <-> RGB bridge: a 3x3 matrix
    applied to a channel triple, plus a per-channel additive shift. All
    arithmetic happens in float64 regardless of the storage format.
  - chroma and hue extraction for any 3-channel colour.

Hue uses the swap-and-sign-track formulation instead of a six-way switch
on the maximum channel. It returns the same values as the usual HSV/HSL
hue, in turns (0 = red, 1/3 = green, 2/3 = blue).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import numpy as np

from colorchan.core.angle import AngleUnit

if TYPE_CHECKING:
    from colorchan.core.color import Color
    from colorchan.core.model import YCbCrModel

# Keeps the hue division finite for achromatic colours (max == min).
HUE_EPSILON = 1e-10

Triple = tuple[float, float, float]


def transform_vector(matrix: Any, vector: Sequence[float]) -> Triple:
    """Multiply a 3x3 matrix by a 3-vector in double precision."""
    out = np.asarray(matrix, dtype=np.float64) @ np.asarray(vector, dtype=np.float64)
    return float(out[0]), float(out[1]), float(out[2])


def apply_forward(model: YCbCrModel, rgb: Sequence[float]) -> Triple:
    """RGB triple -> Y'CbCr triple: forward transform, then add the shift."""
    y, cb, cr = transform_vector(model.forward_transform, rgb)
    s = model.shift
    return y + s[0], cb + s[1], cr + s[2]


def apply_inverse(model: YCbCrModel, ycbcr: Sequence[float]) -> Triple:
    """Y'CbCr triple -> RGB triple: subtract the shift, then inverse transform."""
    s = model.shift
    shifted = (float(ycbcr[0]) - s[0], float(ycbcr[1]) - s[1], float(ycbcr[2]) - s[2])
    return transform_vector(model.inverse_transform, shifted)


def _require_three(color: Color) -> None:
    if color.num_channels() != 3:
        raise TypeError(f'{type(color).__name__} has {color.num_channels()} channels; expected 3')


def get_chroma(color: Color) -> Any:
    """Largest minus smallest channel, in the colour's storage format.

    Exact for unsigned and float storage. On signed integer storage the span
    can exceed the dtype's maximum and saturates, e.g. int8 (127, 0, -128)
    gives 127.
    """
    _require_three(color)
    fmt = color.fmt
    c1, c2, c3 = (fmt.widen(v) for v in color.to_tuple())
    # fixed three-compare sorting network, descending
    if c2 < c3:
        c2, c3 = c3, c2
    if c1 < c2:
        c1, c2 = c2, c1
    if c2 < c3:
        c2, c3 = c3, c2
    return fmt.cast(c1 - c3)


def _hue_factor_and_ordered_channels(c1: float, c2: float, c3: float) -> tuple[float, float, float, float, float]:
    scaling_factor = 0.0
    if c2 < c3:
        c2, c3 = c3, c2
        scaling_factor = -1.0
    min_chan = c3
    if c1 < c2:
        c1, c2 = c2, c1
        scaling_factor = -1.0 / 3.0 - scaling_factor
        min_chan = min(c2, c3)
    return scaling_factor, c1, c2, c3, min_chan


def get_hue(color: Color, unit: AngleUnit | str = AngleUnit.TURNS) -> float:
    """Hue of a 3-channel colour, as a fraction of a turn in [0, 1) converted to unit."""
    _require_three(color)
    fmt = color.fmt
    c1, c2, c3 = (fmt.to_float(v) for v in color.to_tuple())
    scaling_factor, c1, c2, c3, min_chan = _hue_factor_and_ordered_channels(c1, c2, c3)
    hue = scaling_factor + (c2 - c3) / (6.0 * (c1 - min_chan) + HUE_EPSILON)
    return AngleUnit.parse(unit).from_turns(abs(hue))
