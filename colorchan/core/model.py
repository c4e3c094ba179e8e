"""Y'CbCr transform models: a forward 3x3 matrix, its inverse, and a shift.

A model is plain immutable data. Its matrices are read-only numpy arrays,
so one model can be shared by any number of concurrent conversions.

build_model() derives a full-range model for a given storage format from
a pair of luma coefficients (Kr, Kb):

    Y'  = Kr R + Kg G + Kb B                  Kg = 1 - Kr - Kb
    Pb  = (B - Y') / (2 (1 - Kb))
    Pr  = (R - Y') / (2 (1 - Kr))

Y' is scaled onto the luma channel's range and Pb/Pr onto the chroma
channels' range. The shift then moves each channel to its zero point:
0 for floats and signed integers, (max + 1) / 2 for unsigned integers
(128 for 8-bit storage, as in JPEG/JFIF).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from colorchan.core.channel import BipolarChannel, BoundedChannel, PosNormalChannel
from colorchan.core.scalar import ScalarFormat

logger = logging.getLogger(__name__)


def _frozen_matrix(values: Any) -> np.ndarray:
    m = np.array(values, dtype=np.float64)
    if m.shape != (3, 3):
        raise ValueError(f'Transform must be a 3x3 matrix, got shape {m.shape}')
    m.setflags(write=False)
    return m


@dataclass(frozen=True, eq=False)
class YCbCrModel:
    """Forward/inverse transforms and shift for one RGB <-> Y'CbCr variant.

    The inverse is not checked against the forward matrix; from_matrix()
    derives it, and callers building a model by hand own that invariant.
    """

    name: str
    forward_transform: np.ndarray
    inverse_transform: np.ndarray
    shift: tuple[float, float, float]
    fmt: ScalarFormat | None = field(default=None)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'forward_transform', _frozen_matrix(self.forward_transform))
        object.__setattr__(self, 'inverse_transform', _frozen_matrix(self.inverse_transform))
        if len(self.shift) != 3:
            raise ValueError(f'Shift must have 3 components, got {len(self.shift)}')
        object.__setattr__(self, 'shift', tuple(float(s) for s in self.shift))

    @classmethod
    def from_matrix(
        cls,
        forward: Any,
        shift: tuple[float, float, float] = (0.0, 0.0, 0.0),
        name: str = 'custom',
        dtype: Any = None,
    ) -> YCbCrModel:
        """Build a model from its forward matrix; the inverse is computed."""
        forward = _frozen_matrix(forward)
        inverse = np.linalg.inv(forward)
        fmt = ScalarFormat.of(dtype) if dtype is not None else None
        return cls(name=name, forward_transform=forward, inverse_transform=inverse, shift=shift, fmt=fmt)

    def __repr__(self) -> str:
        fmt = self.fmt.name if self.fmt else 'any'
        return f'YCbCrModel(name={self.name!r}, fmt={fmt}, shift={self.shift})'


def luma_chroma_matrix(kr: float, kb: float) -> np.ndarray:
    """Unscaled RGB -> Y'PbPr matrix (Pb, Pr in [-0.5, 0.5] for unit RGB)."""
    if kr <= 0 or kb <= 0 or kr + kb >= 1:
        raise ValueError(f'Invalid luma coefficients kr={kr}, kb={kb}: need kr > 0, kb > 0, kr + kb < 1')
    kg = 1.0 - kr - kb
    return np.array(
        [
            [kr, kg, kb],
            [-kr / (2 * (1 - kb)), -kg / (2 * (1 - kb)), 0.5],
            [0.5, -kg / (2 * (1 - kr)), -kb / (2 * (1 - kr))],
        ],
        dtype=np.float64,
    )


def build_model(kr: float, kb: float, dtype: Any = np.float64, name: str = 'custom') -> YCbCrModel:
    """Full-range Y'CbCr model for the given luma coefficients and storage format."""
    fmt = ScalarFormat.of(dtype)
    rgb_lo, rgb_hi = BoundedChannel.bounds(fmt)
    y_lo, y_hi = PosNormalChannel.bounds(fmt)
    c_lo, c_hi = BipolarChannel.bounds(fmt)

    width = float(rgb_hi) - float(rgb_lo)
    luma_scale = (float(y_hi) - float(y_lo)) / width
    chroma_scale = (float(c_hi) - float(c_lo)) / width
    forward = luma_chroma_matrix(kr, kb) * np.array([[luma_scale], [chroma_scale], [chroma_scale]])

    luma_shift = float(y_lo) - float(rgb_lo) * luma_scale
    if fmt.is_integer and not fmt.is_signed:
        chroma_zero = (float(c_hi) + 1.0) / 2.0
    else:
        chroma_zero = (float(c_hi) + float(c_lo)) / 2.0

    logger.debug('Built %s model for %s: luma_scale=%g chroma_scale=%g', name, fmt.name, luma_scale, chroma_scale)
    return YCbCrModel.from_matrix(forward, shift=(luma_shift, chroma_zero, chroma_zero), name=name, dtype=fmt)
