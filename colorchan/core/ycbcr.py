"""Y'CbCr colour and its bridge to RGB.

Luma is a positive-normalised channel, Cb and Cr are bipolar-normalised,
so invert() and normalize() behave differently from Rgb's even with the
same storage format. Conversion goes through a YCbCrModel:

    RGB -> Y'CbCr   forward_transform, then + shift
    Y'CbCr -> RGB   - shift, then inverse_transform, then the gamut policy

All arithmetic is float64; results are cast (saturating) into the
storage format at the end.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

from colorchan.core.channel import BipolarChannel, PosNormalChannel
from colorchan.core.color import DEFAULT_DTYPE, Color, channel_property
from colorchan.core.convert import apply_forward, apply_inverse
from colorchan.core.model import YCbCrModel
from colorchan.core.rgb import Rgb
from colorchan.core.scalar import ScalarFormat


class OutOfGamutMode(enum.Enum):
    """What to_rgb() does with channels that land outside their range."""

    PRESERVE = 'preserve'  # keep the cast values, possibly un-normalised
    CLIP = 'clip'  # normalize() every channel

    @classmethod
    def parse(cls, value: OutOfGamutMode | str) -> OutOfGamutMode:
        if isinstance(value, OutOfGamutMode):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f'Unknown gamut mode: {value!r}. Available: preserve, clip') from None


def _check_model_format(model: YCbCrModel, fmt: ScalarFormat) -> None:
    if model.fmt is not None and model.fmt != fmt:
        raise TypeError(f'Model {model.name} was built for {model.fmt.name}, colour is {fmt.name}')


class YCbCr(Color):
    """Y'CbCr colour without an attached model."""

    tag = 'ycbcr'
    channel_names = ('luma', 'cb', 'cr')
    channel_kinds = (PosNormalChannel, BipolarChannel, BipolarChannel)

    luma = channel_property(0, 'luma')
    cb = channel_property(1, 'cb')
    cr = channel_property(2, 'cr')

    @classmethod
    def from_channels(cls, luma: Any, cb: Any, cr: Any, dtype: Any = DEFAULT_DTYPE) -> YCbCr:
        return cls((luma, cb, cr), dtype)

    @classmethod
    def from_rgb_and_model(cls, rgb: Rgb, model: YCbCrModel) -> YCbCr:
        """Encode an RGB colour with model, keeping the RGB storage format."""
        fmt = rgb.fmt
        _check_model_format(model, fmt)
        values = apply_forward(model, [fmt.to_float(v) for v in rgb.to_tuple()])
        return cls(values, fmt)

    def to_rgb(self, model: YCbCrModel, out_of_gamut_mode: OutOfGamutMode | str) -> Rgb:
        """Decode to RGB in the same storage format.

        PRESERVE returns the cast result as-is: float formats may carry
        channels outside [0, 1]. CLIP normalises every channel.
        """
        mode = OutOfGamutMode.parse(out_of_gamut_mode)
        fmt = self.fmt
        _check_model_format(model, fmt)
        values = apply_inverse(model, [fmt.to_float(v) for v in self.to_tuple()])
        out = Rgb(values, fmt)
        if mode is OutOfGamutMode.CLIP:
            return out.normalize()
        return out

    def with_model(self, model: YCbCrModel) -> ModeledYCbCr:
        return ModeledYCbCr(self, model)


@dataclass(frozen=True)
class ModeledYCbCr:
    """A Y'CbCr colour together with the model it was encoded with."""

    color: YCbCr
    model: YCbCrModel

    # the wrapped colour is mutable
    __hash__ = None

    def __post_init__(self) -> None:
        _check_model_format(self.model, self.color.fmt)

    @classmethod
    def from_rgb(cls, rgb: Rgb, model: YCbCrModel) -> ModeledYCbCr:
        return cls(YCbCr.from_rgb_and_model(rgb, model), model)

    def to_rgb(self, out_of_gamut_mode: OutOfGamutMode | str) -> Rgb:
        return self.color.to_rgb(self.model, out_of_gamut_mode)

    def __str__(self) -> str:
        return f'{self.color} [{self.model.name}]'
