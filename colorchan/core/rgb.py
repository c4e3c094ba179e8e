"""RGB colour: three bounded channels (red, green, blue) in one storage format."""

from __future__ import annotations

from typing import Any

from colorchan.core.angle import AngleUnit
from colorchan.core.channel import BoundedChannel
from colorchan.core.color import DEFAULT_DTYPE, HomogeneousColor, channel_property
from colorchan.core.convert import get_chroma, get_hue


class Rgb(HomogeneousColor):
    """RGB colour.

    Integer formats use the full storage range (0..255 for uint8); float
    formats use [0, 1]. Channel values are read and written through the
    red/green/blue properties; assigned values are cast into the colour's
    format.

        >>> Rgb.from_channels(200, 0, 255, dtype='uint8').invert()
        Rgb(red=55, green=255, blue=0, dtype=uint8)
    """

    tag = 'rgb'
    channel_names = ('red', 'green', 'blue')
    channel_kinds = (BoundedChannel, BoundedChannel, BoundedChannel)

    red = channel_property(0, 'red')
    green = channel_property(1, 'green')
    blue = channel_property(2, 'blue')

    @classmethod
    def from_channels(cls, red: Any, green: Any, blue: Any, dtype: Any = DEFAULT_DTYPE) -> Rgb:
        return cls((red, green, blue), dtype)

    def get_chroma(self) -> Any:
        return get_chroma(self)

    def get_hue(self, unit: AngleUnit | str = AngleUnit.TURNS) -> float:
        return get_hue(self, unit)
