"""Generic colour contract: a fixed-arity tuple of channels sharing one storage format.

Concrete colours declare three class attributes and inherit everything else:

    class Rgb(HomogeneousColor):
        tag = 'rgb'
        channel_names = ('red', 'green', 'blue')
        channel_kinds = (BoundedChannel, BoundedChannel, BoundedChannel)

Per-channel operations (invert, normalize, lerp, clamp, comparisons) are
applied by mapping over the channel tuple, so a new colour type needs no
per-channel boilerplate. Colours with different tags never mix: RGB and
YCbCr are both 3-tuples but lerp() or comparisons between them raise
TypeError.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Sequence
from typing import Any, ClassVar, TypeVar

import numpy as np

from colorchan.core.channel import Channel
from colorchan.core.scalar import ScalarFormat

DEFAULT_DTYPE = np.float64

C = TypeVar('C', bound='Color')


def channel_property(index: int, name: str) -> property:
    """Read/write property exposing the stored value of one channel."""

    def getter(self: Color) -> Any:
        return self._channels[index].value

    def setter(self: Color, value: Any) -> None:
        channels = list(self._channels)
        channels[index] = self.channel_kinds[index](value, self.fmt)
        self._channels = tuple(channels)

    return property(getter, setter, doc=f'The {name} channel value.')


@functools.total_ordering
class Color:
    """Base class for every colour type."""

    tag: ClassVar[str]
    channel_names: ClassVar[tuple[str, ...]]
    channel_kinds: ClassVar[tuple[type[Channel], ...]]

    __slots__ = ('_channels',)
    __hash__ = None  # mutable through channel setters

    def __init__(self, values: Sequence[Any], dtype: Any = DEFAULT_DTYPE):
        n = self.num_channels()
        if len(values) != n:
            raise ValueError(f'{type(self).__name__} needs exactly {n} channel values, got {len(values)}')
        fmt = ScalarFormat.of(dtype)
        self._channels = tuple(kind(v, fmt) for kind, v in zip(self.channel_kinds, values))

    @classmethod
    def _from_channel_objects(cls: type[C], channels: Sequence[Channel]) -> C:
        color = cls.__new__(cls)
        color._channels = tuple(channels)
        return color

    @classmethod
    def num_channels(cls) -> int:
        return len(cls.channel_names)

    @property
    def fmt(self) -> ScalarFormat:
        return self._channels[0].fmt

    @property
    def dtype(self) -> np.dtype:
        return self.fmt.dtype

    @property
    def channels(self) -> tuple[Channel, ...]:
        return self._channels

    # -- tuple / slice views ------------------------------------------------

    @classmethod
    def from_tuple(cls: type[C], values: Sequence[Any], dtype: Any = DEFAULT_DTYPE) -> C:
        return cls(values, dtype)

    def to_tuple(self) -> tuple[Any, ...]:
        return tuple(c.value for c in self._channels)

    @classmethod
    def from_slice(cls: type[C], values: Sequence[Any], dtype: Any = None) -> C:
        """Build a colour from a flat sequence of exactly num_channels() values.

        The dtype defaults to the sequence's own dtype when it has one
        (numpy arrays), else to float64. A length mismatch is a caller bug
        and raises ValueError.
        """
        if dtype is None:
            dtype = getattr(values, 'dtype', DEFAULT_DTYPE)
        if len(values) != cls.num_channels():
            raise ValueError(f'{cls.__name__}.from_slice expects {cls.num_channels()} values, got {len(values)}')
        return cls(list(values), dtype)

    def as_slice(self) -> np.ndarray:
        return np.array(self.to_tuple(), dtype=self.dtype)

    @classmethod
    def default(cls: type[C], dtype: Any = DEFAULT_DTYPE) -> C:
        """All channels at the zero value of the storage type."""
        return cls([0] * cls.num_channels(), dtype)

    # -- per-channel operations -------------------------------------------

    def _map(self: C, fn: Callable[[Channel], Channel]) -> C:
        return self._from_channel_objects([fn(c) for c in self._channels])

    def _zip(self, other: Color, fn: Callable[[Channel, Channel], Any]) -> list[Any]:
        self._check_same_tag(other)
        return [fn(a, b) for a, b in zip(self._channels, other._channels)]

    def _check_same_tag(self, other: Color) -> None:
        if not isinstance(other, Color) or other.tag != self.tag:
            other_name = type(other).__name__
            raise TypeError(f'Cannot combine {type(self).__name__} with {other_name}')

    def invert(self: C) -> C:
        return self._map(lambda c: c.invert())

    def normalize(self: C) -> C:
        return self._map(lambda c: c.normalize())

    def is_normalized(self) -> bool:
        return all(c.is_normalized() for c in self._channels)

    def lerp(self: C, other: C, pos: float) -> C:
        return self._from_channel_objects(self._zip(other, lambda a, b: a.lerp(b, pos)))

    def color_cast(self: C, dtype: Any) -> C:
        """Convert to another storage format, rescaling each channel's range."""
        return self._map(lambda c: c.cast_to(dtype))

    def abs_diff_eq(self, other: Color, epsilon: float | None = None) -> bool:
        return all(self._zip(other, lambda a, b: a.abs_diff_eq(b, epsilon)))

    def relative_eq(self, other: Color, epsilon: float | None = None, max_relative: float | None = None) -> bool:
        return all(self._zip(other, lambda a, b: a.relative_eq(b, epsilon, max_relative)))

    def ulps_eq(self, other: Color, epsilon: float | None = None, max_ulps: int | None = None) -> bool:
        return all(self._zip(other, lambda a, b: a.ulps_eq(b, epsilon, max_ulps)))

    # -- dunder ---------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return type(other) is type(self) and other._channels == self._channels

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        mine = tuple(c.fmt.widen(c.value) for c in self._channels)
        theirs = tuple(c.fmt.widen(c.value) for c in other._channels)
        return mine < theirs

    def __iter__(self):
        return iter(self.to_tuple())

    def __len__(self) -> int:
        return self.num_channels()

    def __str__(self) -> str:
        return f'{type(self).__name__}({", ".join(str(c) for c in self._channels)})'

    def __repr__(self) -> str:
        parts = [f'{name}={c}' for name, c in zip(self.channel_names, self._channels)]
        return f'{type(self).__name__}({", ".join(parts)}, dtype={self.fmt.name})'


class HomogeneousColor(Color):
    """A colour whose channels all share one kind, so one value fits every channel."""

    __slots__ = ()

    @classmethod
    def broadcast(cls: type[C], value: Any, dtype: Any = DEFAULT_DTYPE) -> C:
        return cls([value] * cls.num_channels(), dtype)

    def clamp(self: C, low: Any, high: Any) -> C:
        return self._map(lambda c: c.clamp(low, high))
