"""Angular units for hue values. Hue is computed in turns (1 turn = 360 degrees)."""

from __future__ import annotations

import enum
import math


class AngleUnit(enum.Enum):
    TURNS = 'turns'
    DEGREES = 'degrees'
    RADIANS = 'radians'

    @classmethod
    def parse(cls, value: AngleUnit | str) -> AngleUnit:
        if isinstance(value, AngleUnit):
            return value
        key = value.strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            choices = ', '.join(u.value for u in cls)
            raise ValueError(f'Unknown angle unit: {value!r}. Available: {choices}') from None

    def from_turns(self, turns: float) -> float:
        if self is AngleUnit.DEGREES:
            return turns * 360.0
        if self is AngleUnit.RADIANS:
            return turns * math.tau
        return turns


_ALIASES = {'deg': 'degrees', 'rad': 'radians', 'turn': 'turns'}
