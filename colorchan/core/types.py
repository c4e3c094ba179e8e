"""Shared types for colorchan: ModelSpec and CommandResult."""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from typing import Any

from colorchan.core.model import YCbCrModel, build_model
from colorchan.core.scalar import ScalarFormat


@dataclass(frozen=True)
class ModelSpec:
    """A named Y'CbCr standard, defined by its luma coefficients.

    Usage in a model module:

        model = ModelSpec(name='bt709', kr=0.2126, kb=0.0722, help='ITU-R BT.709 (HDTV)')

    The registry discovers the module-level `model` object. Concrete
    matrices depend on the storage format, so they are built on demand:

        ycc_model = model.for_format('uint8')
    """

    name: str
    kr: float
    kb: float
    help: str = ''
    aliases: tuple[str, ...] = ()

    @property
    def kg(self) -> float:
        return 1.0 - self.kr - self.kb

    def for_format(self, dtype: Any = 'float64') -> YCbCrModel:
        """Build (or reuse) this standard's model for a storage format."""
        return _cached_model(self.name, self.kr, self.kb, ScalarFormat.of(dtype))


@functools.lru_cache(maxsize=64)
def _cached_model(name: str, kr: float, kb: float, fmt: ScalarFormat) -> YCbCrModel:
    return build_model(kr, kb, fmt, name=name)


@dataclass
class CommandResult:
    """Inputs and outputs of one CLI command, for text/JSON output."""

    command: str
    dtype: str | None = None
    model: str | None = None
    inputs: dict[str, Any] = field(default_factory=dict)
    outputs: dict[str, Any] = field(default_factory=dict)

    def add_input(self, name: str, value: Any) -> None:
        self.inputs[name] = value

    def add_output(self, name: str, value: Any) -> None:
        self.outputs[name] = value
