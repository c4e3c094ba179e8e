"""Report builder — text and JSON output for colorchan commands."""

import json
from typing import Any

import numpy as np

from colorchan.core.color import Color
from colorchan.core.types import CommandResult
from colorchan.core.ycbcr import ModeledYCbCr


def _jsonable(value: Any) -> Any:
    if isinstance(value, ModeledYCbCr):
        obj = _jsonable(value.color)
        obj['model'] = value.model.name
        return obj
    if isinstance(value, Color):
        return {
            'space': value.tag,
            'dtype': value.fmt.name,
            'channels': {name: value.fmt.widen(v) for name, v in zip(value.channel_names, value.to_tuple())},
            'normalized': value.is_normalized(),
        }
    if isinstance(value, np.generic):
        return value.item()
    return value


def _text(value: Any) -> str:
    if isinstance(value, (Color, ModeledYCbCr)):
        return str(value)
    if isinstance(value, float):
        return f'{value:.6g}'
    if isinstance(value, np.floating):
        return np.format_float_positional(value, trim='0')
    return str(value)


def format_text(result: CommandResult) -> str:
    """Format a command result as human-readable text."""
    header = f'colorchan {result.command}'
    details = [d for d in (result.dtype, result.model and f'model={result.model}') if d]
    if details:
        header += f' ({", ".join(details)})'
    lines = [header]

    rows = list(result.inputs.items()) + list(result.outputs.items())
    width = max((len(name) for name, _ in rows), default=0) + 1
    for name, value in result.inputs.items():
        lines.append(f'  {name + ":":<{width}} {_text(value)}')
    if result.inputs and result.outputs:
        lines.append('  ' + '─' * (width + 1))
    for name, value in result.outputs.items():
        lines.append(f'  {name + ":":<{width}} {_text(value)}')
    return '\n'.join(lines)


def format_json(result: CommandResult) -> str:
    """Format a command result as JSON."""
    obj: dict[str, Any] = {'command': result.command}
    if result.dtype:
        obj['dtype'] = result.dtype
    if result.model:
        obj['model'] = result.model
    obj['inputs'] = {k: _jsonable(v) for k, v in result.inputs.items()}
    obj['outputs'] = {k: _jsonable(v) for k, v in result.outputs.items()}
    return json.dumps(obj, indent=2)
