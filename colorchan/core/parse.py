"""Parsing colour literals from command-line text.

Accepted forms:
  200,0,255          channel values, in the target storage format's units
  0.5, 0.25, 1       whitespace around values is ignored
  (200, 0, 255)      optional parentheses
  #c800ff / #f0f     8-bit hex RGB; rescaled when the target format differs
"""

import re
from typing import Any

import numpy as np

from colorchan.core.color import Color
from colorchan.core.rgb import Rgb

_HEX_RE = re.compile(r'^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')
_NUMBER_RE = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$')


def parse_numbers(text: str) -> list[int | float]:
    """Split 'a,b,c' into numbers. Integers stay int; anything else is float."""
    body = text.strip()
    if body.startswith('(') and body.endswith(')'):
        body = body[1:-1]
    values: list[int | float] = []
    for token in body.split(','):
        token = token.strip()
        if not _NUMBER_RE.match(token):
            raise ValueError(f'Not a number: {token!r} in {text!r}')
        values.append(int(token) if re.fullmatch(r'[+-]?\d+', token) else float(token))
    return values


def hex_to_rgb8(text: str) -> tuple[int, int, int]:
    """'#rrggbb' or '#rgb' to an 8-bit (r, g, b) tuple."""
    m = _HEX_RE.match(text.strip())
    if not m:
        raise ValueError(f'Not a hex colour: {text!r}')
    digits = m.group(1)
    if len(digits) == 3:
        digits = ''.join(ch * 2 for ch in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def parse_color(text: str, cls: type[Color], dtype: Any) -> Color:
    """Parse text into a colour of type cls stored as dtype."""
    if _HEX_RE.match(text.strip()) and not _NUMBER_RE.match(text.strip()):
        if cls is not Rgb:
            raise ValueError(f'Hex notation is only valid for RGB colours: {text!r}')
        return Rgb(hex_to_rgb8(text), np.uint8).color_cast(dtype)
    values = parse_numbers(text)
    if len(values) != cls.num_channels():
        raise ValueError(f'{cls.__name__} needs {cls.num_channels()} comma-separated values, got {len(values)}')
    return cls(values, dtype)


def rgb_to_hex(color: Rgb) -> str:
    """Hex string of an RGB colour, rescaled to 8 bits first when needed."""
    r, g, b = (int(v) for v in color.normalize().color_cast(np.uint8).to_tuple())
    return f'#{r:02x}{g:02x}{b:02x}'
