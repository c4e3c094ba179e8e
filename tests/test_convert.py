"""Tests for colorchan.core.convert and colorchan.core.angle — transforms, chroma and hue."""

import colorsys
import itertools
import math

import numpy as np
import pytest
from colorchan.core.angle import AngleUnit
from colorchan.core.convert import HUE_EPSILON, get_chroma, get_hue, transform_vector
from colorchan.core.rgb import Rgb


class TestTransformVector:
    def test_identity(self):
        assert transform_vector(np.eye(3), (1, 2, 3)) == (1.0, 2.0, 3.0)

    def test_returns_python_floats(self):
        out = transform_vector([[0, 1, 0], [1, 0, 0], [0, 0, 2]], np.array([1, 2, 3], dtype=np.uint8))
        assert out == (2.0, 1.0, 6.0)
        assert all(type(v) is float for v in out)


class TestHue:
    def test_epsilon_value(self):
        assert HUE_EPSILON == 1e-10

    def test_achromatic_is_zero(self):
        for v in (0.0, 0.3, 1.0):
            assert get_hue(Rgb.broadcast(v)) == 0.0

    def test_matches_colorsys(self):
        steps = [0.0, 0.25, 0.5, 0.75, 1.0]
        for r, g, b in itertools.product(steps, repeat=3):
            if max(r, g, b) == min(r, g, b):
                continue
            expected, _s, _v = colorsys.rgb_to_hsv(r, g, b)
            assert get_hue(Rgb.from_channels(r, g, b)) == pytest.approx(expected, abs=1e-6), (r, g, b)

    def test_range_is_half_open_turn(self):
        steps = np.linspace(0.0, 1.0, 7)
        for values in itertools.product(steps, repeat=3):
            hue = get_hue(Rgb(values))
            assert 0.0 <= hue < 1.0

    def test_units(self):
        green = Rgb.from_channels(0.0, 1.0, 0.0)
        assert get_hue(green, AngleUnit.TURNS) == pytest.approx(1.0 / 3.0)
        assert get_hue(green, 'degrees') == pytest.approx(120.0)
        assert get_hue(green, 'rad') == pytest.approx(2.0 * math.pi / 3.0)


class TestChroma:
    def test_function_matches_method(self):
        c = Rgb.from_channels(0.1, 0.9, 0.4)
        assert get_chroma(c) == c.get_chroma()

    def test_float_chroma(self):
        assert get_chroma(Rgb.from_channels(0.25, 1.0, 0.5)) == 0.75

    def test_signed_span_within_range_is_exact(self):
        assert get_chroma(Rgb.from_channels(100, 0, -27, dtype='int8')) == 127

    def test_signed_span_beyond_range_saturates(self):
        chroma = get_chroma(Rgb.from_channels(127, 0, -128, dtype='int8'))
        assert chroma == 127
        assert type(chroma) is np.int8


class TestAngleUnit:
    def test_parse_aliases(self):
        assert AngleUnit.parse('deg') is AngleUnit.DEGREES
        assert AngleUnit.parse(' Radians ') is AngleUnit.RADIANS
        assert AngleUnit.parse(AngleUnit.TURNS) is AngleUnit.TURNS

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match='Unknown angle unit'):
            AngleUnit.parse('gradians')

    def test_from_turns(self):
        assert AngleUnit.DEGREES.from_turns(0.5) == 180.0
        assert AngleUnit.RADIANS.from_turns(1.0) == pytest.approx(math.tau)
        assert AngleUnit.TURNS.from_turns(0.25) == 0.25
