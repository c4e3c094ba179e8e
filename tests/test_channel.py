"""Tests for colorchan.core.channel — channel kinds, ranges, invert/normalize/lerp."""

import numpy as np
import pytest
from colorchan.core.channel import BipolarChannel, BoundedChannel, PosNormalChannel
from colorchan.core.scalar import ScalarFormat

KINDS = [BoundedChannel, PosNormalChannel, BipolarChannel]


class TestBounds:
    @pytest.mark.parametrize(
        'kind, dtype, expected',
        [
            (BoundedChannel, 'uint8', (0, 255)),
            (BoundedChannel, 'int8', (-128, 127)),
            (BoundedChannel, 'float32', (0.0, 1.0)),
            (PosNormalChannel, 'uint8', (0, 255)),
            (PosNormalChannel, 'int8', (0, 127)),
            (PosNormalChannel, 'float64', (0.0, 1.0)),
            (BipolarChannel, 'uint8', (0, 255)),
            (BipolarChannel, 'int8', (-127, 127)),
            (BipolarChannel, 'float32', (-1.0, 1.0)),
        ],
    )
    def test_table(self, kind, dtype, expected):
        assert kind.bounds(ScalarFormat.of(dtype)) == expected


class TestConstruct:
    def test_value_is_cast(self):
        c = BoundedChannel(300, 'uint8')
        assert c.value == 255
        assert type(c.value) is np.uint8

    def test_default_dtype_is_float64(self):
        assert BoundedChannel(0.5).fmt == ScalarFormat.of('float64')

    def test_kinds_are_not_equal(self):
        assert BoundedChannel(3, 'uint8') != PosNormalChannel(3, 'uint8')


class TestInvert:
    def test_bounded_uint8(self):
        assert BoundedChannel(200, 'uint8').invert().value == 55

    def test_bounded_float(self):
        assert BoundedChannel(0.8, 'float32').invert().ulps_eq(BoundedChannel(0.2, 'float32'))

    def test_bipolar_float_negates(self):
        assert BipolarChannel(0.25, 'float64').invert().value == -0.25

    def test_bipolar_signed_negates(self):
        assert BipolarChannel(-100, 'int8').invert().value == 100

    @pytest.mark.parametrize('kind', KINDS)
    def test_involution_uint8(self, kind):
        for v in range(256):
            c = kind(v, 'uint8')
            assert c.invert().invert() == c

    @pytest.mark.parametrize('kind', KINDS)
    def test_involution_int8_full_range(self, kind):
        for v in range(-128, 128):
            c = kind(v, 'int8')
            assert c.invert().invert() == c

    def test_unreflectable_int8_values_are_fixed_points(self):
        assert BipolarChannel(-128, 'int8').invert().value == -128
        assert PosNormalChannel(-1, 'int8').invert().value == -1
        assert PosNormalChannel(-128, 'int8').invert().value == -128

    def test_int8_positive_reflects(self):
        assert PosNormalChannel(27, 'int8').invert().value == 100
        assert BipolarChannel(-127, 'int8').invert().value == 127

    @pytest.mark.parametrize('kind', KINDS)
    def test_involution_float(self, kind):
        for v in np.linspace(-1.0, 1.0, 41):
            c = kind(v, 'float64')
            assert c.invert().invert().abs_diff_eq(c, epsilon=1e-15)


class TestNormalize:
    def test_float_above_range(self):
        c = BoundedChannel(1.5, 'float32')
        assert not c.is_normalized()
        assert c.normalize().value == 1.0
        assert c.normalize().is_normalized()

    def test_bipolar_float_below_range(self):
        assert BipolarChannel(-1.5, 'float64').normalize().value == -1.0

    def test_bipolar_int8_most_negative_is_outside(self):
        c = BipolarChannel(-128, 'int8')
        assert not c.is_normalized()
        assert c.normalize().value == -127

    def test_posnormal_int8_negative_is_outside(self):
        c = PosNormalChannel(-5, 'int8')
        assert not c.is_normalized()
        assert c.normalize().value == 0

    def test_uint8_always_normalized(self):
        for kind in KINDS:
            assert kind(0, 'uint8').is_normalized()
            assert kind(255, 'uint8').is_normalized()


class TestClamp:
    def test_clamp_high(self):
        assert BoundedChannel(200, 'uint8').clamp(10, 20).value == 20

    def test_clamp_low(self):
        assert BoundedChannel(0.1, 'float64').clamp(0.25, 0.75).value == 0.25

    def test_clamp_inside(self):
        assert BoundedChannel(15, 'uint8').clamp(10, 20).value == 15


class TestLerp:
    def test_integer_tie_rounds_toward_zero(self):
        a = BoundedChannel(0, 'uint8')
        b = BoundedChannel(255, 'uint8')
        assert a.lerp(b, 0.5).value == 127

    def test_endpoints(self):
        a = BoundedChannel(13, 'uint8')
        b = BoundedChannel(250, 'uint8')
        assert a.lerp(b, 0.0) == a
        assert a.lerp(b, 1.0) == b

    def test_mixed_kinds_rejected(self):
        with pytest.raises(TypeError):
            BoundedChannel(1, 'uint8').lerp(PosNormalChannel(1, 'uint8'), 0.5)

    def test_mixed_formats_rejected(self):
        with pytest.raises(TypeError):
            BoundedChannel(1, 'uint8').lerp(BoundedChannel(1, 'uint16'), 0.5)


class TestCastTo:
    def test_uint8_to_float(self):
        assert BoundedChannel(255, 'uint8').cast_to('float32').value == 1.0

    def test_float_to_uint8(self):
        assert BoundedChannel(0.5, 'float64').cast_to('uint8').value == 127

    def test_bipolar_float_to_int8(self):
        assert BipolarChannel(-1.0, 'float64').cast_to('int8').value == -127

    def test_str(self):
        assert str(BoundedChannel(7, 'uint8')) == '7'
