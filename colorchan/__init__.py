"""colorchan — bounded colour channels and RGB / Y'CbCr conversion."""

from colorchan.core.angle import AngleUnit
from colorchan.core.channel import BipolarChannel, BoundedChannel, Channel, PosNormalChannel
from colorchan.core.color import Color, HomogeneousColor
from colorchan.core.convert import HUE_EPSILON, get_chroma, get_hue, transform_vector
from colorchan.core.model import YCbCrModel, build_model
from colorchan.core.rgb import Rgb
from colorchan.core.scalar import ScalarFormat
from colorchan.core.types import ModelSpec
from colorchan.core.ycbcr import ModeledYCbCr, OutOfGamutMode, YCbCr

__all__ = [
    'AngleUnit',
    'BipolarChannel',
    'BoundedChannel',
    'Channel',
    'Color',
    'HUE_EPSILON',
    'HomogeneousColor',
    'ModelSpec',
    'ModeledYCbCr',
    'OutOfGamutMode',
    'PosNormalChannel',
    'Rgb',
    'ScalarFormat',
    'YCbCr',
    'YCbCrModel',
    'build_model',
    'get_chroma',
    'get_hue',
    'transform_vector',
]
