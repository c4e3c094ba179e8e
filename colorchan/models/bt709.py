"""ITU-R BT.709 (HDTV): Kr = 0.2126, Kb = 0.0722."""

from colorchan.core.types import ModelSpec

model = ModelSpec(
    name='bt709',
    kr=0.2126,
    kb=0.0722,
    help='ITU-R BT.709 (HDTV).',
    aliases=('rec709',),
)
