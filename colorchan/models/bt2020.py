"""ITU-R BT.2020 (UHDTV), non-constant luminance form: Kr = 0.2627, Kb = 0.0593."""

from colorchan.core.types import ModelSpec

model = ModelSpec(
    name='bt2020',
    kr=0.2627,
    kb=0.0593,
    help='ITU-R BT.2020 (UHDTV), non-constant luminance.',
    aliases=('rec2020',),
)
