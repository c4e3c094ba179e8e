"""SMPTE 240M (early HDTV): Kr = 0.212, Kb = 0.087."""

from colorchan.core.types import ModelSpec

model = ModelSpec(
    name='smpte240m',
    kr=0.212,
    kb=0.087,
    help='SMPTE 240M (early HDTV).',
)
