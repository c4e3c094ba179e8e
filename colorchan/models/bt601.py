"""ITU-R BT.601 (standard-definition television).

Kr = 0.299, Kb = 0.114. With full-range 8-bit storage this is exactly the
JPEG/JFIF matrix, hence the aliases.

Example:
    colorchan to-ycbcr 255,0,0 --model jpeg
"""

from colorchan.core.types import ModelSpec

model = ModelSpec(
    name='bt601',
    kr=0.299,
    kb=0.114,
    help='ITU-R BT.601 (SDTV). Same matrix as JPEG/JFIF.',
    aliases=('jpeg', 'jfif'),
)
