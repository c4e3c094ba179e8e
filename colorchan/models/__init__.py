"""Y'CbCr model standards.

Every .py file in this package that defines a `model` object is
auto-registered by colorchan.registry.discover().

The explicit imports below keep the modules importable when the package
is bundled somewhere pkgutil cannot list it; keep the list in sync.
"""

import colorchan.models.bt601 as _bt601  # noqa: F401
import colorchan.models.bt709 as _bt709  # noqa: F401
import colorchan.models.bt2020 as _bt2020  # noqa: F401
import colorchan.models.smpte240m as _smpte240m  # noqa: F401
