"""Number formatting shared by the text serializers. No engine imports."""

from __future__ import annotations

import numbers


def fmt_num(v: float) -> str:
    """Integral values without a decimal point, others as shortest round-trip repr."""
    if isinstance(v, numbers.Integral):
        return str(int(v))
    v = float(v)
    if v.is_integer():
        return str(int(v))
    return repr(v)


def fmt_vec(v, sep: str = ", ") -> str:
    """Join the x, y, z components of a vector."""
    return sep.join(fmt_num(c) for c in (v.x, v.y, v.z))
