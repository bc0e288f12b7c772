"""Boolean connectives."""
from __future__ import annotations


def implies(a: bool, b: bool) -> bool:
    """Material implication: false only when ``a`` holds and ``b`` does not."""
    return not a or b


def xor(a: bool, b: bool) -> bool:
    """Exclusive or."""
    return bool(a) != bool(b)
