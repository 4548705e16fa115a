"""Integer arithmetic utility with optional fixed-width overflow semantics.

Python integers never overflow, so :func:`add` and :func:`multiply` return
the exact mathematical result. :class:`MathUtils` pins a two's-complement
width when a caller needs results that match a fixed-width integer type.

Contents:
    * :func:`add` - Exact integer sum.
    * :func:`multiply` - Exact integer product.
    * :func:`wrap_integer` - Reduce a value into a signed ``bits``-wide range.
    * :class:`MathUtils` - Arithmetic bound to an :class:`OverflowMode`.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import OverflowMode


def _require_int(name: str, value: object) -> int:
    """Return *value* unchanged or raise TypeError for non-int operands."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def add(a: int, b: int) -> int:
    """Return the sum of two integers.

    Examples:
        >>> add(5, 3)
        8
        >>> add(-2, -3)
        -5
    """
    return _require_int("a", a) + _require_int("b", b)


def multiply(a: int, b: int) -> int:
    """Return the product of two integers.

    Examples:
        >>> multiply(5, 3)
        15
        >>> multiply(-2, 5)
        -10
    """
    return _require_int("a", a) * _require_int("b", b)


def wrap_integer(value: int, bits: int) -> int:
    """Reduce *value* into the signed range of a ``bits``-wide integer.

    Args:
        value: Any Python integer.
        bits: Width of the two's-complement target type.

    Returns:
        The value congruent to *value* modulo ``2**bits`` that lies in
        ``[-2**(bits - 1), 2**(bits - 1) - 1]``.

    Raises:
        ValueError: If *bits* is not positive.

    Examples:
        >>> wrap_integer(2**31, 32)
        -2147483648
        >>> wrap_integer(-1, 32)
        -1
        >>> wrap_integer(255, 8)
        -1
    """
    if bits <= 0:
        raise ValueError(f"bits must be positive, got {bits}")
    modulus = 1 << bits
    reduced = value & (modulus - 1)
    if reduced >= modulus >> 1:
        reduced -= modulus
    return reduced


@dataclass(frozen=True, slots=True)
class MathUtils:
    """Stateless arithmetic helper bound to an overflow mode.

    Attributes:
        overflow: How results are reduced. ``UNBOUNDED`` keeps Python's
            exact integers; ``WRAP32``/``WRAP64`` wrap like fixed-width
            signed integers.

    Example:
        >>> MathUtils().add(5, 3)
        8
        >>> MathUtils(OverflowMode.WRAP32).add(2**31 - 1, 1)
        -2147483648
    """

    overflow: OverflowMode = OverflowMode.UNBOUNDED

    def _reduce(self, value: int) -> int:
        bits = self.overflow.bits
        if bits is None:
            return value
        return wrap_integer(value, bits)

    def add(self, a: int, b: int) -> int:
        """Return ``a + b`` reduced according to :attr:`overflow`."""
        return self._reduce(add(a, b))

    def multiply(self, a: int, b: int) -> int:
        """Return ``a * b`` reduced according to :attr:`overflow`."""
        return self._reduce(multiply(a, b))


__all__ = [
    "MathUtils",
    "add",
    "multiply",
    "wrap_integer",
]
