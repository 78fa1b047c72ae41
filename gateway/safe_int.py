"""Safe integer wrapper for arithmetic on token amounts.

SafeInt makes the quote math fail loudly instead of silently:
- Division by zero raises DivisionByZero
- Mixing in floats raises TypeError

Usage pattern:
    from gateway.safe_int import S

    def calculate(a: int, b: int, c: int) -> int:
        result = (S(a) * S(b)) // S(c)  # Raises if c == 0
        return result.value
"""

from __future__ import annotations


class SafeIntError(ArithmeticError):
    """Base class for SafeInt arithmetic errors."""

    pass


class DivisionByZero(SafeIntError):
    """Division by zero."""

    pass


class SafeInt:
    """Integer with checked arithmetic.

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        if isinstance(value, SafeInt):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            self._value = value
        else:
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __hash__(self) -> int:
        return hash(self._value)

    def __add__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value + _extract_value(other))

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value * _extract_value(other))

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Integer (floor) division.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: {self._value} // 0")
        return SafeInt(self._value // other_val)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented


def _extract_value(other: SafeInt | int) -> int:
    if isinstance(other, SafeInt):
        return other._value
    if isinstance(other, int) and not isinstance(other, bool):
        return other
    raise TypeError(f"Expected SafeInt or int, got {type(other).__name__}")


# Short alias used at arithmetic call sites
S = SafeInt

__all__ = [
    "SafeInt",
    "S",
    "SafeIntError",
    "DivisionByZero",
]
