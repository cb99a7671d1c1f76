"""Integers modulo the prime 998244353."""

from __future__ import annotations

from typing import Union

_Operand = Union["ModInt", int]


class ModInt:
    """An immutable residue modulo ``ModInt.MOD``."""

    MOD = 998244353
    __slots__ = ("_value",)

    def __init__(self, n: int = 0) -> None:
        self._value = int(n) % self.MOD

    @property
    def value(self) -> int:
        return self._value

    @classmethod
    def zero(cls) -> ModInt:
        return cls(0)

    @classmethod
    def one(cls) -> ModInt:
        return cls(1)

    def pow(self, n: int) -> ModInt:
        """Raise to a non-negative integer power."""
        if n < 0:
            raise ValueError("exponent must be non-negative")
        return ModInt(pow(self._value, n, self.MOD))

    def inv(self) -> ModInt:
        """Multiplicative inverse."""
        if self._value == 0:
            raise ZeroDivisionError("zero has no inverse")
        return ModInt(pow(self._value, -1, self.MOD))

    @staticmethod
    def _coerce(other: object) -> ModInt | None:
        if isinstance(other, ModInt):
            return other
        if isinstance(other, int):
            return ModInt(other)
        return None

    def __add__(self, other: _Operand) -> ModInt:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return ModInt(self._value + o._value)

    __radd__ = __add__

    def __sub__(self, other: _Operand) -> ModInt:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return ModInt(self._value - o._value)

    def __rsub__(self, other: _Operand) -> ModInt:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return ModInt(o._value - self._value)

    def __mul__(self, other: _Operand) -> ModInt:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return ModInt(self._value * o._value)

    __rmul__ = __mul__

    def __truediv__(self, other: _Operand) -> ModInt:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self * o.inv()

    def __rtruediv__(self, other: _Operand) -> ModInt:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o * self.inv()

    def __neg__(self) -> ModInt:
        return ModInt(-self._value)

    def __pow__(self, n: int) -> ModInt:
        return self.pow(n)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ModInt):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __int__(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"ModInt({self._value})"