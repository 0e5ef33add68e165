"""Prime-field arithmetic F_p.

A ``FieldElement`` pairs a residue ``num`` with its modulus ``prime``.
Operators return new elements and require both operands to share ``prime``.
"""

from __future__ import annotations

import logging
import operator

from primefield.crypto.errors import FieldMismatchError, FieldValueError

logger = logging.getLogger(__name__)


class FieldElement:
    """Immutable element of F_prime."""

    __slots__ = ("num", "prime")

    def __init__(self, num: int, prime: int) -> None:
        if num < 0 or num >= prime:
            logger.debug({"action": "new", "status": "out of range", "num": num, "prime": prime})
            raise FieldValueError(f"num {num} not in field range 0 to {prime - 1}")
        object.__setattr__(self, "num", num)
        object.__setattr__(self, "prime", prime)

    @classmethod
    def new(cls, num: int, prime: int) -> FieldElement:
        """Validated factory, same contract as the constructor."""
        return cls(num, prime)

    @classmethod
    def _unchecked(cls, num: int, prime: int) -> FieldElement:
        # results of arithmetic skip range validation
        elem = object.__new__(cls)
        object.__setattr__(elem, "num", num)
        object.__setattr__(elem, "prime", prime)
        return elem

    def __setattr__(self, name, value):
        raise AttributeError(f"FieldElement is immutable, cannot set '{name}'")

    def __delattr__(self, name):
        raise AttributeError(f"FieldElement is immutable, cannot delete '{name}'")

    def __reduce__(self):
        return (self.__class__._unchecked, (self.num, self.prime))

    def __repr__(self) -> str:
        return f"FieldElement_{self.prime}({self.num})"

    def __eq__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.num == other.num and self.prime == other.prime

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash((self.num, self.prime))

    def _check_field(self, other: FieldElement) -> None:
        if self.prime != other.prime:
            logger.debug({"action": "check field", "status": "mismatch",
                          "left": self.prime, "right": other.prime})
            raise FieldMismatchError(self.prime, other.prime)

    # ---------- arithmetic ----------

    def __add__(self, other: FieldElement) -> FieldElement:
        """Field addition."""
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._check_field(other)
        return self._unchecked((self.num + other.num) % self.prime, self.prime)

    def __sub__(self, other: FieldElement) -> FieldElement:
        """Field subtraction, kept inside the non-negative residues."""
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._check_field(other)
        if self.num < other.num:
            num = self.prime - ((other.num - self.num) % self.prime)
        else:
            num = self.num - other.num
        return self._unchecked(num, self.prime)

    def __neg__(self) -> FieldElement:
        """Additive inverse.

        The zero element maps to ``num == prime`` rather than 0.
        """
        return self._unchecked(self.prime - (self.num % self.prime), self.prime)

    def __mul__(self, other: FieldElement) -> FieldElement:
        """Field multiplication."""
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._check_field(other)
        return self._unchecked((self.num * other.num) % self.prime, self.prime)

    def __rmul__(self, coefficient: int) -> FieldElement:
        """Scalar multiple ``k * a`` for an integer ``k``."""
        if not isinstance(coefficient, int):
            return NotImplemented
        return self._unchecked((self.num * coefficient) % self.prime, self.prime)

    def __truediv__(self, other: FieldElement) -> FieldElement:
        """Floor division of the residues, reduced mod prime.

        This is not division by the modular inverse; use
        ``a * b.inverse()`` for that.
        """
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._check_field(other)
        return self._unchecked((self.num // other.num) % self.prime, self.prime)

    def inverse(self) -> FieldElement:
        """Multiplicative inverse via Fermat's little theorem (prime is prime)."""
        if self.num % self.prime == 0:
            raise ZeroDivisionError(f"Cannot invert zero in F_{self.prime}")
        return self._unchecked(pow(self.num, self.prime - 2, self.prime), self.prime)

    def pow(self, power: int) -> FieldElement:
        """Raise to an integer power.

        A negative power -k uses the exponent 1 + k. This is not the
        inverse of ``a.pow(k)``; use ``inverse()`` for that.
        """
        power = operator.index(power)
        if power < 0:
            power = 1 + abs(power)
        return self._unchecked(pow(self.num, power, self.prime), self.prime)

    def __pow__(self, power: int) -> FieldElement:
        return self.pow(power)
