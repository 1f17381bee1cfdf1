"""
Rational values kept in reduced form.

Reduction uses a brute-force scan for the common divisor, restricted to
a > 0, b >= 0; pairs outside that domain (negative numerator or denominator)
are stored without reduction.
"""

import logging

from .base import RationalBase
from .errors import InvalidArgument, InvalidOperation


logger = logging.getLogger(__name__)


class SimplifiedRational(RationalBase):
    """Rational value that reduces its pair on every construction."""

    __slots__ = ()

    def __init__(self, numerator: int, denominator: int):
        if denominator == 0:
            raise InvalidArgument("Zero denominator!")
        super().__init__(*self.simplify(numerator, denominator))

    @staticmethod
    def gcd(a: int, b: int) -> int:
        """
        Greatest common divisor of a and b, scanning candidates 1..min(a, b).

        Returns 0 if there is nothing to scan, i.e., b == 0.

        Raises:
            InvalidOperation: if a <= 0 or b < 0
        """
        if a <= 0 or b < 0:
            raise InvalidOperation("gcd is defined for a > 0, b >= 0")
        gcd = 0
        for i in range(1, min(a, b) + 1):
            if a % i == 0 and b % i == 0:
                gcd = i
        return gcd

    @classmethod
    def simplify(cls, numerator: int, denominator: int) -> tuple[int, int]:
        """
        Reduce the pair by its gcd, e.g., (10, 100) -> (1, 10), (0, 10) -> (0, 1).

        Raises:
            InvalidOperation: if denominator is 0
        """
        if denominator == 0:
            raise InvalidOperation("Zero denominator!")
        if numerator == 0:
            return 0, 1
        try:
            gcd = cls.gcd(numerator, denominator)
        except InvalidOperation:
            logger.debug('simplify: gcd undefined for (%d, %d), keep as is', numerator, denominator)
            return numerator, denominator
        # gcd == 0 is a bug in the scan: let ZeroDivisionError through
        return numerator // gcd, denominator // gcd

    def construct(self, numerator, denominator):
        if denominator == 0:
            raise InvalidArgument("Zero denominator!")
        return SimplifiedRational(numerator, denominator)

    def __eq__(self, other):
        if not isinstance(other, SimplifiedRational):
            return False
        return (self.numerator, self.denominator) == (other.numerator, other.denominator)

    def __hash__(self):
        return hash((SimplifiedRational, self.numerator, self.denominator))
