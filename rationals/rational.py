from .base import RationalBase
from .errors import InvalidArgument


class Rational(RationalBase):
    """
    Raw rational value: the pair is kept exactly as given, no simplification.

    Rational(2, 4) != Rational(1, 2), though they have equal values.
    """

    __slots__ = ()

    def construct(self, numerator, denominator):
        if denominator == 0:
            raise InvalidArgument("Zero denominator!")
        return Rational(numerator, denominator)

    def __eq__(self, other):
        if not isinstance(other, Rational):
            return False
        return (self.numerator, self.denominator) == (other.numerator, other.denominator)

    def __hash__(self):
        return hash((Rational, self.numerator, self.denominator))
