from numbers import Number

from quicktions import Fraction  # type: ignore

from .errors import InvalidArgument, InvalidOperation


class RationalBase:
    """
    Abstract rational value n/d with integer numerator and non-zero denominator.

    Immutable. All arithmetic is implemented here in terms of construct(),
    which concrete kinds define, so that results have the kind of the receiver:
      Rational(1, 2).add(SimplifiedRational(1, 3)) -> Rational(5, 6)
    The denominator is checked once, at construction.
    """

    __slots__ = ('_numerator', '_denominator')

    def __init__(self, numerator: int, denominator: int):
        if denominator == 0:
            raise InvalidArgument("Zero denominator!")
        object.__setattr__(self, '_numerator', numerator)
        object.__setattr__(self, '_denominator', denominator)

    def __setattr__(self, name, value):
        raise AttributeError("{} is immutable".format(type(self).__name__))

    def __delattr__(self, name):
        raise AttributeError("{} is immutable".format(type(self).__name__))

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def construct(self, numerator: int, denominator: int) -> 'RationalBase':
        """
        Create a value of the same kind as self.

        Raises:
            InvalidArgument: if denominator is 0
        """
        raise NotImplementedError("Define in child class")

    @classmethod
    def convert(cls, x):
        """Get value of this kind from int or from rational value of any kind."""
        if isinstance(x, cls):
            return x
        elif isinstance(x, RationalBase):
            return cls(x.numerator, x.denominator)
        elif isinstance(x, int) and not isinstance(x, bool):
            return cls(x, 1)
        else:
            raise InvalidArgument("Can't convert {!r}".format(x))

    @classmethod
    def parse(cls, text: str):
        """Get value from 'n/d' or 'n' string, e.g., '3/4', '-2/5', '7'."""
        text = text.strip()
        if '/' in text:
            n, d = text.split('/')
        else:
            n, d = text, 1
        return cls(int(n), int(d))

    # arithmetic

    def negate(self):
        """-(n/d) = (-n)/d"""
        return self.construct(-self.numerator, self.denominator)

    def invert(self):
        """1/(n/d) = d/n, defined for n != 0."""
        if self.numerator == 0:
            raise InvalidOperation("Can't invert zero!")
        return self.construct(self.denominator, self.numerator)

    def add(self, other):
        """n1/d1 + n2/d2 = (n1*d2 + n2*d1) / (d1*d2)"""
        if other is None:
            raise InvalidOperation("Missing operand!")
        return self.construct(
            self.numerator * other.denominator + other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def sub(self, other):
        """n1/d1 - n2/d2 = (n1*d2 - n2*d1) / (d1*d2)"""
        if other is None:
            raise InvalidOperation("Missing operand!")
        return self.construct(
            self.numerator * other.denominator - other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def mul(self, other):
        """n1/d1 * n2/d2 = (n1*n2) / (d1*d2)"""
        if other is None:
            raise InvalidOperation("Missing operand!")
        return self.construct(self.numerator * other.numerator, self.denominator * other.denominator)

    def div(self, other):
        """(n1/d1) / (n2/d2) = (n1*d2) / (d1*n2), defined for n2 != 0."""
        if other is None:
            raise InvalidOperation("Missing operand!")
        if other.numerator == 0:
            raise InvalidOperation("Division by zero!")
        return self.construct(self.numerator * other.denominator, self.denominator * other.numerator)

    # operators; non-rational operands are left to python

    def __neg__(self):
        return self.negate()

    def __add__(self, other):
        if not isinstance(other, RationalBase):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, RationalBase):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other):
        if not isinstance(other, RationalBase):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other):
        if not isinstance(other, RationalBase):
            return NotImplemented
        return self.div(other)

    # conversions and ordering by value

    def to_fraction(self) -> Fraction:
        """Exact value as a normalized Fraction."""
        return Fraction(self.numerator, self.denominator)

    def __float__(self):
        return self.numerator / self.denominator

    # gives floor, as int division does
    def __int__(self):
        return self.numerator // self.denominator

    def __bool__(self):
        return self.numerator != 0

    def _cmp_value(self, other):
        if isinstance(other, RationalBase):
            return other.to_fraction()
        if isinstance(other, (Number, Fraction)):
            return other
        return None

    def __lt__(self, other):
        value = self._cmp_value(other)
        if value is None:
            return NotImplemented
        return self.to_fraction() < value

    def __le__(self, other):
        value = self._cmp_value(other)
        if value is None:
            return NotImplemented
        return self.to_fraction() <= value

    def __gt__(self, other):
        value = self._cmp_value(other)
        if value is None:
            return NotImplemented
        return self.to_fraction() > value

    def __ge__(self, other):
        value = self._cmp_value(other)
        if value is None:
            return NotImplemented
        return self.to_fraction() >= value

    # sign is put before the numerator as is, so -3/4 gives "--3/4"
    def __str__(self):
        if self.numerator < 0:
            return '-{}/{}'.format(self.numerator, self.denominator)
        else:
            return '{}/{}'.format(self.numerator, self.denominator)

    def __repr__(self):
        return '{}({}, {})'.format(type(self).__name__, self.numerator, self.denominator)
