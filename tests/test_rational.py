import unittest

from rationals.rational import Rational
from rationals.simplified import SimplifiedRational


class TestRational(unittest.TestCase):

    def test_pair_is_kept(self):
        for n in range(-6, 7):
            for d in range(-6, 7):
                if d == 0:
                    continue
                x = Rational(n, d)
                self.assertEqual((x.numerator, x.denominator), (n, d))

    def test_no_simplification(self):
        x = Rational(1, 2).add(Rational(1, 2))
        self.assertEqual((x.numerator, x.denominator), (4, 4))
        self.assertNotEqual(Rational(2, 4), Rational(1, 2))

    def test_eq(self):
        x = Rational(3, 4)
        y = Rational(3, 4)
        self.assertEqual(x, x)
        self.assertEqual(x, y)
        self.assertEqual(y, x)
        self.assertNotEqual(x, Rational(3, 5))
        self.assertNotEqual(x, SimplifiedRational(3, 4))
        self.assertNotEqual(SimplifiedRational(3, 4), x)
        self.assertNotEqual(x, None)
        self.assertNotEqual(x, '3/4')

    def test_hash(self):
        self.assertEqual(len({Rational(1, 2), Rational(1, 2), Rational(2, 4), SimplifiedRational(1, 2)}), 3)

    def test_str(self):
        self.assertEqual(str(Rational(3, 4)), '3/4')
        self.assertEqual(str(Rational(0, 4)), '0/4')
        self.assertEqual(str(Rational(3, -4)), '3/-4')
        # sign is prepended to the already negative numerator
        self.assertEqual(str(Rational(-3, 4)), '--3/4')
        self.assertEqual(str(Rational(3, 4).negate()), '--3/4')


if __name__ == "__main__":
    unittest.main()
