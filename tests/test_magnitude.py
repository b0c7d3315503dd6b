import random
from itertools import product

import pytest

from pilosa import *
from pilosa import magnitude
from pilosa.magnitude import (clean, compare, add, subtract, multiply, shift_left,
                              short_divide, long_divide, divide, power_of_ten)


# Digit pools; the skewed ones provoke long carry and borrow chains and the rarer
# branches of long division.
digit_pools = (range(10), range(10), (0, 9), (9, ), (0, ), (0, 1), (4, 5, 9))


def random_magnitude(rng, max_length):
    length = rng.randint(1, max_length)
    pool = rng.choice(digit_pools)
    digits = [rng.choice(pool) for _ in range(length - 1)]
    digits.append(rng.randint(1, 9) if length > 1 else rng.randint(0, 9))
    return Magnitude(digits)


def M(value):
    return Magnitude.from_int(value)


class TestMagnitude:

    def test_zero(self):
        assert Magnitude() == (0, )
        assert Magnitude().is_zero()
        assert Magnitude([]) == (0, )
        assert Magnitude([0, 0, 0]) == (0, )
        assert not Magnitude([1]).is_zero()

    def test_clean_on_construction(self):
        assert Magnitude([3, 2, 1, 0, 0]) == (3, 2, 1)
        assert str(Magnitude([3, 2, 1, 0, 0])) == '123'

    @pytest.mark.parametrize('digits', ([10], [1, -1], ['1'], [1.0], [True], [None]))
    def test_invalid_digits(self, digits):
        with pytest.raises(ValidationError):
            Magnitude(digits)

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            Magnitude([11])
        with pytest.raises(DecimalError):
            Magnitude([11])

    @pytest.mark.parametrize('value', (0, 1, 9, 10, 100, 12345, 10 ** 50 + 7))
    def test_int_round_trip(self, value):
        assert int(M(value)) == value
        assert str(M(value)) == str(value)

    def test_from_int_bad(self):
        with pytest.raises(ValueError):
            Magnitude.from_int(-1)
        with pytest.raises(TypeError):
            Magnitude.from_int(1.0)

    def test_from_string(self):
        assert Magnitude.from_string('00120') == (0, 2, 1)
        assert Magnitude.from_string('0') == (0, )
        for bad in ('', '12a', '-1', ' 1', '1.5'):
            with pytest.raises(ValidationError):
                Magnitude.from_string(bad)

    def test_repr(self):
        assert repr(M(120)) == "Magnitude.from_string('120')"

    def test_ordering_operators(self):
        assert M(9) < M(10)
        assert M(10) > M(9)
        assert M(21) > M(12)
        assert M(12) <= M(12)
        assert M(12) >= M(12)
        assert sorted([M(100), M(9), M(21), M(0)]) == [M(0), M(9), M(21), M(100)]

    def test_hashable(self):
        assert len({M(5), Magnitude([5]), Magnitude([5, 0])}) == 1


class TestClean:

    @pytest.mark.parametrize('digits, answer', (
        ([], (0, )),
        ([0], (0, )),
        ([0, 0], (0, )),
        ([0, 1], (0, 1)),
        ([1, 0, 0], (1, )),
        ([0, 0, 1, 0], (0, 0, 1)),
    ))
    def test_clean(self, digits, answer):
        result = clean(digits)
        assert result == answer
        assert isinstance(result, Magnitude)


class TestCompare:

    def test_exhaustive_small(self):
        # Every pair of magnitudes below 100, both orders, equal lengths and not
        for a, b in product(range(100), repeat=2):
            expected = (Compare.LESS_THAN if a < b else
                        Compare.GREATER_THAN if a > b else Compare.EQUAL)
            assert compare(M(a), M(b)) == expected

    @pytest.mark.parametrize('seed', range(20))
    def test_random_short(self, seed):
        rng = random.Random(seed)
        for _ in range(500):
            u = random_magnitude(rng, 5)
            v = random_magnitude(rng, 5)
            a, b = int(u), int(v)
            expected = (Compare.LESS_THAN if a < b else
                        Compare.GREATER_THAN if a > b else Compare.EQUAL)
            assert compare(u, v) == expected

    @pytest.mark.parametrize('u, v, answer', (
        # Equal lengths must be decided by the most significant differing digit
        (21, 12, Compare.GREATER_THAN),
        (12, 21, Compare.LESS_THAN),
        (109, 901, Compare.LESS_THAN),
        (99999, 100000, Compare.LESS_THAN),
        (54321, 54321, Compare.EQUAL),
    ))
    def test_most_significant_first(self, u, v, answer):
        assert compare(M(u), M(v)) == answer


class TestAddSubtract:

    @pytest.mark.parametrize('seed', range(20))
    def test_random(self, seed):
        rng = random.Random(seed)
        for _ in range(100):
            u = random_magnitude(rng, 40)
            v = random_magnitude(rng, 40)
            assert int(add(u, v)) == int(u) + int(v)
            assert add(u, v) == add(v, u)
            if int(u) < int(v):
                u, v = v, u
            assert int(subtract(u, v)) == int(u) - int(v)

    def test_carry_chain(self):
        assert add(M(999999), M(1)) == M(1000000)
        assert add(M(0), M(0)) == M(0)
        assert add(M(5), M(0)) == M(5)

    def test_borrow_chain(self):
        assert subtract(M(1000000), M(1)) == M(999999)
        assert subtract(M(1000000), M(1000000)) == M(0)
        assert subtract(M(7), M(0)) == M(7)

    def test_subtract_larger(self):
        with pytest.raises(InternalInvariantViolation):
            subtract(M(12), M(21))
        with pytest.raises(AssertionError):
            subtract(M(0), M(1))

    def test_invariant_violation_is_not_recoverable_error(self):
        assert not issubclass(InternalInvariantViolation, DecimalError)


class TestMultiply:

    @pytest.mark.parametrize('seed', range(20))
    def test_random(self, seed):
        rng = random.Random(seed)
        for _ in range(50):
            u = random_magnitude(rng, 30)
            v = random_magnitude(rng, 30)
            assert int(multiply(u, v)) == int(u) * int(v)
            assert multiply(u, v) == multiply(v, u)

    @pytest.mark.parametrize('u', (0, 1, 7, 1234567))
    def test_zero_and_one(self, u):
        assert multiply(M(u), M(0)) == M(0)
        assert multiply(M(0), M(u)) == M(0)
        assert multiply(M(u), M(1)) == M(u)
        assert multiply(M(1), M(u)) == M(u)

    def test_internal_zeroes(self):
        assert multiply(M(1001), M(1001)) == M(1002001)
        assert multiply(M(12345679), M(9)) == M(111111111)

    @pytest.mark.parametrize('u, count', ((0, 3), (5, 0), (12, 1), (12, 4)))
    def test_shift_left(self, u, count):
        assert shift_left(M(u), count) == M(u * 10 ** count)

    def test_shift_left_negative(self):
        with pytest.raises(ValueError):
            shift_left(M(5), -1)


class TestShortDivide:

    @pytest.mark.parametrize('seed', range(10))
    def test_random(self, seed):
        rng = random.Random(seed)
        for _ in range(100):
            u = random_magnitude(rng, 30)
            d = rng.randint(1, 9)
            quotient, remainder = short_divide(u, d)
            assert (int(quotient), remainder) == divmod(int(u), d)
            assert isinstance(remainder, int)

    def test_zero(self):
        with pytest.raises(DivisionByZero):
            short_divide(M(123), 0)
        with pytest.raises(ZeroDivisionError):
            short_divide(M(123), 0)

    def test_not_single_digit(self):
        with pytest.raises(ValueError):
            short_divide(M(123), 10)

    def test_leading_zero_quotient(self):
        assert short_divide(M(123), 9) == (M(13), 6)
        assert short_divide(M(5), 7) == (M(0), 5)


class TestLongDivide:

    @pytest.mark.parametrize('seed', range(40))
    def test_random(self, seed):
        rng = random.Random(seed)
        for _ in range(50):
            u = random_magnitude(rng, 40)
            v = random_magnitude(rng, 20)
            if v.is_zero():
                continue
            quotient, remainder = divide(u, v)
            assert (int(quotient), int(remainder)) == divmod(int(u), int(v))

    @pytest.mark.parametrize('seed', range(20))
    def test_random_near_multiples(self, seed):
        # Dividends just either side of a multiple of the divisor stress the trial
        # quotient corrections
        rng = random.Random(seed)
        for _ in range(50):
            v = random_magnitude(rng, 12)
            if int(v) < 10:
                continue
            q = int(random_magnitude(rng, 12))
            for delta in (-1, 0, 1):
                n = q * int(v) + delta
                if n < 0:
                    continue
                quotient, remainder = long_divide(M(n), v)
                assert (int(quotient), int(remainder)) == divmod(n, int(v))

    def test_add_back(self):
        # The corrected trial digit for 4100 / 588 is 7, one too big
        assert long_divide(M(4100), M(588)) == (M(6), M(572))

    @pytest.mark.parametrize('u, v', (
        (123456789123456789123456789, 1992113),
        (10 ** 30, 10 ** 15 + 1),
        (10 ** 30 - 1, 99999),
        (99999999999999999999, 10000000001),
        (1000000000, 19),
        (1000000000, 10),
        (500, 50),
        (49, 50),
        (0, 12),
    ))
    def test_specific(self, u, v):
        assert long_divide(M(u), M(v)) == (M(u // v), M(u % v))

    def test_single_digit_divisor_delegates(self):
        assert long_divide(M(100), M(7)) == (M(14), M(2))

    def test_divide_by_zero(self):
        with pytest.raises(DivisionByZero):
            divide(M(100), M(0))


class TestPowerOfTen:

    @pytest.mark.parametrize('u, answer', (
        (1, 0),
        (10, 1),
        (1000000, 6),
        (0, None),
        (2, None),
        (11, None),
        (1001, None),
        (20, None),
    ))
    def test_power_of_ten(self, u, answer):
        assert power_of_ten(M(u)) == answer


def test_module_exports():
    for name in magnitude.__all__:
        assert hasattr(magnitude, name)
