"""
Тесты для Word Primitives

Проверяет:
1. Геометрию слова (константы)
2. wide_multiply_add: точность на границах диапазона
3. divide_wide: quotient-high / quotient-low / remainder
4. Деление на ноль
5. leading_zero_bits / is_word
"""

import pytest

from arbint.core.errors import DivisionByZero
from arbint.core.math.words import (
    HEX_DIGITS_PER_WORD,
    WORD_BASE,
    WORD_BIT_COUNT,
    WORD_HIGH_BIT,
    WORD_MASK,
    divide_wide,
    is_word,
    leading_zero_bits,
    wide_multiply_add,
)

# =============================================================================
# ТЕСТЫ КОНСТАНТ
# =============================================================================


class TestWordGeometry:
    """Константы геометрии слова"""

    def test_word_is_64_bits(self) -> None:
        """Слово — 64 бита, основание 2^64"""
        assert WORD_BIT_COUNT == 64
        assert WORD_BASE == 2**64
        assert WORD_MASK == 2**64 - 1
        assert WORD_HIGH_BIT == 2**63

    def test_hex_digits_per_word(self) -> None:
        """16 hex-символов на слово"""
        assert HEX_DIGITS_PER_WORD == 16


# =============================================================================
# ТЕСТЫ WIDE MULTIPLY-ADD
# =============================================================================


class TestWideMultiplyAdd:
    """Тесты для wide_multiply_add"""

    def test_small_values(self) -> None:
        """Малые значения: старшее слово нулевое"""
        assert wide_multiply_add(2, 3, 4, 5) == (15, 0)
        assert wide_multiply_add(0, 0, 0, 0) == (0, 0)

    def test_carry_into_high_word(self) -> None:
        """2^63 * 2 = 2^64 → (0, 1)"""
        assert wide_multiply_add(WORD_HIGH_BIT, 2, 0, 0) == (0, 1)

    def test_maximum_never_overflows(self) -> None:
        """(B-1)^2 + 2(B-1) = B^2 - 1 помещается в два слова"""
        assert wide_multiply_add(WORD_MASK, WORD_MASK, WORD_MASK, WORD_MASK) == (
            WORD_MASK,
            WORD_MASK,
        )

    def test_matches_integer_arithmetic(self) -> None:
        """Результат совпадает с точной целочисленной арифметикой"""
        a, b, c, d = 0xDEADBEEFCAFEBABE, 0x0123456789ABCDEF, 0xFFFF, 0x1
        low, high = wide_multiply_add(a, b, c, d)
        assert (high << 64) | low == a * b + c + d
        assert is_word(low) and is_word(high)


# =============================================================================
# ТЕСТЫ DIVIDE WIDE
# =============================================================================


class TestDivideWide:
    """Тесты для divide_wide"""

    def test_single_word_dividend(self) -> None:
        """100 / 7 = 14 остаток 2"""
        assert divide_wide(0, 100, 7) == (0, 14, 2)

    def test_quotient_fits_one_word(self) -> None:
        """2^64 / 2 = 2^63: quotient-high равен нулю"""
        assert divide_wide(1, 0, 2) == (0, WORD_HIGH_BIT, 0)

    def test_quotient_overflows_one_word(self) -> None:
        """2^64 / 1: quotient-high ненулевой"""
        assert divide_wide(1, 0, 1) == (1, 0, 0)

    def test_maximum_dividend(self) -> None:
        """(B^2 - 1) / (B - 1) = B + 1"""
        assert divide_wide(WORD_MASK, WORD_MASK, WORD_MASK) == (1, 1, 0)

    def test_remainder_below_divisor(self) -> None:
        """Остаток всегда меньше делителя"""
        hi, lo, divisor = 0x1234, 0xFEDCBA9876543210, 0x9999999999999999
        q_hi, q_lo, remainder = divide_wide(hi, lo, divisor)
        assert remainder < divisor
        assert ((q_hi << 64) | q_lo) * divisor + remainder == (hi << 64) | lo

    def test_division_by_zero_raises(self) -> None:
        """Деление на ноль → DivisionByZero"""
        with pytest.raises(DivisionByZero):
            divide_wide(1, 2, 0)

    def test_division_by_zero_is_zero_division_error(self) -> None:
        """DivisionByZero ловится как встроенный ZeroDivisionError"""
        with pytest.raises(ZeroDivisionError):
            divide_wide(0, 0, 0)


# =============================================================================
# ТЕСТЫ УТИЛИТ
# =============================================================================


class TestWordUtilities:
    """Тесты для leading_zero_bits и is_word"""

    def test_leading_zero_bits(self) -> None:
        assert leading_zero_bits(1) == 63
        assert leading_zero_bits(WORD_MASK) == 0
        assert leading_zero_bits(WORD_HIGH_BIT) == 0
        assert leading_zero_bits(WORD_HIGH_BIT >> 1) == 1
        assert leading_zero_bits(0) == 64

    def test_is_word_bounds(self) -> None:
        assert is_word(0)
        assert is_word(WORD_MASK)
        assert not is_word(WORD_BASE)
        assert not is_word(-1)
