"""
Words — Примитивы над машинными словами

Базовые строительные блоки всей арифметики старшего уровня:
- wide_multiply_add: a*b + c + d → (low word, high word)
- divide_wide: [hi|lo] / divisor → (quotient-high, quotient-low, remainder)

Word — беззнаковое целое ширины WORD_BIT_COUNT бит. В Python слово
представлено обычным int, поэтому каждый примитив явно маскирует результат
до ширины слова.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. a*b + c + d <= 2^(2W) - 1 для любых слов a, b, c, d (результат всегда точен)
2. divide_wide с divisor == 0 → DivisionByZero
3. Все функции чистые: без side effects и глобального состояния
"""

from typing import Final

from arbint.core.errors import DivisionByZero

# =============================================================================
# ГЕОМЕТРИЯ СЛОВА
# =============================================================================

# Ширина слова в байтах и битах
WORD_BYTE_COUNT: Final[int] = 8
WORD_BIT_COUNT: Final[int] = WORD_BYTE_COUNT * 8

# Основание позиционной системы B = 2^W
WORD_BASE: Final[int] = 1 << WORD_BIT_COUNT

# Максимальное значение слова (B - 1)
WORD_MASK: Final[int] = WORD_BASE - 1

# Старший бит слова (признак нормализованного делителя)
WORD_HIGH_BIT: Final[int] = 1 << (WORD_BIT_COUNT - 1)

# Количество hex-символов на одно слово (2 символа на байт)
HEX_DIGITS_PER_WORD: Final[int] = WORD_BYTE_COUNT * 2


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_word(value: int) -> bool:
    """
    Проверка, что значение помещается в одно слово.

    Args:
        value: Проверяемое значение

    Returns:
        True если 0 <= value < WORD_BASE
    """
    return 0 <= value <= WORD_MASK


def leading_zero_bits(word: int) -> int:
    """
    Количество ведущих нулевых бит в слове.

    Используется для нормализации делителя в long division.

    Examples:
        >>> leading_zero_bits(1)
        63
        >>> leading_zero_bits(WORD_HIGH_BIT)
        0
        >>> leading_zero_bits(0)
        64
    """
    return WORD_BIT_COUNT - word.bit_length()


# =============================================================================
# WIDE ARITHMETIC
# =============================================================================


def wide_multiply_add(a: int, b: int, c: int, d: int) -> tuple[int, int]:
    """
    Вычисление a*b + c + d в двойной ширине слова.

    (B-1)^2 + 2*(B-1) = B^2 - 1, поэтому результат всегда помещается
    в два слова без потери переноса.

    Args:
        a: Множитель (слово)
        b: Множитель (слово)
        c: Слагаемое (слово), обычно carry из предыдущей позиции
        d: Слагаемое (слово), обычно уже накопленное значение позиции

    Returns:
        (low, high): младшее и старшее слово результата

    Examples:
        >>> wide_multiply_add(WORD_MASK, WORD_MASK, WORD_MASK, WORD_MASK)
        (18446744073709551615, 18446744073709551615)
        >>> wide_multiply_add(2, 3, 4, 5)
        (15, 0)
    """
    result = a * b + c + d
    return (result & WORD_MASK, result >> WORD_BIT_COUNT)


def divide_wide(hi: int, lo: int, divisor: int) -> tuple[int, int, int]:
    """
    Деление двухсловного делимого [hi|lo] на одно слово.

    Если истинное частное не помещается в одно слово, quotient-high != 0.
    Вызывающий код, которому нужно однословное частное, обязан проверить
    quotient-high и трактовать ненулевое значение как нарушение инварианта.

    Args:
        hi: Старшее слово делимого
        lo: Младшее слово делимого
        divisor: Делитель (слово, != 0)

    Returns:
        (quotient_high, quotient_low, remainder)

    Raises:
        DivisionByZero: Если divisor == 0

    Examples:
        >>> divide_wide(0, 100, 7)
        (0, 14, 2)
        >>> divide_wide(1, 0, 1)
        (1, 0, 0)
    """
    if divisor == 0:
        raise DivisionByZero("Division of a double word by zero")

    dividend = (hi << WORD_BIT_COUNT) | lo
    quotient, remainder = divmod(dividend, divisor)

    return (quotient >> WORD_BIT_COUNT, quotient & WORD_MASK, remainder)
