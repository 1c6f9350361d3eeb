"""
Division Engine — Деление с остатком над массивами слов

Два пути:
- Short division: делитель помещается в одно слово. Слова делимого
  обрабатываются от старшего к младшему, quotient digit считается через
  divide_wide на двухсловном частичном остатке.
- Long division: делитель из нескольких слов. Digit-estimate-and-correct
  (Knuth, Algorithm D): оценка q̂ по старшим словам частичного делимого
  и делителя, затем коррекция вниз, пока пробное произведение больше
  частичного делимого.

Нормализация в long division:
    Перед делением оба операнда сдвигаются влево так, чтобы старший бит
    старшего слова делителя был установлен. Тогда q - 2 <= q̂ <= q, и цикл
    коррекции делает не более MAX_QUOTIENT_CORRECTIONS шагов. Остаток
    сдвигается обратно в конце.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. divisor · quotient + remainder == dividend, 0 <= remainder < divisor
2. Деление на ноль → DivisionByZero
3. Частичный остаток перед каждым шагом < divisor, поэтому истинный
   quotient digit всегда помещается в одно слово
4. Нарушение 3 или границы коррекций → ArithmeticInvariantViolation
"""

import logging
from typing import Final, Sequence

from arbint.core.errors import ArithmeticInvariantViolation, DivisionByZero
from arbint.core.math.word_arrays import (
    compare_words,
    is_zero_words,
    multiply_words,
    normalize_words,
    shift_left_words,
    shift_right_words,
    subtract_words,
    word_at,
)
from arbint.core.math.words import WORD_MASK, divide_wide, leading_zero_bits

_logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ LONG DIVISION
# =============================================================================

# Максимальное число декрементов q̂ на один quotient digit
# (верно для нормализованного делителя, Knuth TAOCP Vol.2 4.3.1 Theorem B)
MAX_QUOTIENT_CORRECTIONS: Final[int] = 2


# =============================================================================
# SHORT DIVISION
# =============================================================================


def divide_short(dividend: Sequence[int], divisor: int) -> tuple[list[int], int]:
    """
    Деление массива слов на одно слово.

    Если старшее слово делимого меньше делителя, оно сразу сворачивается
    в частичный остаток, и первый quotient digit считается по двум словам.

    Args:
        dividend: Little-endian массив слов делимого
        divisor: Делитель (одно слово, != 0)

    Returns:
        (quotient_words, remainder_word)

    Raises:
        DivisionByZero: Если divisor == 0
        ArithmeticInvariantViolation: Если quotient digit не помещается в слово
    """
    if divisor == 0:
        raise DivisionByZero("Division by zero")

    words = normalize_words(dividend)
    quotient = [0] * len(words)

    top = len(words) - 1
    if words[top] < divisor and top > 0:
        remainder = words[top]
        top -= 1
    else:
        remainder = 0

    for j in reversed(range(top + 1)):
        quotient_high, quotient[j], remainder = divide_wide(remainder, words[j], divisor)
        if quotient_high != 0:
            raise ArithmeticInvariantViolation(
                f"Short division digit {j} overflowed a word (quotient-high={quotient_high:#x})"
            )

    return normalize_words(quotient), remainder


# =============================================================================
# LONG DIVISION
# =============================================================================


def _estimate_quotient_digit(partial: Sequence[int], divisor: Sequence[int]) -> int:
    """
    Оценка q̂ по двум старшим словам частичного делимого и старшему слову делителя.

    При u_top == v_top оценка равна B или больше, поэтому q̂ ограничивается
    сверху значением B - 1 (истинный digit меньше B по инварианту окна).
    """
    n = len(divisor)
    u_top = word_at(partial, n)
    u_next = word_at(partial, n - 1)
    v_top = divisor[n - 1]

    if u_top > v_top:
        raise ArithmeticInvariantViolation(
            f"Partial dividend top word {u_top:#x} exceeds divisor top word {v_top:#x}"
        )

    quotient_high, q_hat, _ = divide_wide(u_top, u_next, v_top)

    if quotient_high != 0:
        _logger.debug("quotient digit estimate clamped to B-1 (u_top == v_top == %#x)", v_top)
        q_hat = WORD_MASK

    return q_hat


def divide_long(dividend: Sequence[int], divisor: Sequence[int]) -> tuple[list[int], list[int]]:
    """
    Long division (digit-estimate-and-correct).

    Для каждой позиции от старшей к младшей следующее неиспользованное слово
    делимого дописывается снизу к частичному остатку, затем:
    1. Если частичный остаток < делителя, digit = 0
    2. Иначе q̂ оценивается по старшим словам и корректируется вниз,
       пока divisor · q̂ > частичного остатка
    3. Новый частичный остаток = частичный остаток - divisor · q̂

    Принимает и однословный делитель (результат совпадает с divide_short).

    Args:
        dividend: Little-endian массив слов делимого
        divisor: Little-endian массив слов делителя (!= 0)

    Returns:
        (quotient_words, remainder_words), оба нормализованы

    Raises:
        DivisionByZero: Если divisor == 0
        ArithmeticInvariantViolation: Если нарушена граница коррекций
    """
    if is_zero_words(divisor):
        raise DivisionByZero("Division by zero")

    shift = leading_zero_bits(normalize_words(divisor)[-1])
    u = shift_left_words(dividend, shift)
    v = shift_left_words(divisor, shift)

    quotient = [0] * len(u)
    partial = [0]

    for j in reversed(range(len(u))):
        partial = normalize_words([u[j]] + partial)

        if compare_words(partial, v) < 0:
            continue

        q_hat = _estimate_quotient_digit(partial, v)
        product = multiply_words(v, [q_hat])

        corrections = 0
        while compare_words(product, partial) > 0:
            q_hat -= 1
            product = subtract_words(product, v)
            corrections += 1

            if corrections > MAX_QUOTIENT_CORRECTIONS:
                raise ArithmeticInvariantViolation(
                    f"Quotient digit {j} needed more than {MAX_QUOTIENT_CORRECTIONS} corrections"
                )

        if corrections:
            _logger.debug("quotient digit %d corrected %d time(s) to %#x", j, corrections, q_hat)

        quotient[j] = q_hat
        partial = subtract_words(partial, product)

    return normalize_words(quotient), shift_right_words(partial, shift)


# =============================================================================
# DISPATCH
# =============================================================================


def divide_words(dividend: Sequence[int], divisor: Sequence[int]) -> tuple[list[int], list[int]]:
    """
    Деление с остатком: выбор пути по размеру операндов.

    - divisor == 0 → DivisionByZero
    - dividend < divisor → (0, dividend)
    - dividend == divisor → (1, 0)
    - однословный divisor → short division
    - иначе → long division

    Returns:
        (quotient_words, remainder_words), оба нормализованы
    """
    if is_zero_words(divisor):
        raise DivisionByZero("Division by zero")

    ordering = compare_words(dividend, divisor)
    if ordering < 0:
        return [0], normalize_words(dividend)
    if ordering == 0:
        return [1], [0]

    v = normalize_words(divisor)
    if len(v) == 1:
        _logger.debug("short division: %d-word dividend", len(dividend))
        quotient, remainder = divide_short(dividend, v[0])
        return quotient, [remainder]

    _logger.debug("long division: %d-word dividend by %d-word divisor", len(dividend), len(v))
    return divide_long(dividend, v)
