"""
Word Arrays — Ядро арифметики над little-endian массивами слов

Массив слов [w0, w1, ..., wn-1] интерпретируется как Σ w_i · B^i, B = 2^W.
words[0] — младшее слово.

Модуль работает с обычными list[int] и ничего не знает о Magnitude:
- normalize / compare / word_at — housekeeping
- add_words — ripple-carry сложение с дополнительным словом под carry
- wrapping_subtract_words — вычитание через two's complement трюк (mod B^n)
- subtract_words — то же, но с явной ошибкой при отрицательной разности
- multiply_words — schoolbook convolution через wide_multiply_add
- shift_left_words / shift_right_words / or_words — битовые операции

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая функция возвращает НОВЫЙ нормализованный список (входы не мутируются)
2. Нормальная форма: нет старших нулевых слов; ноль — ровно [0]
3. Функции принимают и ненормализованные входы (word_at читает за концом как 0)
"""

from typing import Sequence

from arbint.core.errors import MagnitudeUnderflow
from arbint.core.math.words import WORD_BIT_COUNT, WORD_MASK, wide_multiply_add

# =============================================================================
# HOUSEKEEPING
# =============================================================================


def normalize_words(words: Sequence[int]) -> list[int]:
    """
    Удаление старших нулевых слов.

    Args:
        words: Little-endian массив слов (может быть пустым)

    Returns:
        Канонический массив; [0] если все слова нулевые или массив пуст

    Examples:
        >>> normalize_words([5, 0, 0])
        [5]
        >>> normalize_words([0, 0])
        [0]
        >>> normalize_words([])
        [0]
    """
    end = len(words)
    while end > 1 and words[end - 1] == 0:
        end -= 1

    if end == 0:
        return [0]

    return list(words[:end])


def word_at(words: Sequence[int], index: int) -> int:
    """Слово на позиции index; 0 за пределами массива."""
    if index >= len(words):
        return 0
    return words[index]


def is_zero_words(words: Sequence[int]) -> bool:
    """True если массив представляет ноль."""
    return all(w == 0 for w in words)


def compare_words(lhs: Sequence[int], rhs: Sequence[int]) -> int:
    """
    Сравнение двух массивов слов как чисел.

    Сравнение начинается со старшего слова.

    Returns:
        -1 если lhs < rhs, 0 если равны, +1 если lhs > rhs
    """
    for i in reversed(range(max(len(lhs), len(rhs)))):
        left = word_at(lhs, i)
        right = word_at(rhs, i)
        if left != right:
            return -1 if left < right else 1

    return 0


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def _carrying_add(lhs: Sequence[int], rhs: Sequence[int], length: int) -> tuple[list[int], int]:
    """
    Ripple-carry сложение по модулю B^length.

    Returns:
        (слова суммы длины length, финальный carry 0/1)
    """
    result = [0] * length
    carry = 0

    for i in range(length):
        total = word_at(lhs, i) + word_at(rhs, i) + carry
        result[i] = total & WORD_MASK
        carry = total >> WORD_BIT_COUNT

    return result, carry


def add_words(lhs: Sequence[int], rhs: Sequence[int]) -> list[int]:
    """
    Сложение двух массивов слов.

    Массив расширяется на одно слово под возможный финальный carry,
    поэтому результат точен.

    Examples:
        >>> add_words([WORD_MASK], [1])
        [0, 1]
    """
    # +1 слово гарантирует, что финальный carry всегда равен 0
    total, _ = _carrying_add(lhs, rhs, max(len(lhs), len(rhs)) + 1)
    return normalize_words(total)


def complement_words(words: Sequence[int], length: int) -> list[int]:
    """Побитовое дополнение каждого слова после расширения до length слов."""
    return [~word_at(words, i) & WORD_MASK for i in range(length)]


def wrapping_subtract_words(minuend: Sequence[int], subtrahend: Sequence[int]) -> list[int]:
    """
    Вычитание через two's complement трюк.

    Оба операнда расширяются до общей длины n, слова subtrahend
    инвертируются, прибавляется 1 (аддитивная инверсия по модулю B^n),
    результат складывается с minuend, финальный carry отбрасывается.

    При minuend < subtrahend результат — wraparound значение по модулю B^n,
    а НЕ знаковая разность.

    Examples:
        >>> wrapping_subtract_words([5], [3])
        [2]
        >>> wrapping_subtract_words([1], [2]) == [WORD_MASK]
        True
    """
    length = max(len(minuend), len(subtrahend))

    negated, _ = _carrying_add(complement_words(subtrahend, length), [1], length)
    difference, _ = _carrying_add(minuend, negated, length)

    return normalize_words(difference)


def subtract_words(minuend: Sequence[int], subtrahend: Sequence[int]) -> list[int]:
    """
    Unsigned вычитание с явной проверкой знака разности.

    Raises:
        MagnitudeUnderflow: Если minuend < subtrahend
    """
    if compare_words(minuend, subtrahend) < 0:
        raise MagnitudeUnderflow(
            "Unsigned subtraction underflow: minuend is smaller than subtrahend"
        )

    return wrapping_subtract_words(minuend, subtrahend)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_words(lhs: Sequence[int], rhs: Sequence[int]) -> list[int]:
    """
    Schoolbook умножение (convolution), O(n·m).

    Для каждой пары позиций (i, j) накапливает lhs[i]*rhs[j] в позицию i+j
    через wide_multiply_add; carry распространяется по внутреннему циклу
    и записывается в позицию len(lhs) + j.

    Fast paths: ноль → [0], единица → другой операнд без convolution.
    """
    if is_zero_words(lhs) or is_zero_words(rhs):
        return [0]

    left = normalize_words(lhs)
    right = normalize_words(rhs)

    if left == [1]:
        return right
    if right == [1]:
        return left

    product = [0] * (len(left) + len(right))

    for j, right_word in enumerate(right):
        carry = 0
        for i, left_word in enumerate(left):
            product[i + j], carry = wide_multiply_add(left_word, right_word, carry, product[i + j])
        product[len(left) + j] = carry

    return normalize_words(product)


# =============================================================================
# БИТОВЫЕ ОПЕРАЦИИ
# =============================================================================


def _split_shift(bits: int) -> tuple[int, int]:
    if bits < 0:
        raise ValueError(f"shift amount must be non-negative, got {bits}")
    return divmod(bits, WORD_BIT_COUNT)


def shift_left_words(words: Sequence[int], bits: int) -> list[int]:
    """
    Сдвиг влево на bits бит.

    bits раскладывается на сдвиг целыми словами и сдвиг внутри слова.
    Массив расширяется на word_shift + 1 слово, чтобы не потерять старшие биты.

    Raises:
        ValueError: Если bits < 0
    """
    word_shift, bit_shift = _split_shift(bits)

    shifted = list(words) + [0] * (word_shift + 1)

    # Сдвиг целыми словами: сверху вниз, чтобы не затереть ещё не перенесённые
    for i in reversed(range(word_shift, len(shifted))):
        shifted[i] = shifted[i - word_shift]
    for i in range(word_shift):
        shifted[i] = 0

    if bit_shift:
        carry_shift = WORD_BIT_COUNT - bit_shift
        for i in reversed(range(1, len(shifted))):
            shifted[i] = ((shifted[i] << bit_shift) & WORD_MASK) | (shifted[i - 1] >> carry_shift)
        shifted[0] = (shifted[0] << bit_shift) & WORD_MASK

    return normalize_words(shifted)


def shift_right_words(words: Sequence[int], bits: int) -> list[int]:
    """
    Сдвиг вправо на bits бит.

    Если сдвиг целыми словами >= длины массива, результат — канонический ноль.

    Raises:
        ValueError: Если bits < 0
    """
    word_shift, bit_shift = _split_shift(bits)

    if word_shift >= len(words):
        return [0]

    shifted = list(words[word_shift:])

    if bit_shift:
        carry_shift = WORD_BIT_COUNT - bit_shift
        for i in range(len(shifted) - 1):
            shifted[i] = (shifted[i] >> bit_shift) | ((shifted[i + 1] << carry_shift) & WORD_MASK)
        shifted[-1] >>= bit_shift

    return normalize_words(shifted)


def or_words(lhs: Sequence[int], rhs: Sequence[int]) -> list[int]:
    """Побитовое OR; более короткий операнд дополняется нулями."""
    length = max(len(lhs), len(rhs))
    return normalize_words([word_at(lhs, i) | word_at(rhs, i) for i in range(length)])
