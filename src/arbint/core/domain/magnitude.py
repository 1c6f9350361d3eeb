"""
Magnitude — Беззнаковое целое произвольной точности

Immutable Pydantic модель: каноническая little-endian последовательность
слов по основанию B = 2^64.

Инвариант нормальной формы:
    Нет старших нулевых слов; ноль — ровно (0,).
    Валидатор поля words приводит к нормальной форме ЛЮБОЙ путь создания,
    поэтому равенство моделей == равенство чисел.

Все операции consume-and-return: операнды не изменяются, возвращается
новый Magnitude. Именованные операции (add, subtract, multiply, divide,
remainder, ...) — основной API; Python операторы — тонкие алиасы над ними.

Реализует протоколы Ring / EuclideanDomain (arbint.core.domain.algebra).
"""

from typing import Sequence

from pydantic import BaseModel, Field, StrictInt, field_validator

from arbint.core.domain.hex_format import format_compact, format_debug, parse_hex_words
from arbint.core.errors import NegativeToUnsignedCoercion
from arbint.core.math.division import divide_words
from arbint.core.math.random_source import WordSource, random_words
from arbint.core.math.word_arrays import (
    add_words,
    compare_words,
    multiply_words,
    normalize_words,
    or_words,
    shift_left_words,
    shift_right_words,
    subtract_words,
    wrapping_subtract_words,
)
from arbint.core.math.words import WORD_BIT_COUNT, WORD_MASK, is_word


class Magnitude(BaseModel):
    """
    Беззнаковое целое произвольной точности.

    words[0] — младшее слово. Значение = Σ words[i] · 2^(64·i).
    """

    words: tuple[StrictInt, ...] = Field(
        default=(0,), description="Little-endian слова, каждое в [0, 2^64)"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("words")
    @classmethod
    def normalize(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Проверка диапазона слов и приведение к нормальной форме."""
        for index, word in enumerate(v):
            if not is_word(word):
                raise ValueError(f"word {index} out of range [0, 2^64): {word}")
        return tuple(normalize_words(v))

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def zero(cls) -> "Magnitude":
        return cls(words=(0,))

    @classmethod
    def one(cls) -> "Magnitude":
        return cls(words=(1,))

    @classmethod
    def from_words(cls, words: Sequence[int]) -> "Magnitude":
        """Создание из little-endian последовательности слов (нормализуется)."""
        return cls(words=tuple(words))

    @classmethod
    def from_word(cls, word: int) -> "Magnitude":
        """
        Promotion одного машинного слова.

        Raises:
            ValidationError: Если word вне [0, 2^64)
        """
        return cls(words=(word,))

    @classmethod
    def from_int(cls, value: int) -> "Magnitude":
        """
        Конверсия Python int → Magnitude.

        Raises:
            NegativeToUnsignedCoercion: Если value < 0
        """
        if value < 0:
            raise NegativeToUnsignedCoercion(f"Cannot coerce negative integer {value} to Magnitude")

        words = []
        while value:
            words.append(value & WORD_MASK)
            value >>= WORD_BIT_COUNT

        return cls.from_words(words)

    @classmethod
    def from_hex_string(cls, text: str) -> "Magnitude":
        """
        Разбор hex-строки с необязательным префиксом 0x/0X.

        Raises:
            MalformedInput: Если строка содержит не-hex символы
        """
        return cls.from_words(parse_hex_words(text))

    @classmethod
    def random(cls, count: int, rng: WordSource) -> "Magnitude":
        """
        Случайное значение из count слов (старшие слова могут оказаться нулевыми).

        Args:
            count: Количество случайных слов
            rng: Явный источник случайности (например, random.Random(seed))
        """
        return cls.from_words(random_words(count, rng))

    # =========================================================================
    # HOUSEKEEPING
    # =========================================================================

    def is_zero(self) -> bool:
        return self.words == (0,)

    def word_count(self) -> int:
        """Количество слов в канонической форме (у нуля — 1)."""
        return len(self.words)

    def most_significant_word(self) -> int:
        return self.words[-1]

    def sub_number(self, start: int, stop: int) -> "Magnitude":
        """
        Число, образованное словами [start, stop).

        Например, для цифр (по основанию 2^64) 439803 sub_number(2, 5) == 398.
        """
        return Magnitude.from_words(self.words[start:stop])

    def bit_length(self) -> int:
        """Количество значащих бит (у нуля — 0)."""
        return (len(self.words) - 1) * WORD_BIT_COUNT + self.words[-1].bit_length()

    def euclidean_size(self) -> "Magnitude":
        """Евклидова норма — само значение."""
        return self

    def to_int(self) -> int:
        value = 0
        for word in reversed(self.words):
            value = (value << WORD_BIT_COUNT) | word
        return value

    def to_debug_string(self) -> str:
        """Debug-формат: '0x1 0000000000000002'."""
        return format_debug(self.words)

    def to_hex_string(self) -> str:
        """Compact-формат без пробелов: '0x10000000000000002'."""
        return format_compact(self.words)

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def compare(self, other: "Magnitude") -> int:
        """
        Сравнение по канонической последовательности слов (старшее первым).

        Returns:
            -1, 0 или +1
        """
        return compare_words(self.words, other.words)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self, other: "Magnitude") -> "Magnitude":
        return Magnitude.from_words(add_words(self.words, other.words))

    def subtract(self, other: "Magnitude") -> "Magnitude":
        """
        self - other.

        Raises:
            MagnitudeUnderflow: Если self < other
        """
        return Magnitude.from_words(subtract_words(self.words, other.words))

    def wrapping_subtract(self, other: "Magnitude") -> "Magnitude":
        """
        self - other по модулю B^n, n = max(word_count) операндов.

        При self < other возвращает wraparound значение, а не ошибку.
        """
        return Magnitude.from_words(wrapping_subtract_words(self.words, other.words))

    def multiply(self, other: "Magnitude") -> "Magnitude":
        """Schoolbook умножение; умножение на единицу возвращает другой операнд."""
        if self.is_zero() or other.is_zero():
            return Magnitude.zero()
        if self.words == (1,):
            return other
        if other.words == (1,):
            return self
        return Magnitude.from_words(multiply_words(self.words, other.words))

    def quotient_and_remainder(self, divisor: "Magnitude") -> tuple["Magnitude", "Magnitude"]:
        """
        Деление с остатком.

        Returns:
            (quotient, remainder): divisor * quotient + remainder == self,
            0 <= remainder < divisor

        Raises:
            DivisionByZero: Если divisor равен нулю
        """
        quotient, remainder = divide_words(self.words, divisor.words)
        return Magnitude.from_words(quotient), Magnitude.from_words(remainder)

    def divide(self, divisor: "Magnitude") -> "Magnitude":
        return self.quotient_and_remainder(divisor)[0]

    def remainder(self, divisor: "Magnitude") -> "Magnitude":
        return self.quotient_and_remainder(divisor)[1]

    # =========================================================================
    # БИТОВЫЕ ОПЕРАЦИИ
    # =========================================================================

    def shift_left(self, bits: int) -> "Magnitude":
        return Magnitude.from_words(shift_left_words(self.words, bits))

    def shift_right(self, bits: int) -> "Magnitude":
        return Magnitude.from_words(shift_right_words(self.words, bits))

    def bit_or(self, other: "Magnitude") -> "Magnitude":
        return Magnitude.from_words(or_words(self.words, other.words))

    # =========================================================================
    # PYTHON PROTOCOLS
    # =========================================================================

    def __int__(self) -> int:
        return self.to_int()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __str__(self) -> str:
        return self.to_debug_string()

    def __repr__(self) -> str:
        return f"Magnitude({self.to_debug_string()})"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Magnitude):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Magnitude):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Magnitude):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Magnitude):
            return NotImplemented
        return self.compare(other) >= 0

    def __add__(self, other: "Magnitude") -> "Magnitude":
        return self.add(other)

    def __sub__(self, other: "Magnitude") -> "Magnitude":
        return self.subtract(other)

    def __mul__(self, other: "Magnitude") -> "Magnitude":
        return self.multiply(other)

    def __floordiv__(self, other: "Magnitude") -> "Magnitude":
        return self.divide(other)

    def __mod__(self, other: "Magnitude") -> "Magnitude":
        return self.remainder(other)

    def __divmod__(self, other: "Magnitude") -> tuple["Magnitude", "Magnitude"]:
        return self.quotient_and_remainder(other)

    def __lshift__(self, bits: int) -> "Magnitude":
        return self.shift_left(bits)

    def __rshift__(self, bits: int) -> "Magnitude":
        return self.shift_right(bits)

    def __or__(self, other: "Magnitude") -> "Magnitude":
        return self.bit_or(other)
