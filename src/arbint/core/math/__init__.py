"""
Core math modules для arbint

Примитивы над словами и массивами слов, division engine.
Ничего не знают о Magnitude / SignedInteger: работают с list[int].
"""

# Word primitives
from arbint.core.math.words import (
    HEX_DIGITS_PER_WORD,
    WORD_BASE,
    WORD_BIT_COUNT,
    WORD_BYTE_COUNT,
    WORD_HIGH_BIT,
    WORD_MASK,
    divide_wide,
    is_word,
    leading_zero_bits,
    wide_multiply_add,
)

# Word arrays
from arbint.core.math.word_arrays import (
    add_words,
    compare_words,
    complement_words,
    is_zero_words,
    multiply_words,
    normalize_words,
    or_words,
    shift_left_words,
    shift_right_words,
    subtract_words,
    word_at,
    wrapping_subtract_words,
)

# Division engine
from arbint.core.math.division import (
    MAX_QUOTIENT_CORRECTIONS,
    divide_long,
    divide_short,
    divide_words,
)

# Random source
from arbint.core.math.random_source import WordSource, random_words

__all__ = [
    # Words: constants
    "HEX_DIGITS_PER_WORD",
    "WORD_BASE",
    "WORD_BIT_COUNT",
    "WORD_BYTE_COUNT",
    "WORD_HIGH_BIT",
    "WORD_MASK",
    # Words: functions
    "divide_wide",
    "is_word",
    "leading_zero_bits",
    "wide_multiply_add",
    # Word arrays
    "add_words",
    "compare_words",
    "complement_words",
    "is_zero_words",
    "multiply_words",
    "normalize_words",
    "or_words",
    "shift_left_words",
    "shift_right_words",
    "subtract_words",
    "word_at",
    "wrapping_subtract_words",
    # Division
    "MAX_QUOTIENT_CORRECTIONS",
    "divide_long",
    "divide_short",
    "divide_words",
    # Random
    "WordSource",
    "random_words",
]
