"""
Hex Format — Текстовое представление массивов слов

Грамматика разбора:
    [0x|0X] HEXDIGIT*
- Префикс 0x необязателен и регистронезависим
- Цифры регистронезависимы
- Строка дополняется нулями слева до кратности HEX_DIGITS_PER_WORD,
  затем режется на группы, старшая группа первой
- Пустая строка цифр (например, "0x") разбирается как ноль

Debug-формат:
    0x<старшее слово без ведущих нулей> <слово, 16 символов> ...
- Верхний регистр, слова через один пробел, ноль печатается как 0x0

Compact-формат (для JSON контрактов):
    0x<все слова подряд, верхний регистр, без пробелов>
"""

import re
from typing import Final, Sequence

from arbint.core.errors import MalformedInput
from arbint.core.math.word_arrays import normalize_words
from arbint.core.math.words import HEX_DIGITS_PER_WORD

_HEX_DIGITS: Final[re.Pattern[str]] = re.compile(r"[0-9a-fA-F]*")


def strip_hex_prefix(text: str) -> str:
    """Удаление необязательного префикса 0x / 0X."""
    if text[:2] in ("0x", "0X"):
        return text[2:]
    return text


def parse_hex_words(text: str) -> list[int]:
    """
    Разбор hex-строки в нормализованный little-endian массив слов.

    Args:
        text: Hex-строка, например "0xDEADBEEF" или "deadbeef"

    Returns:
        Нормализованный массив слов

    Raises:
        MalformedInput: Если после префикса встречаются не-hex символы

    Examples:
        >>> parse_hex_words("0x1" + "0" * 16)
        [0, 1]
        >>> parse_hex_words("ff")
        [255]
    """
    digits = strip_hex_prefix(text)

    # int(..., 16) допускает пробелы, '_' и знак, их нужно отсечь заранее
    if _HEX_DIGITS.fullmatch(digits) is None:
        raise MalformedInput(f"Not a hexadecimal number: {text!r}")

    padding = -len(digits) % HEX_DIGITS_PER_WORD
    digits = "0" * padding + digits

    chunks = [
        int(digits[start : start + HEX_DIGITS_PER_WORD], 16)
        for start in range(0, len(digits), HEX_DIGITS_PER_WORD)
    ]
    chunks.reverse()

    return normalize_words(chunks)


def format_debug(words: Sequence[int]) -> str:
    """
    Debug-представление: старшее слово без padding, остальные по 16 символов.

    Examples:
        >>> format_debug([0])
        '0x0'
        >>> format_debug([2, 1])
        '0x1 0000000000000002'
    """
    canonical = normalize_words(words)
    parts = [f"0x{canonical[-1]:X}"]
    parts.extend(f"{word:0{HEX_DIGITS_PER_WORD}X}" for word in reversed(canonical[:-1]))
    return " ".join(parts)


def format_compact(words: Sequence[int]) -> str:
    """
    Compact-представление без пробелов.

    Examples:
        >>> format_compact([2, 1])
        '0x10000000000000002'
    """
    canonical = normalize_words(words)
    lower = "".join(f"{word:0{HEX_DIGITS_PER_WORD}X}" for word in reversed(canonical[:-1]))
    return f"0x{canonical[-1]:X}{lower}"
