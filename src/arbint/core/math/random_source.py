"""
Random Source — Генерация случайных слов

Источник случайности всегда передаётся явно (random.Random или совместимый
объект с getrandbits), глобальный генератор не используется. Это делает
тесты детерминированными: одинаковый seed → одинаковые значения.

ВНИМАНИЕ: не является криптографически стойким генератором.
"""

import random
from typing import Protocol

from arbint.core.math.words import WORD_BIT_COUNT


class WordSource(Protocol):
    """Минимальный контракт источника случайных бит."""

    def getrandbits(self, k: int) -> int: ...


def random_words(count: int, rng: WordSource) -> list[int]:
    """
    Генерация count случайных слов.

    Args:
        count: Количество слов (>= 0)
        rng: Источник случайности (например, random.Random(seed))

    Returns:
        Список из count слов (НЕ нормализован: старшие слова могут быть нулевыми)

    Raises:
        ValueError: Если count < 0

    Examples:
        >>> len(random_words(3, random.Random(7)))
        3
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    return [rng.getrandbits(WORD_BIT_COUNT) for _ in range(count)]
