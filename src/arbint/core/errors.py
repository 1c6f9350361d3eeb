"""
Errors — Таксономия ошибок arbitrary-precision арифметики

Все нарушения предусловий арифметики — ошибки программиста вызывающего кода,
а не ожидаемые runtime-условия. Поэтому они поднимаются как exception в точке
обнаружения и никогда не деградируют в "тихо неверный" результат.

Иерархия:
- ArbitraryPrecisionError — базовый класс
  - DivisionByZero — делитель равен каноническому нулю
  - NegativeToUnsignedCoercion — отрицательное значение → Magnitude
  - UnsupportedOperation — степень, которую тип не поддерживает
  - MalformedInput — не-hex символы во входной строке
  - MagnitudeUnderflow — unsigned вычитание с отрицательным результатом
  - ArithmeticInvariantViolation — нарушение внутреннего инварианта division engine

Каждый класс дополнительно наследует ближайший встроенный exception
(ZeroDivisionError, ValueError, ArithmeticError, AssertionError), чтобы
вызывающий код мог ловить их привычным способом.
"""


class ArbitraryPrecisionError(Exception):
    """Базовый класс всех ошибок arbint."""

    pass


class DivisionByZero(ArbitraryPrecisionError, ZeroDivisionError):
    """Делитель в quotient/remainder операции равен нулю."""

    pass


class NegativeToUnsignedCoercion(ArbitraryPrecisionError, ValueError):
    """
    Попытка привести отрицательное значение к беззнаковому Magnitude.

    Возникает при SignedInteger.to_magnitude() и Magnitude.from_int(n < 0).
    """

    pass


class UnsupportedOperation(ArbitraryPrecisionError, ArithmeticError):
    """
    Операция не поддерживается типом.

    Сейчас: возведение SignedInteger в отрицательную или ненулевую степень.
    """

    pass


class MalformedInput(ArbitraryPrecisionError, ValueError):
    """Текстовый ввод содержит символы, не являющиеся hex-цифрами."""

    pass


class MagnitudeUnderflow(ArbitraryPrecisionError, ArithmeticError):
    """
    Unsigned вычитание, при котором minuend < subtrahend.

    Magnitude.subtract не возвращает wraparound-значение молча;
    для модульной семантики есть явный Magnitude.wrapping_subtract.
    """

    pass


class ArithmeticInvariantViolation(ArbitraryPrecisionError, AssertionError):
    """
    Нарушен внутренний инвариант арифметики.

    Пример: оценка quotient digit в long division не помещается в одно слово,
    или цикл коррекции превысил теоретическую границу. Никогда не должно
    возникать на корректной реализации; сигнализирует о баге.
    """

    pass
