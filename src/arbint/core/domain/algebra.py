"""
Algebra — Алгебраические интерфейсы для generic алгоритмов

Внешний generic код (GCD, модульная редукция и т.п.) пишется против этих
протоколов, а не против конкретных типов. Magnitude и SignedInteger
реализуют оба протокола структурно (без наследования).

Capability set:
- Ring: аддитивная и мультипликативная единицы, zero test, +, -, *
- EuclideanDomain: Ring + quotient_and_remainder + euclidean_size

Гарантия EuclideanDomain для quotient_and_remainder(d), d != 0:
    self == d * q + r  и  euclidean_size(r) < euclidean_size(d)
"""

from typing import TYPE_CHECKING, Protocol, Self, runtime_checkable

if TYPE_CHECKING:
    from arbint.core.domain.magnitude import Magnitude


@runtime_checkable
class Ring(Protocol):
    """Коммутативное кольцо с единицей."""

    @classmethod
    def zero(cls) -> Self:
        """Аддитивная единица."""
        ...

    @classmethod
    def one(cls) -> Self:
        """Мультипликативная единица."""
        ...

    def is_zero(self) -> bool: ...

    def add(self, other: Self) -> Self: ...

    def subtract(self, other: Self) -> Self: ...

    def multiply(self, other: Self) -> Self: ...


@runtime_checkable
class EuclideanDomain(Ring, Protocol):
    """Кольцо с делением с остатком и функцией размера."""

    def quotient_and_remainder(self, divisor: Self) -> tuple[Self, Self]:
        """
        Деление с остатком.

        Raises:
            DivisionByZero: Если divisor.is_zero()
        """
        ...

    def euclidean_size(self) -> "Magnitude":
        """Евклидова норма значения (для целых — модуль)."""
        ...
