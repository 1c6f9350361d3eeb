"""
Тесты для алгебраических интерфейсов

Проверяет:
1. Magnitude и SignedInteger структурно реализуют Ring / EuclideanDomain
2. Единицы и zero test
3. Generic алгоритм (Euclid GCD), написанный только против протокола,
   работает на обоих типах и совпадает с math.gcd
4. euclidean_size(remainder) < euclidean_size(divisor)
"""

import math
import random
from typing import TypeVar

import pytest

from arbint import EuclideanDomain, Magnitude, Ring, SignedInteger

E = TypeVar("E", bound=EuclideanDomain)


def generic_gcd(a: E, b: E) -> E:
    """Алгоритм Евклида, использующий только операции EuclideanDomain."""
    while not b.is_zero():
        _, remainder = a.quotient_and_remainder(b)
        a, b = b, remainder
    return a


@pytest.fixture(params=[Magnitude, SignedInteger], ids=["magnitude", "signed"])
def domain(request: pytest.FixtureRequest) -> type:
    """Оба типа прогоняются через одни и те же тесты."""
    return request.param


class TestProtocolConformance:
    """Структурная реализация протоколов"""

    def test_isinstance_ring(self, domain: type) -> None:
        assert isinstance(domain.one(), Ring)

    def test_isinstance_euclidean_domain(self, domain: type) -> None:
        assert isinstance(domain.zero(), EuclideanDomain)

    def test_identities(self, domain: type) -> None:
        one, zero = domain.one(), domain.zero()
        assert zero.is_zero()
        assert not one.is_zero()
        assert one.multiply(one) == one
        assert one.add(zero) == one

    def test_quotient_and_remainder_by_one(self, domain: type) -> None:
        value = domain.one().add(domain.one())
        quotient, remainder = value.quotient_and_remainder(domain.one())
        assert quotient == value
        assert remainder.is_zero()


class TestGenericAlgorithms:
    """Generic код против EuclideanDomain"""

    def test_gcd_magnitude(self) -> None:
        rng = random.Random(11)
        for _ in range(20):
            common = rng.getrandbits(100) + 1
            a = common * (rng.getrandbits(150) + 1)
            b = common * (rng.getrandbits(90) + 1)
            result = generic_gcd(Magnitude.from_int(a), Magnitude.from_int(b))
            assert int(result) == math.gcd(a, b)

    def test_gcd_signed(self) -> None:
        rng = random.Random(12)
        for _ in range(20):
            a = rng.getrandbits(200) - 2**199
            b = rng.getrandbits(130) - 2**129 or 1
            result = generic_gcd(SignedInteger.from_int(a), SignedInteger.from_int(b))
            assert result.euclidean_size() == Magnitude.from_int(math.gcd(a, b))

    def test_remainder_size_below_divisor_size(self, domain: type) -> None:
        rng = random.Random(13)
        for _ in range(30):
            a = domain.from_int(rng.getrandbits(300))
            b = domain.from_int(rng.getrandbits(140) + 1)
            _, remainder = a.quotient_and_remainder(b)
            assert remainder.euclidean_size() < b.euclidean_size()
