"""
SignedInteger — Знаковое целое произвольной точности (sign-magnitude)

Immutable Pydantic модель: (magnitude, negative). Вся арифметика делегируется
Magnitude, здесь только учёт знаков.

Ноль всегда канонический:
    Валидатор поля negative принудительно ставит negative=False, если
    magnitude == 0. Поэтому -0 == 0, а XOR-правило знаков при умножении
    и делении никогда не порождает "отрицательный ноль".

Деление — truncating (к нулю):
- знак quotient = XOR знаков операндов
- знак remainder = знак делимого
euc_rem даёт евклидов остаток в [0, |divisor|).

Порядок: отрицательные < неотрицательных; среди отрицательных порядок
модулей обращён.
"""

from pydantic import BaseModel, Field, StrictBool, ValidationInfo, field_validator

from arbint.core.domain.magnitude import Magnitude
from arbint.core.errors import NegativeToUnsignedCoercion, UnsupportedOperation


class SignedInteger(BaseModel):
    """
    Знаковое целое произвольной точности.

    Поле magnitude объявлено первым: валидатору negative нужен уже
    провалидированный magnitude.
    """

    magnitude: Magnitude = Field(default_factory=Magnitude.zero, description="Модуль значения")
    negative: StrictBool = Field(default=False, description="True для отрицательных значений")

    model_config = {"frozen": True}  # Immutable

    @field_validator("negative")
    @classmethod
    def canonical_zero_sign(cls, v: bool, info: ValidationInfo) -> bool:
        """Ноль всегда неотрицательный."""
        magnitude = info.data.get("magnitude")
        if magnitude is not None and magnitude.is_zero():
            return False
        return v

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def zero(cls) -> "SignedInteger":
        return cls(magnitude=Magnitude.zero(), negative=False)

    @classmethod
    def one(cls) -> "SignedInteger":
        return cls(magnitude=Magnitude.one(), negative=False)

    @classmethod
    def from_sign_magnitude(cls, negative: bool, magnitude: Magnitude) -> "SignedInteger":
        return cls(magnitude=magnitude, negative=negative)

    @classmethod
    def from_magnitude(cls, magnitude: Magnitude) -> "SignedInteger":
        """Promotion беззнакового значения (всегда неотрицательное)."""
        return cls(magnitude=magnitude, negative=False)

    @classmethod
    def from_int(cls, value: int) -> "SignedInteger":
        return cls(magnitude=Magnitude.from_int(abs(value)), negative=value < 0)

    @classmethod
    def from_hex_string(cls, text: str) -> "SignedInteger":
        """
        Разбор hex-строки с необязательным ведущим '-' и префиксом 0x.

        Raises:
            MalformedInput: Если после знака и префикса встречаются не-hex символы
        """
        negative = text.startswith("-")
        digits = text[1:] if negative else text
        return cls(magnitude=Magnitude.from_hex_string(digits), negative=negative)

    # =========================================================================
    # HOUSEKEEPING
    # =========================================================================

    def is_zero(self) -> bool:
        return self.magnitude.is_zero()

    def is_negative(self) -> bool:
        return self.negative

    def euclidean_size(self) -> Magnitude:
        """Евклидова норма — модуль значения."""
        return self.magnitude

    def to_magnitude(self) -> Magnitude:
        """
        Demotion в беззнаковый тип.

        Raises:
            NegativeToUnsignedCoercion: Если значение отрицательное
        """
        if self.negative:
            raise NegativeToUnsignedCoercion(
                f"Cannot coerce negative integer {self.to_debug_string()} to Magnitude"
            )
        return self.magnitude

    def to_int(self) -> int:
        value = self.magnitude.to_int()
        return -value if self.negative else value

    def to_debug_string(self) -> str:
        if self.is_zero():
            return "0x0"
        sign = "-" if self.negative else ""
        return sign + self.magnitude.to_debug_string()

    def to_hex_string(self) -> str:
        if self.is_zero():
            return "0x0"
        sign = "-" if self.negative else ""
        return sign + self.magnitude.to_hex_string()

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def compare(self, other: "SignedInteger") -> int:
        """
        Сравнение знаковых значений.

        Returns:
            -1, 0 или +1
        """
        if self.negative != other.negative:
            return -1 if self.negative else 1

        ordering = self.magnitude.compare(other.magnitude)
        return -ordering if self.negative else ordering

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def negate(self) -> "SignedInteger":
        return SignedInteger.from_sign_magnitude(not self.negative, self.magnitude)

    def absolute(self) -> "SignedInteger":
        return SignedInteger.from_magnitude(self.magnitude)

    def add(self, other: "SignedInteger") -> "SignedInteger":
        """
        Сложение.

        Одинаковые знаки → сумма модулей с тем же знаком.
        Разные знаки → сводится к вычитанию двух неотрицательных значений.
        """
        if self.negative == other.negative:
            return SignedInteger.from_sign_magnitude(
                self.negative, self.magnitude.add(other.magnitude)
            )

        # -a + b = b - a;  a + (-b) = a - b
        if self.negative:
            return other.subtract(self.negate())
        return self.subtract(other.negate())

    def subtract(self, other: "SignedInteger") -> "SignedInteger":
        """
        Вычитание: разбор четырёх комбинаций знаков.

        При одинаковых знаках модули сравниваются заранее, поэтому
        беззнаковое вычитание всегда идёт из большего меньшего.
        """
        if not self.negative and not other.negative:
            ordering = self.magnitude.compare(other.magnitude)
            if ordering > 0:
                return SignedInteger.from_magnitude(self.magnitude.subtract(other.magnitude))
            if ordering == 0:
                return SignedInteger.zero()
            return SignedInteger.from_sign_magnitude(True, other.magnitude.subtract(self.magnitude))

        if not self.negative and other.negative:
            # a - (-b) = a + b
            return self.add(other.negate())

        if self.negative and not other.negative:
            # -a - b = -(a + b)
            return SignedInteger.from_sign_magnitude(True, self.magnitude.add(other.magnitude))

        # -a - (-b) = b - a
        return other.negate().subtract(self.negate())

    def multiply(self, other: "SignedInteger") -> "SignedInteger":
        return SignedInteger.from_sign_magnitude(
            self.negative != other.negative, self.magnitude.multiply(other.magnitude)
        )

    def quotient_and_remainder(
        self, divisor: "SignedInteger"
    ) -> tuple["SignedInteger", "SignedInteger"]:
        """
        Truncating деление с остатком.

        Returns:
            (quotient, remainder): divisor * quotient + remainder == self,
            |remainder| < |divisor|, знак remainder = знак self

        Raises:
            DivisionByZero: Если divisor равен нулю
        """
        quotient, remainder = self.magnitude.quotient_and_remainder(divisor.magnitude)
        return (
            SignedInteger.from_sign_magnitude(self.negative != divisor.negative, quotient),
            SignedInteger.from_sign_magnitude(self.negative, remainder),
        )

    def divide(self, divisor: "SignedInteger") -> "SignedInteger":
        return self.quotient_and_remainder(divisor)[0]

    def remainder(self, divisor: "SignedInteger") -> "SignedInteger":
        return self.quotient_and_remainder(divisor)[1]

    def euc_rem(self, divisor: "SignedInteger") -> "SignedInteger":
        """
        Евклидов остаток ("modulo" в алгебраическом смысле).

        Returns:
            Остаток в [0, |divisor|)

        Raises:
            DivisionByZero: Если divisor равен нулю
        """
        remainder = self.remainder(divisor)
        if remainder.negative:
            return remainder.add(divisor.absolute())
        return remainder

    def power(self, exponent: int) -> "SignedInteger":
        """
        Возведение в степень.

        Реализован только нулевой показатель.

        Raises:
            UnsupportedOperation: Если exponent < 0 (целые необратимы)
                или exponent > 0 (не реализовано)
        """
        if exponent < 0:
            raise UnsupportedOperation(f"Cannot invert integer (exponent {exponent})")
        if exponent == 0:
            return SignedInteger.one()
        raise UnsupportedOperation(f"Positive exponents are not implemented (exponent {exponent})")

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
        return f"SignedInteger({self.to_debug_string()})"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SignedInteger):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SignedInteger):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SignedInteger):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SignedInteger):
            return NotImplemented
        return self.compare(other) >= 0

    def __neg__(self) -> "SignedInteger":
        return self.negate()

    def __abs__(self) -> "SignedInteger":
        return self.absolute()

    def __add__(self, other: "SignedInteger") -> "SignedInteger":
        return self.add(other)

    def __sub__(self, other: "SignedInteger") -> "SignedInteger":
        return self.subtract(other)

    def __mul__(self, other: "SignedInteger") -> "SignedInteger":
        return self.multiply(other)

    def __floordiv__(self, other: "SignedInteger") -> "SignedInteger":
        # truncating, в отличие от Python int (floor)
        return self.divide(other)

    def __mod__(self, other: "SignedInteger") -> "SignedInteger":
        return self.remainder(other)

    def __divmod__(self, other: "SignedInteger") -> tuple["SignedInteger", "SignedInteger"]:
        return self.quotient_and_remainder(other)
