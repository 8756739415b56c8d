"""
ExactRational — Точное значение разобранного числа

Immutable Pydantic модель: целая часть + дробь numerator/denominator.
Все поля — Python int произвольной разрядности, float не используется нигде.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. int_part >= 0, frac_numerator >= 0, frac_denominator >= 1
2. frac_numerator < frac_denominator
3. frac_denominator = source_radix ** (число дробных цифр), дробь НЕ сокращается
"""

from fractions import Fraction

from pydantic import BaseModel, Field, model_validator


class ExactRational(BaseModel):
    """
    Точное рациональное значение числа.

    Значение = int_part + frac_numerator / frac_denominator.

    Пример: 'A.F' в base 16 → int_part=10, frac_numerator=15, frac_denominator=16
    """

    int_part: int = Field(..., description="Целая часть (>= 0)")
    frac_numerator: int = Field(0, description="Дробные цифры, прочитанные как целое")
    frac_denominator: int = Field(1, description="source_radix ** число дробных цифр")

    model_config = {"frozen": True, "strict": True}

    @model_validator(mode="after")
    def validate_invariants(self) -> "ExactRational":
        """Проверка знаков и правильности дроби"""
        if self.int_part < 0:
            raise ValueError(f"int_part must be non-negative, got {self.int_part}")
        if self.frac_numerator < 0:
            raise ValueError(
                f"frac_numerator must be non-negative, got {self.frac_numerator}"
            )
        if self.frac_denominator < 1:
            raise ValueError(
                f"frac_denominator must be positive, got {self.frac_denominator}"
            )
        if self.frac_numerator >= self.frac_denominator:
            raise ValueError(
                f"frac_numerator {self.frac_numerator} must be < "
                f"frac_denominator {self.frac_denominator}"
            )
        return self

    @classmethod
    def integer(cls, value: int) -> "ExactRational":
        """Целое значение без дробной части."""
        return cls(int_part=value, frac_numerator=0, frac_denominator=1)

    @property
    def has_fraction(self) -> bool:
        """True, если дробная часть ненулевая (нужна точка при рендеринге)"""
        return self.frac_numerator != 0

    def as_fraction(self) -> Fraction:
        """
        Полное значение как fractions.Fraction (сокращённое).

        Удобно для сравнения значений, разобранных из разных оснований:
        parse('0.8', 16) и parse('0.5', 10) дают разные знаменатели,
        но одинаковый Fraction(1, 2).
        """
        return self.int_part + Fraction(self.frac_numerator, self.frac_denominator)
