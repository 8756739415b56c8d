"""
Numeral Renderer — Запись точного значения в заданном основании

Модуль переводит ExactRational в строку в целевом основании:
- Целая часть: повторное деление на radix (divmod), остатки в обратном порядке
- Дробная часть: последовательное умножение на radix (long multiplication)
  с ограничением precision цифр

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Float не используется: целая часть и конечные дроби точны
2. Бесконечные дроби ОБРЕЗАЮТСЯ (truncation), округления нет
3. Цифры при precision p являются префиксом цифр при precision p' > p
4. Нулевая дробь → без точки; дробь без выданных цифр → '.0'
"""

from typing import Final

from src.core.domain.digits import RADIX_POINT, digit_char, validate_radix
from src.core.domain.rational import ExactRational


# Бюджет дробных цифр по умолчанию
DEFAULT_PRECISION: Final[int] = 12


def validate_precision(precision: int) -> int:
    """
    Проверка бюджета дробных цифр.

    Raises:
        ValueError: Если precision не int или отрицательный
    """
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise ValueError(f"precision must be an int, got {precision!r}")
    if precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")
    return precision


def render_integer(value: int, radix: int) -> str:
    """
    Запись неотрицательного целого в основании radix.

    Args:
        value: Целое >= 0 произвольной разрядности
        radix: Целевое основание (2..16)

    Returns:
        Строка цифр 0-9A-F; 0 → '0'

    Raises:
        ValueError: Если value < 0 или radix некорректен

    Examples:
        >>> render_integer(255, 16)
        'FF'
        >>> render_integer(0, 2)
        '0'
    """
    validate_radix(radix)
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")

    if value == 0:
        return "0"

    digits = []
    while value > 0:
        value, remainder = divmod(value, radix)
        digits.append(digit_char(remainder))
    return "".join(reversed(digits))


def render_fraction_digits(
    numerator: int, denominator: int, radix: int, precision: int
) -> str:
    """
    Дробные цифры numerator/denominator в основании radix.

    На каждом шаге: num *= radix, цифра = num // den, num = num % den.
    Останавливается, когда num == 0 (конечная дробь) или выдано precision цифр.

    Returns:
        Строка цифр без точки (может быть пустой)
    """
    digits = []
    num = numerator
    while num != 0 and len(digits) < precision:
        digit, num = divmod(num * radix, denominator)
        digits.append(digit_char(digit))
    return "".join(digits)


def render(value: ExactRational, target_radix: int, precision: int = DEFAULT_PRECISION) -> str:
    """
    Запись ExactRational в целевом основании.

    Args:
        value: Точное значение (обычно результат parse)
        target_radix: Целевое основание (2..16)
        precision: Максимум дробных цифр (default: DEFAULT_PRECISION)

    Returns:
        'INT' если дробь нулевая, иначе 'INT.FRAC'

    Raises:
        ValueError: Если target_radix или precision некорректны

    Examples:
        >>> render(ExactRational(int_part=10, frac_numerator=15, frac_denominator=16), 10)
        '10.9375'
        >>> render(ExactRational.integer(0), 2)
        '0'
    """
    validate_radix(target_radix)
    validate_precision(precision)

    int_text = render_integer(value.int_part, target_radix)
    if not value.has_fraction:
        return int_text

    frac_text = render_fraction_digits(
        value.frac_numerator, value.frac_denominator, target_radix, precision
    )

    # precision == 0 при ненулевой дроби: точка всё равно выводится
    return int_text + RADIX_POINT + (frac_text or "0")
