"""
Numeral Parser — Разбор позиционной записи числа в точное значение

Модуль переводит строку вида 'A.F' (base 16) в ExactRational:
- Нормализация (trim, верхний регистр, удаление префикса 0X)
- Разделение на целую и дробную части по '.'
- Полная проверка всех цифр ДО вычислений (fail-fast)
- Накопление value = value * radix + digit на Python int (без переполнения)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. При ошибке ExactRational не создаётся (нет частичных результатов)
2. frac_denominator = radix ** len(дробной части), без сокращения
3. Проверки идут в порядке: пустой ввод → несколько точек → цифры
4. Все операции детерминированы, повтор не меняет результат
"""

from enum import Enum
from typing import Any, Dict, Optional

from src.core.domain.digits import HEX_PREFIX, RADIX_POINT, digit_value, validate_radix
from src.core.domain.rational import ExactRational


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ParseError(Exception):
    """
    Базовая ошибка разбора числа.

    Каждый подкласс имеет стабильный code для вызывающей стороны
    и сообщение, пригодное для показа пользователю.
    """

    code: str = "parse_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        """Форма JSON контракта conversion_error."""
        return {"code": self.code, "message": self.message}


class EmptyInput(ParseError):
    """Нормализованный ввод пустой."""

    code = "empty_input"

    def __init__(self) -> None:
        super().__init__("Input is empty")


class MultipleDecimalPoints(ParseError):
    """В вводе больше одного разделителя '.'."""

    code = "multiple_decimal_points"

    def __init__(self, count: int):
        super().__init__(f"Invalid format: {count} decimal points, at most one allowed")
        self.count = count


class InvalidDigit(ParseError):
    """
    Символ не является цифрой для основания.

    position — индекс символа в нормализованной строке (после удаления 0X).
    """

    code = "invalid_digit"

    def __init__(self, character: str, radix: int, position: int):
        super().__init__(f"Invalid digit for base {radix}: {character}")
        self.character = character
        self.radix = radix
        self.position = position

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["character"] = self.character
        data["position"] = self.position
        return data


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


class HexPrefixPolicy(str, Enum):
    """Когда удалять ведущий префикс 0X"""

    ANY_RADIX = "any_radix"  # для любого основания (decimal '0X1' → '1')
    HEX_ONLY = "hex_only"  # только при source_radix == 16


def normalize_numeral(
    raw: Optional[str],
    source_radix: int,
    hex_prefix_policy: HexPrefixPolicy = HexPrefixPolicy.ANY_RADIX,
) -> str:
    """
    Нормализация ввода перед проверкой.

    1. None → ""
    2. Удаление пробелов по краям
    3. Верхний регистр
    4. Удаление ведущего '0X' (по политике hex_prefix_policy)

    Examples:
        >>> normalize_numeral("  0xff.8 ", 16)
        'FF.8'
        >>> normalize_numeral("0x1", 10)
        '1'
        >>> normalize_numeral("0x1", 10, HexPrefixPolicy.HEX_ONLY)
        '0X1'
    """
    if raw is None:
        return ""

    text = str(raw).strip().upper()

    strip_prefix = hex_prefix_policy == HexPrefixPolicy.ANY_RADIX or source_radix == 16
    if strip_prefix and text.startswith(HEX_PREFIX):
        text = text[len(HEX_PREFIX):]

    return text


# =============================================================================
# РАЗБОР
# =============================================================================


def _accumulate(digits: str, radix: int) -> int:
    """Позиционное значение строки уже проверенных цифр (пустая строка → 0)."""
    value = 0
    for char in digits:
        value = value * radix + digit_value(char)
    return value


def parse(
    raw: Optional[str],
    source_radix: int,
    *,
    hex_prefix_policy: HexPrefixPolicy = HexPrefixPolicy.ANY_RADIX,
) -> ExactRational:
    """
    Разбор числа в основании source_radix в точное значение.

    Пустая целая часть означает 0 ('.5' → 0.5), пустая дробная часть
    означает отсутствие дроби ('5.' → 5, numerator=0, denominator=1).

    Args:
        raw: Текст числа (например 'A.F', '0x1f', ' 101.1 ')
        source_radix: Основание ввода (2..16)
        hex_prefix_policy: Политика удаления префикса 0X

    Returns:
        ExactRational

    Raises:
        EmptyInput: Нормализованный ввод пустой
        MultipleDecimalPoints: Больше одного '.'
        InvalidDigit: Первый символ, недопустимый для основания
        ValueError: Некорректное основание

    Examples:
        >>> parse("A.F", 16)
        ExactRational(int_part=10, frac_numerator=15, frac_denominator=16)
    """
    validate_radix(source_radix)

    text = normalize_numeral(raw, source_radix, hex_prefix_policy)
    if not text:
        raise EmptyInput()

    point_count = text.count(RADIX_POINT)
    if point_count > 1:
        raise MultipleDecimalPoints(point_count)

    int_digits, _, frac_digits = text.partition(RADIX_POINT)

    # Fail-fast: проверяем ВСЕ символы до любых вычислений
    for position, char in enumerate(text):
        if char == RADIX_POINT:
            continue
        value = digit_value(char)
        if value is None or value >= source_radix:
            raise InvalidDigit(char, source_radix, position)

    int_part = _accumulate(int_digits, source_radix)

    if not frac_digits:
        return ExactRational.integer(int_part)

    return ExactRational(
        int_part=int_part,
        frac_numerator=_accumulate(frac_digits, source_radix),
        frac_denominator=source_radix ** len(frac_digits),
    )
