"""
Digits — Алфавит цифр и правила допустимости для оснований 2..16

Единственный источник истины для:
- соответствия символ ↔ числовое значение цифры (0-9, A-F)
- проверки допустимости цифры для основания
- проверки самого основания (radix)

Поиск значения идёт только по явному алфавиту DIGIT_ALPHABET, поэтому
не-ASCII цифры (например, арабо-индийские) никогда не считаются валидными.
"""

from typing import Final


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Алфавит цифр: индекс символа == его значение
DIGIT_ALPHABET: Final[str] = "0123456789ABCDEF"

# Допустимый диапазон оснований
MIN_RADIX: Final[int] = 2
MAX_RADIX: Final[int] = len(DIGIT_ALPHABET)

# Основания, которые отображает вызывающая сторона (bin/oct/dec/hex)
SUPPORTED_RADICES: Final[tuple[int, ...]] = (2, 8, 10, 16)

# Разделитель дробной части
RADIX_POINT: Final[str] = "."

# Префикс шестнадцатеричной записи (после перевода в верхний регистр)
HEX_PREFIX: Final[str] = "0X"


# =============================================================================
# ОСНОВАНИЕ
# =============================================================================


def validate_radix(radix: int) -> int:
    """
    Проверка основания системы счисления.

    Args:
        radix: Основание (int в диапазоне MIN_RADIX..MAX_RADIX)

    Returns:
        radix без изменений

    Raises:
        ValueError: Если radix не int или вне диапазона

    Examples:
        >>> validate_radix(16)
        16
        >>> validate_radix(1)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ValueError: radix must be in [2, 16], got 1
    """
    # bool — подкласс int, но основанием быть не может
    if isinstance(radix, bool) or not isinstance(radix, int):
        raise ValueError(f"radix must be an int, got {radix!r}")

    if radix < MIN_RADIX or radix > MAX_RADIX:
        raise ValueError(f"radix must be in [{MIN_RADIX}, {MAX_RADIX}], got {radix}")

    return radix


# =============================================================================
# ЦИФРЫ
# =============================================================================


def digit_value(char: str) -> int | None:
    """
    Числовое значение цифры.

    Регистр не важен ('a' == 'A' == 10).

    Args:
        char: Один символ

    Returns:
        Значение 0..15 или None, если символ не цифра
    """
    if len(char) != 1:
        return None

    # upper() может вернуть несколько символов ('ß' → 'SS')
    folded = char.upper()
    if len(folded) != 1:
        return None

    index = DIGIT_ALPHABET.find(folded)
    return index if index >= 0 else None


def digit_char(value: int) -> str:
    """
    Символ цифры по значению (0-9, затем A-F в верхнем регистре).

    Raises:
        ValueError: Если value вне 0..15
    """
    if value < 0 or value >= MAX_RADIX:
        raise ValueError(f"digit value must be in [0, {MAX_RADIX - 1}], got {value}")
    return DIGIT_ALPHABET[value]


def is_valid_digit(char: str, radix: int) -> bool:
    """
    Проверка, что символ — допустимая цифра для основания.

    Разделитель дробной части цифрой не является.

    Examples:
        >>> is_valid_digit("F", 16)
        True
        >>> is_valid_digit("2", 2)
        False
    """
    value = digit_value(char)
    return value is not None and value < radix


def allowed_digits(radix: int) -> str:
    """Цифры, допустимые для основания, в порядке возрастания значения."""
    validate_radix(radix)
    return DIGIT_ALPHABET[:radix]


# =============================================================================
# САНИТИЗАЦИЯ ВВОДА
# =============================================================================


def sanitize_numeral(raw: str | None, radix: int) -> str:
    """
    Фильтр набираемого текста: оставляет только то, что может стать числом.

    Правила:
    1. Перевод в верхний регистр
    2. Удаление ведущего префикса 0X
    3. Удаление всех символов, недопустимых для основания
    4. Сохраняется только первый разделитель '.'

    В отличие от парсера, никогда не выбрасывает ошибку разбора:
    это фильтр для поля ввода, а не валидатор.

    Args:
        raw: Сырой текст (None → "")
        radix: Основание

    Returns:
        Отфильтрованный текст (может быть пустым)

    Examples:
        >>> sanitize_numeral("0x1g.f.f", 16)
        '1.FF'
        >>> sanitize_numeral("12a3", 2)
        '1'
    """
    validate_radix(radix)
    if raw is None:
        return ""

    text = str(raw).upper()
    if text.startswith(HEX_PREFIX):
        text = text[len(HEX_PREFIX):]

    kept: list[str] = []
    point_seen = False
    for char in text:
        if char == RADIX_POINT:
            if not point_seen:
                point_seen = True
                kept.append(char)
            continue
        if is_valid_digit(char, radix):
            kept.append(char)

    return "".join(kept)
