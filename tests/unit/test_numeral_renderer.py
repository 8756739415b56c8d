"""
Тесты для модуля Numeral Renderer

Проверяет:
1. Запись целых (divmod) во всех основаниях
2. Запись дробей последовательным умножением
3. Truncation (без округления) и монотонность по precision
4. Round-trip parse ↔ render
5. Валидацию основания и precision
"""

import pytest

from src.core.domain import SUPPORTED_RADICES, ExactRational
from src.core.math.numeral_parser import parse
from src.core.math.numeral_renderer import (
    DEFAULT_PRECISION,
    render,
    render_fraction_digits,
    render_integer,
    validate_precision,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def a_point_f():
    """'A.F' base 16 = 10 + 15/16."""
    return parse("A.F", 16)


@pytest.fixture
def one_tenth():
    """'0.1' base 10 — бесконечная дробь в base 2."""
    return parse("0.1", 10)


# =============================================================================
# ТЕСТЫ ЦЕЛЫХ
# =============================================================================


class TestRenderInteger:
    """Тесты для render_integer"""

    def test_zero(self) -> None:
        """0 → '0' в любом основании"""
        for radix in SUPPORTED_RADICES:
            assert render_integer(0, radix) == "0"

    def test_known_values(self) -> None:
        """Совпадает со встроенными bin/oct/hex"""
        assert render_integer(10, 2) == "1010"
        assert render_integer(255, 16) == "FF"
        assert render_integer(64, 8) == "100"
        assert render_integer(1234567890, 10) == "1234567890"

    def test_matches_builtin_formatting(self) -> None:
        """Для ряда значений совпадает с format(n, 'b'/'o'/'X')"""
        for n in [1, 7, 8, 15, 16, 255, 256, 65535, 2**64 + 3]:
            assert render_integer(n, 2) == format(n, "b")
            assert render_integer(n, 8) == format(n, "o")
            assert render_integer(n, 16) == format(n, "X")

    def test_uppercase_letters(self) -> None:
        """Буквы A-F в верхнем регистре"""
        assert render_integer(0xABCDEF, 16) == "ABCDEF"

    def test_arbitrary_width(self) -> None:
        """Целые произвольной разрядности"""
        assert render_integer(2**200, 2) == "1" + "0" * 200
        assert render_integer(10**50, 10) == "1" + "0" * 50

    def test_negative_raises(self) -> None:
        """Отрицательные значения не поддерживаются"""
        with pytest.raises(ValueError, match="value must be non-negative"):
            render_integer(-1, 10)

    def test_invalid_radix_raises(self) -> None:
        with pytest.raises(ValueError, match="radix must be in"):
            render_integer(5, 1)


# =============================================================================
# ТЕСТЫ ДРОБЕЙ
# =============================================================================


class TestRender:
    """Тесты для render"""

    def test_hex_roundtrip(self, a_point_f: ExactRational) -> None:
        """'A.F' base 16 → 'A.F'"""
        assert render(a_point_f, 16) == "A.F"

    def test_hex_to_decimal(self, a_point_f: ExactRational) -> None:
        """'A.F' base 16 → '10.9375' (конечная дробь)"""
        assert render(a_point_f, 10, 12) == "10.9375"

    def test_hex_to_binary_and_octal(self, a_point_f: ExactRational) -> None:
        assert render(a_point_f, 2) == "1010.1111"
        assert render(a_point_f, 8) == "12.74"

    def test_binary_to_hex_integer(self) -> None:
        """'1010' base 2 → 'A'"""
        assert render(parse("1010", 2), 16) == "A"

    def test_non_terminating_truncated(self, one_tenth: ExactRational) -> None:
        """'0.1' base 10 → base 2, 8 цифр: '0.00011001' (без округления)"""
        assert render(one_tenth, 2, 8) == "0.00011001"

    def test_default_precision(self, one_tenth: ExactRational) -> None:
        """По умолчанию 12 дробных цифр"""
        text = render(one_tenth, 2)
        assert DEFAULT_PRECISION == 12
        assert text == "0.000110011001"

    def test_truncation_not_rounding(self) -> None:
        """2/3 в base 10 → 0.666…6, последняя цифра не округляется до 7"""
        two_thirds = parse("0.2", 3)
        assert render(two_thirds, 10, 5) == "0.66666"

    def test_zero_no_point(self) -> None:
        """'0' → '0' без точки"""
        assert render(parse("0", 10), 2) == "0"

    def test_zero_fraction_digits_no_point(self) -> None:
        """'7.000' → '7' без точки"""
        assert render(parse("7.000", 10), 10) == "7"

    def test_precision_zero_fallback(self, a_point_f: ExactRational) -> None:
        """precision=0 при ненулевой дроби → '.0'"""
        assert render(a_point_f, 10, 0) == "10.0"

    def test_terminating_shorter_than_precision(self) -> None:
        """Конечная дробь останавливается раньше precision"""
        assert render(parse("0.5", 10), 2, 12) == "0.1"

    def test_fraction_in_all_supported_radices(self) -> None:
        """'0.8' base 16 = 1/2 во всех основаниях"""
        half = parse("0.8", 16)
        assert render(half, 2) == "0.1"
        assert render(half, 8) == "0.4"
        assert render(half, 10) == "0.5"
        assert render(half, 16) == "0.8"

    def test_long_exact_binary_fraction(self) -> None:
        """Точная двоичная дробь длиннее float mantissa не теряет точность"""
        text = "0." + "0" * 59 + "1"
        value = parse(text, 2)
        assert render(value, 2, 60) == text
        # 2^-60 == 16^-15
        assert render(value, 16, 15) == "0." + "0" * 14 + "1"

    @pytest.mark.parametrize("radix", [0, 1, 17])
    def test_invalid_radix_raises(self, a_point_f: ExactRational, radix: int) -> None:
        with pytest.raises(ValueError):
            render(a_point_f, radix)

    @pytest.mark.parametrize("precision", [-1, 1.5, True, None])
    def test_invalid_precision_raises(self, a_point_f: ExactRational, precision) -> None:
        with pytest.raises(ValueError, match="precision must be"):
            render(a_point_f, 10, precision)


class TestRenderFractionDigits:
    """Тесты для render_fraction_digits"""

    def test_zero_numerator_empty(self) -> None:
        """numerator 0 → ''"""
        assert render_fraction_digits(0, 10, 2, 12) == ""

    def test_precision_zero_empty(self) -> None:
        assert render_fraction_digits(1, 3, 10, 0) == ""

    def test_one_third_base_3(self) -> None:
        """1/3 в base 3 — конечная '1'"""
        assert render_fraction_digits(1, 3, 3, 12) == "1"


class TestValidatePrecision:
    """Тесты для validate_precision"""

    def test_valid(self) -> None:
        assert validate_precision(0) == 0
        assert validate_precision(64) == 64

    def test_negative(self) -> None:
        with pytest.raises(ValueError, match="precision must be non-negative"):
            validate_precision(-3)


# =============================================================================
# СВОЙСТВА
# =============================================================================


class TestRenderProperties:
    """Round-trip, identity и монотонность"""

    @pytest.mark.parametrize("radix", SUPPORTED_RADICES)
    @pytest.mark.parametrize(
        "n", [0, 1, 2, 7, 8, 9, 10, 15, 16, 255, 4096, 10**18, 2**64 - 1, 2**64, 3**150]
    )
    def test_integer_round_trip(self, n: int, radix: int) -> None:
        """parse(render_integer(n, r), r).int_part == n"""
        assert parse(render_integer(n, radix), radix).int_part == n

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("0", "0"),
            ("42", "42"),
            ("0042", "42"),
            ("000", "0"),
            ("18446744073709551616", "18446744073709551616"),
            ("9" * 80, "9" * 80),
        ],
    )
    def test_decimal_identity(self, text: str, expected: str) -> None:
        """Decimal → decimal без потерь (кроме ведущих нулей)"""
        assert render(parse(text, 10), 10) == expected

    def test_decimal_fraction_identity(self) -> None:
        """Конечная decimal дробь в пределах precision возвращается как есть"""
        assert render(parse("3.14159", 10), 10) == "3.14159"

    @pytest.mark.parametrize(
        "text, source, target",
        [("0.1", 10, 2), ("0.1", 10, 16), ("0.2", 3, 10), ("A.F", 16, 10), ("0.7", 8, 3)],
    )
    def test_truncation_monotonic(self, text: str, source: int, target: int) -> None:
        """Цифры при precision p — префикс цифр при p' > p"""
        value = parse(text, source)
        previous = ""
        for precision in range(1, 30):
            digits = render(value, target, precision).split(".")[1]
            assert digits.startswith(previous)
            previous = digits
