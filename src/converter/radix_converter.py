"""Radix Converter — один ввод → строки во всех целевых основаниях.

Композиция parse → render:
- Ввод разбирается один раз в ExactRational
- Для каждого целевого основания вызывается render с общим precision
- При ошибке разбора ParseError пробрасывается, частичных результатов нет

Порядок выходов совпадает с порядком target_radices (повторы схлопываются).
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from src.core.contracts import validate_conversion_result
from src.core.domain.conversion import ConversionResult
from src.core.domain.digits import SUPPORTED_RADICES, validate_radix
from src.core.math.numeral_parser import (
    HexPrefixPolicy,
    ParseError,
    normalize_numeral,
    parse,
)
from src.core.math.numeral_renderer import DEFAULT_PRECISION, render, validate_precision


logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION
# =============================================================================


@dataclass(frozen=True)
class ConverterConfig:
    """Конфигурация конвертера.

    - precision: максимум дробных цифр в каждом выходе
    - target_radices: основания выходов (по умолчанию bin/oct/dec/hex)
    - hex_prefix_policy: когда удалять ведущий 0X из ввода
    - validate_contract: проверять каждый результат JSON контрактом
    """

    precision: int = DEFAULT_PRECISION
    target_radices: tuple[int, ...] = SUPPORTED_RADICES
    hex_prefix_policy: HexPrefixPolicy = HexPrefixPolicy.ANY_RADIX
    validate_contract: bool = False

    def __post_init__(self):
        # Любой iterable (в т.ч. генератор) фиксируется в tuple без повторов
        object.__setattr__(
            self, "target_radices", tuple(dict.fromkeys(self.target_radices))
        )
        validate_precision(self.precision)
        if not self.target_radices:
            raise ValueError("target_radices must not be empty")
        for radix in self.target_radices:
            validate_radix(radix)
        if not isinstance(self.hex_prefix_policy, HexPrefixPolicy):
            raise ValueError(
                f"hex_prefix_policy must be a HexPrefixPolicy, got {self.hex_prefix_policy!r}"
            )


# =============================================================================
# CONVERSION
# =============================================================================


def convert_all(
    text: Optional[str],
    source_radix: int,
    target_radices: Iterable[int] = SUPPORTED_RADICES,
    precision: int = DEFAULT_PRECISION,
    *,
    hex_prefix_policy: HexPrefixPolicy = HexPrefixPolicy.ANY_RADIX,
) -> Dict[int, str]:
    """Конверсия одного ввода во все целевые основания.

    Args:
        text: Число в основании source_radix
        source_radix: Основание ввода (2..16)
        target_radices: Основания выходов
        precision: Максимум дробных цифр
        hex_prefix_policy: Политика удаления префикса 0X

    Returns:
        dict radix → строка, в порядке target_radices

    Raises:
        ParseError: Ввод не разбирается (EmptyInput/MultipleDecimalPoints/InvalidDigit)
        ValueError: Некорректное основание или precision

    Examples:
        >>> convert_all("A.F", 16)
        {2: '1010.1111', 8: '12.74', 10: '10.9375', 16: 'A.F'}
    """
    radices = list(dict.fromkeys(target_radices))
    for radix in radices:
        validate_radix(radix)
    validate_precision(precision)

    value = parse(text, source_radix, hex_prefix_policy=hex_prefix_policy)
    return {radix: render(value, radix, precision) for radix in radices}


class RadixConverter:
    """Конвертер с фиксированной конфигурацией.

    Возвращает ConversionResult (ввод, нормализованный ввод, выходы),
    который сериализуется в JSON контракт conversion_result.
    """

    def __init__(self, config: ConverterConfig | None = None):
        """
        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or ConverterConfig()

    def convert(self, text: Optional[str], source_radix: int) -> ConversionResult:
        """Конверсия ввода во все основания из конфигурации.

        Raises:
            ParseError: Ввод не разбирается
            ValueError: Некорректное source_radix
            jsonschema.ValidationError: Результат нарушает контракт
                (только при config.validate_contract)
        """
        try:
            outputs = convert_all(
                text,
                source_radix,
                self.config.target_radices,
                self.config.precision,
                hex_prefix_policy=self.config.hex_prefix_policy,
            )
        except ParseError as e:
            logger.debug(
                "Parse failed: code=%s source_radix=%d input=%r", e.code, source_radix, text
            )
            raise

        result = ConversionResult(
            input="" if text is None else str(text),
            normalized=normalize_numeral(text, source_radix, self.config.hex_prefix_policy),
            source_radix=source_radix,
            precision=self.config.precision,
            outputs=outputs,
        )

        if self.config.validate_contract:
            validate_conversion_result(result.to_contract())

        logger.debug(
            "Converted %r from base %d into %d radices",
            result.normalized,
            source_radix,
            len(outputs),
        )
        return result
