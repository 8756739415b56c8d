"""Converter: точка входа для вызывающей стороны (UI и т.п.).

- convert_all: текст + основание → строки во всех целевых основаниях
- RadixConverter: то же с фиксированной конфигурацией и ConversionResult
"""

from .radix_converter import ConverterConfig, RadixConverter, convert_all

__all__ = [
    "ConverterConfig",
    "RadixConverter",
    "convert_all",
]
