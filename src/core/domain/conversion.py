"""
ConversionResult — Результат конверсии одного ввода во все целевые основания

Immutable Pydantic модель. Полная совместимость с JSON Schema
(src/core/contracts/schema/conversion_result.json) через to_contract().
"""

from typing import Any, Dict, Final

from pydantic import BaseModel, Field, field_validator

from src.core.domain.digits import MAX_RADIX, MIN_RADIX


# Версия JSON контракта conversion_result
CONVERSION_RESULT_SCHEMA_VERSION: Final[str] = "1"


class ConversionResult(BaseModel):
    """
    Результат конверсии.

    Содержит:
    - Исходный и нормализованный ввод
    - Основание ввода и бюджет дробных цифр
    - Строку для каждого целевого основания (порядок как в запросе)
    """

    input: str = Field(..., description="Ввод как его передал вызывающий")
    normalized: str = Field(..., min_length=1, description="Ввод после нормализации")
    source_radix: int = Field(..., ge=MIN_RADIX, le=MAX_RADIX, description="Основание ввода")
    precision: int = Field(..., ge=0, description="Максимум дробных цифр на выходе")
    outputs: Dict[int, str] = Field(..., min_length=1, description="radix → строка в этом основании")

    model_config = {"frozen": True}

    @field_validator("outputs")
    @classmethod
    def validate_output_radices(cls, v: Dict[int, str]) -> Dict[int, str]:
        """Проверка, что все ключи — допустимые основания"""
        for radix in v:
            if radix < MIN_RADIX or radix > MAX_RADIX:
                raise ValueError(
                    f"output radix must be in [{MIN_RADIX}, {MAX_RADIX}], got {radix}"
                )
        return v

    def to_contract(self) -> Dict[str, Any]:
        """
        Сериализация в форму JSON контракта conversion_result.

        Ключи outputs — строки, так как в JSON ключи объекта только строковые.
        """
        return {
            "schema_version": CONVERSION_RESULT_SCHEMA_VERSION,
            "input": self.input,
            "normalized": self.normalized,
            "source_radix": self.source_radix,
            "precision": self.precision,
            "outputs": {str(radix): text for radix, text in self.outputs.items()},
        }
