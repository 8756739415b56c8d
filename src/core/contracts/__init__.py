"""
Contract Validation Module

Модуль для валидации JSON контрактов конвертера (результат и ошибка разбора).
"""

from .validators import (
    CONVERSION_ERROR_VALIDATOR,
    CONVERSION_RESULT_VALIDATOR,
    ContractValidator,
    SchemaLoader,
    validate_conversion_error,
    validate_conversion_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    # Validator instances
    "CONVERSION_RESULT_VALIDATOR",
    "CONVERSION_ERROR_VALIDATOR",
    # Functions
    "validate_conversion_result",
    "validate_conversion_error",
]
