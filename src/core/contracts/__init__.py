"""
Contract Validation Module

Модуль для валидации JSON контрактов системы polycut.
"""

from .validators import (
    ContractValidator,
    CutTaskValidator,
    SchemaLoader,
    load_cut_task,
    validate_cut_task,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CutTaskValidator",
    # Functions
    "validate_cut_task",
    "load_cut_task",
]
