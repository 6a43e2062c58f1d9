"""
Core math modules для polycut

Численные примитивы с гарантией стабильности.
"""

from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_AREA,
    EPS_EDGE_PARAM,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_PARALLEL,
    EPS_POINT,
    EPS_SIDE,
    # NaN/Inf checks
    is_valid_float,
    # Epsilon comparisons
    compare_with_tolerance,
    is_close,
    is_negative,
    is_positive,
    is_zero,
    # Utilities
    clamp,
    # Validation
    validate_positive,
)

__all__ = [
    # Epsilon constants
    "EPS_AREA",
    "EPS_EDGE_PARAM",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_PARALLEL",
    "EPS_POINT",
    "EPS_SIDE",
    # NaN/Inf checks
    "is_valid_float",
    # Epsilon comparisons
    "compare_with_tolerance",
    "is_close",
    "is_negative",
    "is_positive",
    "is_zero",
    # Utilities
    "clamp",
    # Validation
    "validate_positive",
]
