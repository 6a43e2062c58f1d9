"""
Numerical Safeguards - Safe Math Primitives

Модуль обеспечивает численную устойчивость геометрических операций:
- Epsilon-параметры для классификации сторон, пересечений и площадей
- NaN/Inf проверки для предотвращения распространения невалидных значений
- Epsilon-сравнения float с учётом машинной точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Точное сравнение float (==) в геометрии не используется
2. Все толерантности берутся из констант этого модуля (или CutConfig)
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для классификации точки относительно прямой (LEFT/RIGHT/ON)
# Применяется к перпендикулярному расстоянию: |cross| <= eps * |direction|
EPS_SIDE: Final[float] = 1e-10

# Epsilon для детекции параллельности прямой и ребра
# Синус угла: |d2 × d1| <= eps · |d1| · |d2| → прямые параллельны, пересечения нет
EPS_PARALLEL: Final[float] = 1e-10

# Допуск на параметр пересечения вдоль ребра: t ∈ [-eps, 1 + eps]
EPS_EDGE_PARAM: Final[float] = 1e-10

# Покоординатный допуск совпадения точек (дубликаты вершин, вырожденная прямая)
EPS_POINT: Final[float] = 1e-10

# Минимальная площадь невырожденного полигона
EPS_AREA: Final[float] = 1e-12

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """
    Проверка, близко ли значение к нулю с учётом толерантности.

    Args:
        value: Проверяемое значение
        tol: Абсолютная толерантность (default: EPS_FLOAT_COMPARE_ABS)

    Returns:
        True если abs(value) <= tol
    """
    return abs(value) <= tol


def is_positive(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """True если value > tol."""
    return value > tol


def is_negative(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """True если value < -tol."""
    return value < -tol


def compare_with_tolerance(
    a: float,
    b: float,
    tol: float = EPS_FLOAT_COMPARE_ABS,
) -> int:
    """
    Сравнение двух float с учётом толерантности.

    Используется как знаковая функция с мёртвой зоной:
    compare_with_tolerance(cross, 0.0, tol) → -1 / 0 / +1.

    Args:
        a: Первое значение
        b: Второе значение
        tol: Абсолютная толерантность (default: EPS_FLOAT_COMPARE_ABS)

    Returns:
        -1 если a < b (с учётом tol)
         0 если a ≈ b (в пределах tol)
        +1 если a > b (с учётом tol)

    Examples:
        >>> compare_with_tolerance(1.0, 2.0)
        -1
        >>> compare_with_tolerance(2.0, 1.0)
        1
        >>> compare_with_tolerance(1.0, 1.0 + 1e-13)
        0
    """
    diff = a - b

    if abs(diff) <= tol:
        return 0
    elif diff < 0:
        return -1
    else:
        return 1


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-1.0, 0.0, 10.0)
        0.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


# =============================================================================
# ВАЛИДАЦИЯ И ПРОВЕРКИ
# =============================================================================


def validate_positive(value: float, name: str, eps: float = 0.0) -> None:
    """
    Валидация, что значение положительное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        eps: Минимальный порог (default: 0.0)

    Raises:
        ValueError: Если value <= eps или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= eps:
        raise ValueError(f"{name} must be positive (> {eps}), got {value}")
