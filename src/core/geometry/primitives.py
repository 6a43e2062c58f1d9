"""
Geometry Primitives - классификация сторон, пересечения, площади

Модуль содержит чистые геометрические функции над доменными моделями
Point / Line / Polygon:
- side(): классификация точки относительно бесконечной прямой (LEFT/RIGHT/ON)
- line_edge_intersection() / intersect(): пересечение прямой с ребром полигона
- signed_area() / polygon_area(): площадь по формуле шнурования (shoelace)
- is_convex(): проверка выпуклости для валидации на стороне вызывающего

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Классификация стороны всегда детерминирована: ровно одно из LEFT/RIGHT/ON
2. Точное сравнение float с нулём не используется (только epsilon-допуски)
3. Вырожденная прямая (p1 == p2) → InvalidLine, а не "нет пересечения"

ФОРМУЛЫ:
    cross = (p2 - p1) × (point - p1)
    cross > 0 → LEFT, cross < 0 → RIGHT, |cross| <= eps * |p2 - p1| → ON

    Пересечение прямой p1 + s·d1 с ребром a + t·d2:
    t = ((p1 - a) × d1) / (d2 × d1),   ребру принадлежат t ∈ [0, 1]

    area = ½ · Σ (x_i · y_{i+1} − x_{i+1} · y_i)
"""

from enum import Enum
from typing import NamedTuple, Optional, Sequence, Union

from src.core.domain.line import Line
from src.core.domain.point import Point
from src.core.domain.polygon import Polygon
from src.core.math.numerical_safeguards import (
    EPS_EDGE_PARAM,
    EPS_PARALLEL,
    EPS_POINT,
    EPS_SIDE,
    compare_with_tolerance,
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidLine(Exception):
    """
    Прямая без направления: p1 совпадает с p2.

    Для такой прямой тест стороны не определён, поэтому любая операция
    над ней завершается ошибкой, а не молча считается "без пересечения".
    """
    pass


# =============================================================================
# TYPES
# =============================================================================


class Side(str, Enum):
    """Положение точки относительно направленной прямой."""

    LEFT = "left"
    RIGHT = "right"
    ON = "on"

    def opposes(self, other: "Side") -> bool:
        """True только для пары LEFT/RIGHT (в любом порядке)."""
        return {self, other} == {Side.LEFT, Side.RIGHT}


class EdgeIntersection(NamedTuple):
    """Точка пересечения прямой с прямой ребра и параметр t вдоль ребра."""

    point: Point
    edge_param: float


PointSequence = Union[Polygon, Sequence[Point]]


# =============================================================================
# BASIC OPERATIONS
# =============================================================================


def require_direction(line: Line, eps: float = EPS_POINT) -> None:
    """
    Проверка, что прямая имеет направление.

    Raises:
        InvalidLine: Если p1 и p2 совпадают в пределах eps
    """
    if line.is_degenerate(eps):
        raise InvalidLine(
            f"Line has no direction: p1={line.p1.as_tuple()} equals p2={line.p2.as_tuple()}"
        )


def cross(o: Point, a: Point, b: Point) -> float:
    """2D векторное произведение (a - o) × (b - o)."""
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def side(
    line: Line,
    point: Point,
    eps: float = EPS_SIDE,
    eps_point: float = EPS_POINT,
) -> Side:
    """
    Классификация точки относительно бесконечной прямой.

    Допуск масштабируется длиной направляющего вектора, т.е. фактически
    задаёт перпендикулярное расстояние до прямой. Результат не зависит от
    того, насколько далеко друг от друга выбраны p1 и p2.

    Args:
        line: Прямая разреза
        point: Классифицируемая точка
        eps: Допуск расстояния до прямой (default: EPS_SIDE)
        eps_point: Допуск вырожденности прямой (default: EPS_POINT)

    Returns:
        Side.LEFT / Side.RIGHT / Side.ON

    Raises:
        InvalidLine: Если прямая вырождена

    Examples:
        >>> side(Line.through(0, 0, 1, 0), Point(x=0.5, y=1.0))
        <Side.LEFT: 'left'>
        >>> side(Line.through(0, 0, 1, 0), Point(x=3.0, y=0.0))
        <Side.ON: 'on'>
    """
    require_direction(line, eps_point)

    value = cross(line.p1, line.p2, point)
    sign = compare_with_tolerance(value, 0.0, tol=eps * line.length)

    if sign > 0:
        return Side.LEFT
    elif sign < 0:
        return Side.RIGHT
    else:
        return Side.ON


# =============================================================================
# INTERSECTIONS
# =============================================================================


def line_edge_intersection(
    line: Line,
    start: Point,
    end: Point,
    eps: float = EPS_PARALLEL,
    eps_point: float = EPS_POINT,
) -> Optional[EdgeIntersection]:
    """
    Пересечение бесконечной прямой с прямой, несущей ребро start → end.

    Параметр t не проверяется: вызывающий обязан убедиться, что
    t ∈ [0, 1], прежде чем считать точку лежащей на ребре (см. intersect()).

    Параллельность определяется по синусу угла между направлениями:
    |d2 × d1| <= eps · |d1| · |d2|.

    Args:
        line: Прямая разреза
        start: Начало ребра
        end: Конец ребра
        eps: Допуск параллельности (default: EPS_PARALLEL)
        eps_point: Допуск вырожденности прямой (default: EPS_POINT)

    Returns:
        EdgeIntersection(point, edge_param) или None если прямые параллельны
        (в том числе если ребро лежит на прямой разреза)

    Raises:
        InvalidLine: Если прямая вырождена
    """
    require_direction(line, eps_point)

    d1x, d1y = line.direction
    d2x = end.x - start.x
    d2y = end.y - start.y

    denom = d2x * d1y - d2y * d1x
    edge_length_sq = d2x * d2x + d2y * d2y

    if edge_length_sq == 0.0 or abs(denom) <= eps * line.length * edge_length_sq ** 0.5:
        return None

    t = ((line.p1.x - start.x) * d1y - (line.p1.y - start.y) * d1x) / denom

    return EdgeIntersection(
        point=Point(x=start.x + t * d2x, y=start.y + t * d2y),
        edge_param=t,
    )


def intersect(
    line: Line,
    start: Point,
    end: Point,
    eps: float = EPS_PARALLEL,
    eps_edge_param: float = EPS_EDGE_PARAM,
    eps_point: float = EPS_POINT,
) -> Optional[Point]:
    """
    Точка пересечения прямой с отрезком-ребром start → end.

    Пересечение с параметром вне [0, 1] лежит за пределами ребра и
    отбрасывается. Параметр в пределах допуска eps_edge_param за границей
    прижимается к ближайшему концу ребра.

    Returns:
        Point на ребре или None (параллельность / вне ребра)

    Raises:
        InvalidLine: Если прямая вырождена

    Examples:
        >>> intersect(Line.through(0.5, 0, 0.5, 1), Point(x=0, y=0), Point(x=1, y=0))
        Point(x=0.5, y=0.0)
        >>> intersect(Line.through(2, 0, 2, 1), Point(x=0, y=0), Point(x=1, y=0)) is None
        True
    """
    hit = line_edge_intersection(line, start, end, eps=eps, eps_point=eps_point)
    if hit is None:
        return None

    t = hit.edge_param
    if t < -eps_edge_param or t > 1.0 + eps_edge_param:
        return None

    if t < 0.0:
        return start
    if t > 1.0:
        return end
    return hit.point


# =============================================================================
# AREA & SHAPE
# =============================================================================


def _points_of(polygon: PointSequence) -> Sequence[Point]:
    if isinstance(polygon, Polygon):
        return polygon.vertices
    return polygon


def signed_area(polygon: PointSequence) -> float:
    """
    Знаковая площадь по формуле шнурования.

    Знак определяется направлением обхода: CCW → положительная,
    CW → отрицательная. Менее 3 точек → 0.0 (не полигон).

    Args:
        polygon: Polygon или последовательность Point

    Returns:
        Знаковая площадь
    """
    points = _points_of(polygon)
    n = len(points)
    if n < 3:
        return 0.0

    total = 0.0
    for i in range(n):
        current = points[i]
        nxt = points[(i + 1) % n]
        total += current.x * nxt.y - nxt.x * current.y

    return total / 2.0


def polygon_area(polygon: PointSequence) -> float:
    """Абсолютная площадь (знак обхода не влияет на величину)."""
    return abs(signed_area(polygon))


def is_convex(polygon: PointSequence, eps: float = EPS_SIDE) -> bool:
    """
    Проверка выпуклости: все ненулевые повороты одного знака.

    Коллинеарные тройки вершин (поворот в пределах eps) игнорируются.
    Полигон без единого ненулевого поворота вырожден и выпуклым не считается.

    Ядро выпуклость не проверяет: функция предназначена для валидации
    входных данных на стороне вызывающего (CLI, загрузка задач).

    Args:
        polygon: Polygon или последовательность Point
        eps: Допуск для определения коллинеарности

    Returns:
        True если полигон выпуклый и невырожденный
    """
    points = _points_of(polygon)
    n = len(points)
    if n < 3:
        return False

    turn_sign = 0
    for i in range(n):
        turn = cross(points[i], points[(i + 1) % n], points[(i + 2) % n])
        sign = compare_with_tolerance(turn, 0.0, tol=eps)
        if sign == 0:
            continue
        if turn_sign == 0:
            turn_sign = sign
        elif sign != turn_sign:
            return False

    return turn_sign != 0
