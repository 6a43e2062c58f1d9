"""
Тесты для Geometry Primitives

Проверяет:
1. Классификацию стороны (LEFT/RIGHT/ON) и допуск
2. Пересечение прямой с ребром: параллельность, параметр t, границы ребра
3. Площадь по формуле шнурования и знак обхода
4. Проверку выпуклости
5. InvalidLine для вырожденных прямых
"""

import pytest

from src.core.domain import Line, Point, Polygon
from src.core.geometry import (
    InvalidLine,
    Side,
    cross,
    intersect,
    is_convex,
    line_edge_intersection,
    polygon_area,
    require_direction,
    side,
    signed_area,
)


@pytest.fixture
def x_axis() -> Line:
    """Прямая y = 0, направление +X"""
    return Line.through(0, 0, 1, 0)


@pytest.fixture
def unit_square() -> Polygon:
    return Polygon.from_coords([(0, 0), (1, 0), (1, 1), (0, 1)])


# =============================================================================
# SIDE CLASSIFICATION
# =============================================================================


class TestSide:
    """Тесты для side()"""

    def test_left_and_right(self, x_axis: Line) -> None:
        assert side(x_axis, Point(x=0.5, y=1.0)) == Side.LEFT
        assert side(x_axis, Point(x=0.5, y=-1.0)) == Side.RIGHT

    def test_point_on_line_beyond_defining_points(self, x_axis: Line) -> None:
        """Прямая бесконечна: точка за пределами p1..p2 тоже ON"""
        assert side(x_axis, Point(x=-100.0, y=0.0)) == Side.ON
        assert side(x_axis, Point(x=100.0, y=0.0)) == Side.ON

    def test_reversed_direction_swaps_sides(self) -> None:
        reversed_axis = Line.through(1, 0, 0, 0)
        assert side(reversed_axis, Point(x=0.5, y=1.0)) == Side.RIGHT

    def test_within_tolerance_is_on(self, x_axis: Line) -> None:
        """Погрешность вычислений поглощается допуском"""
        assert side(x_axis, Point(x=0.3, y=5e-11)) == Side.ON
        assert side(x_axis, Point(x=0.3, y=-5e-11)) == Side.ON
        assert side(x_axis, Point(x=0.3, y=1e-9)) == Side.LEFT

    def test_tolerance_independent_of_defining_point_spacing(self) -> None:
        """Допуск - расстояние до прямой, а не величина cross product"""
        far_apart = Line.through(0, 0, 1e6, 0)
        close = Line.through(0, 0, 1e-3, 0)
        p = Point(x=0.5, y=5e-11)
        assert side(far_apart, p) == Side.ON
        assert side(close, p) == Side.ON

    def test_custom_eps(self, x_axis: Line) -> None:
        p = Point(x=0.5, y=1e-6)
        assert side(x_axis, p) == Side.LEFT
        assert side(x_axis, p, eps=1e-5) == Side.ON

    def test_diagonal(self) -> None:
        diagonal = Line.through(0, 0, 1, 1)
        assert side(diagonal, Point(x=0, y=1)) == Side.LEFT
        assert side(diagonal, Point(x=1, y=0)) == Side.RIGHT
        assert side(diagonal, Point(x=0.1 + 0.2, y=0.3)) == Side.ON

    def test_degenerate_line_raises(self) -> None:
        with pytest.raises(InvalidLine, match="no direction"):
            side(Line.through(1, 1, 1, 1), Point(x=0, y=0))

    def test_opposes(self) -> None:
        assert Side.LEFT.opposes(Side.RIGHT)
        assert Side.RIGHT.opposes(Side.LEFT)
        assert not Side.LEFT.opposes(Side.LEFT)
        assert not Side.ON.opposes(Side.LEFT)
        assert not Side.RIGHT.opposes(Side.ON)


class TestCross:
    """Тесты для cross()"""

    def test_counter_clockwise_turn_positive(self) -> None:
        assert cross(Point(x=0, y=0), Point(x=1, y=0), Point(x=0, y=1)) == 1.0

    def test_clockwise_turn_negative(self) -> None:
        assert cross(Point(x=0, y=0), Point(x=0, y=1), Point(x=1, y=0)) == -1.0

    def test_collinear_zero(self) -> None:
        assert cross(Point(x=0, y=0), Point(x=1, y=1), Point(x=2, y=2)) == 0.0


class TestRequireDirection:
    """Тесты для require_direction()"""

    def test_valid_line_passes(self, x_axis: Line) -> None:
        require_direction(x_axis)

    def test_exactly_degenerate_raises(self) -> None:
        with pytest.raises(InvalidLine):
            require_direction(Line.through(0.5, 0.5, 0.5, 0.5))

    def test_nearly_degenerate_raises(self) -> None:
        with pytest.raises(InvalidLine):
            require_direction(Line.through(0.5, 0.5, 0.5 + 1e-12, 0.5))


# =============================================================================
# INTERSECTIONS
# =============================================================================


class TestLineEdgeIntersection:
    """Тесты для line_edge_intersection()"""

    def test_crossing_edge_midpoint(self) -> None:
        vertical = Line.through(0.5, 0, 0.5, 1)
        hit = line_edge_intersection(vertical, Point(x=0, y=0), Point(x=1, y=0))
        assert hit is not None
        assert hit.point == Point(x=0.5, y=0.0)
        assert hit.edge_param == pytest.approx(0.5)

    def test_parameter_outside_edge_reported(self) -> None:
        """Параметр вне [0, 1] возвращается как есть - проверка на вызывающем"""
        vertical = Line.through(2, 0, 2, 1)
        hit = line_edge_intersection(vertical, Point(x=0, y=0), Point(x=1, y=0))
        assert hit is not None
        assert hit.edge_param == pytest.approx(2.0)
        assert hit.point.x == pytest.approx(2.0)

    def test_parallel_returns_none(self, x_axis: Line) -> None:
        assert line_edge_intersection(x_axis, Point(x=0, y=1), Point(x=1, y=1)) is None

    def test_edge_on_line_returns_none(self, x_axis: Line) -> None:
        """Ребро на прямой разреза не даёт новой вершины"""
        assert line_edge_intersection(x_axis, Point(x=2, y=0), Point(x=3, y=0)) is None

    def test_degenerate_line_raises(self) -> None:
        with pytest.raises(InvalidLine):
            line_edge_intersection(
                Line.through(0, 0, 0, 0), Point(x=0, y=0), Point(x=1, y=1)
            )

    def test_diagonal_edge(self) -> None:
        vertical = Line.through(0.5, 0, 0.5, 1)
        hit = line_edge_intersection(vertical, Point(x=1, y=1), Point(x=0, y=0))
        assert hit is not None
        assert hit.point.x == pytest.approx(0.5)
        assert hit.point.y == pytest.approx(0.5)
        assert hit.edge_param == pytest.approx(0.5)


class TestIntersect:
    """Тесты для intersect()"""

    def test_inside_edge(self) -> None:
        vertical = Line.through(0.25, -3, 0.25, 7)
        p = intersect(vertical, Point(x=0, y=0), Point(x=1, y=0))
        assert p is not None
        assert p.x == pytest.approx(0.25)
        assert p.y == pytest.approx(0.0)

    def test_outside_edge_discarded(self) -> None:
        vertical = Line.through(1.5, 0, 1.5, 1)
        assert intersect(vertical, Point(x=0, y=0), Point(x=1, y=0)) is None
        vertical = Line.through(-0.5, 0, -0.5, 1)
        assert intersect(vertical, Point(x=0, y=0), Point(x=1, y=0)) is None

    def test_endpoints_inclusive(self) -> None:
        at_start = Line.through(0, 0, 0, 1)
        at_end = Line.through(1, 0, 1, 1)
        assert intersect(at_start, Point(x=0, y=0), Point(x=1, y=0)) == Point(x=0, y=0)
        assert intersect(at_end, Point(x=0, y=0), Point(x=1, y=0)) == Point(x=1, y=0)

    def test_slightly_outside_clamped_to_endpoint(self) -> None:
        just_past = Line.through(1 + 1e-12, 0, 1 + 1e-12, 1)
        assert intersect(just_past, Point(x=0, y=0), Point(x=1, y=0)) == Point(x=1, y=0)

    def test_parallel_none(self, x_axis: Line) -> None:
        assert intersect(x_axis, Point(x=0, y=1), Point(x=1, y=1)) is None


# =============================================================================
# AREA & CONVEXITY
# =============================================================================


class TestArea:
    """Тесты для signed_area() / polygon_area()"""

    def test_unit_square_ccw_positive(self, unit_square: Polygon) -> None:
        assert signed_area(unit_square) == 1.0

    def test_clockwise_negative(self) -> None:
        cw = Polygon.from_coords([(0, 0), (0, 1), (1, 1), (1, 0)])
        assert signed_area(cw) == -1.0
        assert polygon_area(cw) == 1.0

    def test_triangle(self) -> None:
        tri = Polygon.from_coords([(0, 0), (4, 0), (0, 3)])
        assert polygon_area(tri) == pytest.approx(6.0)

    def test_point_sequence_accepted(self) -> None:
        points = [Point(x=0, y=0), Point(x=2, y=0), Point(x=2, y=2), Point(x=0, y=2)]
        assert signed_area(points) == 4.0

    def test_fewer_than_three_points_zero(self) -> None:
        assert signed_area([Point(x=0, y=0), Point(x=1, y=1)]) == 0.0
        assert signed_area([]) == 0.0

    def test_collinear_zero(self) -> None:
        points = [Point(x=0, y=0), Point(x=1, y=1), Point(x=2, y=2)]
        assert signed_area(points) == 0.0

    def test_rotation_invariant(self, unit_square: Polygon) -> None:
        rotated = unit_square.vertices[2:] + unit_square.vertices[:2]
        assert signed_area(rotated) == signed_area(unit_square)

    def test_translated_far_from_origin(self) -> None:
        far = Polygon.from_coords([(1e6, 1e6), (1e6 + 1, 1e6), (1e6 + 1, 1e6 + 1), (1e6, 1e6 + 1)])
        assert polygon_area(far) == pytest.approx(1.0, rel=1e-6)


class TestIsConvex:
    """Тесты для is_convex()"""

    def test_square_convex(self, unit_square: Polygon) -> None:
        assert is_convex(unit_square)

    def test_clockwise_square_convex(self) -> None:
        assert is_convex(Polygon.from_coords([(0, 0), (0, 1), (1, 1), (1, 0)]))

    def test_reflex_vertex_not_convex(self) -> None:
        arrow = Polygon.from_coords([(0, 0), (2, 0), (1, 0.5), (2, 2), (0, 2)])
        assert not is_convex(arrow)

    def test_collinear_vertex_allowed(self) -> None:
        """Вершина на ребре (угол 180°) не нарушает выпуклость"""
        square = Polygon.from_coords([(0, 0), (0.5, 0), (1, 0), (1, 1), (0, 1)])
        assert is_convex(square)

    def test_degenerate_not_convex(self) -> None:
        flat = Polygon.from_coords([(0, 0), (1, 0), (2, 0)])
        assert not is_convex(flat)

    def test_self_intersecting_not_convex(self) -> None:
        bowtie = Polygon.from_coords([(0, 0), (1, 1), (1, 0), (0, 1)])
        assert not is_convex(bowtie)
