"""Polygon Splitter - разрезание выпуклого полигона бесконечной прямой.

Один проход по границе полигона:
1. Классификация каждой вершины (LEFT/RIGHT/ON)
2. Вершины раскладываются в левый/правый списки (ON → в оба)
3. Ребро со строго противоположными концами даёт точку пересечения → в оба списка
4. Сторона с ≥3 вершинами и ненулевой площадью - валидный кусок

Результат: 2 новых полигона, либо исходный полигон без изменений.
Порядок обхода сохраняется (вершины никогда не сортируются по углу),
поэтому куски наследуют направление обхода исходного полигона.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from src.core.domain.line import Line
from src.core.domain.point import Point
from src.core.domain.polygon import Polygon
from src.core.geometry.primitives import (
    Side,
    intersect,
    require_direction,
    side,
    signed_area,
)
from src.core.math.numerical_safeguards import (
    EPS_AREA,
    EPS_EDGE_PARAM,
    EPS_PARALLEL,
    EPS_POINT,
    EPS_SIDE,
    validate_positive,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CutConfig:
    """Допуски геометрии разреза.

    Один экземпляр используется на весь прогон, чтобы классификация
    сторон была согласована между всеми шагами.

    - eps_side: допуск расстояния вершины до прямой (ON)
    - eps_parallel: допуск параллельности прямой и ребра
    - eps_edge_param: допуск параметра пересечения вдоль ребра
    - eps_point: допуск совпадения точек
    - eps_area: минимальная площадь невырожденного куска
    """
    eps_side: float = EPS_SIDE
    eps_parallel: float = EPS_PARALLEL
    eps_edge_param: float = EPS_EDGE_PARAM
    eps_point: float = EPS_POINT
    eps_area: float = EPS_AREA

    def __post_init__(self):
        validate_positive(self.eps_side, "eps_side")
        validate_positive(self.eps_parallel, "eps_parallel")
        validate_positive(self.eps_edge_param, "eps_edge_param")
        validate_positive(self.eps_point, "eps_point")
        validate_positive(self.eps_area, "eps_area")


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class SplitOutcome:
    """Результат разрезания одного полигона одной прямой."""

    pieces: Tuple[Polygon, ...]
    was_split: bool
    reason: str

    # Классификация вершин исходного полигона
    sides: Tuple[Side, ...]

    # Для отладки
    details: str


# =============================================================================
# SPLITTER
# =============================================================================


class PolygonSplitter:
    """Разрезание выпуклого полигона бесконечной прямой.

    Stateless: единственная зависимость - CutConfig.

    Политика граничных случаев:
    - прямая касается только вершины → полигон без изменений
    - прямая совпадает с ребром → полигон без изменений
    - прямая проходит мимо → полигон без изменений
    - прямая через две несмежные вершины (диагональ) → 2 куска
    """

    def __init__(self, config: Optional[CutConfig] = None):
        self.config = config or CutConfig()

    def split(self, polygon: Polygon, line: Line) -> Tuple[Polygon, ...]:
        """Куски полигона после разреза (1 или 2 элемента).

        Raises:
            InvalidLine: Если прямая вырождена
        """
        return self.evaluate(polygon, line).pieces

    def evaluate(self, polygon: Polygon, line: Line) -> SplitOutcome:
        """Разрезание с диагностикой.

        Args:
            polygon: выпуклый полигон
            line: прямая разреза

        Returns:
            SplitOutcome с кусками и причиной решения

        Raises:
            InvalidLine: Если прямая вырождена
        """
        cfg = self.config
        require_direction(line, cfg.eps_point)

        sides = tuple(
            side(line, v, eps=cfg.eps_side, eps_point=cfg.eps_point)
            for v in polygon.vertices
        )

        # 1. Прямая не пересекает внутренность
        if Side.LEFT not in sides or Side.RIGHT not in sides:
            return self._unchanged(
                polygon,
                sides,
                reason="no_crossing",
                details=f"No strict crossing: left={sides.count(Side.LEFT)}, "
                        f"right={sides.count(Side.RIGHT)}, on={sides.count(Side.ON)}",
            )

        # 2. Обход границы
        left, right = self._walk(polygon, line, sides)

        left = self._drop_repeated(left)
        right = self._drop_repeated(right)

        # 3. Валидность сторон
        if not (self._is_valid_piece(left) and self._is_valid_piece(right)):
            return self._unchanged(
                polygon,
                sides,
                reason="degenerate_side",
                details=f"Degenerate side after walk: left={len(left)} vertices, "
                        f"right={len(right)} vertices",
            )

        pieces = (Polygon(vertices=tuple(left)), Polygon(vertices=tuple(right)))

        logger.debug(
            "Split polygon with %d vertices into %d + %d",
            polygon.vertex_count,
            len(left),
            len(right),
        )

        return SplitOutcome(
            pieces=pieces,
            was_split=True,
            reason="split",
            sides=sides,
            details=f"Split into left={len(left)} and right={len(right)} vertices",
        )

    def _walk(
        self,
        polygon: Polygon,
        line: Line,
        sides: Tuple[Side, ...],
    ) -> Tuple[List[Point], List[Point]]:
        """Раскладка вершин и точек пересечения по сторонам.

        Returns:
            (left, right) списки вершин в порядке обхода
        """
        cfg = self.config
        vertices = polygon.vertices
        n = len(vertices)

        left: List[Point] = []
        right: List[Point] = []

        for i in range(n):
            current = vertices[i]
            nxt = vertices[(i + 1) % n]
            current_side = sides[i]

            if current_side != Side.RIGHT:
                left.append(current)
            if current_side != Side.LEFT:
                right.append(current)

            if current_side.opposes(sides[(i + 1) % n]):
                point = intersect(
                    line,
                    current,
                    nxt,
                    eps=cfg.eps_parallel,
                    eps_edge_param=cfg.eps_edge_param,
                    eps_point=cfg.eps_point,
                )
                if point is None:
                    logger.debug(
                        "Discarded intersection outside edge %s -> %s",
                        current.as_tuple(),
                        nxt.as_tuple(),
                    )
                    continue
                left.append(point)
                right.append(point)

        return left, right

    def _drop_repeated(self, points: List[Point]) -> List[Point]:
        """Удаление соседних совпадающих вершин (включая последнюю → первую)."""
        eps = self.config.eps_point
        result: List[Point] = []
        for p in points:
            if result and result[-1].is_close(p, eps):
                continue
            result.append(p)

        while len(result) > 1 and result[-1].is_close(result[0], eps):
            result.pop()

        return result

    def _is_valid_piece(self, points: List[Point]) -> bool:
        return len(points) >= 3 and abs(signed_area(points)) > self.config.eps_area

    @staticmethod
    def _unchanged(
        polygon: Polygon,
        sides: Tuple[Side, ...],
        reason: str,
        details: str,
    ) -> SplitOutcome:
        return SplitOutcome(
            pieces=(polygon,),
            was_split=False,
            reason=reason,
            sides=sides,
            details=details,
        )


def split(
    polygon: Polygon,
    line: Line,
    config: Optional[CutConfig] = None,
) -> Tuple[Polygon, ...]:
    """Разрезание полигона прямой (1 или 2 куска).

    Raises:
        InvalidLine: Если прямая вырождена
    """
    return PolygonSplitter(config).split(polygon, line)
