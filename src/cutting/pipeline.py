"""Pipeline - единственная точка входа ядра.

Выпуклый полигон + упорядоченные прямые → площадь наибольшего куска.
"""

import logging
from typing import Iterable, Optional

from src.core.domain.line import Line
from src.core.domain.polygon import Polygon
from src.cutting.reducer import max_area
from src.cutting.sequencer import CutSequencer
from src.cutting.splitter import CutConfig

logger = logging.getLogger(__name__)


def largest_piece_area(
    polygon: Polygon,
    lines: Iterable[Line],
    config: Optional[CutConfig] = None,
) -> float:
    """Площадь наибольшего куска после последовательного разрезания.

    Args:
        polygon: выпуклый полигон (выпуклость гарантирует вызывающий)
        lines: прямые в порядке применения
        config: допуски геометрии (default: CutConfig())

    Returns:
        Максимальная абсолютная площадь среди кусков

    Raises:
        InvalidLine: Если любая из прямых вырождена

    Examples:
        >>> square = Polygon.from_coords([(0, 0), (1, 0), (1, 1), (0, 1)])
        >>> largest_piece_area(square, [Line.through(0, 0, 1, 1), Line.through(0.5, 0, 0.5, 1)])
        0.375
    """
    final_state = CutSequencer(config).run(polygon, lines)
    area = max_area(final_state.polygons)

    logger.info(
        "Applied %d lines: %d pieces, largest area %.10g",
        final_state.lines_processed,
        final_state.size,
        area,
    )

    return area
