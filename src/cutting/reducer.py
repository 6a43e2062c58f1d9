"""Area Reducer - площадь наибольшего куска.

Абсолютная площадь каждого полигона финальной коллекции и выбор максимума.
Пустая коллекция невозможна (сплиттер всегда сохраняет хотя бы одну сторону),
поэтому она трактуется как нарушение инварианта, а не как штатная ошибка.
"""

from dataclasses import dataclass
from typing import Sequence

from src.core.domain.polygon import Polygon
from src.core.geometry.primitives import polygon_area


class EmptyPolygonCollection(Exception):
    """Нарушение инварианта: финальная коллекция полигонов пуста."""
    pass


@dataclass(frozen=True)
class LargestPiece:
    """Наибольший кусок коллекции."""

    polygon: Polygon
    area: float
    index: int


def largest_piece(polygons: Sequence[Polygon]) -> LargestPiece:
    """Наибольший по абсолютной площади полигон.

    При равенстве площадей выбирается первый по порядку.

    Raises:
        EmptyPolygonCollection: Если коллекция пуста
    """
    if not polygons:
        raise EmptyPolygonCollection("Cannot reduce an empty polygon collection")

    best_index = 0
    best_area = polygon_area(polygons[0])
    for index in range(1, len(polygons)):
        area = polygon_area(polygons[index])
        if area > best_area:
            best_index = index
            best_area = area

    return LargestPiece(polygon=polygons[best_index], area=best_area, index=best_index)


def max_area(polygons: Sequence[Polygon]) -> float:
    """Максимальная абсолютная площадь среди полигонов коллекции.

    Raises:
        EmptyPolygonCollection: Если коллекция пуста
    """
    return largest_piece(polygons).area
