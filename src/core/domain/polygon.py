"""
Polygon - Выпуклый полигон

Immutable Pydantic модель: упорядоченная последовательность вершин,
обходящая границу в постоянном направлении (CW или CCW).

ИНВАРИАНТЫ:
1. Не менее 3 вершин
2. Соседние вершины (включая последнюю → первую) не совпадают
3. Выпуклость гарантируется вызывающей стороной и сохраняется сплиттером
"""

from typing import Iterable, Iterator

from pydantic import BaseModel, Field, field_validator

from src.core.domain.point import Point


class Polygon(BaseModel):
    """
    Выпуклый полигон.

    Разрезание всегда создаёт новые экземпляры; существующий полигон
    никогда не изменяется.
    """

    vertices: tuple[Point, ...] = Field(
        ..., min_length=3, description="Вершины в порядке обхода границы"
    )

    model_config = {"frozen": True}

    @field_validator("vertices")
    @classmethod
    def validate_no_repeated_vertices(cls, v: tuple[Point, ...]) -> tuple[Point, ...]:
        """Соседние вершины не должны совпадать."""
        n = len(v)
        for i in range(n):
            if v[i] == v[(i + 1) % n]:
                raise ValueError(
                    f"consecutive vertices {i} and {(i + 1) % n} are equal: {v[i].as_tuple()}"
                )
        return v

    @classmethod
    def from_coords(cls, coords: Iterable[tuple[float, float]]) -> "Polygon":
        """
        Полигон из последовательности пар (x, y).

        Examples:
            >>> Polygon.from_coords([(0, 0), (1, 0), (1, 1), (0, 1)]).vertex_count
            4
        """
        return cls(vertices=tuple(Point(x=x, y=y) for x, y in coords))

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    def edges(self) -> Iterator[tuple[Point, Point]]:
        """Рёбра (текущая → следующая вершина), последняя замыкается на первую."""
        n = len(self.vertices)
        for i in range(n):
            yield self.vertices[i], self.vertices[(i + 1) % n]

    def as_coords(self) -> list[tuple[float, float]]:
        return [p.as_tuple() for p in self.vertices]
