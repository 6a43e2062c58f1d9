"""
Line - Бесконечная прямая через две точки

Прямая используется только ради направления и теста стороны; отрезок
между p1 и p2 никогда не отсекается.

Вырожденная прямая (p1 == p2) допустима как данные, но любая геометрическая
операция над ней выбрасывает InvalidLine (см. src.core.geometry.primitives).
"""

import math

from pydantic import BaseModel, Field

from src.core.domain.point import Point
from src.core.math.numerical_safeguards import EPS_POINT


class Line(BaseModel):
    """Бесконечная прямая, заданная двумя точками."""

    p1: Point = Field(..., description="Первая опорная точка")
    p2: Point = Field(..., description="Вторая опорная точка")

    model_config = {"frozen": True}

    @classmethod
    def through(cls, x1: float, y1: float, x2: float, y2: float) -> "Line":
        """Прямая через (x1, y1) и (x2, y2)."""
        return cls(p1=Point(x=x1, y=y1), p2=Point(x=x2, y=y2))

    @property
    def direction(self) -> tuple[float, float]:
        """Вектор направления (p2 - p1)."""
        return (self.p2.x - self.p1.x, self.p2.y - self.p1.y)

    @property
    def length(self) -> float:
        """Длина вектора направления |p2 - p1|."""
        dx, dy = self.direction
        return math.hypot(dx, dy)

    def is_degenerate(self, eps: float = EPS_POINT) -> bool:
        """True если p1 и p2 совпадают в пределах eps (направление не определено)."""
        return self.p1.is_close(self.p2, eps)
