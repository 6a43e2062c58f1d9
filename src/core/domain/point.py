"""
Point - Точка на плоскости

Immutable Pydantic модель вершины полигона / опорной точки прямой.
Координаты всегда конечные (NaN/Inf отклоняются при создании).
"""

from pydantic import BaseModel, Field, field_validator

from src.core.math.numerical_safeguards import EPS_POINT, is_valid_float


class Point(BaseModel):
    """
    Точка (x, y).

    Immutable модель (frozen=True): все геометрические операции создают
    новые экземпляры.
    """

    x: float = Field(..., description="Координата X")
    y: float = Field(..., description="Координата Y")

    model_config = {"frozen": True}

    @field_validator("x", "y")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        """Координаты не могут быть NaN/Inf."""
        if not is_valid_float(v):
            raise ValueError(f"coordinate must be finite, got {v}")
        return v

    @classmethod
    def of(cls, x: float, y: float) -> "Point":
        """Короткий конструктор из позиционных координат."""
        return cls(x=x, y=y)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def is_close(self, other: "Point", eps: float = EPS_POINT) -> bool:
        """
        Покоординатное сравнение с допуском.

        Args:
            other: Вторая точка
            eps: Допуск по каждой координате

        Returns:
            True если |dx| <= eps и |dy| <= eps
        """
        return abs(self.x - other.x) <= eps and abs(self.y - other.y) <= eps
