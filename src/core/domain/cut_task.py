"""
CutTask - Сериализуемая задача разрезания

Полигон плюс упорядоченный список прямых. Соответствует контракту
contracts/schema/cut_task.json (см. src.core.contracts).

Payload формат:
    {
        "schema_version": "1",
        "polygon": [[x, y], ...],
        "lines": [[[x1, y1], [x2, y2]], ...]
    }
"""

from typing import Any, Dict, Literal

from pydantic import BaseModel, Field

from src.core.domain.line import Line
from src.core.domain.point import Point
from src.core.domain.polygon import Polygon


class CutTask(BaseModel):
    """Задача: исходный выпуклый полигон и прямые в порядке применения."""

    schema_version: Literal["1"] = Field("1", description="Версия контракта")
    polygon: Polygon = Field(..., description="Исходный выпуклый полигон")
    lines: tuple[Line, ...] = Field(default=(), description="Прямые разреза (порядок важен)")

    model_config = {"frozen": True}

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "CutTask":
        """
        Построение задачи из JSON payload.

        Payload должен предварительно пройти validate_cut_task; здесь
        выполняется только доменная валидация Pydantic.

        Raises:
            pydantic.ValidationError: Если данные нарушают доменные инварианты
        """
        polygon = Polygon.from_coords(tuple(xy) for xy in data["polygon"])
        lines = tuple(
            Line(p1=Point(x=a[0], y=a[1]), p2=Point(x=b[0], y=b[1]))
            for a, b in data.get("lines", [])
        )
        return cls(
            schema_version=data.get("schema_version", "1"),
            polygon=polygon,
            lines=lines,
        )

    def to_payload(self) -> Dict[str, Any]:
        """Обратная сериализация в JSON payload."""
        return {
            "schema_version": self.schema_version,
            "polygon": [[p.x, p.y] for p in self.polygon.vertices],
            "lines": [
                [[line.p1.x, line.p1.y], [line.p2.x, line.p2.y]] for line in self.lines
            ],
        }
