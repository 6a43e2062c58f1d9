"""
Domain models and value objects.

Contains fundamental geometric entities: Point, Line, Polygon, CutTask.
"""

from src.core.domain.cut_task import CutTask
from src.core.domain.line import Line
from src.core.domain.point import Point
from src.core.domain.polygon import Polygon

__all__ = [
    "Point",
    "Line",
    "Polygon",
    "CutTask",
]
