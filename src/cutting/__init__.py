"""Cutting - последовательное разрезание выпуклого полигона прямыми.

- Polygon Splitter: один полигон + одна прямая → 1 или 2 выпуклых полигона
- Cut Sequencer: применение прямых ко всей коллекции в порядке ввода
- Area Reducer: площадь наибольшего куска
"""

from .pipeline import largest_piece_area
from .reducer import EmptyPolygonCollection, LargestPiece, largest_piece, max_area
from .sequencer import CutSequencer, CutState, CutStepResult, apply
from .splitter import CutConfig, PolygonSplitter, SplitOutcome, split

__all__ = [
    "largest_piece_area",
    "EmptyPolygonCollection",
    "LargestPiece",
    "largest_piece",
    "max_area",
    "CutSequencer",
    "CutState",
    "CutStepResult",
    "apply",
    "CutConfig",
    "PolygonSplitter",
    "SplitOutcome",
    "split",
]
