"""Cut Sequencer - последовательное применение прямых ко всей коллекции полигонов.

Конечный автомат с одним состоянием на каждое число обработанных прямых:
- старт: {исходный полигон}, lines_processed = 0
- переход: следующая прямая → коллекция заменяется конкатенацией
  split(p, line) по всем p текущей коллекции (map-then-flatten)
- терминал: все прямые обработаны

Инварианты:
- прямые применяются строго в порядке ввода (результат зависит от порядка)
- полигоны никогда не сливаются обратно
- размер коллекции не убывает
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

from src.core.domain.line import Line
from src.core.domain.polygon import Polygon
from src.core.geometry.primitives import require_direction
from src.cutting.splitter import CutConfig, PolygonSplitter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CutState:
    """Состояние автомата: сколько прямых применено и текущая коллекция."""

    lines_processed: int
    polygons: Tuple[Polygon, ...]

    @property
    def size(self) -> int:
        return len(self.polygons)


@dataclass(frozen=True)
class CutStepResult:
    """Результат перехода по одной прямой."""

    state: CutState
    previous_state: CutState

    # Сколько полигонов было фактически разрезано на этом шаге
    polygons_split: int
    transition_occurred: bool

    # Для отладки
    details: str


class CutSequencer:
    """Автомат разрезания коллекции полигонов последовательностью прямых.

    Stateless между вызовами: рабочая коллекция живёт только внутри
    CutState, который заменяется целиком на каждом шаге.
    """

    def __init__(self, config: Optional[CutConfig] = None):
        """
        Args:
            config: допуски геометрии (общие для всех шагов прогона)
        """
        self.config = config or CutConfig()
        self.splitter = PolygonSplitter(self.config)

    @staticmethod
    def initial_state(polygon: Polygon) -> CutState:
        return CutState(lines_processed=0, polygons=(polygon,))

    def step(self, state: CutState, line: Line) -> CutStepResult:
        """Переход: применение одной прямой ко всей коллекции.

        Args:
            state: текущее состояние
            line: следующая прямая

        Returns:
            CutStepResult с новым состоянием

        Raises:
            InvalidLine: Если прямая вырождена (даже если коллекция пуста)
        """
        require_direction(line, self.config.eps_point)

        new_polygons = []
        polygons_split = 0
        for polygon in state.polygons:
            outcome = self.splitter.evaluate(polygon, line)
            if outcome.was_split:
                polygons_split += 1
            new_polygons.extend(outcome.pieces)

        new_state = CutState(
            lines_processed=state.lines_processed + 1,
            polygons=tuple(new_polygons),
        )

        logger.debug(
            "Line %d: %d -> %d polygons (%d split)",
            new_state.lines_processed,
            state.size,
            new_state.size,
            polygons_split,
        )

        return CutStepResult(
            state=new_state,
            previous_state=state,
            polygons_split=polygons_split,
            transition_occurred=polygons_split > 0,
            details=f"line_{new_state.lines_processed}: {state.size} -> {new_state.size} polygons",
        )

    def iter_states(self, polygon: Polygon, lines: Iterable[Line]) -> Iterator[CutState]:
        """Все состояния от стартового до терминального включительно."""
        state = self.initial_state(polygon)
        yield state
        for line in lines:
            state = self.step(state, line).state
            yield state

    def run(self, polygon: Polygon, lines: Iterable[Line]) -> CutState:
        """Прогон до терминального состояния."""
        state = self.initial_state(polygon)
        for state in self.iter_states(polygon, lines):
            pass
        return state

    def apply(self, polygon: Polygon, lines: Iterable[Line]) -> Tuple[Polygon, ...]:
        """Финальная коллекция полигонов после применения всех прямых.

        Raises:
            InvalidLine: Если любая из прямых вырождена
        """
        return self.run(polygon, lines).polygons


def apply(
    polygon: Polygon,
    lines: Iterable[Line],
    config: Optional[CutConfig] = None,
) -> Tuple[Polygon, ...]:
    """Финальная коллекция полигонов (см. CutSequencer.apply)."""
    return CutSequencer(config).apply(polygon, lines)
