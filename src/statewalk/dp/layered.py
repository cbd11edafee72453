"""
Layered dynamic programming over streamed states.

A layer maps each distinct state (through ``key``) to an accumulated value.
``process_layer`` expands every state of the current layer with a streaming
generator and folds the values of the predecessors into the successors,
merging states reached along different paths.

Example, counting lattice paths::

    solver = LayeredPuzzleSolver(init_one, origin_stream, key=tuple, default=int)
    for _ in range(steps):
        solver.process_layer(add_count, neighbour_stream)
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Generic, Hashable, Iterator, Optional, Tuple, TypeVar

from statewalk.core.streaming import StreamingIterator

S = TypeVar("S")
V = TypeVar("V")

logger = logging.getLogger(__name__)


def freeze(state: Any) -> Hashable:
    """Hashable snapshot of a state built from lists, tuples, sets and dicts.

    Other values are returned unchanged, so they must already be hashable and
    must not be mutated by the stream afterwards.
    """
    if isinstance(state, (list, tuple)):
        return tuple(freeze(item) for item in state)
    if isinstance(state, (set, frozenset)):
        return frozenset(freeze(item) for item in state)
    if isinstance(state, dict):
        return frozenset((k, freeze(v)) for k, v in state.items())
    return state


class LayeredPuzzleSolver(Generic[S, V]):
    """
    Args:
        initializer: ``initializer(state, value) -> value`` seeds the first layer.
        states: Streaming iterator of the first layer's states.
        key: Turns a (possibly shared, mutable) streamed state into a hashable
            value kept in the layer. Defaults to ``freeze``.
        default: Factory for the value of a state seen for the first time.
    """

    def __init__(
        self,
        initializer: Callable[[S, V], V],
        states: StreamingIterator[S],
        key: Callable[[S], Hashable] = freeze,
        default: Callable[[], V] = lambda: None,  # type: ignore[assignment,return-value]
    ):
        self.key = key
        self.default = default
        self.depth = 0
        self.current_layer: Dict[Hashable, V] = {}
        self._fold(self.current_layer, states, initializer)

    def _fold(
        self,
        layer: Dict[Hashable, V],
        states: StreamingIterator[S],
        update: Callable[[S, V], V],
    ) -> None:
        while True:
            state = states.next()
            if state is None:
                return
            k = self.key(state)
            layer[k] = update(state, layer.get(k, self.default()))

    def process_layer(
        self,
        transform: Callable[[V, V], V],
        generator: Callable[[Hashable], StreamingIterator[S]],
    ) -> "LayeredPuzzleSolver[S, V]":
        """Replace the current layer with the states generated from it.

        Args:
            transform: ``transform(parent_value, child_value) -> child_value``.
            generator: Builds the successor stream for one stored state key.
        """
        new_layer: Dict[Hashable, V] = {}
        for k, value in self.current_layer.items():
            self._fold(new_layer, generator(k), lambda _state, child, v=value: transform(v, child))
        self.current_layer = new_layer
        self.depth += 1
        logger.debug("Layer %d holds %d states", self.depth, len(new_layer))
        return self

    @property
    def layer(self) -> Dict[Hashable, V]:
        return self.current_layer

    def get(self, state_key: Hashable) -> Optional[V]:
        return self.current_layer.get(state_key)

    def items(self) -> Iterator[Tuple[Hashable, V]]:
        return iter(self.current_layer.items())

    def __len__(self) -> int:
        return len(self.current_layer)


__all__ = ["LayeredPuzzleSolver", "freeze"]
