"""
Streaming iteration.

A streaming iterator hands out a reference to storage it owns and keeps
mutating. The item returned by ``get()`` is only meaningful until the next
``advance()``: holding on to it and reading it later shows whatever state the
iterator has moved to since. Use ``collect()`` (or copy the item yourself) to
keep values.

Python iteration is supported, with the same caveat::

    for state in generator:        # ``state`` is the same object every time
        solutions.append(list(state))
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class StreamingIterator(ABC, Generic[T]):
    """Lazy sequence driven by explicit ``advance()`` / ``get()`` calls."""

    @abstractmethod
    def advance(self) -> None:
        """Move to the next item. Calling it after exhaustion does nothing."""
        raise NotImplementedError

    @abstractmethod
    def get(self) -> Optional[T]:
        """Current item, or None before the first advance and after exhaustion."""
        raise NotImplementedError

    def current(self) -> Optional[T]:
        return self.get()

    def next(self) -> Optional[T]:
        self.advance()
        return self.get()

    @property
    def is_done(self) -> bool:
        return False

    def __iter__(self) -> Iterator[T]:
        while True:
            item = self.next()
            if item is None:
                return
            yield item

    # -- adapters ---------------------------------------------------------

    def take_while(self, predicate: Callable[[T], bool]) -> "TakeWhile[T]":
        return TakeWhile(self, predicate)

    def filter(self, predicate: Callable[[T], bool]) -> "Filter[T]":
        return Filter(self, predicate)

    def count(self) -> int:
        """Drain the iterator and return how many items it produced."""
        total = 0
        while self.next() is not None:
            total += 1
        return total

    def for_each(self, fn: Callable[[T], None]) -> None:
        while True:
            item = self.next()
            if item is None:
                return
            fn(item)

    def collect(self, copy_fn: Callable[[T], T] = copy.deepcopy, limit: Optional[int] = None) -> List[T]:
        """Drain the iterator into a list of independent copies."""
        items: List[T] = []
        while limit is None or len(items) < limit:
            item = self.next()
            if item is None:
                break
            items.append(copy_fn(item))
        return items


class TakeWhile(StreamingIterator[T]):
    """Yields items of ``source`` until ``predicate`` first fails."""

    def __init__(self, source: StreamingIterator[T], predicate: Callable[[T], bool]):
        self.source = source
        self.predicate = predicate
        self._stopped = False

    def advance(self) -> None:
        if self._stopped:
            return
        self.source.advance()
        item = self.source.get()
        if item is None or not self.predicate(item):
            self._stopped = True

    def get(self) -> Optional[T]:
        if self._stopped:
            return None
        return self.source.get()

    @property
    def is_done(self) -> bool:
        return self._stopped


class Filter(StreamingIterator[T]):
    """Skips items of ``source`` that do not satisfy ``predicate``."""

    def __init__(self, source: StreamingIterator[T], predicate: Callable[[T], bool]):
        self.source = source
        self.predicate = predicate

    def advance(self) -> None:
        while True:
            self.source.advance()
            item = self.source.get()
            if item is None or self.predicate(item):
                return

    def get(self) -> Optional[T]:
        return self.source.get()

    @property
    def is_done(self) -> bool:
        return self.source.is_done


class Convert(StreamingIterator[T]):
    """Streams the items of an ordinary iterable."""

    def __init__(self, items: Iterable[T]):
        self._items = iter(items)
        self._current: Optional[T] = None
        self._done = False

    def advance(self) -> None:
        if self._done:
            return
        try:
            self._current = next(self._items)
        except StopIteration:
            self._current = None
            self._done = True

    def get(self) -> Optional[T]:
        return self._current

    @property
    def is_done(self) -> bool:
        return self._done


def convert(items: Iterable[T]) -> Convert[T]:
    return Convert(items)


__all__ = ["StreamingIterator", "TakeWhile", "Filter", "Convert", "convert"]
