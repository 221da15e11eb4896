#!filepath: tabledb/engines/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterable, Iterator, TypeVar


InLine = TypeVar("InLine")
OutEvent = TypeVar("OutEvent")


class BaseEngine(ABC, Generic[InLine, OutEvent]):
    """
    Engine base class:

    - no I/O (never opens files or writes stdout)
    - pure "input item → output item" logic
    - state machines keep their state on the instance
    """

    @abstractmethod
    def process(self, item: InLine) -> OutEvent:
        """
        Handle one input item (smallest unit).
        """
        raise NotImplementedError

    def process_stream(self, items: Iterable[InLine]) -> Iterator[OutEvent]:
        """
        Lazily handle a batch of items by calling ``process`` on each.
        """
        for item in items:
            yield self.process(item)
