"""FIFO queue for one producer thread and one consumer thread."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any


class SingleProducerSingleConsumerList:
    """A thread-safe FIFO with producer/consumer completion flags."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()
        self._producer_finished = threading.Event()
        self._consumer_finished = threading.Event()
        self.produced = 0
        self.consumed = 0

    def __len__(self) -> int:
        return len(self._items)

    def produce(self, value: Any) -> None:
        """Append a value at the tail."""
        self._items.append(value)
        self.produced += 1

    def consume(self) -> Any:
        """Remove and return the value at the head; IndexError if empty."""
        try:
            value = self._items.popleft()
        except IndexError:
            raise IndexError("consume from an empty list") from None
        self.consumed += 1
        return value

    def can_be_consumed(self) -> bool:
        return bool(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def is_producer_finished(self) -> bool:
        return self._producer_finished.is_set()

    def set_producer_finished(self) -> None:
        self._producer_finished.set()

    def is_consumer_finished(self) -> bool:
        return self._consumer_finished.is_set()

    def set_consumer_finished(self) -> None:
        self._consumer_finished.set()