"""Array-backed linked lists, stack and queue command runners, monotonic scans."""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any

_NONE = -1
_HEAD = 0
_TAIL = 1


class IndexedLinkedList:
    """Singly linked list whose nodes are addressed by insertion number (from 1)."""

    def __init__(self) -> None:
        self._values: list[Any] = []
        self._next: list[int] = []
        self._head = _NONE

    def _node(self, k: int) -> int:
        if not 1 <= k <= len(self._values):
            raise IndexError(f"no node was inserted as number {k}")
        return k - 1

    def _new_node(self, value: Any, following: int) -> int:
        self._values.append(value)
        self._next.append(following)
        return len(self._values) - 1

    def push_front(self, value: Any) -> None:
        """Insert ``value`` at the head."""
        self._head = self._new_node(value, self._head)

    def insert_after(self, k: int, value: Any) -> None:
        """Insert ``value`` right after the ``k``-th inserted node."""
        node = self._node(k)
        self._next[node] = self._new_node(value, self._next[node])

    def remove_after(self, k: int) -> None:
        """Remove the node following the ``k``-th inserted node."""
        node = self._node(k)
        target = self._next[node]
        if target == _NONE:
            raise IndexError(f"node {k} has no successor")
        self._next[node] = self._next[target]

    def remove_front(self) -> None:
        """Remove the head node."""
        if self._head == _NONE:
            raise IndexError("remove from empty list")
        self._head = self._next[self._head]

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node != _NONE:
            yield self._values[node]
            node = self._next[node]


class IndexedDoublyLinkedList:
    """Doubly linked list whose nodes are addressed by insertion number (from 1)."""

    def __init__(self) -> None:
        self._values: list[Any] = [None, None]
        self._left = [_HEAD, _HEAD]
        self._right = [_TAIL, _TAIL]
        self._removed: set[int] = set()

    def _node(self, k: int) -> int:
        node = k + 1
        if not 2 <= node < len(self._values):
            raise IndexError(f"no node was inserted as number {k}")
        if node in self._removed:
            raise IndexError(f"node {k} was removed")
        return node

    def _link_after(self, node: int, value: Any) -> None:
        new = len(self._values)
        self._values.append(value)
        self._right.append(self._right[node])
        self._left.append(node)
        self._left[self._right[node]] = new
        self._right[node] = new

    def push_left(self, value: Any) -> None:
        """Insert ``value`` at the left end."""
        self._link_after(_HEAD, value)

    def push_right(self, value: Any) -> None:
        """Insert ``value`` at the right end."""
        self._link_after(self._left[_TAIL], value)

    def remove(self, k: int) -> None:
        """Remove the ``k``-th inserted node."""
        node = self._node(k)
        self._left[self._right[node]] = self._left[node]
        self._right[self._left[node]] = self._right[node]
        self._removed.add(node)

    def insert_left(self, k: int, value: Any) -> None:
        """Insert ``value`` immediately left of the ``k``-th inserted node."""
        self._link_after(self._left[self._node(k)], value)

    def insert_right(self, k: int, value: Any) -> None:
        """Insert ``value`` immediately right of the ``k``-th inserted node."""
        self._link_after(self._node(k), value)

    def __iter__(self) -> Iterator[Any]:
        node = self._right[_HEAD]
        while node != _TAIL:
            yield self._values[node]
            node = self._right[node]


def _parse(command: str) -> tuple[str, list[int]]:
    name, *args = command.split()
    return name, [int(arg) for arg in args]


def run_stack_commands(commands: Iterable[str]) -> list[int | bool]:
    """Run ``push x``/``pop``/``empty``/``query`` commands on a stack.

    Returns one result per ``empty`` (a bool) or ``query`` (the top value).
    """
    stack: list[int] = []
    results: list[int | bool] = []
    for command in commands:
        name, args = _parse(command)
        if name == "push":
            stack.append(args[0])
        elif name == "pop":
            if not stack:
                raise IndexError("pop from empty stack")
            stack.pop()
        elif name == "empty":
            results.append(not stack)
        elif name == "query":
            if not stack:
                raise IndexError("query on empty stack")
            results.append(stack[-1])
        else:
            raise ValueError(f"unknown command: {command!r}")
    return results


def run_queue_commands(commands: Iterable[str]) -> list[int | bool]:
    """Run ``push x``/``pop``/``empty``/``query`` commands on a FIFO queue.

    Returns one result per ``empty`` (a bool) or ``query`` (the front value).
    """
    queue: deque[int] = deque()
    results: list[int | bool] = []
    for command in commands:
        name, args = _parse(command)
        if name == "push":
            queue.append(args[0])
        elif name == "pop":
            if not queue:
                raise IndexError("pop from empty queue")
            queue.popleft()
        elif name == "empty":
            results.append(not queue)
        elif name == "query":
            if not queue:
                raise IndexError("query on empty queue")
            results.append(queue[0])
        else:
            raise ValueError(f"unknown command: {command!r}")
    return results


def previous_smaller(values: Iterable[int]) -> list[int]:
    """For each value, return the nearest strictly smaller value to its left, or -1."""
    stack: list[int] = []
    result = []
    for value in values:
        while stack and stack[-1] >= value:
            stack.pop()
        result.append(stack[-1] if stack else -1)
        stack.append(value)
    return result


def _window_best(
    values: Sequence[int], k: int, dominated: Callable[[int, int], bool]
) -> list[int]:
    window: deque[int] = deque()
    best = []
    for i, value in enumerate(values):
        if window and i - k + 1 > window[0]:
            window.popleft()
        while window and dominated(values[window[-1]], value):
            window.pop()
        window.append(i)
        if i >= k - 1:
            best.append(values[window[0]])
    return best


def sliding_window_extremes(values: Sequence[int], k: int) -> tuple[list[int], list[int]]:
    """Return the minimum and maximum of every window of ``k`` consecutive values."""
    if k < 1:
        raise ValueError("window size must be positive")
    values = list(values)
    return _window_best(values, k, operator.ge), _window_best(values, k, operator.le)