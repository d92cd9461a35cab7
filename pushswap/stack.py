"""Stacks of numbered nodes and the machine that applies push-swap operations."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import IO, Iterable, Iterator


@dataclass(eq=False)
class Node:
    """One number on a stack, with the bookkeeping the sorter needs."""

    value: int
    index: int = 0
    cost: int = 0
    above_median: bool = False
    target: Node | None = field(default=None, repr=False)


class Stack:
    """A stack whose top is its first element."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._nodes: deque[Node] = deque(Node(value) for value in values)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"

    def top(self) -> Node | None:
        """Return the top node, or None when the stack is empty."""
        return self._nodes[0] if self._nodes else None

    def values(self) -> list[int]:
        """Return the numbers from top to bottom."""
        return [node.value for node in self._nodes]

    def swap(self) -> None:
        """Exchange the two top nodes; does nothing with fewer than two."""
        if len(self._nodes) < 2:
            return
        first = self._nodes.popleft()
        second = self._nodes.popleft()
        self._nodes.appendleft(first)
        self._nodes.appendleft(second)

    def rotate(self) -> None:
        """Move the top node to the bottom."""
        if len(self._nodes) < 2:
            return
        self._nodes.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom node to the top."""
        if len(self._nodes) < 2:
            return
        self._nodes.rotate(1)

    def push_to(self, other: Stack) -> None:
        """Move the top node onto the top of another stack."""
        if not self._nodes:
            return
        other._nodes.appendleft(self._nodes.popleft())

    def update_positions(self) -> None:
        """Record each node's position and whether it lies in the upper half."""
        median = len(self._nodes) // 2
        for position, node in enumerate(self._nodes):
            node.index = position
            node.above_median = position <= median

    def is_sorted(self) -> bool:
        """Tell whether the numbers rise from top to bottom."""
        values = self.values()
        return all(a <= b for a, b in zip(values, values[1:]))

    def smallest(self) -> Node | None:
        """Return the node holding the smallest number."""
        return min(self._nodes, key=lambda node: node.value, default=None)

    def biggest(self) -> Node | None:
        """Return the node holding the biggest number."""
        return max(self._nodes, key=lambda node: node.value, default=None)


class Machine:
    """Two stacks and the named operations on them, each one reported."""

    def __init__(self, values: Iterable[int] = (), out: IO[str] | None = None) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self.out = out
        self.operations: list[str] = []

    def _emit(self, name: str) -> None:
        self.operations.append(name)
        if self.out is not None:
            self.out.write(name + "\n")

    def sa(self) -> None:
        self.a.swap()
        self._emit("sa")

    def sb(self) -> None:
        self.b.swap()
        self._emit("sb")

    def ss(self) -> None:
        self.a.swap()
        self.b.swap()
        self._emit("ss")

    def ra(self) -> None:
        self.a.rotate()
        self._emit("ra")

    def rb(self) -> None:
        self.b.rotate()
        self._emit("rb")

    def rr(self) -> None:
        self.a.rotate()
        self.b.rotate()
        self._emit("rr")

    def rra(self) -> None:
        self.a.reverse_rotate()
        self._emit("rra")

    def rrb(self) -> None:
        self.b.reverse_rotate()
        self._emit("rrb")

    def rrr(self) -> None:
        self.a.reverse_rotate()
        self.b.reverse_rotate()
        self._emit("rrr")

    def pa(self) -> None:
        self.b.push_to(self.a)
        self._emit("pa")

    def pb(self) -> None:
        self.a.push_to(self.b)
        self._emit("pb")