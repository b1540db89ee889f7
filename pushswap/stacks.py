"""The two push_swap stacks and the operations allowed on them."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass
from enum import Enum
from itertools import pairwise
from typing import Callable, Iterable, Iterator, Optional, TextIO, Union


@dataclass(eq=False)
class Item:
    """A value on a stack, with its rank among all values (-1 until ranked)."""

    data: int
    rank: int = -1


def _as_item(value: Union[Item, int]) -> Item:
    return value if isinstance(value, Item) else Item(value)


class Stack:
    """A stack of items; iteration runs from the top down."""

    def __init__(self, values: Optional[Iterable[Union[Item, int]]] = None) -> None:
        self._items: deque[Item] = deque(_as_item(v) for v in values or ())

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"

    def push(self, item: Union[Item, int]) -> None:
        """Put an item on top."""
        self._items.appendleft(_as_item(item))

    def pop(self) -> Item:
        """Take the top item off; raises IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.popleft()

    def append(self, item: Union[Item, int]) -> None:
        """Put an item at the bottom."""
        self._items.append(_as_item(item))

    def swap(self) -> None:
        """Exchange the two top items; nothing happens with fewer than two."""
        if len(self._items) >= 2:
            self._items[0], self._items[1] = self._items[1], self._items[0]

    def rotate(self) -> None:
        """Move the top item to the bottom."""
        if len(self._items) >= 2:
            self._items.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom item to the top."""
        if len(self._items) >= 2:
            self._items.rotate(1)

    def values(self) -> list[int]:
        """The values from top to bottom."""
        return [item.data for item in self._items]

    def is_sorted(self) -> bool:
        """True when values never decrease from top to bottom."""
        return all(a.data <= b.data for a, b in pairwise(self._items))


class Operation(Enum):
    """The instructions of the push_swap language."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"


def _transfer(src: Stack, dst: Stack) -> None:
    if len(src):
        dst.push(src.pop())


_ACTIONS: dict[Operation, Callable[["PushSwap"], None]] = {
    Operation.SA: lambda ps: ps.a.swap(),
    Operation.SB: lambda ps: ps.b.swap(),
    Operation.SS: lambda ps: (ps.a.swap(), ps.b.swap()),
    Operation.PA: lambda ps: _transfer(ps.b, ps.a),
    Operation.PB: lambda ps: _transfer(ps.a, ps.b),
    Operation.RA: lambda ps: ps.a.rotate(),
    Operation.RB: lambda ps: ps.b.rotate(),
    Operation.RR: lambda ps: (ps.a.rotate(), ps.b.rotate()),
    Operation.RRA: lambda ps: ps.a.reverse_rotate(),
    Operation.RRB: lambda ps: ps.b.reverse_rotate(),
    Operation.RRR: lambda ps: (ps.a.reverse_rotate(), ps.b.reverse_rotate()),
}


class PushSwap:
    """Stacks a and b; every operation is performed, written out and recorded."""

    def __init__(
        self,
        values: Optional[Iterable[Union[Item, int]]] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self._out = out
        self.operations: list[Operation] = []

    def apply(self, op: Union[Operation, str]) -> None:
        """Perform an operation and write its name on its own line."""
        op = Operation(op)
        _ACTIONS[op](self)
        self.operations.append(op)
        (sys.stdout if self._out is None else self._out).write(op.value + "\n")

    def sa(self) -> None:
        """Swap the top two of a."""
        self.apply(Operation.SA)

    def sb(self) -> None:
        """Swap the top two of b."""
        self.apply(Operation.SB)

    def ss(self) -> None:
        """Swap the top two of both stacks."""
        self.apply(Operation.SS)

    def pa(self) -> None:
        """Move the top of b onto a."""
        self.apply(Operation.PA)

    def pb(self) -> None:
        """Move the top of a onto b."""
        self.apply(Operation.PB)

    def ra(self) -> None:
        """Rotate a upwards."""
        self.apply(Operation.RA)

    def rb(self) -> None:
        """Rotate b upwards."""
        self.apply(Operation.RB)

    def rr(self) -> None:
        """Rotate both stacks upwards."""
        self.apply(Operation.RR)

    def rra(self) -> None:
        """Rotate a downwards."""
        self.apply(Operation.RRA)

    def rrb(self) -> None:
        """Rotate b downwards."""
        self.apply(Operation.RRB)

    def rrr(self) -> None:
        """Rotate both stacks downwards."""
        self.apply(Operation.RRR)