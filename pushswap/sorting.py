"""Sorting stack a with the push_swap operations."""

from __future__ import annotations

from pushswap.stacks import PushSwap, Stack

LLONG_MAX = 2**63 - 1


def assign_ranks(stacks: PushSwap) -> None:
    """Give every item on a its position in ascending order of value.

    Equal values are ranked in the order they stand on the stack.
    """
    for rank, item in enumerate(sorted(stacks.a, key=lambda it: it.data)):
        item.rank = rank


def sort_two(stacks: PushSwap) -> None:
    """Sort a stack of two values."""
    first, second = stacks.a.values()[:2]
    if first > second:
        stacks.sa()


def sort_three(stacks: PushSwap) -> None:
    """Sort a stack of three values with at most two operations."""
    first, second, third = stacks.a.values()[:3]
    if first > second:
        if second > third:
            stacks.sa()
            stacks.rra()
        elif first > third:
            stacks.ra()
        else:
            stacks.sa()
    elif second > third:
        if first > third:
            stacks.rra()
        else:
            stacks.sa()
            stacks.ra()


def find_mins(stack: Stack) -> tuple[int, int]:
    """The smallest and second smallest distinct values.

    A missing value is reported as LLONG_MAX.
    """
    min1 = min2 = LLONG_MAX
    for value in stack.values():
        if value < min1:
            min2, min1 = min1, value
        elif value < min2 and value != min1:
            min2 = value
    return min1, min2


def find_position(stack: Stack, value: int) -> int:
    """Index from the top of the first item holding value, or len(stack)."""
    return next(
        (index for index, data in enumerate(stack.values()) if data == value),
        len(stack),
    )


def _bring_to_top(stacks: PushSwap, value: int) -> None:
    rotate = stacks.ra if find_position(stacks.a, value) <= len(stacks.a) // 2 else stacks.rra
    while stacks.a.values()[0] != value:
        rotate()


def _extract_mins(stacks: PushSwap) -> None:
    min1, min2 = find_mins(stacks.a)
    _bring_to_top(stacks, min1)
    stacks.pb()
    _bring_to_top(stacks, min2)
    stacks.pb()
    top, below = stacks.b.values()[:2]
    if top < below:
        stacks.sb()


def sort_five(stacks: PushSwap) -> None:
    """Sort a stack of five values."""
    _extract_mins(stacks)
    sort_three(stacks)
    top, below = stacks.b.values()[:2]
    if top > below:
        stacks.pa()
        stacks.pa()
    else:
        stacks.pa()
        stacks.sa()
        stacks.pa()


def sort_four(stacks: PushSwap) -> None:
    """Sort a stack of four values."""
    min1, _ = find_mins(stacks.a)
    while stacks.a.values()[0] != min1:
        stacks.ra()
    stacks.pb()
    sort_three(stacks)
    stacks.pa()


def _bit_count(num: int) -> int:
    bits = 0
    while 1 << bits <= num:
        bits += 1
    return bits


def _top_rank(stack: Stack) -> int:
    return next(iter(stack)).rank


def radix_sort(stacks: PushSwap) -> None:
    """Sort a by the bits of the ranks, lowest bit first."""
    shift_limit = _bit_count(len(stacks.a))
    for shift in range(shift_limit):
        for _ in range(len(stacks.a)):
            if _top_rank(stacks.a) & (1 << shift):
                stacks.ra()
            else:
                stacks.pb()
        if shift < shift_limit - 1:
            next_bit = 1 << (shift + 1)
            for _ in range(len(stacks.b)):
                if _top_rank(stacks.b) & next_bit:
                    stacks.pa()
                else:
                    stacks.rb()
        else:
            while len(stacks.b):
                stacks.pa()


def move_element_to_top(stacks: PushSwap, target_pos: int) -> None:
    """Rotate a the shorter way until the item at target_pos is on top."""
    if target_pos <= len(stacks.a) // 2:
        for _ in range(target_pos):
            stacks.ra()
    else:
        for _ in range(target_pos, len(stacks.a)):
            stacks.rra()


def find_max_digits(stack: Stack) -> int:
    """Number of decimal digits of the largest value; 0 for an empty stack or zero."""
    values = stack.values()
    if not values:
        return 0
    largest = abs(max(values))
    return len(str(largest)) if largest else 0


def sort_stacks(stacks: PushSwap) -> None:
    """Sort a, choosing the method by its size; a sorted stack is left alone."""
    if stacks.a.is_sorted():
        return
    size = len(stacks.a)
    if size == 2:
        sort_two(stacks)
    elif size == 3:
        sort_three(stacks)
    elif size == 4:
        sort_four(stacks)
    elif size == 5:
        sort_five(stacks)
    else:
        radix_sort(stacks)