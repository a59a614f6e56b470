"""A bounded integer stack as used by the push_swap puzzle."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class Stack:
    """A stack of fixed capacity.

    ``items`` holds the values from the bottom (index 0) to the top (last).
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self.items: list[int] = []

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[int]:
        """Iterate from the bottom of the stack to its top."""
        return iter(self.items)

    def __repr__(self) -> str:
        return f"Stack(capacity={self.capacity}, items={self.items!r})"

    def is_empty(self) -> bool:
        return not self.items

    def is_full(self) -> bool:
        return len(self.items) == self.capacity

    def push(self, value: int) -> None:
        """Put a value on top; a full stack silently ignores it."""
        if not self.is_full():
            self.items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self.items:
            raise IndexError("pop from empty stack")
        return self.items.pop()

    def is_sorted(self) -> bool:
        """True when values grow from the top down to the bottom."""
        return all(lower >= upper for lower, upper in zip(self.items, self.items[1:]))

    def max(self) -> int:
        """Largest value among the elements below the top.

        The bottom element is always considered; the top element is only
        considered when it is the sole element.
        """
        if not self.items:
            raise ValueError("max of empty stack")
        return max(self.items[:-1], default=self.items[0])

    def swap(self) -> None:
        """Exchange the two topmost values; fewer than two is a no-op."""
        if len(self.items) >= 2:
            self.items[-1], self.items[-2] = self.items[-2], self.items[-1]

    def rotate(self) -> None:
        """Move the top value to the bottom."""
        if self.items:
            self.items.insert(0, self.items.pop())

    def reverse_rotate(self) -> None:
        """Move the bottom value to the top."""
        if self.items:
            self.items.append(self.items.pop(0))


def fill_stack(values: Iterable[int]) -> Stack:
    """Build a full stack whose top is the first of ``values``."""
    values = list(values)
    stack = Stack(len(values))
    for value in reversed(values):
        stack.push(value)
    return stack