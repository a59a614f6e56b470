"""Strategies that sort stack a using the push_swap instructions."""

from __future__ import annotations

from collections.abc import Iterable

from pushswap.operations import Machine, ok_sa
from pushswap.stack import Stack, fill_stack


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order."""
    return sorted(values)


def find_midpoint(stack: Stack, chunk_start: int) -> int:
    """Median of the stack values from ``chunk_start`` (bottom index) upwards."""
    chunk = insertion_sort(stack.items[chunk_start:])
    if not chunk:
        raise ValueError("midpoint of an empty chunk")
    return chunk[len(chunk) // 2]


def move_smaller_top(machine: Machine, mid_point: int) -> None:
    """Push values below ``mid_point`` from the top of a onto b."""
    a = machine.a
    while a.items and a.items[-1] < mid_point:
        machine.pb()


def move_smaller_bottom(machine: Machine, mid_point: int) -> None:
    """Bring values below ``mid_point`` up from the bottom of a and push them."""
    a = machine.a
    while a.items and a.items[0] < mid_point:
        machine.rra()
        machine.pb()


def finish_moving(machine: Machine, mid_point: int, nr_chunks: int) -> None:
    """Keep pushing smaller values to b, rotating a past the larger ones."""
    a, b = machine.a, machine.b
    while (len(a) - 2) > _trunc_div(len(b) - 1, nr_chunks):
        if a.items[-1] < mid_point:
            machine.pb()
        else:
            machine.ra()


def ismaxpoint_on_top_half(b: Stack, max_point: int) -> bool:
    """Whether ``max_point`` sits in the upper half of ``b``."""
    half = _trunc_div(len(b) - 1, 2)
    return max_point in b.items[half + 1:]


def move_bigger_top(machine: Machine, max_point: int) -> None:
    """Rotate b the shorter way until ``max_point`` is reached, then push to a."""
    b = machine.b
    rotate = machine.rb if ismaxpoint_on_top_half(b, max_point) else machine.rrb
    while b.items[-1] < max_point:
        rotate()
    machine.pa()


def midpoint_sort(machine: Machine) -> None:
    """Split a around its median repeatedly, then gather b back in order."""
    a, b = machine.a, machine.b
    if ok_sa(a):
        machine.sa()
    chunks = 1
    while len(a) > 2:
        mid_point = find_midpoint(a, 0)
        move_smaller_top(machine, mid_point)
        move_smaller_bottom(machine, mid_point)
        finish_moving(machine, mid_point, chunks)
        chunks += 1
    if ok_sa(a):
        machine.sa()
    while not b.is_empty():
        move_bigger_top(machine, b.max())


def _simplify_numbers(stack: Stack) -> None:
    ranks = {value: rank for rank, value in enumerate(insertion_sort(stack.items))}
    stack.items[:] = [ranks[value] for value in stack.items]


def radix_sort(machine: Machine) -> None:
    """Binary radix sort on the ranks of the values in a."""
    a, b = machine.a, machine.b
    _simplify_numbers(a)
    max_bits = a.max().bit_length()
    for bit in range(max_bits):
        for _ in range(a.capacity):
            if a.is_sorted():
                break
            if (a.items[-1] >> bit) & 1:
                machine.ra()
            else:
                machine.pb()
        while not b.is_empty():
            machine.pa()


def special_case(a: Stack) -> list[str]:
    """Instructions that sort a stack of exactly three values."""
    bottom, middle, top = a.items
    if bottom < middle and bottom < top and middle < top:
        return ["sa", "rra"]
    if bottom < middle and bottom > top and middle > top:
        return ["rra", "sa"]
    if bottom < middle and bottom < top and middle > top:
        return ["rra"]
    if bottom > middle and bottom > top and middle < top:
        return ["sa"]
    if bottom > middle and bottom < top and middle < top:
        return ["ra"]
    return []


def solve(values: Iterable[int]) -> list[str]:
    """Instructions that sort ``values``, the first of which is the top of a."""
    values = list(values)
    instructions: list[str] = []
    machine = Machine(fill_stack(values), Stack(len(values)), instructions.append)
    if not machine.a.is_sorted():
        if len(values) == 3:
            instructions.extend(special_case(machine.a))
        elif len(values) >= 200:
            radix_sort(machine)
        else:
            midpoint_sort(machine)
    return instructions