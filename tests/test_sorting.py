import itertools
import random

import pytest

from pushswap.operations import Machine
from pushswap.stack import Stack, fill_stack
from pushswap.sorting import (
    find_midpoint,
    finish_moving,
    insertion_sort,
    ismaxpoint_on_top_half,
    midpoint_sort,
    move_bigger_top,
    move_smaller_bottom,
    move_smaller_top,
    radix_sort,
    solve,
    special_case,
)

VALID = {"sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"}


def _machine(values):
    log = []
    values = list(values)
    machine = Machine(fill_stack(values), Stack(len(values)), log.append)
    return machine, log


def _replay(values, instructions):
    machine, _ = _machine(values)
    for name in instructions:
        machine.execute(name)
    return machine


def test_insertion_sort_returns_sorted_copy():
    data = [3, -1, 2, 0]
    result = insertion_sort(data)
    assert result == sorted(data)
    assert data == [3, -1, 2, 0]


def test_find_midpoint_is_median():
    stack = fill_stack([4, 1, 3, 2, 5])
    assert find_midpoint(stack, 0) == 3


def test_find_midpoint_from_chunk_start():
    stack = fill_stack([4, 1, 3, 2, 5])
    chunk = sorted(stack.items[2:])
    assert find_midpoint(stack, 2) == chunk[len(chunk) // 2]


def test_move_smaller_top():
    machine, log = _machine([1, 2, 5, 4, 3])
    move_smaller_top(machine, 3)
    assert list(machine.a) == [3, 4, 5]
    assert sorted(machine.b) == [1, 2]
    assert log == ["pb", "pb"]


def test_move_smaller_bottom():
    machine, log = _machine([5, 6, 2, 1])
    move_smaller_bottom(machine, 3)
    assert sorted(machine.b) == [1, 2]
    assert sorted(machine.a) == [5, 6]
    assert log == ["rra", "pb", "rra", "pb"]


def test_finish_moving_pushes_smaller_values():
    machine, log = _machine([6, 1, 5, 2])
    finish_moving(machine, 3, 1)
    assert sorted(machine.b) == [1, 2]
    assert sorted(machine.a) == [5, 6]
    assert set(log) <= {"pb", "ra"}


def test_ismaxpoint_on_top_half():
    assert ismaxpoint_on_top_half(fill_stack([9, 1, 2, 3]), 9) is True
    assert ismaxpoint_on_top_half(fill_stack([1, 2, 3, 9]), 9) is False


def test_move_bigger_top_rotates_up():
    a = Stack(4)
    machine = Machine(a, fill_stack([1, 9, 2, 3]), (log := []).append)
    move_bigger_top(machine, 9)
    assert list(machine.a) == [9]
    assert 9 not in list(machine.b)
    assert "rb" in log and "rrb" not in log
    assert log[-1] == "pa"


def test_move_bigger_top_rotates_down():
    machine = Machine(Stack(4), fill_stack([1, 2, 3, 9]), (log := []).append)
    move_bigger_top(machine, 9)
    assert list(machine.a) == [9]
    assert "rrb" in log and "rb" not in log


@pytest.mark.parametrize("perm", list(itertools.permutations([1, 2, 3])))
def test_special_case_sorts_three(perm):
    instructions = special_case(fill_stack(perm))
    assert len(instructions) <= 2
    assert _replay(perm, instructions).a.is_sorted()


def test_special_case_already_sorted():
    assert special_case(fill_stack([1, 2, 3])) == []


@pytest.mark.parametrize("values", [[5, 4, 3, 2, 1], [2, 5, 1, 4, 3, 6]])
def test_midpoint_sort_direct(values):
    machine, log = _machine(values)
    midpoint_sort(machine)
    assert machine.a.is_sorted()
    assert machine.b.is_empty()
    assert sorted(machine.a) == sorted(values)
    assert set(log) <= VALID


def test_radix_sort_leaves_ranks_in_order():
    values = [40, -3, 17, 8, 100, 2]
    machine, log = _machine(values)
    radix_sort(machine)
    assert list(machine.a) == list(range(len(values) - 1, -1, -1))
    assert machine.b.is_empty()
    assert set(log) <= {"ra", "pb", "pa"}


def test_solve_two_values():
    assert solve([2, 1]) == ["sa"]


def test_solve_sorted_input_needs_nothing():
    assert solve([1, 2, 3, 4, 5]) == []
    assert solve([7]) == []


@pytest.mark.parametrize(
    "perm",
    list(itertools.permutations([1, 2, 3, 4])) + list(itertools.permutations([1, 2, 3, 4, 5])),
)
def test_solve_small_permutations(perm):
    instructions = solve(perm)
    machine = _replay(perm, instructions)
    assert machine.a.is_sorted()
    assert machine.b.is_empty()


@pytest.mark.parametrize("size, seed", [(10, 1), (50, 2), (100, 3)])
def test_solve_random_midpoint(size, seed):
    values = random.Random(seed).sample(range(-1000, 1000), size)
    instructions = solve(values)
    machine = _replay(values, instructions)
    assert machine.a.is_sorted()
    assert machine.b.is_empty()
    assert sorted(machine.a) == sorted(values)


def test_solve_random_radix():
    values = random.Random(7).sample(range(-100000, 100000), 200)
    instructions = solve(values)
    assert set(instructions) <= {"ra", "pb", "pa"}
    machine = _replay(values, instructions)
    assert machine.a.is_sorted()
    assert machine.b.is_empty()