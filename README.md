# pushswap

This package sorts a list of distinct integers with two stacks, `a` and `b`,
and a small set of instructions. It can also check whether an instruction
sequence really sorts a given input.

## Instructions

| Name  | Effect |
|-------|--------|
| `sa`  | swap the top two elements of `a` |
| `sb`  | swap the top two elements of `b` |
| `ss`  | `sa` and `sb` together |
| `pa`  | move the top of `b` onto `a` |
| `pb`  | move the top of `a` onto `b` |
| `ra`  | rotate `a` up: the top element goes to the bottom |
| `rb`  | rotate `b` up |
| `rr`  | `ra` and `rb` together |
| `rra` | rotate `a` down: the bottom element goes to the top |
| `rrb` | rotate `b` down |
| `rrr` | `rra` and `rrb` together |

The first argument is the top of stack `a`. Stack `a` is sorted when the
smallest value is on top. The input counts as solved when `a` is sorted and
`b` is empty.

## Installation

```
pip install .
```

## Solving

```
push-swap 3 2 5 1 4
```

The instructions are printed one per line. If the input is already sorted,
nothing is printed. Exactly three numbers are solved from a fixed table of
moves. Fewer than 200 numbers are solved by splitting `a` around its median
again and again. Larger inputs are solved with a binary radix sort.

Each argument must consist of digits, with an optional minus sign before
them. The value must lie between -2147483647 and 2147483647. No value may
appear twice. If any argument breaks these rules, `Error` is written to
standard error and the exit status is 1. With no arguments the command does
nothing.

## Checking

```
push-swap 3 2 5 1 4 | push-swap-checker 3 2 5 1 4
```

`push-swap-checker` reads instructions from standard input, one per line. It
runs them on the given numbers. It prints `OK` if `a` ends sorted and `b`
ends empty, and `KO` otherwise. Every line must end with a newline. An
unknown instruction or a bad number makes the command write `Error` to
standard error and exit with status 1.

## Library use

```python
from pushswap.sorting import solve
from pushswap.checker import check

moves = solve([3, 2, 5, 1, 4])
print(check(["3", "2", "5", "1", "4"], [m + "\n" for m in moves]))  # True
```

- `pushswap.parsing.parse_input` validates argument strings. It raises
  `InputError` for bad input.
- `pushswap.stack.Stack` is a bounded stack. `fill_stack` builds one with its
  first value on top.
- `pushswap.operations.Machine` applies the instructions to a pair of stacks.
  It has one method per instruction, and `execute(name)` raises
  `UnknownInstructionError` for an unknown name. Pass an `emit` callable to
  record each instruction as it runs.
- `pushswap.push_swap.run` returns the solving instructions for a list of
  argument strings.