"""The eleven push_swap instructions acting on a pair of stacks."""

from __future__ import annotations

from collections.abc import Callable

from pushswap.stack import Stack


class UnknownInstructionError(ValueError):
    """Raised for an instruction name that is not part of the set."""


class Machine:
    """Two stacks and the instructions that move values between them.

    Every instruction that is recorded is passed by name to ``emit``; with
    no ``emit`` the machine runs silently.
    """

    def __init__(
        self,
        a: Stack,
        b: Stack,
        emit: Callable[[str], None] | None = None,
    ) -> None:
        self.a = a
        self.b = b
        self.emit = emit

    def _record(self, name: str, record: bool = True) -> None:
        if record and self.emit is not None:
            self.emit(name)

    def sa(self, record: bool = True) -> None:
        if len(self.a) < 2:
            return
        self.a.swap()
        self._record("sa", record)

    def sb(self, record: bool = True) -> None:
        if len(self.b) < 2:
            return
        self.b.swap()
        self._record("sb", record)

    def ss(self) -> None:
        self.sa(False)
        self.sb(False)
        self._record("ss")

    def pa(self) -> None:
        if self.b.is_empty():
            return
        self.a.push(self.b.pop())
        self._record("pa")

    def pb(self) -> None:
        if self.a.is_empty():
            return
        self.b.push(self.a.pop())
        self._record("pb")

    def ra(self, record: bool = True) -> None:
        if self.a.is_empty():
            return
        self.a.rotate()
        self._record("ra", record)

    def rb(self, record: bool = True) -> None:
        if self.b.is_empty():
            return
        self.b.rotate()
        self._record("rb", record)

    def rr(self) -> None:
        self.ra(False)
        self.rb(False)
        self._record("rr")

    def rra(self, record: bool = True) -> None:
        if self.a.is_empty():
            return
        self.a.reverse_rotate()
        self._record("rra", record)

    def rrb(self, record: bool = True) -> None:
        if self.b.is_empty():
            return
        self.b.reverse_rotate()
        self._record("rrb", record)

    def rrr(self) -> None:
        self.rra(False)
        self.rrb(False)
        self._record("rrr")

    def execute(self, name: str) -> None:
        """Run the instruction called ``name``."""
        actions: dict[str, Callable[[], None]] = {
            "sa": self.sa,
            "sb": self.sb,
            "ss": self.ss,
            "pa": self.pa,
            "pb": self.pb,
            "ra": self.ra,
            "rb": self.rb,
            "rr": self.rr,
            "rra": self.rra,
            "rrb": self.rrb,
            "rrr": self.rrr,
        }
        try:
            action = actions[name]
        except KeyError:
            raise UnknownInstructionError(f"unknown instruction: {name!r}") from None
        action()


def _top_above_next(stack: Stack) -> bool:
    return len(stack) >= 2 and stack.items[-1] > stack.items[-2]


def _top_above_bottom(stack: Stack) -> bool:
    return not stack.is_empty() and stack.items[-1] > stack.items[0]


def ok_sa(a: Stack) -> bool:
    """Whether swapping the top of ``a`` brings it closer to order."""
    return _top_above_next(a)


def ok_sb(b: Stack) -> bool:
    return _top_above_next(b)


def ok_ra(a: Stack) -> bool:
    return _top_above_bottom(a)


def ok_rb(b: Stack) -> bool:
    return _top_above_bottom(b)


def ok_rra(a: Stack) -> bool:
    return _top_above_bottom(a)


def ok_rrb(b: Stack) -> bool:
    return _top_above_bottom(b)


def ok_ss(a: Stack, b: Stack) -> bool:
    return ok_sa(a) and ok_sb(b)


def ok_rr(a: Stack, b: Stack) -> bool:
    return ok_ra(a) and ok_rb(b)


def ok_rrr(a: Stack, b: Stack) -> bool:
    return ok_rra(a) and ok_rra(b)