"""Two-stack integer sorting with a restricted instruction set, plus a checker."""

__version__ = "0.1.0"
__all__ = ["stack", "operations", "parsing", "sorting", "push_swap", "checker"]