"""Two-stack sorting puzzle: stacks and instructions, solver, checker and number generator."""

__version__ = "0.1.0"
__all__ = ["__version__"]