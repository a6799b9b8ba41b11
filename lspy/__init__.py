"""A small Lisp interpreter: reader, environments, evaluator and command line."""

__version__ = "0.1.0"
__all__ = ["builtins", "cli", "env", "evaluator", "reader", "values"]