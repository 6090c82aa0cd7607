from _macresforks.cli import main

__all__ = ["main"]
