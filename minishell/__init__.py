"""Command-tree execution with pipes and redirections, environment handling, PATH lookup, printf and string utilities."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "numbers",
    "strings",
    "output",
    "printf",
    "linereader",
    "environment",
    "pathsearch",
    "executor",
]