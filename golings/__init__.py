"""Interactive Go exercises: list, run, verify and watch them from the command line."""

__version__ = "0.1.0"