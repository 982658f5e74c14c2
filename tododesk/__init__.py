"""A multi-user to-do list and calendar for the terminal, kept in a text file."""

__version__ = "0.1.0"