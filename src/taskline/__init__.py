"""taskline: a line-oriented tracker for to-dos, deadlines and events."""

__version__ = "0.1.0"
