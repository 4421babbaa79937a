"""Console Drills: a temperature logger and a multiplication table trainer."""

__version__ = "1.0.0"
