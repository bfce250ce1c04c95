"""graphctl — graph engine and analysis CLI."""

__version__ = "0.1.0"
