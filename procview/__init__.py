"""Live resource history for a single watched process."""

__version__ = "0.3.0"
