"""A desktop task manager with Tkinter windows and SQLite storage."""

__version__ = "0.1.0"
__all__ = ["__version__"]