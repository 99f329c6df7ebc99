"""Shot tracking and goalie statistics for box lacrosse games."""

__version__ = "0.1.0"
