"""Assessment survey analytics: score records, opinions, and insights."""

__version__ = "0.1.0"
