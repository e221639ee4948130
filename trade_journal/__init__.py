"""Trade journal analytics: derived trade fields and performance aggregation."""

__version__ = "0.1.0"
