"""A typing game in which words drift across the screen until they are typed."""

__version__ = "0.1.0"