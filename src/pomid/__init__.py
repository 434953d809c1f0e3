"""Query and edit Maven project identities."""

__version__ = "0.1.0"
