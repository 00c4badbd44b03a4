"""User directory service exposing a follows graph over REST and GraphQL."""

__version__ = "1.0.0"
