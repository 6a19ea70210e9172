"""Organisation chart person models, validation, SQL helpers and HS256 tokens."""

__version__ = "0.1.0"