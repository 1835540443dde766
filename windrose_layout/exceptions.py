"""Errors raised by wind rose layouts."""


class InvalidInput(ValueError):
    """Raised when a dataset or direction list cannot be laid out."""
