"""Exceptions raised at the public call boundary."""


class InvalidArgumentError(ValueError):
    """Raised when a key or date argument is missing or malformed."""
