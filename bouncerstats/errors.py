"""Errors shown directly to the person requesting a chart."""


class ValidationError(Exception):
    """Bad request input: the message is safe to show to the requester."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


__all__ = ["ValidationError"]
