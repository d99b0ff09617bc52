"""Domain errors raised by the service layer.

Routes translate these to HTTP responses; services never import FastAPI.
"""


class NotFoundError(Exception):
    """The referenced row does not exist or is not visible to the caller."""


class ConflictError(Exception):
    """A uniqueness constraint rejected the write."""
