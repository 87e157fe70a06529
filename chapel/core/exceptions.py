# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Domain errors raised by services and repositories, mapped to HTTP in main.py."""


class ChapelError(Exception):
    """Base class for every error this service raises on purpose."""


class ValidationError(ChapelError):
    """Input the rotation cannot accept: a blank name, a null flag, or a write a table constraint refused."""


class StorageUnavailable(ChapelError):
    """The database could not be reached or failed mid-write."""
