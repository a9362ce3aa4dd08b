"""
Schemas
File: __init__.py

Purpose: Export the error taxonomy shared by every engine module.
"""

from .errors import (
    BatchCapacityException,
    BitLengthException,
    CommitmentError,
    CommitmentException,
    ConfigurationMismatchException,
    ErrorCodes,
    IncompleteInputError,
    RootMismatchException,
)

__all__ = [
    "ErrorCodes",
    "CommitmentError",
    "IncompleteInputError",
    "CommitmentException",
    "BatchCapacityException",
    "ConfigurationMismatchException",
    "BitLengthException",
    "RootMismatchException",
]
