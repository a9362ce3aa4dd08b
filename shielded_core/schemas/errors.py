"""
Schemas - Error Taxonomy
File: errors.py

Purpose: Standard error taxonomy for the commitment engine.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.

Every operation in this package is a deterministic pure function, so no
error is ever retryable: calling again with the same inputs fails the same way.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes used across the engine."""

    # Input completeness (root not computable from supplied evidence)
    INCOMPLETE_INPUT = "INCOMPLETE_INPUT"

    # Caller errors
    PRECONDITION_VIOLATION = "PRECONDITION_VIOLATION"

    # Tree / hasher configuration errors
    CONFIGURATION_MISMATCH = "CONFIGURATION_MISMATCH"
    BIT_LENGTH_OVERFLOW = "BIT_LENGTH_OVERFLOW"

    # Verification
    ROOT_MISMATCH = "ROOT_MISMATCH"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class CommitmentError(BaseModel):
    """
    Base error model for structured error communication.

    Used by callers that layer a service on top of the engine and need to
    report a rejection without raising.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.PRECONDITION_VIOLATION],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )

    def to_exception(self) -> "CommitmentException":
        """Convert this error model to a raised exception."""
        return CommitmentException(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )


class IncompleteInputError(CommitmentError):
    """Error model for a root that cannot be computed from the supplied path."""

    code: str = Field(default=ErrorCodes.INCOMPLETE_INPUT)
    missing_levels: list[int] = Field(
        default_factory=list,
        description="Path levels whose entry was absent",
    )
    leaf_missing: bool = Field(default=False)


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class CommitmentException(Exception):
    """
    Base exception for all commitment engine errors.

    Carries structured error information and can be converted to
    CommitmentError models.
    """

    def __init__(
        self,
        message: str,
        code: str = "COMMITMENT_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> CommitmentError:
        """Convert this exception to a CommitmentError model."""
        return CommitmentError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class BatchCapacityException(CommitmentException):
    """Raised when a batch update does not fit the tree it addresses."""

    def __init__(
        self,
        message: str,
        index: int | None = None,
        batch_size: int | None = None,
        capacity: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if index is not None:
            full_details["index"] = index
        if batch_size is not None:
            full_details["batch_size"] = batch_size
        if capacity is not None:
            full_details["capacity"] = capacity
        super().__init__(
            message=message,
            code=ErrorCodes.PRECONDITION_VIOLATION,
            details=full_details,
            retryable=False,
        )


class ConfigurationMismatchException(CommitmentException):
    """Raised when path/defaults lengths or levels disagree with the tree height."""

    def __init__(
        self,
        message: str,
        height: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if height is not None:
            full_details["height"] = height
        super().__init__(
            message=message,
            code=ErrorCodes.CONFIGURATION_MISMATCH,
            details=full_details,
            retryable=False,
        )


class BitLengthException(CommitmentException):
    """Raised in strict mode when a bit expansion would drop set high bits."""

    def __init__(
        self,
        message: str,
        requested_bits: int | None = None,
        value_bits: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if requested_bits is not None:
            full_details["requested_bits"] = requested_bits
        if value_bits is not None:
            full_details["value_bits"] = value_bits
        super().__init__(
            message=message,
            code=ErrorCodes.BIT_LENGTH_OVERFLOW,
            details=full_details,
            retryable=False,
        )


class RootMismatchException(CommitmentException):
    """Raised when a proof does not reconstruct the root it claims."""

    def __init__(
        self,
        message: str,
        expected: str | None = None,
        computed: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if expected is not None:
            full_details["expected"] = expected
        if computed is not None:
            full_details["computed"] = computed
        super().__init__(
            message=message,
            code=ErrorCodes.ROOT_MISMATCH,
            details=full_details,
            retryable=False,
        )
