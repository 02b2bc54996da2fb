"""
Error management for maybe-monad.

This module provides the package's exception hierarchy with error codes,
severities and call-site context. Every error logs itself when created.
"""

import inspect
from enum import Enum
from typing import Dict, Any, Optional
from dataclasses import dataclass

from maybe_monad.utils.logging_utils import get_logger

logger = get_logger("maybe_monad.errors")


class ErrorSeverity(Enum):
    """Severity levels for errors."""

    CRITICAL = "CRITICAL"  # Programmer error, must not be caught and ignored
    ERROR = "ERROR"  # Operation rejected, caller can recover
    WARNING = "WARNING"


class ErrorCategory(Enum):
    """Categories for errors to help with grouping and filtering."""

    CONTRACT = "CONTRACT"
    COMPOSITION = "COMPOSITION"
    UNKNOWN = "UNKNOWN"


class ErrorCode(Enum):
    """
    Standard error codes.

    Format: CATEGORY_DESCRIPTION
    """

    CONTRACT_GET_ON_NOTHING = "CONTRACT_GET_ON_NOTHING"

    COMPOSITION_ARITY = "COMPOSITION_ARITY"
    COMPOSITION_SIGNATURE_MISMATCH = "COMPOSITION_SIGNATURE_MISMATCH"

    UNKNOWN_ERROR = "UNKNOWN_ERROR"

    @property
    def category(self) -> ErrorCategory:
        for category in ErrorCategory:
            if self.value.startswith(category.name):
                return category
        return ErrorCategory.UNKNOWN


@dataclass
class ErrorContext:
    """Where an error was raised: the first frame outside this package."""

    module: Optional[str] = None
    function: Optional[str] = None
    line_number: Optional[int] = None
    file_path: Optional[str] = None

    @classmethod
    def current(cls) -> "ErrorContext":
        """Build a context from the nearest frame outside ``maybe_monad``."""
        frame = inspect.currentframe()
        try:
            while frame is not None:
                module = frame.f_globals.get("__name__", "")
                if not module.startswith("maybe_monad"):
                    break
                frame = frame.f_back

            if frame is None:
                return cls()

            return cls(
                module=frame.f_globals.get("__name__"),
                function=frame.f_code.co_name,
                line_number=frame.f_lineno,
                file_path=frame.f_code.co_filename,
            )
        finally:
            # Break the frame reference cycle
            del frame


class MaybeError(Exception):
    """
    Base exception class for maybe-monad.

    Carries an error code, a severity and the call site that triggered it.
    """

    severity = ErrorSeverity.ERROR

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        context: Optional[ErrorContext] = None,
        **kwargs,
    ):
        """
        Initialize a MaybeError.

        Args:
            message: Error message
            code: Error code
            context: Error context information, captured from the caller if omitted
            **kwargs: Additional information attached to the error
        """
        self.message = message
        self.code = code
        self.context = context or ErrorContext.current()
        self.additional_info: Dict[str, Any] = dict(kwargs)

        super().__init__(f"{code.value}: {message}")

        self._log_error()

    def _log_error(self):
        """Log the error at the level matching its severity."""
        log_message = self._format_for_logging()

        if self.severity == ErrorSeverity.CRITICAL:
            logger.critical(log_message)
        elif self.severity == ErrorSeverity.ERROR:
            logger.error(log_message)
        else:
            logger.warning(log_message)

    def _format_for_logging(self) -> str:
        parts = [f"ERROR [{self.code.value}] ({self.severity.value}): {self.message}"]

        if self.context.module is not None:
            parts.append(
                f"Location: {self.context.module}.{self.context.function} "
                f"({self.context.file_path}:{self.context.line_number})"
            )

        for key, value in self.additional_info.items():
            parts.append(f"  {key}: {value}")

        return "\n".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the error to a dictionary for reporting."""
        result = {
            "code": self.code.value,
            "category": self.code.category.value,
            "message": self.message,
            "severity": self.severity.value,
            "context": {
                "module": self.context.module,
                "function": self.context.function,
                "line_number": self.context.line_number,
                "file_path": self.context.file_path,
            },
        }

        if self.additional_info:
            result["additional_info"] = {
                key: repr(value) for key, value in self.additional_info.items()
            }

        return result


class ContractViolationError(MaybeError, AssertionError):
    """A precondition of the API was broken by the caller."""

    severity = ErrorSeverity.CRITICAL

    def __init__(
        self, message: str, code: ErrorCode = ErrorCode.CONTRACT_GET_ON_NOTHING, **kwargs
    ):
        super().__init__(message, code=code, **kwargs)


class CompositionError(MaybeError, TypeError):
    """Functions cannot be lifted or composed as requested."""


class ArityError(CompositionError):
    """A callable does not take the number of arguments required."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.COMPOSITION_ARITY, **kwargs):
        super().__init__(message, code=code, **kwargs)


class SignatureMismatchError(CompositionError):
    """Declared result and argument types of composed functions do not line up."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.COMPOSITION_SIGNATURE_MISMATCH,
        **kwargs,
    ):
        super().__init__(message, code=code, **kwargs)
