"""Error hierarchy for digestify.

Every public error class inherits from DigestifyError. Each carries a
machine-readable ``code`` (from :class:`ErrorCode`), a human-readable
``message``, an optional structured ``context`` dict, and an optional
``cause`` (chained exception).

The text being hashed is never copied into ``message`` or ``context``;
scripts routinely hash tokens and passwords.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable error codes for every error digestify can raise."""

    ENCODING_ERROR = "ENCODING_ERROR"
    INPUT_TYPE_ERROR = "INPUT_TYPE_ERROR"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class DigestifyError(Exception):
    """Base exception for all digestify errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` (or any string) identifying the
        error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Structured diagnostic detail.  Keys are documented per subclass.
    cause:
        The underlying exception, if this error wraps another.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


# ---------------------------------------------------------------------------
# Input errors
# ---------------------------------------------------------------------------

class DigestifyEncodingError(DigestifyError):
    """The input could not be turned into UTF-8 bytes.

    Raised for strings holding lone surrogates.  No replacement bytes are
    ever substituted.

    Context keys: ``encoding``, ``start``, ``end``, ``reason``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
        code: str = ErrorCode.ENCODING_ERROR,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            context=context,
            cause=cause,
        )


class DigestifyInputTypeError(DigestifyEncodingError):
    """The input was not a ``str`` (e.g. ``bytes`` or ``None``).

    Context keys: ``expected``, ``received``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            message=message,
            context=context,
            cause=cause,
            code=ErrorCode.INPUT_TYPE_ERROR,
        )
