"""
Exception hierarchy for ecverify.

Only *structural* problems are exceptions: a buffer of the wrong length
means the caller broke the calling contract.  A signature that simply
does not verify is a normal outcome and is reported as ``False``.
"""

from __future__ import annotations


class EcVerifyError(Exception):
    """Base class for every error raised by this package."""


# ── structural errors ───────────────────────────────────────────────────
class InvalidLengthError(EcVerifyError, ValueError):
    """A fixed-length buffer had the wrong number of bytes."""

    expected: int = 0

    def __init__(self, actual: int, expected: int | None = None, what: str = "buffer") -> None:
        if expected is not None:
            self.expected = expected
        self.actual = actual
        self.what = what
        super().__init__(
            f"{what} length is not {self.expected}: got {actual} bytes"
        )

    @classmethod
    def check(cls, data: bytes, what: str = "buffer") -> bytes:
        """Return *data* unchanged, or raise if its length is wrong."""
        if len(data) != cls.expected:
            raise cls(len(data), what=what)
        return data


class LengthIsNot32Error(InvalidLengthError):
    expected = 32


class LengthIsNot64Error(InvalidLengthError):
    expected = 64


class LengthIsNot96Error(InvalidLengthError):
    expected = 96


# ── protocol errors ─────────────────────────────────────────────────────
class AdaptorSecretError(EcVerifyError, ValueError):
    """
    Secret extraction refused.

    Raised when the standard signature, the adaptor signature or their
    relationship through the adaptor point fails to check out.  An
    extracted secret is only meaningful if all of them hold.
    """
