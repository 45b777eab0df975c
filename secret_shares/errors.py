"""
Exceptions raised by the secret sharing scheme.

Every error derives from ShamirError, which is a ValueError, so callers
that only care about "bad input" can keep catching ValueError.

Author: secret-shares contributors
Date: 2026-10-17
"""


class ShamirError(ValueError):
    """Base class for all secret sharing errors."""


class RangeError(ShamirError):
    """Share count, threshold or byte width outside the supported range."""


class ConfigurationError(ShamirError):
    """The scheme constants are inconsistent (e.g. pad char in alphabet)."""


class MalformedShareError(ShamirError):
    """A share string cannot be parsed."""


class IncompatibleSharesError(ShamirError):
    """Shares disagree on width, threshold or body layout."""


class InsufficientSharesError(ShamirError):
    """Fewer shares than the declared threshold."""


class DuplicateShareError(ShamirError):
    """Two shares carry the same index."""


class EmptyInputError(ShamirError):
    """No shares were given."""
