"""Secret Shares: Shamir's Secret Sharing with compact text shares."""

from .shamir import Shamir, split, recover, verify_shares, chunk_secret
from .share import Share, format_share, parse_share
from .field import select_prime, modulo, build_inverse_table, InverseTable, PRIMES
from .codec import convert_base, max_encoded_length, CHARS, DECIMAL, PAD_CHAR
from .rng import RandomGenerator, SecretsGenerator, UrandomGenerator
from .errors import (
    ShamirError, RangeError, ConfigurationError, MalformedShareError,
    IncompatibleSharesError, InsufficientSharesError, DuplicateShareError,
    EmptyInputError,
)

__version__ = '1.0.0'

__all__ = [
    'Shamir', 'split', 'recover', 'verify_shares', 'chunk_secret',
    'Share', 'format_share', 'parse_share',
    'select_prime', 'modulo', 'build_inverse_table', 'InverseTable', 'PRIMES',
    'convert_base', 'max_encoded_length', 'CHARS', 'DECIMAL', 'PAD_CHAR',
    'RandomGenerator', 'SecretsGenerator', 'UrandomGenerator',
    'ShamirError', 'RangeError', 'ConfigurationError', 'MalformedShareError',
    'IncompatibleSharesError', 'InsufficientSharesError', 'DuplicateShareError',
    'EmptyInputError',
]
