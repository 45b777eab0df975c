"""
Share record and its textual format.

Format: <width><threshold><index><body>

    width      1 hex digit, bytes per secret chunk
    threshold  CHARS, left-padded with '0' to L symbols
    index      CHARS, left-padded with '0' to L symbols
    body       one L-symbol field per chunk

L = max_encoded_length(width). If the secret length is not a multiple of
the width, the left padding of the last field is shortened by the number
of missing bytes and that many PAD_CHAR symbols are appended, e.g. a
3-byte secret split with 2-byte chunks ends its shares with '='.

Author: secret-shares contributors
Date: 2026-10-17
"""

from .codec import PAD_CHAR, decode_int, encode_int, max_encoded_length
from .errors import MalformedShareError
from .field import PRIMES


class Share:
    """One share: header fields plus one field value per secret chunk."""

    def __init__(self, byte_width: int, threshold: int, index: int,
                 values: list, padding: int = 0):
        self.byte_width = byte_width
        self.threshold = threshold
        self.index = index
        self.values = list(values)
        self.padding = padding

    @property
    def prime(self) -> int:
        return PRIMES[self.byte_width]

    @property
    def field_width(self) -> int:
        return max_encoded_length(self.byte_width)

    @property
    def layout(self) -> tuple:
        """Fields that must match across shares of the same secret."""
        return self.byte_width, self.threshold, len(self.values), self.padding

    @property
    def secret_size(self) -> int:
        return len(self.values) * self.byte_width - self.padding

    def to_dict(self) -> dict:
        return {
            'byte_width': self.byte_width,
            'prime': self.prime,
            'threshold': self.threshold,
            'index': self.index,
            'chunks': len(self.values),
            'padding': self.padding,
            'secret_size': self.secret_size,
        }

    def __eq__(self, other):
        if not isinstance(other, Share):
            return NotImplemented
        return (self.layout, self.index, self.values) == (other.layout, other.index, other.values)

    def __repr__(self):
        return (f"Share(byte_width={self.byte_width}, threshold={self.threshold}, "
                f"index={self.index}, chunks={len(self.values)}, padding={self.padding})")


def format_share(share: Share) -> str:
    """Serialize a Share to its share string."""
    width = share.field_width
    parts = [
        format(share.byte_width, 'x'),
        encode_int(share.threshold, width),
        encode_int(share.index, width),
    ]

    last = len(share.values) - 1
    for n, value in enumerate(share.values):
        if n == last and share.padding:
            parts.append(encode_int(value, width - share.padding))
            parts.append(PAD_CHAR * share.padding)
        else:
            parts.append(encode_int(value, width))

    return ''.join(parts)


def parse_share(share_str: str) -> Share:
    """
    Parse a share string.

    Returns: Share
    Raises MalformedShareError if the header or body is invalid.
    """
    text = share_str.strip()
    if not text:
        raise MalformedShareError("Empty share")

    try:
        byte_width = int(text[0], 16)
    except ValueError:
        raise MalformedShareError(f"Invalid width digit {text[0]!r}") from None
    if byte_width not in PRIMES:
        raise MalformedShareError(f"Unsupported chunk width: {byte_width} bytes")

    width = max_encoded_length(byte_width)
    header_len = 1 + 2 * width
    if len(text) < header_len:
        raise MalformedShareError(
            f"Share too short: header needs {header_len} symbols, got {len(text)}"
        )

    body = text[header_len:]
    stripped = body.rstrip(PAD_CHAR)
    padding = len(body) - len(stripped)

    try:
        threshold = decode_int(text[1:1 + width])
        index = decode_int(text[1 + width:header_len])
        values = [decode_int(stripped[i:i + width]) for i in range(0, len(stripped), width)]
    except ValueError as e:
        raise MalformedShareError(f"Invalid share symbols: {e}") from e

    prime = PRIMES[byte_width]
    if threshold < 2:
        raise MalformedShareError(f"Invalid threshold {threshold}")
    if not 1 <= index < prime:
        raise MalformedShareError(f"Share index {index} outside [1, {prime})")
    if padding >= byte_width:
        raise MalformedShareError(
            f"Padding of {padding} bytes does not fit {byte_width}-byte chunks"
        )
    if padding and not values:
        raise MalformedShareError("Padding without share data")

    # only the last field may be short, and only by its shortened padding
    remainder = len(stripped) % width
    if remainder and (not padding or remainder < width - padding):
        raise MalformedShareError(
            f"Share body length {len(stripped)} is not a multiple of {width}"
        )
    if any(value >= prime for value in values):
        raise MalformedShareError(f"Share value outside field of prime {prime}")

    return Share(byte_width, threshold, index, values, padding)

