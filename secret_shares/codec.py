"""
Base conversion between decimal and the compact share alphabet.

Field values and header fields are written in a 45-symbol alphabet and
left-padded to a fixed width, so a share can be sliced positionally
without delimiters.

Author: secret-shares contributors
Date: 2026-10-17
"""

# Calculation base
DECIMAL = '0123456789'

# Symbols used in share strings
CHARS = '0123456789abcdefghijklmnopqrstuvwxyz.,:;!?*#%'

# Marks trailing bytes of the last chunk that are not part of the secret
PAD_CHAR = '='


def convert_base(number: str, from_alphabet: str, to_alphabet: str) -> str:
    """
    Convert a digit string between two alphabets.

    Python integers are arbitrary precision, so no intermediate value
    can overflow regardless of how long the input is.

    Args:
        number: Digits in from_alphabet, most significant first
        from_alphabet: Source symbols, index = digit value
        to_alphabet: Target symbols, index = digit value

    Returns:
        The same number written in to_alphabet

    Raises:
        ValueError: If number is empty or uses a symbol outside from_alphabet
    """
    if not number:
        raise ValueError("Cannot convert an empty number")
    if from_alphabet == to_alphabet:
        return number

    from_base = len(from_alphabet)
    value = 0
    for symbol in number:
        digit = from_alphabet.find(symbol)
        if digit < 0:
            raise ValueError(f"Invalid symbol {symbol!r} for this alphabet")
        value = value * from_base + digit

    to_base = len(to_alphabet)
    if value < to_base:
        return to_alphabet[value]

    digits = []
    while value:
        value, digit = divmod(value, to_base)
        digits.append(to_alphabet[digit])
    return ''.join(reversed(digits))


def encode_int(value: int, width: int = 0) -> str:
    """Write a non-negative integer in CHARS, left-padded to width."""
    if value < 0:
        raise ValueError(f"Cannot encode negative value {value}")
    return convert_base(str(value), DECIMAL, CHARS).rjust(width, CHARS[0])


def decode_int(text: str) -> int:
    """Read an integer written in CHARS."""
    return int(convert_base(text, CHARS, DECIMAL))


def max_encoded_length(byte_width: int) -> int:
    """Number of CHARS symbols needed for the largest byte_width-byte value."""
    return len(encode_int((1 << (byte_width * 8)) - 1))
