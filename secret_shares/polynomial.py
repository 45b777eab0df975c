"""
Polynomial operations over GF(p).

Split side: random coefficients and Horner evaluation.
Recover side: Lagrange weights for interpolation at x = 0.

Author: secret-shares contributors
Date: 2026-10-17
"""

from .errors import DuplicateShareError
from .field import modulo


def generate_coefficients(threshold: int, prime: int, generator) -> list:
    """
    Draw threshold - 1 random field elements.

    Each value comes from the generator with zero rejected, then is
    reduced modulo prime. The chunk value is appended by the caller as
    the constant term.
    """
    coefficients = []
    for _ in range(threshold - 1):
        random = 0
        while random < 1:
            random = abs(generator.get_random_int())
        coefficients.append(modulo(random, prime))
    return coefficients


def evaluate(x: int, coefficients: list, prime: int) -> int:
    """
    Evaluate a polynomial at x using Horner's method in GF(prime).

    Coefficients are ordered highest degree first, so
    11 + 7x - 5x^2 is given as [-5, 7, 11] and computed as
    11 + x * (7 + x * -5).
    """
    y = 0
    for c in coefficients:
        y = modulo(x * y + c, prime)
    return y


def reverse_coefficients(xs: list, threshold: int, inverses) -> list:
    """
    Lagrange basis weights at x = 0 for the first `threshold` x values.

    weight_i = prod over j != i of (-x_j) * inv(x_i - x_j) mod p

    Args:
        xs: Share indices
        threshold: How many of xs to use
        inverses: InverseTable for the field prime

    Returns:
        One weight per used share

    Raises:
        DuplicateShareError: If a weight is zero, i.e. two indices coincide
    """
    prime = inverses.prime
    weights = []
    for i in range(threshold):
        temp = 1
        for j in range(threshold):
            if i != j:
                temp = modulo(-temp * xs[j] * inverses.inverse(xs[i] - xs[j]), prime)

        if temp == 0:
            raise DuplicateShareError(
                "Repeated share detected - cannot compute reverse coefficients"
            )
        weights.append(temp)
    return weights
