"""
Reconstructor
Recover P(0) from k points by Lagrange interpolation.

For identifiers x_0..x_{k-1} the basis polynomial L_i evaluated at 0 is

    L_i(0) = prod_{j != i} x_j / (x_j - x_i)

so the secret is sum_i L_i(0) * y_i (mod p). The division is a modular
inverse, which only exists when no two identifiers coincide modulo p.

There is no built-in verifiability: shares from different polynomials,
wrong identifiers or too few points all interpolate to *some* field
element, silently. Callers who need authenticity must add it on top.
"""

from typing import Iterable, Sequence

import gmpy2

from keysplit.errors import DegenerateInputError, InvalidParameterError


def _inverse(value: int, prime: int) -> int:
    try:
        return int(gmpy2.invert(value, prime))
    except ZeroDivisionError:
        raise DegenerateInputError(f"{value} has no inverse modulo {prime}") from None


def lagrange_coefficients(identifiers: Sequence[int], prime: int) -> list[int]:
    """
    Compute the Lagrange basis at 0 for a set of identifiers.

    Args:
        identifiers: Participant identifiers x_0..x_{k-1}.
        prime: The field modulus.

    Returns:
        lambda_0..lambda_{k-1}, each in [0, prime).

    Raises:
        InvalidParameterError: If no identifiers are given or prime < 2.
        DegenerateInputError: If two identifiers are congruent modulo prime.
    """
    if not identifiers:
        raise InvalidParameterError("Need at least one identifier")
    if prime < 2:
        raise InvalidParameterError(f"Modulus must be at least 2, got {prime}")

    coefficients = []
    for i, xi in enumerate(identifiers):
        lam = 1
        for j, xj in enumerate(identifiers):
            if i == j:
                continue
            diff = (xj - xi) % prime
            if diff == 0:
                raise DegenerateInputError(
                    f"Identifiers {xi} and {xj} collide modulo {prime}",
                    identifiers=(xi, xj),
                )
            lam = (lam * xj * _inverse(diff, prime)) % prime
        coefficients.append(lam)
    return coefficients


def reconstruct(coefficients: Sequence[int], shares: Sequence[int], prime: int) -> int:
    """
    Combine shares with their Lagrange coefficients: sum(lambda_i * y_i) mod p.

    Raises:
        InvalidParameterError: If the two sequences differ in length.
    """
    if len(coefficients) != len(shares):
        raise InvalidParameterError(
            f"Got {len(shares)} shares for {len(coefficients)} Lagrange coefficients"
        )

    total = 0
    for lam, y in zip(coefficients, shares):
        total += lam * y
    return total % prime


def recover_secret(points: Iterable, prime: int) -> int:
    """
    Recover the secret from (identifier, value) points.

    Accepts Share objects or plain pairs. Uses every point given, so
    pass exactly the subset to interpolate over.
    """
    identifiers = []
    values = []
    for x, y in points:
        identifiers.append(x)
        values.append(y)
    return reconstruct(lagrange_coefficients(identifiers, prime), values, prime)
