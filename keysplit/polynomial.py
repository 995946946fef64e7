"""
Polynomial Splitter
Hide a secret as the constant term of a random polynomial.

A threshold-k sharing uses a polynomial of degree k-1:

    P(X) = a[0]*X^(k-1) + a[1]*X^(k-2) + ... + a[k-2]*X + a[k-1]

Coefficients are stored highest power first (Horner order), so the
secret is the last coefficient: a[k-1] == P(0) == secret. Every other
coefficient is uniform in [0, p). Each participant receives P(x_i) for
its own identifier x_i. Any k such points pin down P, and therefore
P(0). Fewer than k points are consistent with every possible secret.
"""

import random
import secrets
from typing import Sequence

from keysplit.errors import InvalidParameterError


def split(secret: int, prime: int, threshold: int, rng: random.Random = None) -> list[int]:
    """
    Build the coefficients of a random degree-(threshold-1) polynomial.

    Args:
        secret: The secret, in [0, prime).
        prime: The field modulus.
        threshold: Number of shares needed to reconstruct (k).
        rng: Random source. Defaults to OS entropy.

    Returns:
        threshold coefficients, highest power first. The last one is the secret.

    Raises:
        InvalidParameterError: If threshold <= 0 or the secret is outside the field.
    """
    if threshold <= 0:
        raise InvalidParameterError(f"Threshold must be at least 1, got {threshold}")
    if not 0 <= secret < prime:
        raise InvalidParameterError("Secret must lie in [0, prime)")

    rng = rng or secrets.SystemRandom()
    coefficients = [rng.randrange(prime) for _ in range(threshold - 1)]
    coefficients.append(secret)
    return coefficients


def evaluate_share(
    coefficients: Sequence[int],
    x: int,
    prime: int,
    reduce: bool = False,
) -> int:
    """
    Evaluate the sharing polynomial at a participant identifier.

    By default the value is the exact integer P(x), not reduced modulo
    prime, so shares grow like x^(k-1). With reduce=True the share is
    returned as a field element. Reconstruction works with either.

    The identifier must be nonzero and distinct from every other
    participant's modulo prime. That is the caller's job.

    Args:
        coefficients: Polynomial coefficients, highest power first.
        x: Participant identifier.
        prime: The field modulus.
        reduce: Reduce the share modulo prime.

    Returns:
        The share value y = P(x).
    """
    if not coefficients:
        raise InvalidParameterError("Polynomial needs at least one coefficient")

    # Horner's rule
    value = 0
    for coeff in coefficients:
        value = value * x + coeff

    if reduce:
        value %= prime
    return value


def compute_shares(
    coefficients: Sequence[int],
    identifiers: Sequence[int],
    prime: int,
    reduce: bool = False,
) -> list[int]:
    """Evaluate the polynomial at each identifier, in order."""
    return [evaluate_share(coefficients, x, prime, reduce=reduce) for x in identifiers]


def format_polynomial(coefficients: Sequence[int]) -> str:
    """Render coefficients as 'P(X) = 7X^2 + 3X + 5'."""
    degree = len(coefficients) - 1
    terms = []
    for i, coeff in enumerate(coefficients):
        power = degree - i
        if power == 0:
            terms.append(f"{coeff}")
        elif power == 1:
            terms.append(f"{coeff}X")
        else:
            terms.append(f"{coeff}X^{power}")
    return "P(X) = " + " + ".join(terms)
