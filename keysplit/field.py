"""
Field Setup
Choose the prime modulus p that defines the field Z/pZ.

Every other value in a sharing session lives in [0, p): the secret,
the random polynomial coefficients, the Lagrange coefficients and the
reconstructed secret. p must be prime so that every nonzero difference
of identifiers has a modular inverse.

Prime search and primality testing are delegated to GMP through gmpy2.
"""

import random
import secrets

import gmpy2

from keysplit.errors import InvalidParameterError


# Bits of a demo-sized modulus. Real secrets want 256 or more.
DEFAULT_BIT_STRENGTH = 14

# Miller-Rabin rounds for is_prime
PRIMALITY_ROUNDS = 25


def _default_rng() -> random.Random:
    return secrets.SystemRandom()


def generate_prime(bit_strength: int, rng: random.Random = None) -> int:
    """
    Generate a random prime with at least bit_strength bits.

    Draws bit_strength random bits, forces the lowest bit (all primes
    of interest are odd) and the highest bit (so the candidate really
    has bit_strength bits), then advances to the first prime >= the
    candidate.

    Args:
        bit_strength: Desired bit length of the modulus (>= 2).
        rng: Random source. Defaults to OS entropy.

    Returns:
        A prime p with p.bit_length() >= bit_strength.

    Raises:
        InvalidParameterError: If bit_strength is not an integer > 1.
    """
    if isinstance(bit_strength, bool) or not isinstance(bit_strength, int):
        raise InvalidParameterError(f"Bit strength must be an integer, got {bit_strength!r}")
    if bit_strength <= 1:
        raise InvalidParameterError(f"Bit strength must be at least 2, got {bit_strength}")

    rng = rng or _default_rng()
    candidate = rng.getrandbits(bit_strength)
    candidate |= 1
    candidate |= 1 << (bit_strength - 1)

    # next_prime is strictly greater, step back one to include the candidate
    return int(gmpy2.next_prime(candidate - 1))


def generate_secret(prime: int, rng: random.Random = None) -> int:
    """
    Draw a secret uniformly from [0, prime).

    Raises:
        InvalidParameterError: If prime < 2.
    """
    if prime < 2:
        raise InvalidParameterError(f"Modulus must be at least 2, got {prime}")
    rng = rng or _default_rng()
    return rng.randrange(prime)


def is_prime(n: int) -> bool:
    """Probabilistic primality test (exact for small n)."""
    if n < 2:
        return False
    return bool(gmpy2.is_prime(n, PRIMALITY_ROUNDS))
