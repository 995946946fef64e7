"""Tests for prime and secret generation."""

import random
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from keysplit.errors import InvalidParameterError
from keysplit.field import generate_prime, generate_secret, is_prime


def test_generated_prime_is_prime_with_requested_bits():
    """Every bit strength from 2 to 96 yields a prime at least that long."""
    rng = random.Random(1234)
    for bits in range(2, 97):
        p = generate_prime(bits, rng)
        assert is_prime(p), f"{p} is not prime ({bits} bits requested)"
        assert p.bit_length() >= bits
        assert isinstance(p, int)


def test_generated_prime_is_odd():
    rng = random.Random(99)
    for _ in range(50):
        assert generate_prime(16, rng) % 2 == 1


def test_two_bit_prime_is_three():
    """The only 2-bit odd candidate is 3, which is already prime."""
    for seed in range(10):
        assert generate_prime(2, random.Random(seed)) == 3


def test_same_seed_same_prime():
    assert generate_prime(128, random.Random(42)) == generate_prime(128, random.Random(42))


def test_default_rng_uses_os_entropy():
    p = generate_prime(64)
    assert is_prime(p)
    assert p.bit_length() >= 64


def test_invalid_bit_strength_rejected():
    for bad in (1, 0, -8, True, 2.5, "14"):
        try:
            generate_prime(bad)
        except InvalidParameterError:
            continue
        raise AssertionError(f"bit_strength={bad!r} should have been rejected")


def test_secret_in_field():
    """Secrets are always in [0, p) and cover the whole range."""
    rng = random.Random(5)
    seen = {generate_secret(17, rng) for _ in range(1000)}
    assert seen <= set(range(17))
    assert 0 in seen
    assert 16 in seen


def test_secret_for_large_prime():
    rng = random.Random(6)
    p = generate_prime(256, rng)
    for _ in range(100):
        assert 0 <= generate_secret(p, rng) < p


def test_secret_rejects_tiny_modulus():
    for bad in (1, 0, -5):
        try:
            generate_secret(bad)
        except InvalidParameterError:
            continue
        raise AssertionError(f"modulus {bad} should have been rejected")


def test_is_prime():
    assert is_prime(2)
    assert is_prime(17)
    assert is_prime(2**127 - 1)
    assert not is_prime(1)
    assert not is_prime(0)
    assert not is_prime(-7)
    assert not is_prime(15)
    assert not is_prime(2**64)
