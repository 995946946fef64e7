"""
keysplit — Shamir's Secret Sharing over a prime field
Split a secret into N shares where any K can reconstruct it.

Three layers, each usable on its own:
1. Field setup — pick a random prime p of a given bit strength
2. Splitter — hide the secret as P(0) of a random degree K-1 polynomial
3. Reconstructor — Lagrange interpolation at 0 from any K shares

The Dealer ties them into a single trusted-dealer session.

Usage:
    from keysplit import Dealer, SharingConfig
    dealer = Dealer(SharingConfig(bit_strength=256, participants=5, threshold=3))
    shares = dealer.deal()
    assert dealer.combine(shares[2:]) == dealer.secret
"""

from keysplit.config import SharingConfig
from keysplit.dealer import Dealer, Share, assign_identifiers
from keysplit.errors import DegenerateInputError, InvalidParameterError, SharingError
from keysplit.field import generate_prime, generate_secret, is_prime
from keysplit.lagrange import lagrange_coefficients, reconstruct, recover_secret
from keysplit.polynomial import compute_shares, evaluate_share, format_polynomial, split

__version__ = "0.1.0"
__all__ = [
    "Dealer",
    "Share",
    "SharingConfig",
    "assign_identifiers",
    "generate_prime",
    "generate_secret",
    "is_prime",
    "split",
    "evaluate_share",
    "compute_shares",
    "format_polynomial",
    "lagrange_coefficients",
    "reconstruct",
    "recover_secret",
    "SharingError",
    "InvalidParameterError",
    "DegenerateInputError",
]
