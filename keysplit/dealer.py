"""
Dealer — Trusted Sharing Session
Wires field setup, splitting and reconstruction for N participants.

The dealer picks the prime, owns the secret, assigns each participant
an identifier and hands out exactly one share per participant. The
random polynomial exists only for the duration of deal(): once the
shares are computed the coefficients are dropped, never stored or
returned.

Session:
  1. Choose the prime p (Z/pZ)
  2. Choose the secret S
  3. Draw a random polynomial of degree k-1 with P(0) = S
  4. Compute (x_i, y_i) for each participant i in 1..N
  5. Any k participants reconstruct S
"""

import logging
import random
import secrets
from dataclasses import dataclass

from keysplit.config import SharingConfig
from keysplit.errors import InvalidParameterError, SharingError
from keysplit.field import generate_prime, generate_secret, is_prime
from keysplit.lagrange import recover_secret
from keysplit.polynomial import compute_shares, split

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Share:
    """One participant's point on the sharing polynomial."""
    identifier: int  # x, nonzero and unique modulo p
    value: int       # y = P(x)

    def __iter__(self):
        yield self.identifier
        yield self.value


def assign_identifiers(participants: int, step: int, prime: int) -> list[int]:
    """
    Participant identifiers: step * (i + 1) for i in 0..participants-1.

    Raises:
        InvalidParameterError: If the modulus is too small to keep every
            identifier nonzero and distinct modulo prime.
    """
    identifiers = [step * (i + 1) for i in range(participants)]

    residues = {x % prime for x in identifiers}
    if 0 in residues or len(residues) != len(identifiers):
        raise InvalidParameterError(
            f"Modulus {prime} is too small for {participants} "
            f"participants with identifier step {step}"
        )
    return identifiers


class Dealer:
    """
    A centralized, trusted dealer for one sharing session.

    Each Dealer owns its own modulus, secret and random source, so
    separate sessions never interfere.

    Args:
        config: Session parameters. Defaults to SharingConfig().
        rng: Random source. Defaults to OS entropy.
        prime: Use this modulus instead of generating one.

    Raises:
        InvalidParameterError: If the config is invalid or prime is not prime.
    """

    def __init__(
        self,
        config: SharingConfig = None,
        rng: random.Random = None,
        prime: int = None,
    ):
        self.config = config or SharingConfig()
        self.config.validate()
        self.rng = rng or secrets.SystemRandom()

        if prime is None:
            prime = generate_prime(self.config.bit_strength, self.rng)
        elif not is_prime(prime):
            raise InvalidParameterError(f"Modulus {prime} is not prime")
        self.prime = prime
        self.secret = None

        logger.debug(
            "Dealer ready: %d-bit modulus, %d-of-%d threshold",
            self.prime.bit_length(), self.config.threshold, self.config.participants,
        )

    @property
    def threshold(self) -> int:
        return self.config.threshold

    def identifiers(self) -> list[int]:
        """Identifiers of this session's participants, in order."""
        return assign_identifiers(
            self.config.participants, self.config.identifier_step, self.prime,
        )

    def deal(self, secret: int = None) -> list[Share]:
        """
        Split a secret and produce one share per participant.

        Args:
            secret: The secret, in [0, p). Drawn at random if omitted.

        Returns:
            N shares, in participant order.
        """
        identifiers = self.identifiers()
        if secret is None:
            secret = generate_secret(self.prime, self.rng)

        coefficients = split(secret, self.prime, self.threshold, self.rng)
        values = compute_shares(
            coefficients, identifiers, self.prime, reduce=self.config.reduce_shares,
        )
        del coefficients

        self.secret = secret
        logger.debug(
            "Dealt %d shares (reduced=%s)", len(values), self.config.reduce_shares,
        )
        return [Share(identifier=x, value=y) for x, y in zip(identifiers, values)]

    def combine(self, shares: list[Share]) -> int:
        """
        Reconstruct the secret from at least K shares.

        Any K will do. When more are given only the first K are used.

        Raises:
            InvalidParameterError: If fewer than K shares are given.
            DegenerateInputError: If two shares carry colliding identifiers.
        """
        if len(shares) < self.threshold:
            raise InvalidParameterError(
                f"Need at least {self.threshold} shares, got {len(shares)}"
            )
        return recover_secret(shares[:self.threshold], self.prime)

    def verify(self, shares: list[Share]) -> bool:
        """Check that a set of shares reconstructs the dealt secret."""
        if self.secret is None:
            return False
        try:
            return self.combine(shares) == self.secret
        except SharingError:
            return False
