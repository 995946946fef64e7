"""
Sharing Configuration
Parameters of a dealing session, with environment overrides.

Defaults reproduce the classic demo: a 14-bit prime, 4 participants
with logins 2, 4, 6, 8, and a 3-of-4 threshold.
"""

import os
from dataclasses import dataclass, fields

from keysplit.errors import InvalidParameterError
from keysplit.field import DEFAULT_BIT_STRENGTH


ENV_PREFIX = "KEYSPLIT_"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class SharingConfig:
    """Configuration for a single dealing session."""
    bit_strength: int = DEFAULT_BIT_STRENGTH
    participants: int = 4       # N, shares dealt
    threshold: int = 3          # K, shares needed to reconstruct
    identifier_step: int = 2    # participant i gets identifier step * (i + 1)
    reduce_shares: bool = False

    @classmethod
    def from_env(cls, environ: dict = None) -> "SharingConfig":
        """
        Build a config from KEYSPLIT_* environment variables.

        Unset variables keep their defaults. KEYSPLIT_REDUCE_SHARES is
        true for 1/true/yes/on (any case).

        Raises:
            InvalidParameterError: If an integer variable does not parse.
        """
        environ = os.environ if environ is None else environ
        values = {}
        for f in fields(cls):
            raw = environ.get(ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            if f.type is bool:
                values[f.name] = raw.strip().lower() in _TRUE_VALUES
            else:
                try:
                    values[f.name] = int(raw)
                except ValueError:
                    raise InvalidParameterError(
                        f"{ENV_PREFIX}{f.name.upper()} must be an integer, got {raw!r}"
                    ) from None
        return cls(**values)

    def validate(self) -> None:
        """
        Check the parameters describe a usable sharing.

        Raises:
            InvalidParameterError: On the first parameter out of range.
        """
        if self.bit_strength <= 1:
            raise InvalidParameterError(f"Bit strength must be at least 2, got {self.bit_strength}")
        if self.threshold <= 0:
            raise InvalidParameterError(f"Threshold must be at least 1, got {self.threshold}")
        if self.threshold > self.participants:
            raise InvalidParameterError(
                f"Threshold {self.threshold} cannot exceed {self.participants} participants"
            )
        if self.identifier_step <= 0:
            raise InvalidParameterError(
                f"Identifier step must be positive, got {self.identifier_step}"
            )
