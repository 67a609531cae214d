"""
bcrypt password hasher adapter - Implements PasswordHasher protocol.

Each call generates a fresh salt with the configured cost factor; the salt
and cost are embedded in the returned ``$2b$<cost>$...`` string.

bcrypt only reads the first 72 bytes of its input, and bcrypt >= 5 raises
instead of ignoring the rest. Input is cut to 72 bytes before hashing, so
any password that passed validation can be hashed. Verifiers must apply
the same cut.
"""

import bcrypt

from src.domain.exceptions import HashingError

BCRYPT_MAX_PASSWORD_BYTES = 72


def encode_password(plaintext: str) -> bytes:
    """UTF-8 encode and cut to the bytes bcrypt actually uses."""
    return plaintext.encode()[:BCRYPT_MAX_PASSWORD_BYTES]


class BcryptPasswordHasher:
    """
    Implements PasswordHasher protocol via bcrypt.

    Uses structural subtyping - no explicit inheritance from Protocol.
    The cost factor is fixed per instance and chosen once at startup.
    """

    def __init__(self, cost: int = 10) -> None:
        """
        Initialize hasher with a bcrypt work factor.

        Args:
            cost: bcrypt log2 rounds (4-31)
        """
        self._cost = cost

    @property
    def cost(self) -> int:
        return self._cost

    def hash(self, plaintext: str) -> str:
        """
        Hash a plaintext password with a per-call random salt.

        Raises:
            HashingError: If bcrypt rejects the input (e.g. NUL bytes)
        """
        try:
            digest = bcrypt.hashpw(encode_password(plaintext), bcrypt.gensalt(rounds=self._cost))
        except ValueError as e:
            raise HashingError(str(e)) from e
        return digest.decode()
