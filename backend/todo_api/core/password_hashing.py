"""Credential Hasher — Argon2id password hashing with self-describing encodings.

Invariants:
    - hash_password never returns the plaintext and uses a fresh random salt per call
    - The encoded hash embeds algorithm, version, memory/time/parallelism cost, salt and digest
    - verify_password uses the EMBEDDED parameters, never the current defaults
    - verify_password returns False only for a genuine mismatch; a corrupt or
      unsupported hash raises CredentialHashError

Design Decisions:
    - argon2-cffi over a hand-rolled KDF: PHC string format and constant-time
      comparison come from the reference implementation
    - Only Argon2id v1.3 is accepted: any other variant in the store is data corruption
"""

from dataclasses import dataclass

from argon2 import PasswordHasher, Type, extract_parameters
from argon2.exceptions import (
    HashingError, InvalidHashError, VerificationError, VerifyMismatchError,
)

from todo_api.core.errors import CredentialHashError

ARGON2_VERSION = 19

# Verification reads parameters from the hash itself, so one instance serves all.
_verifier = PasswordHasher(type=Type.ID)


@dataclass(frozen=True)
class HashParams:
    """Argon2id cost parameters. memory_cost is in KiB."""
    memory_cost: int = 64 * 1024
    time_cost: int = 1
    parallelism: int = 2
    salt_len: int = 16
    hash_len: int = 32

    def __post_init__(self):
        if self.parallelism < 1 or self.time_cost < 1:
            raise ValueError("time_cost and parallelism must be >= 1")
        if self.memory_cost < 8 * self.parallelism:
            raise ValueError("memory_cost must be at least 8 KiB per lane")
        if self.salt_len < 8 or self.hash_len < 4:
            raise ValueError("salt_len must be >= 8 and hash_len >= 4")

    def hasher(self) -> PasswordHasher:
        return PasswordHasher(
            time_cost=self.time_cost,
            memory_cost=self.memory_cost,
            parallelism=self.parallelism,
            hash_len=self.hash_len,
            salt_len=self.salt_len,
            type=Type.ID,
        )


def hash_password(plaintext: str, params: HashParams) -> str:
    """Hash plaintext with a random salt; returns the PHC-encoded string."""
    try:
        return params.hasher().hash(plaintext)
    except HashingError as e:
        raise CredentialHashError(f"Password hashing failed: {e}") from e


def _check_supported(encoded: str) -> None:
    if not encoded:
        raise CredentialHashError("Stored password hash is empty")
    try:
        embedded = extract_parameters(encoded)
    except InvalidHashError as e:
        raise CredentialHashError("Stored password hash is malformed") from e
    if embedded.type is not Type.ID:
        raise CredentialHashError(
            f"Unsupported hash variant: {embedded.type.name.lower()}",
        )
    if embedded.version != ARGON2_VERSION:
        raise CredentialHashError(
            f"Unsupported argon2 version: {embedded.version}",
        )


def verify_password(plaintext: str, encoded: str) -> bool:
    """Constant-time check of plaintext against an encoded hash.

    Returns True on match, False on mismatch. Raises CredentialHashError when
    the encoding cannot be verified at all.
    """
    _check_supported(encoded)
    try:
        return _verifier.verify(encoded, plaintext)
    except VerifyMismatchError:
        return False
    except (InvalidHashError, VerificationError) as e:
        raise CredentialHashError("Stored password hash could not be verified") from e


def needs_rehash(encoded: str, params: HashParams) -> bool:
    """True when encoded was produced with parameters other than params."""
    _check_supported(encoded)
    return params.hasher().check_needs_rehash(encoded)
