"""Hashing adapters - Password hashing implementations."""

from .bcrypt_hasher import BCRYPT_MAX_PASSWORD_BYTES, BcryptPasswordHasher, encode_password

__all__ = ["BCRYPT_MAX_PASSWORD_BYTES", "BcryptPasswordHasher", "encode_password"]
