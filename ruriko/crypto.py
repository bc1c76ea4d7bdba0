"""AES-256-GCM helpers for secrets at rest and master-key parsing."""

from __future__ import annotations

import binascii
import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

NONCE_SIZE = 12
"""Standard GCM nonce size in bytes."""

KEY_SIZE = 32
"""Required key length for AES-256-GCM in bytes."""


class CryptoError(Exception):
    """Base class for errors raised by this module."""


class InvalidKeySizeError(CryptoError, ValueError):
    """The key is not exactly KEY_SIZE bytes long."""

    def __init__(self) -> None:
        super().__init__(f"key must be exactly {KEY_SIZE} bytes")


class CiphertextTooShortError(CryptoError, ValueError):
    """The ciphertext cannot even hold a nonce."""

    def __init__(self) -> None:
        super().__init__("ciphertext too short")


class DecryptionError(CryptoError):
    """Authentication of the ciphertext failed."""


class MasterKeyError(CryptoError, ValueError):
    """The master key text is empty, not hex, or the wrong length."""


def _check_key(key: bytes) -> bytes:
    key = bytes(key)
    if len(key) != KEY_SIZE:
        raise InvalidKeySizeError()
    return key


def encrypt(key: bytes, plaintext: bytes) -> bytes:
    """Encrypt plaintext; the result is the random nonce followed by the sealed data."""
    aead = AESGCM(_check_key(key))
    nonce = os.urandom(NONCE_SIZE)
    return nonce + aead.encrypt(nonce, bytes(plaintext), None)


def decrypt(key: bytes, ciphertext: bytes) -> bytes:
    """Decrypt data produced by encrypt() with the same key."""
    aead = AESGCM(_check_key(key))
    ciphertext = bytes(ciphertext)
    if len(ciphertext) < NONCE_SIZE:
        raise CiphertextTooShortError()
    nonce, data = ciphertext[:NONCE_SIZE], ciphertext[NONCE_SIZE:]
    try:
        return aead.decrypt(nonce, data, None)
    except InvalidTag as exc:
        raise DecryptionError("decrypt: message authentication failed") from exc


def parse_master_key(raw_hex: str) -> bytes:
    """Decode a 64-character hex string into a 32-byte key."""
    raw = raw_hex.strip()
    if not raw:
        raise MasterKeyError("master key is empty")
    try:
        key = binascii.unhexlify(raw)
    except (binascii.Error, ValueError) as exc:
        raise MasterKeyError(f"invalid hex in master key: {exc}") from exc
    if len(key) != KEY_SIZE:
        raise MasterKeyError(
            f"master key must be {KEY_SIZE} bytes ({KEY_SIZE * 2} hex chars), "
            f"got {len(key)} bytes"
        )
    return key