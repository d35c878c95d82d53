"""
Exception types raised by the crypto helpers.

Every failure of a helper call surfaces as a subclass of CryptoError. Errors
caused by bad input data also subclass ValueError so callers catching the
builtin keep working.
"""


class CryptoError(Exception):
    """Base exception for crypto helper operations."""
    pass


class DecodeError(CryptoError, ValueError):
    """Raised on malformed base64 text or bytes that are not valid UTF-8."""
    pass


class KeyGenError(CryptoError):
    """Raised when the cryptographic provider cannot generate a key."""
    pass


class KeyExportError(CryptoError):
    """Raised when a key handle cannot be serialized."""
    pass


class KeyImportError(CryptoError, ValueError):
    """Raised when encoded key material is malformed or of the wrong algorithm."""
    pass


class EncryptError(CryptoError, ValueError):
    """Raised when a payload exceeds what the algorithm can encrypt."""
    pass


class DecryptError(CryptoError, ValueError):
    """Raised on key mismatch, bad padding or a corrupted ciphertext."""
    pass
