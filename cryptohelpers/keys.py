"""
Opaque key handles.

Each handle carries a fixed capability: PublicKey can only encrypt, PrivateKey
can only decrypt, SymmetricKey does both. The helpers check the handle type
before touching the provider, so passing a PublicKey where a PrivateKey is
expected fails with TypeError instead of a provider error.
"""

from typing import NamedTuple, Optional, Tuple

from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey

from .errors import KeyImportError

AES_KEY_SIZE = 32


class _KeyHandle:
    __slots__ = ('_key', '_extractable')

    usages: Tuple = ()
    algorithm = ''

    def __init__(self, key, extractable: bool = True):
        object.__setattr__(self, '_key', key)
        object.__setattr__(self, '_extractable', extractable)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def extractable(self) -> bool:
        return self._extractable

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.algorithm} usages={list(self.usages)}>"


class PublicKey(_KeyHandle):
    """RSA-OAEP public key, encrypt-only."""

    __slots__ = ()
    usages = ('encrypt',)
    algorithm = 'RSA-OAEP'

    def __init__(self, key: RSAPublicKey, extractable: bool = True):
        if not isinstance(key, RSAPublicKey):
            raise TypeError("PublicKey requires an RSA public key")
        super().__init__(key, extractable)

    @property
    def key_size(self) -> int:
        return self._key.key_size


class PrivateKey(_KeyHandle):
    """RSA-OAEP private key, decrypt-only."""

    __slots__ = ()
    usages = ('decrypt',)
    algorithm = 'RSA-OAEP'

    def __init__(self, key: RSAPrivateKey, extractable: bool = True):
        if not isinstance(key, RSAPrivateKey):
            raise TypeError("PrivateKey requires an RSA private key")
        super().__init__(key, extractable)

    @property
    def key_size(self) -> int:
        return self._key.key_size

    def public_key(self) -> PublicKey:
        return PublicKey(self._key.public_key(), self._extractable)


class SymmetricKey(_KeyHandle):
    """AES-CBC key usable for both encryption and decryption."""

    __slots__ = ()
    usages = ('encrypt', 'decrypt')
    algorithm = 'AES-CBC'

    def __init__(self, key: bytes, extractable: bool = True):
        if not isinstance(key, (bytes, bytearray)):
            raise TypeError("SymmetricKey requires raw key bytes")
        if len(key) != AES_KEY_SIZE:
            raise KeyImportError(f"Symmetric key must be {AES_KEY_SIZE} bytes, got {len(key)}.")
        super().__init__(bytes(key), extractable)

    @property
    def key_size(self) -> int:
        return len(self._key) * 8


class KeyPair(NamedTuple):
    public_key: PublicKey
    private_key: Optional[PrivateKey]
