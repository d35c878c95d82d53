"""
RSA-OAEP and AES-CBC helper functions.

High-level API:
- buffer_to_base64(data) -> str / base64_to_buffer(text) -> bytes
- generate_rsa_key_pair() -> KeyPair(public_key, private_key)
- export_public_key(key) -> str / import_public_key(text) -> PublicKey
- export_private_key(key_or_none) -> str | None / import_private_key(text) -> PrivateKey
- rsa_encrypt(b64_plaintext, public_key) -> str / rsa_decrypt(b64_ciphertext, private_key) -> str
- generate_symmetric_key() -> SymmetricKey
- export_symmetric_key(key) -> str / import_symmetric_key(text) -> SymmetricKey
- sym_encrypt(key, text) -> str / sym_decrypt(key, envelope) -> str

Awaitable versions live in cryptohelpers.aio. Exceptions are raised on errors,
all deriving from CryptoError.
"""

from .errors import (
    CryptoError,
    DecodeError,
    KeyGenError,
    KeyExportError,
    KeyImportError,
    EncryptError,
    DecryptError,
)
from .keys import KeyPair, PublicKey, PrivateKey, SymmetricKey
from .helpers import (
    buffer_to_base64,
    base64_to_buffer,
    generate_rsa_key_pair,
    export_public_key,
    export_private_key,
    import_public_key,
    import_private_key,
    rsa_max_plaintext_len,
    rsa_encrypt,
    rsa_decrypt,
    generate_symmetric_key,
    export_symmetric_key,
    import_symmetric_key,
    sym_encrypt,
    sym_decrypt,
    RSA_KEY_SIZE,
    AES_KEY_SIZE,
    AES_IV_SIZE,
)

__all__ = [
    "CryptoError",
    "DecodeError",
    "KeyGenError",
    "KeyExportError",
    "KeyImportError",
    "EncryptError",
    "DecryptError",
    "KeyPair",
    "PublicKey",
    "PrivateKey",
    "SymmetricKey",
    "buffer_to_base64",
    "base64_to_buffer",
    "generate_rsa_key_pair",
    "export_public_key",
    "export_private_key",
    "import_public_key",
    "import_private_key",
    "rsa_max_plaintext_len",
    "rsa_encrypt",
    "rsa_decrypt",
    "generate_symmetric_key",
    "export_symmetric_key",
    "import_symmetric_key",
    "sym_encrypt",
    "sym_decrypt",
    "RSA_KEY_SIZE",
    "AES_KEY_SIZE",
    "AES_IV_SIZE",
]
