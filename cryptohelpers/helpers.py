import base64
import binascii
import logging
import os
from typing import Optional, Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, padding as sym_padding, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .errors import (
    DecodeError,
    DecryptError,
    EncryptError,
    KeyExportError,
    KeyGenError,
    KeyImportError,
)
from .keys import AES_KEY_SIZE, KeyPair, PrivateKey, PublicKey, SymmetricKey

RSA_KEY_SIZE = 2048
RSA_PUBLIC_EXPONENT = 65537
OAEP_HASH_SIZE = 32  # SHA-256 digest length
AES_IV_SIZE = 16

log = logging.getLogger(__name__)


def _oaep() -> padding.OAEP:
    return padding.OAEP(
        mgf=padding.MGF1(algorithm=hashes.SHA256()),
        algorithm=hashes.SHA256(),
        label=None,
    )


# --- Codec ---

def buffer_to_base64(data: bytes) -> str:
    """Encode bytes as standard, padded base64 without line breaks."""
    return base64.b64encode(bytes(data)).decode('ascii')


def base64_to_buffer(text: Union[str, bytes]) -> bytes:
    """Decode standard base64. Raises DecodeError on malformed input."""
    if not isinstance(text, (str, bytes, bytearray)):
        raise TypeError("base64 input must be str or bytes")
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError("Input is not valid base64.") from e


# --- RSA-OAEP ---

def generate_rsa_key_pair() -> KeyPair:
    """Generate a 2048-bit RSA-OAEP key pair (e=65537, SHA-256)."""
    try:
        key = rsa.generate_private_key(public_exponent=RSA_PUBLIC_EXPONENT, key_size=RSA_KEY_SIZE)
    except (ValueError, UnsupportedAlgorithm) as e:
        raise KeyGenError("RSA key generation failed.") from e
    log.debug("Generated %d-bit RSA key pair", RSA_KEY_SIZE)
    return KeyPair(PublicKey(key.public_key()), PrivateKey(key))


def export_public_key(key: PublicKey) -> str:
    """Serialize a public key as base64 SPKI DER."""
    if not isinstance(key, PublicKey):
        raise KeyExportError("Key is not an RSA public key handle.")
    if not key.extractable:
        raise KeyExportError("Key is not extractable.")
    der = key._key.public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    return buffer_to_base64(der)


def export_private_key(key: Optional[PrivateKey]) -> Optional[str]:
    """Serialize a private key as base64 PKCS8 DER. None passes through."""
    if key is None:
        return None
    if not isinstance(key, PrivateKey):
        raise KeyExportError("Key is not an RSA private key handle.")
    if not key.extractable:
        raise KeyExportError("Key is not extractable.")
    der = key._key.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    return buffer_to_base64(der)


def import_public_key(encoded: str) -> PublicKey:
    """Rebuild an encrypt-only key from export_public_key output."""
    try:
        der = base64_to_buffer(encoded)
    except DecodeError as e:
        raise KeyImportError("Public key is not valid base64.") from e
    try:
        key = serialization.load_der_public_key(der)
    except (ValueError, UnsupportedAlgorithm) as e:
        raise KeyImportError("Data does not contain a valid SPKI public key.") from e
    if not isinstance(key, rsa.RSAPublicKey):
        raise KeyImportError("Public key is not an RSA key.")
    # the loader also takes PKCS1 RSAPublicKey blobs; only SPKI is accepted
    spki = key.public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    if spki != der:
        raise KeyImportError("Data does not contain a valid SPKI public key.")
    return PublicKey(key)


def import_private_key(encoded: str) -> PrivateKey:
    """Rebuild a decrypt-only key from export_private_key output."""
    try:
        der = base64_to_buffer(encoded)
    except DecodeError as e:
        raise KeyImportError("Private key is not valid base64.") from e
    try:
        key = serialization.load_der_private_key(der, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise KeyImportError("Data does not contain a valid PKCS8 private key.") from e
    if not isinstance(key, rsa.RSAPrivateKey):
        raise KeyImportError("Private key is not an RSA key.")
    # the loader also takes TraditionalOpenSSL (PKCS1) blobs; only PKCS8 is accepted
    pkcs8 = key.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    if pkcs8 != der:
        raise KeyImportError("Data does not contain a valid PKCS8 private key.")
    return PrivateKey(key)


def rsa_max_plaintext_len(public_key: Union[PublicKey, str]) -> int:
    """Largest plaintext OAEP-SHA256 accepts for this key (190 for 2048 bits)."""
    if isinstance(public_key, str):
        public_key = import_public_key(public_key)
    k = (public_key.key_size + 7) // 8
    return k - 2 * OAEP_HASH_SIZE - 2


def rsa_encrypt(b64_plaintext: str, public_key: Union[str, PublicKey]) -> str:
    """Encrypt base64 plaintext with an RSA public key, returning base64 ciphertext.

    A key given as text is imported on every call.
    """
    data = base64_to_buffer(b64_plaintext)
    if isinstance(public_key, str):
        public_key = import_public_key(public_key)
    elif not isinstance(public_key, PublicKey):
        raise TypeError("rsa_encrypt requires a PublicKey or its base64 encoding")

    max_len = rsa_max_plaintext_len(public_key)
    if len(data) > max_len:
        raise EncryptError(
            f"Plaintext is {len(data)} bytes; RSA-OAEP with this key accepts at most {max_len}."
        )
    try:
        ciphertext = public_key._key.encrypt(data, _oaep())
    except ValueError as e:
        raise EncryptError("RSA-OAEP encryption failed.") from e
    log.debug("RSA-OAEP encrypted %d bytes", len(data))
    return buffer_to_base64(ciphertext)


def rsa_decrypt(b64_ciphertext: str, private_key: Union[PrivateKey, str]) -> str:
    """Decrypt base64 ciphertext with an RSA private key, returning base64 plaintext."""
    ciphertext = base64_to_buffer(b64_ciphertext)
    if isinstance(private_key, str):
        private_key = import_private_key(private_key)
    elif not isinstance(private_key, PrivateKey):
        raise TypeError("rsa_decrypt requires a PrivateKey or its base64 encoding")

    try:
        data = private_key._key.decrypt(ciphertext, _oaep())
    except ValueError as e:
        raise DecryptError("RSA-OAEP decryption failed.") from e
    return buffer_to_base64(data)


# --- AES-CBC ---

def generate_symmetric_key() -> SymmetricKey:
    """Generate a random 256-bit AES-CBC key."""
    try:
        raw = os.urandom(AES_KEY_SIZE)
    except NotImplementedError as e:
        raise KeyGenError("No source of randomness available.") from e
    return SymmetricKey(raw)


def export_symmetric_key(key: SymmetricKey) -> str:
    """Serialize a symmetric key as base64 of its 32 raw bytes."""
    if not isinstance(key, SymmetricKey):
        raise KeyExportError("Key is not a symmetric key handle.")
    if not key.extractable:
        raise KeyExportError("Key is not extractable.")
    return buffer_to_base64(key._key)


def import_symmetric_key(encoded: str) -> SymmetricKey:
    """Rebuild a symmetric key from export_symmetric_key output."""
    try:
        raw = base64_to_buffer(encoded)
    except DecodeError as e:
        raise KeyImportError("Symmetric key is not valid base64.") from e
    return SymmetricKey(raw)


def sym_encrypt(key: SymmetricKey, plaintext: str) -> str:
    """Encrypt text with AES-256-CBC.

    Output is base64 of [16-byte IV][ciphertext]; the IV is fresh per call.
    """
    if not isinstance(key, SymmetricKey):
        raise TypeError("sym_encrypt requires a SymmetricKey")
    try:
        data = plaintext.encode('utf-8')
    except UnicodeEncodeError as e:
        raise DecodeError("Plaintext cannot be encoded as UTF-8.") from e

    iv = os.urandom(AES_IV_SIZE)
    padder = sym_padding.PKCS7(algorithms.AES.block_size).padder()
    padded = padder.update(data) + padder.finalize()

    encryptor = Cipher(algorithms.AES(key._key), modes.CBC(iv)).encryptor()
    ciphertext = encryptor.update(padded) + encryptor.finalize()
    log.debug("AES-CBC encrypted %d bytes", len(data))
    return buffer_to_base64(iv + ciphertext)


def sym_decrypt(key: Union[str, SymmetricKey], envelope: str) -> str:
    """Decrypt an envelope produced by sym_encrypt. A key given as text is imported first."""
    if isinstance(key, str):
        key = import_symmetric_key(key)
    elif not isinstance(key, SymmetricKey):
        raise TypeError("sym_decrypt requires a SymmetricKey or its base64 encoding")

    blob = base64_to_buffer(envelope)
    if len(blob) < AES_IV_SIZE:
        raise DecryptError("Envelope is shorter than the IV.")
    iv = blob[:AES_IV_SIZE]
    ciphertext = blob[AES_IV_SIZE:]
    block_bytes = algorithms.AES.block_size // 8
    if not ciphertext or len(ciphertext) % block_bytes:
        raise DecryptError("Ciphertext length is not a positive multiple of the block size.")

    decryptor = Cipher(algorithms.AES(key._key), modes.CBC(iv)).decryptor()
    padded = decryptor.update(ciphertext) + decryptor.finalize()
    unpadder = sym_padding.PKCS7(algorithms.AES.block_size).unpadder()
    try:
        data = unpadder.update(padded) + unpadder.finalize()
    except ValueError as e:
        raise DecryptError("Invalid padding after decryption.") from e

    try:
        return data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise DecodeError("Decrypted data is not valid UTF-8.") from e
