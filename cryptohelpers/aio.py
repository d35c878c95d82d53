"""
Awaitable variants of the crypto helpers.

Each coroutine runs the matching synchronous helper on a worker thread, so key
generation and RSA operations do not block the event loop. Results and
exceptions are passed through unchanged.
"""

import asyncio
from typing import Optional, Union

from . import helpers
from .keys import KeyPair, PrivateKey, PublicKey, SymmetricKey


async def generate_rsa_key_pair() -> KeyPair:
    return await asyncio.to_thread(helpers.generate_rsa_key_pair)


async def export_public_key(key: PublicKey) -> str:
    return await asyncio.to_thread(helpers.export_public_key, key)


async def export_private_key(key: Optional[PrivateKey]) -> Optional[str]:
    return await asyncio.to_thread(helpers.export_private_key, key)


async def import_public_key(encoded: str) -> PublicKey:
    return await asyncio.to_thread(helpers.import_public_key, encoded)


async def import_private_key(encoded: str) -> PrivateKey:
    return await asyncio.to_thread(helpers.import_private_key, encoded)


async def rsa_encrypt(b64_plaintext: str, public_key: Union[str, PublicKey]) -> str:
    return await asyncio.to_thread(helpers.rsa_encrypt, b64_plaintext, public_key)


async def rsa_decrypt(b64_ciphertext: str, private_key: Union[PrivateKey, str]) -> str:
    return await asyncio.to_thread(helpers.rsa_decrypt, b64_ciphertext, private_key)


async def generate_symmetric_key() -> SymmetricKey:
    return await asyncio.to_thread(helpers.generate_symmetric_key)


async def export_symmetric_key(key: SymmetricKey) -> str:
    return await asyncio.to_thread(helpers.export_symmetric_key, key)


async def import_symmetric_key(encoded: str) -> SymmetricKey:
    return await asyncio.to_thread(helpers.import_symmetric_key, encoded)


async def sym_encrypt(key: SymmetricKey, plaintext: str) -> str:
    return await asyncio.to_thread(helpers.sym_encrypt, key, plaintext)


async def sym_decrypt(key: Union[str, SymmetricKey], envelope: str) -> str:
    return await asyncio.to_thread(helpers.sym_decrypt, key, envelope)


async def buffer_to_base64(data: bytes) -> str:
    return await asyncio.to_thread(helpers.buffer_to_base64, data)


async def base64_to_buffer(text: Union[str, bytes]) -> bytes:
    return await asyncio.to_thread(helpers.base64_to_buffer, text)
