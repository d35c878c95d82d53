"""Tests for the awaitable helper variants."""

import asyncio

import pytest

from cryptohelpers import DecryptError, EncryptError, aio


class TestAsyncHelpers:

    @pytest.mark.asyncio
    async def test_rsa_roundtrip(self):
        pair = await aio.generate_rsa_key_pair()
        pub = await aio.import_public_key(await aio.export_public_key(pair.public_key))
        prv = await aio.import_private_key(await aio.export_private_key(pair.private_key))

        ct = await aio.rsa_encrypt(await aio.buffer_to_base64(b"hello-world"), pub)
        plaintext = await aio.base64_to_buffer(await aio.rsa_decrypt(ct, prv))
        assert plaintext == b"hello-world"

    @pytest.mark.asyncio
    async def test_export_private_none(self):
        assert await aio.export_private_key(None) is None

    @pytest.mark.asyncio
    async def test_errors_propagate(self):
        pair = await aio.generate_rsa_key_pair()
        with pytest.raises(EncryptError):
            await aio.rsa_encrypt(await aio.buffer_to_base64(b"x" * 200), pair.public_key)

        key = await aio.generate_symmetric_key()
        with pytest.raises(DecryptError):
            await aio.sym_decrypt(key, "AAAA")

    @pytest.mark.asyncio
    async def test_concurrent_symmetric_calls(self):
        key = await aio.generate_symmetric_key()
        encoded = await aio.export_symmetric_key(key)
        assert (await aio.import_symmetric_key(encoded)).key_size == 256

        texts = [f"message {i}" for i in range(20)]
        envelopes = await asyncio.gather(*(aio.sym_encrypt(key, t) for t in texts))
        assert len(set(envelopes)) == len(texts)

        decrypted = await asyncio.gather(*(aio.sym_decrypt(encoded, e) for e in envelopes))
        assert list(decrypted) == texts
