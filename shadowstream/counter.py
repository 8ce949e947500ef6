"""
Counter-Aligned Adapter
=======================
Salsa20 and ChaCha20 produce keystream in 64-byte blocks addressed by
(nonce, block index). A proxy connection delivers data in fragments of
any size, so each call has to pick up mid-block where the last one
stopped.

The stream keeps one number, the total bytes processed so far (C).
For a call of L bytes:

    pad_len     = C % 64        offset into the current block
    block_index = C // 64
    scratch     = pad_len zero bytes || input
    out         = keystream_xor(scratch, nonce, block_index)[pad_len:]
    C          += L

The padding burns exactly the keystream bytes the previous call already
used, so any split of a message gives the same bytes as one big call.
"""

from .base import Stream, StreamCipher


class CounterAlignedStream(Stream):
    """Resumable byte stream over a block-indexed keystream primitive."""

    def __init__(self, keystream, nonce: bytes):
        self._keystream = keystream
        self._nonce     = bytes(nonce)
        self._counter   = 0

    @property
    def counter(self) -> int:
        """Bytes processed so far."""
        return self._counter

    def update(self, data: bytes) -> bytes:
        if not data:
            return b""
        block_size = self._keystream.block_size
        pad_len    = self._counter % block_size

        # caller buffers have no room in front for the padding
        buf = bytearray(pad_len + len(data))
        buf[pad_len:] = data
        out = self._keystream.xor(bytes(buf), self._nonce, self._counter // block_size)

        self._counter += len(data)
        return out[pad_len:]


class KeystreamCipher(StreamCipher):
    """StreamCipher whose streams are counter-aligned over one keystream primitive."""

    def __init__(self, keystream, name: str = "stream"):
        self._keystream = keystream
        self.name       = name

    @property
    def iv_size(self) -> int:
        return self._keystream.nonce_size

    def _encrypter(self, iv: bytes) -> CounterAlignedStream:
        return CounterAlignedStream(self._keystream, iv)
