"""
ChaCha20 keystream
==================
Block-indexed ChaCha20 for the counter-aligned adapter.

cryptography's ChaCha20 takes a 16-byte "nonce" that is really the
last four state words: block counter followed by nonce. That lets us
start the keystream at any 64-byte block:

  chacha20       8-byte nonce, 64-bit little-endian block counter
  chacha20-ietf 12-byte nonce, 32-bit little-endian block counter (RFC 8439)

Key:   256-bit (32 bytes)

Dependencies: cryptography >= 43.0
"""

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms


class ChaCha20Keystream:
    """ChaCha20 keystream XOR starting at an arbitrary block index."""

    KEY_SIZE   = 32
    block_size = 64

    def __init__(self, key: bytes, nonce_size: int = 8):
        if nonce_size not in (8, 12):
            raise ValueError("ChaCha20 nonce must be 8 or 12 bytes.")
        if len(key) != self.KEY_SIZE:
            raise ValueError(f"ChaCha20 key must be {self.KEY_SIZE} bytes.")
        self._key         = bytes(key)
        self.nonce_size   = nonce_size
        self._counter_len = 16 - nonce_size

    def xor(self, data: bytes, nonce: bytes, block_index: int) -> bytes:
        counter = block_index.to_bytes(self._counter_len, "little")
        algo    = algorithms.ChaCha20(self._key, counter + nonce)
        return Cipher(algo, mode=None).encryptor().update(data)
