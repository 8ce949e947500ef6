"""
RC4 primitives
==============
RC4 has no IV of its own. Two flavours are exposed:

  rc4      — the key drives RC4 directly and the IV is ignored, so every
             stream under one key repeats the same keystream. Kept for
             wire compatibility only.
  rc4-md5  — the working RC4 key is md5(key || iv), derived once per
             stream. Built on top of RC4Cipher rather than beside it.

Both report an IV size of 16 so the transport always exchanges an IV.

Dependencies: cryptography >= 43.0 (ARC4 lives in the decrepit namespace)
"""

import hashlib

from cryptography.hazmat.decrepit.ciphers.algorithms import ARC4
from cryptography.hazmat.primitives.ciphers import Cipher

from ..base import StreamCipher
from ..modes import CipherContextStream


class RC4Cipher(StreamCipher):
    """Plain RC4 keyed by the long-term key."""

    name    = "rc4"
    IV_SIZE = 16

    def __init__(self, key: bytes):
        self._cipher = Cipher(ARC4(key), mode=None)

    @property
    def iv_size(self) -> int:
        return self.IV_SIZE

    def _encrypter(self, iv: bytes) -> CipherContextStream:
        return CipherContextStream(self._cipher.encryptor())


class RC4MD5Cipher(StreamCipher):
    """RC4 rekeyed per stream with md5(key || iv)."""

    name    = "rc4-md5"
    IV_SIZE = 16

    def __init__(self, key: bytes):
        self._key = bytes(key)

    @property
    def iv_size(self) -> int:
        return self.IV_SIZE

    @staticmethod
    def derive_key(key: bytes, iv: bytes) -> bytes:
        return hashlib.md5(key + iv).digest()

    def _encrypter(self, iv: bytes) -> CipherContextStream:
        return RC4Cipher(self.derive_key(self._key, iv)).encrypter(iv)
