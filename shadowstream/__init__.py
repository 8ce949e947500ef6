"""
shadowstream — stream ciphers for encrypted proxy transports
============================================================
One contract over every supported algorithm: look a cipher up by name,
hand it a key, then open an encrypting or decrypting byte stream per IV
and push data through it in chunks of any size.

Families:
    BLOCK + MODE  — AES (CTR / CFB / CFB8 / OFB), Camellia (CFB / CFB8),
                    DES, Blowfish, CAST5, IDEA, RC2, SEED (CFB)
    RC4           — rc4 (IV ignored), rc4-md5 (per-stream md5(key||iv) key)
    KEYSTREAM     — Salsa20, ChaCha20, ChaCha20-IETF, XChaCha20
                    (64-byte blocks, counter-aligned for byte-granular use)

License: Apache 2.0
"""

__version__ = "1.0.0"

from .base     import Stream, StreamCipher
from .errors   import (CipherError, IVSizeError, KeySizeError,
                       StreamMisuseError, UnsupportedCipherError)
from .registry import CIPHERS, available_ciphers, generate_key, key_size, new_cipher

__all__ = [
    "Stream",
    "StreamCipher",
    "CipherError",
    "KeySizeError",
    "IVSizeError",
    "UnsupportedCipherError",
    "StreamMisuseError",
    "CIPHERS",
    "available_ciphers",
    "generate_key",
    "key_size",
    "new_cipher",
]
