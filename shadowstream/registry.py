"""
Algorithm Registry
==================
Maps an algorithm name to its key size and a constructor. The table is
built once at import and is read-only afterwards.

    cipher = new_cipher("aes-256-cfb", key)
    enc    = cipher.encrypter(iv)
    dec    = cipher.decrypter(iv)

Key length is checked here, before any primitive is touched. Errors
raised by the primitive libraries themselves are passed through.
"""

import logging
import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, List

from .base import StreamCipher
from .counter import KeystreamCipher
from .errors import KeySizeError, UnsupportedCipherError
from .modes import CFB8Cipher, CFBCipher, CTRCipher, OFBCipher
from .primitives import block
from .primitives.chacha import ChaCha20Keystream
from .primitives.rc4 import RC4Cipher, RC4MD5Cipher
from .primitives.sodium import SodiumKeystream

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CipherSpec:
    key_size: int
    factory:  Callable[[bytes], StreamCipher]


def _aes(mode_cls):
    return lambda key: mode_cls(block.aes(key))


def _camellia(mode_cls):
    return lambda key: mode_cls(block.camellia(key))


_TABLE = {
    # AES
    "aes-128-ctr":  CipherSpec(16, _aes(CTRCipher)),
    "aes-192-ctr":  CipherSpec(24, _aes(CTRCipher)),
    "aes-256-ctr":  CipherSpec(32, _aes(CTRCipher)),
    "aes-128-cfb":  CipherSpec(16, _aes(CFBCipher)),
    "aes-192-cfb":  CipherSpec(24, _aes(CFBCipher)),
    "aes-256-cfb":  CipherSpec(32, _aes(CFBCipher)),
    "aes-128-cfb8": CipherSpec(16, _aes(CFB8Cipher)),
    "aes-192-cfb8": CipherSpec(24, _aes(CFB8Cipher)),
    "aes-256-cfb8": CipherSpec(32, _aes(CFB8Cipher)),
    "aes-128-ofb":  CipherSpec(16, _aes(OFBCipher)),
    "aes-192-ofb":  CipherSpec(24, _aes(OFBCipher)),
    "aes-256-ofb":  CipherSpec(32, _aes(OFBCipher)),

    # Camellia
    "camellia-128-cfb":  CipherSpec(16, _camellia(CFBCipher)),
    "camellia-192-cfb":  CipherSpec(24, _camellia(CFBCipher)),
    "camellia-256-cfb":  CipherSpec(32, _camellia(CFBCipher)),
    "camellia-128-cfb8": CipherSpec(16, _camellia(CFB8Cipher)),
    "camellia-192-cfb8": CipherSpec(24, _camellia(CFB8Cipher)),
    "camellia-256-cfb8": CipherSpec(32, _camellia(CFB8Cipher)),

    # legacy 64/128-bit block ciphers, CFB only
    "bf-cfb":    CipherSpec(16, lambda key: CFBCipher(block.blowfish(key))),
    "cast5-cfb": CipherSpec(16, lambda key: CFBCipher(block.cast5(key))),
    "des-cfb":   CipherSpec(8,  lambda key: CFBCipher(block.des(key))),
    "idea-cfb":  CipherSpec(16, lambda key: CFBCipher(block.idea(key))),
    "rc2-cfb":   CipherSpec(16, lambda key: CFBCipher(block.rc2(key))),
    "seed-cfb":  CipherSpec(16, lambda key: CFBCipher(block.seed(key))),

    # RC4
    "rc4":     CipherSpec(16, RC4Cipher),
    "rc4-md5": CipherSpec(16, RC4MD5Cipher),

    # 64-byte block keystreams, counter-aligned
    "salsa20":       CipherSpec(32, lambda key: KeystreamCipher(SodiumKeystream(key, "salsa20"))),
    "chacha20":      CipherSpec(32, lambda key: KeystreamCipher(ChaCha20Keystream(key, 8))),
    "chacha20-ietf": CipherSpec(32, lambda key: KeystreamCipher(ChaCha20Keystream(key, 12))),
    "xchacha20":     CipherSpec(32, lambda key: KeystreamCipher(SodiumKeystream(key, "xchacha20"))),
}

CIPHERS = MappingProxyType(_TABLE)


def _lookup(name: str) -> CipherSpec:
    spec = CIPHERS.get(name.lower())
    if spec is None:
        raise UnsupportedCipherError(name)
    return spec


def available_ciphers() -> List[str]:
    return sorted(CIPHERS)


def key_size(name: str) -> int:
    return _lookup(name).key_size


def generate_key(name: str) -> bytes:
    return os.urandom(key_size(name))


def new_cipher(name: str, key: bytes) -> StreamCipher:
    """
    Build the cipher registered under name, keyed with key.
    Raises UnsupportedCipherError for unknown names and KeySizeError
    (carrying the required length) when len(key) is wrong.
    """
    spec = _lookup(name)
    if len(key) != spec.key_size:
        raise KeySizeError(spec.key_size)

    name   = name.lower()
    cipher = spec.factory(bytes(key))
    cipher.name = name
    if name == "rc4":
        logger.warning("rc4 ignores the IV: every stream under this key repeats "
                       "the same keystream. Prefer rc4-md5 or a modern cipher.")
    logger.debug("constructed %s (iv_size=%d)", name, cipher.iv_size)
    return cipher
