"""
libsodium keystream
===================
Salsa20 and XChaCha20 are not in cryptography, so they come from
libsodium through ctypes. The *_xor_ic functions take an initial block
counter, which is exactly what the counter-aligned adapter needs.

  salsa20     8-byte nonce, 64-bit block counter
  xchacha20  24-byte nonce, 64-bit block counter

Key: 256-bit (32 bytes) for both.

Library lookup order: $SHADOWSTREAM_LIBSODIUM, ctypes.util.find_library,
then SODIUM_CANDIDATES.
"""

import ctypes
import ctypes.util
import logging
import os

logger = logging.getLogger(__name__)

ENV_VAR = "SHADOWSTREAM_LIBSODIUM"

SODIUM_CANDIDATES = (
    'libsodium.so.26', 'libsodium.so.23', 'libsodium.so',
    'libsodium.dylib', 'libsodium.26.dylib',
    '/usr/local/lib/libsodium.dylib',
    '/opt/homebrew/lib/libsodium.dylib',
    'libsodium-26.dll', 'libsodium-23.dll', 'libsodium.dll',
)

# name -> (libsodium function, nonce size)
PRIMITIVES = {
    "salsa20":   ("crypto_stream_salsa20_xor_ic",   8),
    "xchacha20": ("crypto_stream_xchacha20_xor_ic", 24),
}

_lib = None


def _candidates():
    override = os.environ.get(ENV_VAR)
    if override:
        yield override
    found = ctypes.util.find_library("sodium")
    if found:
        yield found
    yield from SODIUM_CANDIDATES


def load_libsodium() -> ctypes.CDLL:
    """Load and initialise libsodium once per process."""
    global _lib
    if _lib is not None:
        return _lib
    for name in _candidates():
        try:
            lib = ctypes.CDLL(name)
        except OSError:
            continue
        if lib.sodium_init() < 0:
            raise RuntimeError(f"sodium_init() failed for {name}.")
        _configure_signatures(lib)
        logger.info("libsodium backend: %s", name)
        _lib = lib
        return lib
    raise RuntimeError(
        "libsodium not found. Install it:\n"
        "  Ubuntu/Debian: sudo apt install libsodium-dev\n"
        "  macOS:         brew install libsodium\n"
        "  Windows:       download from https://libsodium.org\n"
        f"or point {ENV_VAR} at the shared library."
    )


def available() -> bool:
    try:
        load_libsodium()
    except RuntimeError:
        return False
    return True


def _configure_signatures(lib):
    for fn, _ in PRIMITIVES.values():
        func = getattr(lib, fn)
        func.restype  = ctypes.c_int
        func.argtypes = (
            ctypes.c_char_p, ctypes.c_char_p, ctypes.c_ulonglong,
            ctypes.c_char_p, ctypes.c_uint64, ctypes.c_char_p,
        )


class SodiumKeystream:
    """libsodium stream cipher XOR starting at an arbitrary block index."""

    KEY_SIZE   = 32
    block_size = 64

    def __init__(self, key: bytes, primitive: str = "salsa20"):
        if primitive not in PRIMITIVES:
            raise ValueError(f"unknown libsodium primitive {primitive!r}")
        if len(key) != self.KEY_SIZE:
            raise ValueError(f"{primitive} key must be {self.KEY_SIZE} bytes.")
        fn, self.nonce_size = PRIMITIVES[primitive]
        self._xor_ic        = getattr(load_libsodium(), fn)
        self._key           = bytes(key)
        self.primitive      = primitive

    def xor(self, data: bytes, nonce: bytes, block_index: int) -> bytes:
        data = bytes(data)
        out  = ctypes.create_string_buffer(len(data))
        ret  = self._xor_ic(out, data, len(data), nonce, block_index, self._key)
        if ret != 0:
            raise RuntimeError(f"{self.primitive} keystream failed.")
        return out.raw
