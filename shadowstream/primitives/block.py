"""
Block primitives
================
Thin adapters around the block ciphers shipped by `cryptography`.

Each adapter carries the keyed algorithm object plus the set of
feedback modes the library can drive for it directly. Modes the
library does not offer for an algorithm are built in modes.py on top
of the single-block transform returned by block_encrypter().

Legacy ciphers (DES, Blowfish, CAST5, IDEA, SEED, RC2) live in
cryptography's decrepit namespace and need the OpenSSL legacy
provider, which cryptography loads by default.

Camellia and the CFB / CFB8 / OFB modes also moved to the decrepit
namespace; CTR, ECB and CBC remain in hazmat.primitives.

Dependencies: cryptography >= 50.0
"""

from typing import Callable

from cryptography.hazmat.decrepit.ciphers import algorithms as decrepit
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

CTR  = "ctr"
CFB  = "cfb"
CFB8 = "cfb8"
OFB  = "ofb"

_ALL_MODES = frozenset((CTR, CFB, CFB8, OFB))


class BlockPrimitive:
    """A keyed block cipher exposed as 'encrypt one block'."""

    def __init__(self, algorithm, library_modes=frozenset()):
        # algorithm constructors have already validated the key
        self.algorithm     = algorithm
        self.block_size    = algorithm.block_size // 8
        self.library_modes = frozenset(library_modes)

    @property
    def name(self) -> str:
        return self.algorithm.name

    def cipher(self, mode) -> Cipher:
        return Cipher(self.algorithm, mode)

    def block_encrypter(self) -> Callable[[bytes], bytes]:
        """Fresh single-block forward transform, one per stream."""
        return self.cipher(modes.ECB()).encryptor().update


class ChainedBlockPrimitive(BlockPrimitive):
    """
    Block primitive for algorithms the library only offers in CBC mode.

    CBC with a zero IV encrypts the first block as E(x). For every
    later block the context XORs in the previous ciphertext first, so
    feeding x ^ previous gives back E(x) again.
    """

    def block_encrypter(self) -> Callable[[bytes], bytes]:
        ctx  = self.cipher(modes.CBC(bytes(self.block_size))).encryptor()
        prev = bytes(self.block_size)

        def encrypt_block(block: bytes) -> bytes:
            nonlocal prev
            prev = ctx.update(xor_bytes(block, prev))
            return prev

        return encrypt_block


def xor_bytes(data: bytes, pad: bytes) -> bytes:
    """XOR data with the first len(data) bytes of pad."""
    n = len(data)
    return (int.from_bytes(data, "big") ^ int.from_bytes(pad[:n], "big")).to_bytes(n, "big")


# ── factories ────────────────────────────────────────────────────────────────

def aes(key: bytes) -> BlockPrimitive:
    return BlockPrimitive(algorithms.AES(key), _ALL_MODES)


def camellia(key: bytes) -> BlockPrimitive:
    return BlockPrimitive(decrepit.Camellia(key), (CFB,))


def des(key: bytes) -> BlockPrimitive:
    # EDE with K1 = K2 = K3 collapses to single DES.
    return BlockPrimitive(decrepit.TripleDES(bytes(key) * 3), (CFB,))


def blowfish(key: bytes) -> BlockPrimitive:
    return BlockPrimitive(decrepit.Blowfish(key), (CFB,))


def cast5(key: bytes) -> BlockPrimitive:
    return BlockPrimitive(decrepit.CAST5(key), (CFB,))


def idea(key: bytes) -> BlockPrimitive:
    return BlockPrimitive(decrepit.IDEA(key), (CFB,))


def seed(key: bytes) -> BlockPrimitive:
    return BlockPrimitive(decrepit.SEED(key), (CFB,))


def rc2(key: bytes) -> ChainedBlockPrimitive:
    return ChainedBlockPrimitive(decrepit.RC2(key))
