"""
Mode Wrapper
============
Turns a BlockPrimitive into a StreamCipher under one of four feedback
modes:

  CTR   keystream = E(counter), counter += 1 per block. Symmetric.
  CFB   keystream = E(previous ciphertext block). Decrypt feeds back the
        incoming ciphertext, so it needs its own stream.
  CFB8  CFB with 1-byte segments: after every byte the register shifts
        left by one and takes in that byte's ciphertext.
  OFB   keystream = E(previous keystream block). Symmetric.

IV size is always the block size. All streams accept chunks of any
length and resume mid-block on the next call.

Where cryptography implements the mode for the algorithm the stream is
just its CipherContext. Otherwise the mode runs here, over the
primitive's single-block transform. Every registered AES mode runs in
the library; CTRStream and OFBStream serve any other primitive and are
checked byte-for-byte against the library's AES modes in the tests.
"""

from abc import abstractmethod

from cryptography.hazmat.decrepit.ciphers import modes as decrepit_modes
from cryptography.hazmat.primitives.ciphers import modes

from .base import Stream, StreamCipher
from .primitives.block import CFB, CFB8, CTR, OFB, BlockPrimitive, xor_bytes


class CipherContextStream(Stream):
    """A cryptography CipherContext (encryptor or decryptor) as a Stream."""

    def __init__(self, context):
        self._ctx = context

    def update(self, data: bytes) -> bytes:
        return self._ctx.update(data)


# ── feedback streams over a single-block transform ───────────────────────────

class FeedbackStream(Stream):
    """
    Shared bookkeeping for the feedback modes.

    _pad holds the current keystream segment and _used how much of it
    has been consumed. Subclasses produce the next segment and absorb
    the bytes that went through the current one.
    """

    def __init__(self, encrypt_block, iv: bytes, decrypt: bool = False):
        self._encrypt_block = encrypt_block
        self._register      = bytearray(iv)
        self._decrypt       = decrypt
        self._pad           = b""
        self._used          = 0

    @abstractmethod
    def _next_pad(self) -> bytes:
        """Produce the next keystream segment."""

    def _absorb(self, offset: int, data: bytes, out: bytes):
        pass

    def update(self, data: bytes) -> bytes:
        data = bytes(data)
        out  = bytearray()
        pos  = 0
        while pos < len(data):
            if self._used == len(self._pad):
                self._pad  = self._next_pad()
                self._used = 0
            n     = min(len(self._pad) - self._used, len(data) - pos)
            chunk = data[pos:pos + n]
            mixed = xor_bytes(chunk, self._pad[self._used:self._used + n])
            self._absorb(self._used, chunk, mixed)
            out       += mixed
            self._used += n
            pos        += n
        return bytes(out)


class CTRStream(FeedbackStream):

    def _next_pad(self) -> bytes:
        pad  = self._encrypt_block(bytes(self._register))
        size = len(self._register)
        ctr  = (int.from_bytes(self._register, "big") + 1) % (1 << (8 * size))
        self._register[:] = ctr.to_bytes(size, "big")
        return pad


class OFBStream(FeedbackStream):

    def _next_pad(self) -> bytes:
        self._register[:] = self._encrypt_block(bytes(self._register))
        return bytes(self._register)


class CFBStream(FeedbackStream):

    def _next_pad(self) -> bytes:
        return self._encrypt_block(bytes(self._register))

    def _absorb(self, offset, data, out):
        # pad offsets line up with register offsets; the register ends up
        # holding the full ciphertext block by the time it is encrypted again
        ciphertext = data if self._decrypt else out
        self._register[offset:offset + len(ciphertext)] = ciphertext


class CFB8Stream(FeedbackStream):

    def _next_pad(self) -> bytes:
        return self._encrypt_block(bytes(self._register))[:1]

    def _absorb(self, offset, data, out):
        del self._register[0]
        self._register += data if self._decrypt else out


# ── mode ciphers ─────────────────────────────────────────────────────────────

class BlockModeCipher(StreamCipher):
    """StreamCipher over a block primitive and one feedback mode."""

    mode_name    = None
    library_mode = None
    feedback     = None
    symmetric    = True

    def __init__(self, primitive: BlockPrimitive):
        self._primitive = primitive
        self.name = f"{primitive.name}-{self.mode_name}".lower()

    @property
    def iv_size(self) -> int:
        return self._primitive.block_size

    @property
    def native(self) -> bool:
        """True when cryptography drives this mode for the primitive."""
        return self.mode_name in self._primitive.library_modes

    def _stream(self, iv: bytes, decrypt: bool) -> Stream:
        if self.native:
            cipher = self._primitive.cipher(self.library_mode(iv))
            return CipherContextStream(cipher.decryptor() if decrypt else cipher.encryptor())
        return self.feedback(self._primitive.block_encrypter(), iv, decrypt)

    def _encrypter(self, iv: bytes) -> Stream:
        return self._stream(iv, decrypt=False)

    def _decrypter(self, iv: bytes) -> Stream:
        if self.symmetric:
            return self._encrypter(iv)
        return self._stream(iv, decrypt=True)


class CTRCipher(BlockModeCipher):
    mode_name    = CTR
    library_mode = modes.CTR
    feedback     = CTRStream


class CFBCipher(BlockModeCipher):
    mode_name    = CFB
    library_mode = decrepit_modes.CFB
    feedback     = CFBStream
    symmetric    = False


class CFB8Cipher(BlockModeCipher):
    mode_name    = CFB8
    library_mode = decrepit_modes.CFB8
    feedback     = CFB8Stream
    symmetric    = False


class OFBCipher(BlockModeCipher):
    mode_name    = OFB
    library_mode = decrepit_modes.OFB
    feedback     = OFBStream
