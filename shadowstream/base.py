"""
Unified Cipher Contract
=======================
Every algorithm in the registry is a StreamCipher: it knows its IV size
and hands out independent Stream objects, one per IV per direction.

A Stream is a keystream, not a random-access transform. Feed it data in
order, from one writer, and never replay a chunk.
"""

import os
from abc import ABC, abstractmethod

from .errors import IVSizeError, StreamMisuseError


class Stream(ABC):
    """Stateful byte-stream transform. Output length always equals input length."""

    @abstractmethod
    def update(self, data: bytes) -> bytes:
        """Transform the next len(data) bytes of the stream."""

    def update_into(self, data: bytes, buf) -> int:
        """
        Transform data into the head of a writable buffer.
        Returns the number of bytes written (always len(data)).
        Raises StreamMisuseError if buf is read-only or shorter than
        data; the stream's state is not advanced in either case.
        """
        view = memoryview(buf).cast("B")
        if view.readonly:
            raise StreamMisuseError("dst is read-only")
        if len(view) < len(data):
            raise StreamMisuseError("dst is smaller than src")
        out = self.update(data)
        view[:len(out)] = out
        return len(out)


class StreamCipher(ABC):
    """A keyed algorithm that produces encrypting and decrypting streams."""

    name = "stream"

    @property
    @abstractmethod
    def iv_size(self) -> int:
        """Required IV / nonce length in bytes."""

    @abstractmethod
    def _encrypter(self, iv: bytes) -> Stream:
        ...

    def _decrypter(self, iv: bytes) -> Stream:
        # Symmetric keystreams: decrypting is the same XOR.
        return self._encrypter(iv)

    def _check_iv(self, iv: bytes) -> bytes:
        if len(iv) != self.iv_size:
            raise IVSizeError(self.iv_size)
        return bytes(iv)

    def encrypter(self, iv: bytes) -> Stream:
        return self._encrypter(self._check_iv(iv))

    def decrypter(self, iv: bytes) -> Stream:
        return self._decrypter(self._check_iv(iv))

    def generate_iv(self) -> bytes:
        return os.urandom(self.iv_size)

    def __repr__(self):
        return f"<{type(self).__name__} {self.name} iv_size={self.iv_size}>"
