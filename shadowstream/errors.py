"""
Errors
======
Everything this package raises on its own account derives from
CipherError. Failures coming from the underlying primitive libraries
(cryptography, libsodium) are passed through untouched.
"""


class CipherError(Exception):
    """Base class for stream cipher errors."""


class KeySizeError(CipherError, ValueError):
    """Key length does not match what the algorithm requires."""

    def __init__(self, size: int):
        self.size = size
        super().__init__(f"key size error: need {size} bytes")


class IVSizeError(CipherError, ValueError):
    """IV length does not match the cipher's iv_size."""

    def __init__(self, size: int):
        self.size = size
        super().__init__(f"IV size error: need {size} bytes")


class UnsupportedCipherError(CipherError, ValueError):
    """No algorithm registered under that name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unsupported cipher: {name!r}")


class StreamMisuseError(CipherError, RuntimeError):
    """
    The caller broke the stream contract (destination shorter than
    source). Stream state is left untouched, but this is a bug in the
    caller and should not be handled as a data error.
    """
