"""
Primitive adapters: block ciphers, RC4, and block-indexed keystream
generators (ChaCha20 via cryptography, Salsa20 / XChaCha20 via libsodium).
"""
