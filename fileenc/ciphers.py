"""Byte-level reversible transforms used as encryption layers.

Every function takes the input bytes and returns new bytes of the same length.
"""

XOR_KEY = 0xAC
ADD_KEY = 0xAC


def xor_encrypt(data: bytes) -> bytes:
    """XOR every byte with the fixed key."""
    return bytes(b ^ XOR_KEY for b in data)


def xor_decrypt(data: bytes) -> bytes:
    """Undo :func:`xor_encrypt`; XOR is its own inverse."""
    return bytes(b ^ XOR_KEY for b in data)


def _swap_pairs(data: bytes) -> bytes:
    out = bytearray(data)
    even = len(data) - len(data) % 2
    out[0:even:2] = data[1:even:2]
    out[1:even:2] = data[0:even:2]
    return bytes(out)


def swap_encrypt(data: bytes) -> bytes:
    """Swap every pair of bytes; a trailing odd byte is left unchanged."""
    return _swap_pairs(data)


def swap_decrypt(data: bytes) -> bytes:
    """Undo :func:`swap_encrypt`; swapping pairs is its own inverse."""
    return _swap_pairs(data)


def add_encrypt(data: bytes) -> bytes:
    """Add the fixed key to every byte, modulo 256."""
    return bytes((b + ADD_KEY) & 0xFF for b in data)


def add_decrypt(data: bytes) -> bytes:
    """Subtract the fixed key from every byte, modulo 256."""
    return bytes((b - ADD_KEY) & 0xFF for b in data)