# stackmeta/utils/hashing.py
"""
64-bit MurmurHash64A over a byte buffer.

Non-cryptographic. Used to fold sparse metadata into a single integrity value,
so the output must stay bit-for-bit stable across versions.
"""

_MASK_64 = 0xFFFFFFFFFFFFFFFF
_M = 0xc6a4a7935bd1e995
_R = 47


def murmur_hash_64a(data: bytes, seed: int) -> int:
    """Returns the unsigned 64-bit MurmurHash64A of `data` (little-endian blocks)."""
    length = len(data)
    h = (seed ^ (length * _M)) & _MASK_64

    block_end = length - (length % 8)
    for offset in range(0, block_end, 8):
        k = int.from_bytes(data[offset:offset + 8], "little")
        k = (k * _M) & _MASK_64
        k ^= k >> _R
        k = (k * _M) & _MASK_64

        h ^= k
        h = (h * _M) & _MASK_64

    tail = data[block_end:]
    if tail:
        h ^= int.from_bytes(tail, "little")
        h = (h * _M) & _MASK_64

    h ^= h >> _R
    h = (h * _M) & _MASK_64
    h ^= h >> _R
    return h
