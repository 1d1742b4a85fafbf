"""
Byte-level and token-level feature extraction.

Provides:
- Normalized byte histogram and Shannon entropy
- Feature hashing of delimited tokens
"""

from domain.features.bytes import byte_counts, byte_histogram, entropy
from domain.features.hashing import hash_trick, tokenize

__all__ = [
    "byte_counts",
    "byte_histogram",
    "entropy",
    "hash_trick",
    "tokenize",
]
