"""Tokenizer package.

This package provides the byte-level BPE building blocks (pair statistics,
merging, vocabulary construction, encoding and decoding) and the
``BPETokenizer`` class that combines them.
"""

from .base import BaseTokenizer
from .bpe import BPETokenizer
from .codec import decode, encode
from .merge import merge
from .stats import get_stats
from .tables import BYTE_VOCAB_SIZE, MergeTable, Pair, Vocabulary
from .vocab import build_vocabulary

__all__ = [
    'BYTE_VOCAB_SIZE',
    'BPETokenizer',
    'BaseTokenizer',
    'MergeTable',
    'Pair',
    'Vocabulary',
    'build_vocabulary',
    'decode',
    'encode',
    'get_stats',
    'merge',
]
