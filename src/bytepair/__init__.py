"""Byte-level BPE tokenizer.

Learn merge rules from raw bytes with ``train``, rebuild the token table with
``build_vocabulary``, and map text to ids and back with ``encode`` and
``decode``. ``BPETokenizer`` bundles these for everyday use.
"""

from bytepair.tokenizer import (
    BYTE_VOCAB_SIZE,
    BPETokenizer,
    MergeTable,
    Vocabulary,
    build_vocabulary,
    decode,
    encode,
    get_stats,
    merge,
)
from bytepair.training import TrainingConfig, train

__all__ = [
    'BYTE_VOCAB_SIZE',
    'BPETokenizer',
    'MergeTable',
    'TrainingConfig',
    'Vocabulary',
    'build_vocabulary',
    'decode',
    'encode',
    'get_stats',
    'merge',
    'train',
]
