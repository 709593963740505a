# Copyright 2025 Michael Ellis
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Byte-level Byte Pair Encoding (BPE) tokenizer implementation."""

from bytepair.tokenizer.base import BaseTokenizer
from bytepair.tokenizer.codec import decode, encode
from bytepair.tokenizer.tables import BYTE_VOCAB_SIZE, MergeTable
from bytepair.tokenizer.vocab import build_vocabulary
from bytepair.training.config import TrainingConfig
from bytepair.training.trainer import train


class BPETokenizer(BaseTokenizer):
    """Byte-level BPE tokenizer class.

    Holds one learned merge table together with the vocabulary built from
    it. Both are read-only once the tokenizer is created.

    Attributes:
        merges (MergeTable): The learned merge rules.
        vocab (Vocabulary): Token id to bytes table built from ``merges``.
    """

    def __init__(self, merges: MergeTable | None = None):
        """Initializes the tokenizer.

        Args:
            merges: The learned merge table. If None, no merges are used and
                every byte is its own token.
        """
        self.merges = merges if merges is not None else MergeTable()
        self.vocab = build_vocabulary(self.merges)

    @classmethod
    def from_training(
        cls, data: str | bytes, config: TrainingConfig | None = None
    ) -> 'BPETokenizer':
        """Trains a tokenizer on ``data``.

        Args:
            data: Training text. Strings are UTF-8 encoded first.
            config: Training configuration. Defaults to ``TrainingConfig()``.

        Returns:
            The trained tokenizer.
        """
        config = config if config is not None else TrainingConfig()
        if isinstance(data, str):
            data = data.encode('utf-8')
        merges = train(data, config.num_merges, verbose=config.verbose)
        return cls(merges)

    @property
    def vocab_size(self) -> int:
        """Number of distinct token ids, bytes included."""
        return BYTE_VOCAB_SIZE + len(self.merges)

    def encode(self, text: str) -> list[int]:
        """Encodes the input text using the learned merges."""
        return encode(self.merges, text)

    def decode(self, ids: list[int]) -> str:
        """Decodes token ids back to text."""
        return decode(self.vocab, ids)

    def compression_ratio(self, text: str) -> float:
        """UTF-8 byte length of ``text`` divided by its token count."""
        ids = self.encode(text)
        if not ids:
            return 0.0
        return len(text.encode('utf-8')) / len(ids)
