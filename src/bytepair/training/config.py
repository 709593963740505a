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
"""Configuration for tokenizer training."""

from dataclasses import dataclass

from bytepair.tokenizer.tables import BYTE_VOCAB_SIZE


@dataclass
class TrainingConfig:
    """Configuration for BPE training.

    Attributes:
        vocab_size (int): Target vocabulary size, including the 256 byte ids.
            Training learns ``vocab_size - 256`` merges at most. Defaults to
            1024.
        verbose (bool): If True, prints training diagnostics and shows a
            progress bar. Defaults to False.
    """

    vocab_size: int = 1024
    verbose: bool = False

    def __post_init__(self):
        if self.vocab_size < BYTE_VOCAB_SIZE:
            raise ValueError(
                f'vocab_size must be at least {BYTE_VOCAB_SIZE}, '
                f'got {self.vocab_size}'
            )

    @property
    def num_merges(self) -> int:
        """Number of merges needed to reach ``vocab_size``."""
        return self.vocab_size - BYTE_VOCAB_SIZE
