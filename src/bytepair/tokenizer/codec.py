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
"""Encoding text to token ids and decoding ids back to text."""

from collections.abc import Mapping, Sequence

from bytepair.tokenizer.merge import merge
from bytepair.tokenizer.stats import get_stats
from bytepair.tokenizer.tables import Pair


def encode(merges: Mapping[Pair, int], text: str) -> list[int]:
    """Encodes text into token ids using learned merges.

    Starting from the UTF-8 bytes of ``text``, the adjacent pair with the
    earliest learned merge is merged repeatedly until no adjacent pair has
    a merge rule.

    Args:
        merges: The merge table produced by training.
        text: The text to encode.

    Returns:
        The list of token ids.
    """
    ids = list(text.encode('utf-8'))
    while len(ids) >= 2:
        stats = get_stats(ids)
        pair = min(stats, key=lambda p: merges.get(p, float('inf')))
        if pair not in merges:
            break  # nothing left to merge
        ids = merge(ids, pair, merges[pair])
    return ids


def decode(vocab: Mapping[int, bytes], ids: Sequence[int]) -> str:
    """Decodes token ids back into text.

    Byte spans that are not valid UTF-8 are replaced with U+FFFD.

    Raises:
        KeyError: If an id is not in the vocabulary.
    """
    chunks = []
    for idx in ids:
        if idx not in vocab:
            raise KeyError(f'Token id {idx} is not in the vocabulary')
        chunks.append(vocab[idx])
    return b''.join(chunks).decode('utf-8', errors='replace')
