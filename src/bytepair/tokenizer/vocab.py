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
"""Vocabulary reconstruction from a merge table."""

from bytepair.tokenizer.tables import BYTE_VOCAB_SIZE, MergeTable, Vocabulary


def build_vocabulary(merges: MergeTable) -> Vocabulary:
    """Expands every token id into the bytes it represents.

    Ids below 256 map to their single byte. Merge rules are then applied in
    ascending id order, so both constituents of a rule are always expanded
    before the rule itself.

    Args:
        merges: The learned merge table.

    Returns:
        The vocabulary covering the 256 byte ids and every merged id.

    Raises:
        KeyError: If a rule references an id that has not been defined yet.
    """
    vocab = {idx: bytes([idx]) for idx in range(BYTE_VOCAB_SIZE)}
    for (p0, p1), idx in sorted(merges.items(), key=lambda item: item[1]):
        if p0 not in vocab or p1 not in vocab:
            raise KeyError(
                f'Merge rule ({p0}, {p1}) -> {idx} references an undefined id'
            )
        vocab[idx] = vocab[p0] + vocab[p1]
    return Vocabulary(vocab)
