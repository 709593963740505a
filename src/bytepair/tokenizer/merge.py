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
"""Single pass pair replacement."""

from collections.abc import Sequence

from bytepair.tokenizer.tables import Pair


def merge(ids: Sequence[int], pair: Pair, idx: int) -> list[int]:
    """Replaces every occurrence of ``pair`` in ``ids`` with ``idx``.

    The scan runs left to right and consumes both ids of a match, so
    overlapping occurrences are not merged twice: ``[7, 7, 7]`` with pair
    ``(7, 7)`` becomes ``[idx, 7]``.

    Args:
        ids: The sequence of token ids. Not modified.
        pair: The adjacent pair to replace.
        idx: The id that replaces each occurrence.

    Returns:
        A new list, shorter than ``ids`` by the number of replacements.
    """
    first, second = pair
    new_ids = []
    i = 0
    while i < len(ids):
        if i < len(ids) - 1 and ids[i] == first and ids[i + 1] == second:
            new_ids.append(idx)
            i += 2
        else:
            new_ids.append(ids[i])
            i += 1
    return new_ids
