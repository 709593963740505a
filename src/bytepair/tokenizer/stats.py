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
"""Adjacent pair statistics."""

from collections.abc import Sequence

from bytepair.tokenizer.tables import Pair


def get_stats(
    ids: Sequence[int], counts: dict[Pair, int] | None = None
) -> dict[Pair, int]:
    """Counts the occurrences of every adjacent pair of ids.

    Args:
        ids: The sequence of token ids.
        counts: Optional existing counts to accumulate into. Updated in place
            and returned.

    Returns:
        A dict mapping each ``(ids[i], ids[i + 1])`` pair to its count.
        Sequences shorter than two ids give an empty dict.

    Example:
        ```python
        get_stats([1, 2, 3, 1, 2])  # {(1, 2): 2, (2, 3): 1, (3, 1): 1}
        ```
    """
    counts = {} if counts is None else counts
    for pair in zip(ids, ids[1:]):
        counts[pair] = counts.get(pair, 0) + 1
    return counts
