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
"""BPE training loop.

This module learns the ordered merge table from raw bytes by repeatedly
merging the most frequent adjacent pair.
"""

import time
from collections.abc import Sequence

from tqdm import tqdm

from bytepair.tokenizer.merge import merge
from bytepair.tokenizer.stats import get_stats
from bytepair.tokenizer.tables import BYTE_VOCAB_SIZE, MergeTable, Pair


def select_pair(stats: dict[Pair, int]) -> Pair:
    """Returns the most frequent pair.

    Ties are broken by taking the lexicographically smallest pair.
    """
    return min(stats, key=lambda pair: (-stats[pair], pair))


def train(
    data: bytes | Sequence[int], num_merges: int, verbose: bool = False
) -> MergeTable:
    """Learns up to ``num_merges`` merge rules from ``data``.

    Each iteration merges the most frequent adjacent pair into the next free
    id, starting at 256. Training stops early once the sequence has no
    pairs left.

    Args:
        data: Raw training bytes, or a sequence of ints in ``[0, 255]``.
        num_merges: Maximum number of merges to learn.
        verbose: If True, prints diagnostics and a progress bar.

    Returns:
        The merge table, with ids ``256 .. 256 + k - 1`` for ``k`` learned
        merges.

    Raises:
        ValueError: If ``num_merges`` is negative or ``data`` contains a value
            outside the byte range.

    Example:
        ```python
        merges = train('hello world'.encode('utf-8'), 10)
        ```
    """
    if num_merges < 0:
        raise ValueError(f'num_merges must be non-negative, got {num_merges}')
    ids = list(data)
    if any(
        not isinstance(b, int) or not 0 <= b < BYTE_VOCAB_SIZE for b in ids
    ):
        raise ValueError('Training data must only contain byte values 0-255')

    if verbose:
        print(f'training: ids={len(ids)}, num_merges={num_merges}')
    start_time = time.time()

    merges: dict[Pair, int] = {}
    with tqdm(total=num_merges, desc='Merging', disable=not verbose) as pbar:
        for i in range(num_merges):
            stats = get_stats(ids)
            if not stats:
                # no pairs left, finish the bar at the merges learned
                pbar.total = pbar.n
                pbar.refresh()
                break
            pair = select_pair(stats)
            idx = BYTE_VOCAB_SIZE + i
            ids = merge(ids, pair, idx)
            merges[pair] = idx
            pbar.update(1)

    if verbose:
        execution_time = time.time() - start_time
        print(
            f'Learned {len(merges)} merges in {execution_time:.2f} seconds.'
        )
    return MergeTable(merges)
