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
"""Immutable merge table and vocabulary types.

Both tables are built once per trained model and are only ever read
afterwards, so they are exposed as read-only mappings.
"""

from collections.abc import Iterable, Iterator, Mapping

BYTE_VOCAB_SIZE = 256

Pair = tuple[int, int]


class MergeTable(Mapping[Pair, int]):
    """Ordered mapping of merge rules, pair -> assigned token id.

    Iteration yields pairs in ascending id order, which is the order the
    rules were learned and therefore their encoding priority.

    Args:
        merges: Mapping (or iterable of items) from pair to assigned id. The
            ids must be exactly ``256, 257, ..., 256 + k - 1``.

    Raises:
        ValueError: If the ids are not contiguous from 256, or a pair is
            malformed.
    """

    def __init__(
        self, merges: Mapping[Pair, int] | Iterable[tuple[Pair, int]] = ()
    ):
        items = merges.items() if isinstance(merges, Mapping) else merges
        ordered = sorted(
            ((tuple(pair), int(idx)) for pair, idx in items),
            key=lambda item: item[1],
        )
        expected = list(
            range(BYTE_VOCAB_SIZE, BYTE_VOCAB_SIZE + len(ordered))
        )
        if [idx for _, idx in ordered] != expected:
            raise ValueError(
                'Merge ids must be contiguous and start at '
                f'{BYTE_VOCAB_SIZE}, got {[idx for _, idx in ordered]}'
            )
        for pair, idx in ordered:
            if len(pair) != 2 or any(p < 0 or p >= idx for p in pair):
                raise ValueError(
                    f'Invalid merge rule {pair} -> {idx}: constituents must '
                    'be non-negative ids smaller than the merged id.'
                )
        self._merges: dict[Pair, int] = dict(ordered)
        if len(self._merges) != len(ordered):
            raise ValueError('Each pair may be merged only once.')

    @classmethod
    def from_pairs(cls, pairs: Iterable[Pair]) -> 'MergeTable':
        """Rebuilds a table from pairs listed in ascending id order."""
        return cls(
            (tuple(pair), BYTE_VOCAB_SIZE + i) for i, pair in enumerate(pairs)
        )

    def pairs(self) -> list[Pair]:
        """Returns the merged pairs in ascending id order."""
        return list(self._merges)

    def __getitem__(self, pair: Pair) -> int:
        return self._merges[pair]

    def __iter__(self) -> Iterator[Pair]:
        return iter(self._merges)

    def __len__(self) -> int:
        return len(self._merges)

    def __repr__(self) -> str:
        return f'MergeTable({len(self)} merges)'


class Vocabulary(Mapping[int, bytes]):
    """Read-only mapping from token id to the bytes it expands to."""

    def __init__(self, entries: Mapping[int, bytes]):
        self._entries: dict[int, bytes] = dict(entries)

    def __getitem__(self, idx: int) -> bytes:
        return self._entries[idx]

    def __iter__(self) -> Iterator[int]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f'Vocabulary({len(self)} tokens)'
