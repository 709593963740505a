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
"""Abstract interface shared by tokenizers."""

from abc import ABC, abstractmethod


class BaseTokenizer(ABC):
    """Base tokenizer class mapping text to token ids and back."""

    @abstractmethod
    def encode(self, text: str) -> list[int]:
        """Encodes text into a list of token ids."""
        pass

    @abstractmethod
    def decode(self, ids: list[int]) -> str:
        """Decodes a list of token ids back into text."""
        pass
