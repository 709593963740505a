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
"""Supporting functions for the tokenizer training script.

Example:
    ```python
    data = read_file_bytes(Path('data/a-man-like-him.txt'))
    ```
"""

from pathlib import Path

from bytepair import BPETokenizer


def read_file_bytes(file_path: Path) -> bytes:
    """Reads the raw bytes of a .txt file.

    Args:
        file_path: A Path object pointing to the .txt file to be read.

    Returns:
        The complete content of the file as bytes.

    Raises:
        ValueError: If the file is not a .txt file (checked by extension).
        FileNotFoundError: If the file does not exist at the specified path.
    """
    if file_path.suffix.lower() != '.txt':
        raise ValueError(
            f"Error: The file '{file_path.name}' is not a .txt file."
        )

    try:
        with file_path.open('rb') as f:
            return f.read()
    except FileNotFoundError as err:
        raise FileNotFoundError(
            f"Error: Could not find the file at path: '{file_path}'"
        ) from err


def summarize_encoding(tokenizer: BPETokenizer, text: str) -> dict:
    """Encodes and decodes ``text``, collecting the results.

    Returns:
        A dictionary with keys ``text``, ``ids``, ``ratio`` and ``decoded``.
    """
    ids = tokenizer.encode(text)
    return {
        'text': text,
        'ids': ids,
        'ratio': tokenizer.compression_ratio(text),
        'decoded': tokenizer.decode(ids),
    }


def print_summary(summary: dict):
    """Prints one encoding summary."""
    print('\n----------------------------------------')
    print(f'text:    {summary["text"]}')
    print(f'ids:     {summary["ids"]}')
    print(f'ratio:   {summary["ratio"]:.2f}')
    print(f'decoded: {summary["decoded"]}')
