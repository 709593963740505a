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
"""Script for training a byte-level BPE tokenizer.

Trains merge rules on a text file, then encodes and decodes a few sample
strings, printing the ids and the compression ratio of each.

Typical usage example:
    python -m scripts.train_tokenizer --data_file data/a-man-like-him.txt
    python -m scripts.train_tokenizer --data_file corpus.txt --vocab_size 512 \
        --text 'hello world' --verbose
"""

import argparse
from pathlib import Path

from bytepair import BPETokenizer, TrainingConfig
from scripts.utils import print_summary, read_file_bytes, summarize_encoding

SAMPLE_TEXTS = [
    'hello world',
    'In the dusk, a thin mist hung in the air.',
    'The black-clad girl taunted him from the magazine lying open on the '
    'floor.',
    '李翊云：我觉得这里是两个问题，雷蒙德·卡佛是一个问题，'
    '《纽约客》是另一个问题。',
]


def create_base_parser():
    """Create argument parser for tokenizer training."""
    parser = argparse.ArgumentParser()

    # Data
    data_group = parser.add_argument_group('Data')
    data_group.add_argument('--data_file', type=str, required=True)

    # Training parameters
    training_group = parser.add_argument_group('Training Parameters')
    training_group.add_argument('--vocab_size', type=int, default=1024)
    training_group.add_argument('--verbose', action='store_true')

    # Samples
    sample_group = parser.add_argument_group('Samples')
    sample_group.add_argument('--text', type=str, action='append')

    return parser


def main(args):
    """Main function for tokenizer training."""
    config = TrainingConfig(vocab_size=args.vocab_size, verbose=args.verbose)

    data = read_file_bytes(Path(args.data_file))
    tokenizer = BPETokenizer.from_training(data, config)
    print(f'merges:{len(tokenizer.merges)}, vocab:{len(tokenizer.vocab)}')

    results = []
    for text in args.text or SAMPLE_TEXTS:
        summary = summarize_encoding(tokenizer, text)
        print_summary(summary)
        results.append(summary)

    return results


if __name__ == '__main__':
    parser = create_base_parser()
    args = parser.parse_args()
    main(args)
