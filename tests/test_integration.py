"""Integration tests for end-to-end tokenizer workflows."""

from pathlib import Path

import pytest

from bytepair import (
    BPETokenizer,
    MergeTable,
    TrainingConfig,
    build_vocabulary,
    decode,
    encode,
    train,
)
from scripts.train_tokenizer import SAMPLE_TEXTS, create_base_parser, main
from scripts.utils import read_file_bytes

TEXT = (
    'The girl, unlike most people photographed for fashion magazines, '
    'was not beautiful.'
)
CJK_TEXT = (
    '李翊云：我觉得这里是两个问题，雷蒙德·卡佛是一个问题，'
    '《纽约客》是另一个问题。'
)


class TestEndToEnd:
    """Integration tests for train, encode and decode together."""

    def test_roundtrip_on_training_text(self):
        """Test text round-trips after training on itself."""
        merges = train(TEXT.encode('utf-8'), 512)
        vocab = build_vocabulary(merges)

        assert decode(vocab, encode(merges, TEXT)) == TEXT

    @pytest.mark.parametrize('num_merges', [0, 1, 5, 20, 100])
    def test_roundtrip_for_merge_counts(self, num_merges):
        """Test round trips hold for any number of merges."""
        merges = train(TEXT.encode('utf-8'), num_merges)
        vocab = build_vocabulary(merges)

        assert decode(vocab, encode(merges, TEXT)) == TEXT

    def test_hello_world_without_merges(self):
        """Test zero merges leave the raw bytes untouched."""
        merges = train(b'hello world', 0)
        vocab = build_vocabulary(merges)
        ids = encode(merges, 'hello world')

        assert ids == list('hello world'.encode('utf-8'))
        assert decode(vocab, ids) == 'hello world'

    def test_multibyte_roundtrip(self):
        """Test CJK text round-trips at the byte level."""
        data = CJK_TEXT.encode('utf-8')
        merges = train(data, 100)
        vocab = build_vocabulary(merges)
        ids = encode(merges, CJK_TEXT)

        assert len(ids) < len(data)
        assert decode(vocab, ids) == CJK_TEXT

    def test_roundtrip_on_unseen_text(self):
        """Test text not seen in training still round-trips."""
        merges = train(TEXT.encode('utf-8'), 64)
        vocab = build_vocabulary(merges)

        for text in SAMPLE_TEXTS:
            assert decode(vocab, encode(merges, text)) == text

    def test_encoded_ids_have_no_mergeable_pairs(self):
        """Test encoding stops only when no adjacent pair can merge."""
        merges = train(TEXT.encode('utf-8'), 40)

        for text in [TEXT, *SAMPLE_TEXTS]:
            ids = encode(merges, text)
            assert not any(pair in merges for pair in zip(ids, ids[1:]))

    def test_vocabulary_covers_merge_table(self):
        """Test every id in the merge table has a vocabulary entry."""
        merges = train(TEXT.encode('utf-8'), 60)
        vocab = build_vocabulary(merges)

        for (p0, p1), idx in merges.items():
            assert p0 in vocab
            assert p1 in vocab
            assert vocab[idx] == vocab[p0] + vocab[p1]

    def test_merge_table_rebuilds_from_pairs(self):
        """Test a table rebuilt from its pairs encodes identically."""
        merges = train(TEXT.encode('utf-8'), 30)
        rebuilt = MergeTable.from_pairs(merges.pairs())

        assert rebuilt == merges
        assert encode(rebuilt, TEXT) == encode(merges, TEXT)

    def test_tokenizer_compresses_training_text(self):
        """Test a trained tokenizer shortens its training text."""
        tokenizer = BPETokenizer.from_training(
            TEXT, TrainingConfig(vocab_size=300)
        )

        assert tokenizer.compression_ratio(TEXT) > 1.0
        assert tokenizer.decode(tokenizer.encode(TEXT)) == TEXT


class TestTrainTokenizerScript:
    """Integration tests for the training script."""

    def write_corpus(self, directory: Path) -> Path:
        """Write a small training corpus."""
        file_path = directory / 'corpus.txt'
        file_path.write_text(TEXT + '\n' + CJK_TEXT, encoding='utf-8')
        return file_path

    def test_main_with_sample_texts(self, tmp_path, capsys):
        """Test the script trains and reports every sample text."""
        file_path = self.write_corpus(tmp_path)
        args = create_base_parser().parse_args(
            ['--data_file', str(file_path), '--vocab_size', '300']
        )

        results = main(args)

        assert [r['text'] for r in results] == SAMPLE_TEXTS
        assert all(r['decoded'] == r['text'] for r in results)
        out = capsys.readouterr().out
        assert 'merges:44, vocab:300' in out
        assert 'ratio:' in out

    def test_main_with_custom_text(self, tmp_path):
        """Test custom texts replace the samples."""
        file_path = self.write_corpus(tmp_path)
        args = create_base_parser().parse_args(
            [
                '--data_file',
                str(file_path),
                '--vocab_size',
                '260',
                '--text',
                'fashion',
                '--text',
                '问题',
            ]
        )

        results = main(args)

        assert [r['decoded'] for r in results] == ['fashion', '问题']
        assert all(r['ratio'] >= 1.0 for r in results)

    def test_read_file_bytes(self, tmp_path):
        """Test raw bytes are read unchanged."""
        file_path = self.write_corpus(tmp_path)

        assert read_file_bytes(file_path) == file_path.read_bytes()

    def test_read_file_bytes_wrong_suffix(self, tmp_path):
        """Test non .txt files are rejected."""
        file_path = tmp_path / 'corpus.csv'
        file_path.write_text('a,b')

        with pytest.raises(ValueError):
            read_file_bytes(file_path)

    def test_read_file_bytes_missing(self, tmp_path):
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            read_file_bytes(tmp_path / 'missing.txt')
