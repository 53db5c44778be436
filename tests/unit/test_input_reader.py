"""
Unit tests for input reading
"""

import os

import pytest

from mapreduce_engine.input_reader import read_tokens


def test_splits_on_any_whitespace(sample_input_file):
    assert read_tokens(sample_input_file) == [str(n) for n in range(1, 11)]


def test_empty_file(temp_dir):
    path = os.path.join(temp_dir, 'empty.txt')
    open(path, 'w').close()

    assert read_tokens(path) == []


def test_missing_file():
    with pytest.raises(FileNotFoundError):
        read_tokens('/nonexistent/input.txt')
