"""
Pytest configuration and shared fixtures
"""

import pytest
import os
import tempfile
import shutil

REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


@pytest.fixture
def temp_dir():
    """Create temporary directory for test files"""
    dirpath = tempfile.mkdtemp()
    yield dirpath
    shutil.rmtree(dirpath)


@pytest.fixture
def sample_text():
    """Integers spread over several lines, with irregular whitespace"""
    return """1 2
3    4
\t5 6 7
8 9 10"""


@pytest.fixture
def sample_input_file(temp_dir, sample_text):
    """Create a sample input file for testing"""
    filepath = os.path.join(temp_dir, 'input.txt')
    with open(filepath, 'w') as f:
        f.write(sample_text)
    return filepath


@pytest.fixture
def parity_job_file():
    """Path to the parity sum example job file"""
    return os.path.join(REPO_ROOT, 'examples', 'parity_sum.py')


@pytest.fixture
def wordcount_job_file():
    """Path to word count example job file"""
    return os.path.join(REPO_ROOT, 'examples', 'wordcount.py')


@pytest.fixture
def incomplete_job_file(temp_dir):
    """Job file that defines map_fn but no reduce_fn"""
    filepath = os.path.join(temp_dir, 'incomplete_job.py')
    with open(filepath, 'w') as f:
        f.write("def map_fn(token):\n    return (token, 1)\n")
    return filepath
