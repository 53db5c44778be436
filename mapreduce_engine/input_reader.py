"""
Reads engine input from text files.
"""

from typing import List


def read_tokens(path: str, encoding: str = 'utf-8') -> List[str]:
    """
    Read a text file and split it into whitespace-delimited tokens.

    Raises:
        FileNotFoundError: If the input file doesn't exist
    """
    with open(path, 'r', encoding=encoding) as f:
        return f.read().split()
